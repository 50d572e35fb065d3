"""Company security-service request form"""
from typing import Dict

from formgateway.models.notification import RenderedEmails
from formgateway.services.form_handler import FormDescriptor
from formgateway.services import templates
from formgateway.services.validation import FieldRule, Pattern, Required, email, phone, required

RULES = (
    required("companyName", "Company name", 2, 100),
    email(),
    phone(),
    required("firstName", "First name", 2, 50),
    required("lastName", "Last name", 2, 50),
    # Older versions of the form post cityProvince / majorArea
    required("city", "City", max_length=100, aliases=("cityProvince",)),
    required("securityGuardType", "Security guard type", max_length=100, aliases=("majorArea",)),
    FieldRule("numberOfGuards", "Number of guards", (
        Required("Number of guards is required"),
        Pattern(r"^\d{1,4}\+?$", "Number of guards must be a number"),
    )),
    required("service", "Service", max_length=100),
    required("details", "Details", max_length=1000, message="Details are required"),
)


def render(record: Dict[str, str]) -> RenderedEmails:
    contact = f"{record['firstName']} {record['lastName']}"

    admin_body = templates.join_rows(
        templates.row("Company", record["companyName"]),
        templates.row("Contact", contact),
        templates.row("Email", record["email"]),
        templates.row("Phone", record["phone"]),
        templates.row("City", record["city"]),
        templates.row("Guard Type", record["securityGuardType"]),
        templates.row("Number of Guards", record["numberOfGuards"]),
        templates.row("Service", record["service"]),
        templates.details_block(record["details"]),
    )

    acknowledgment_body = templates.join_rows(
        "<h3>Your Request Details:</h3>",
        templates.row("Company", record["companyName"]),
        templates.row("City", record["city"]),
        templates.row("Guard Type", record["securityGuardType"]),
        templates.row("Number of Guards", record["numberOfGuards"]),
        templates.row("Service", record["service"]),
        "<p><strong>Details:</strong></p>",
        f'<p style="white-space: pre-wrap;">{record["details"]}</p>',
    )

    return RenderedEmails(
        admin_html=templates.admin_document("New Company Service Request", admin_body),
        acknowledgment_html=templates.acknowledgment_document(
            "Thank you for your service request!",
            record["firstName"],
            "We have received your request for security services. An account manager "
            "will contact you within 24-48 business hours to discuss your needs.",
            acknowledgment_body,
            "Guard Armor Team",
        ),
    )


DESCRIPTOR = FormDescriptor(
    key="company",
    path="/submit-company",
    rules=RULES,
    render=render,
    admin_subject="New Company Service Request",
    acknowledgment_subject="Service Request Received - Guard Armor",
    success_message="Company request submitted successfully",
    log_fields=("email", "companyName", "service"),
)
