"""Security guard job application form"""
from typing import Dict

from formgateway.models.notification import RenderedEmails
from formgateway.services.form_handler import FormDescriptor
from formgateway.services import templates
from formgateway.services.validation import (
    YEARS_PATTERN, FieldRule, Pattern, Required, email, phone, required,
)

RULES = (
    required("fullName", "Full name", 2, 100),
    email(),
    phone(),
    required("city", "City", max_length=100),
    required("license", "License", max_length=100, message="License information is required"),
    FieldRule("yearsOfExperience", "Years of experience", (
        Required("Years of experience is required"),
        Pattern(YEARS_PATTERN, "Years of experience must be a number"),
    )),
    required("details", "Details", max_length=1000, message="Details are required"),
)


def render(record: Dict[str, str]) -> RenderedEmails:
    admin_body = templates.join_rows(
        templates.row("Full Name", record["fullName"]),
        templates.row("Email", record["email"]),
        templates.row("Phone", record["phone"]),
        templates.row("City", record["city"]),
        templates.row("Guard License", record["license"]),
        templates.row("Years of Experience", record["yearsOfExperience"]),
        templates.details_block(record["details"], "Additional Information:"),
    )

    acknowledgment_body = templates.join_rows(
        "<h3>Your Application Details:</h3>",
        templates.row("City", record["city"]),
        templates.row("Guard License", record["license"]),
        templates.row("Years of Experience", record["yearsOfExperience"]),
    )

    return RenderedEmails(
        admin_html=templates.admin_document("New Guard Application", admin_body),
        acknowledgment_html=templates.acknowledgment_document(
            "Thank you for applying to Guard Armor!",
            record["fullName"],
            "We have received your application. Our recruitment team will review "
            "your qualifications and contact you if your profile matches an open position.",
            acknowledgment_body,
            "Guard Armor Recruitment Team",
        ),
    )


DESCRIPTOR = FormDescriptor(
    key="guard",
    path="/submit-guard",
    rules=RULES,
    render=render,
    admin_subject="New Guard Application",
    acknowledgment_subject="Application Received - Guard Armor",
    success_message="Application submitted successfully",
    log_fields=("email", "city"),
)
