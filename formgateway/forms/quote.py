"""Quote request form"""
from typing import Dict

from formgateway.models.notification import RenderedEmails
from formgateway.services.form_handler import FormDescriptor
from formgateway.services import templates
from formgateway.services.validation import email, optional, phone, required

RULES = (
    required("name", "Name", 2, 50),
    email(),
    phone(),
    required("details", "Details", max_length=1000, message="Details are required"),
    optional("company", "Company", 100),
)


def render(record: Dict[str, str]) -> RenderedEmails:
    admin_body = templates.join_rows(
        templates.row("Name", record["name"]),
        templates.row("Email", record["email"]),
        templates.row("Phone", record["phone"]),
        templates.optional_row("Company", record.get("company")),
        templates.details_block(record["details"]),
    )

    acknowledgment_body = templates.join_rows(
        "<h3>Your Request Details:</h3>",
        templates.row("Phone", record["phone"]),
        templates.optional_row("Company", record.get("company")),
        "<p><strong>Details:</strong></p>",
        f'<p style="white-space: pre-wrap;">{record["details"]}</p>',
    )

    return RenderedEmails(
        admin_html=templates.admin_document("New Quote Request", admin_body),
        acknowledgment_html=templates.acknowledgment_document(
            "Thank you for your quote request!",
            record["name"],
            "We have received your quote request and will review it shortly. "
            "Our team will get back to you within 24-48 business hours.",
            acknowledgment_body,
            "Guard Armor Team",
        ),
    )


DESCRIPTOR = FormDescriptor(
    key="quote",
    path="/submit-quote",
    rules=RULES,
    render=render,
    admin_subject="New Quote Request",
    acknowledgment_subject="Quote Request Received - Guard Armor",
    success_message="Quote submitted successfully",
    log_fields=("email",),
)
