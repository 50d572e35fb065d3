"""Fleet services worker application form"""
from typing import Dict

from formgateway.models.notification import RenderedEmails
from formgateway.services.form_handler import FormDescriptor
from formgateway.services import templates
from formgateway.services.validation import (
    YEARS_PATTERN, FieldRule, Pattern, Required, email, optional, phone, required,
)

SPECIALTY_CATEGORIES = {
    "A": "Management & Operations",
    "B": "Drivers & Transportation",
    "C": "Maintenance & Repair",
    "D": "Dispatch & Logistics",
    "E": "Safety & Compliance",
}

RULES = (
    required("firstName", "First name", 2, 50),
    required("lastName", "Last name", 2, 50),
    email(),
    phone(),
    required("city", "City", max_length=100),
    required("specialtyCategory", "Specialty category", max_length=10),
    required("specialtySubcategory", "Specialty subcategory", max_length=100),
    FieldRule("yearsOfExperience", "Years of experience", (
        Required("Years of experience is required"),
        Pattern(YEARS_PATTERN, "Years of experience must be a number"),
    )),
    optional("cdlLicense", "CDL license", 50),
    required("details", "Details", max_length=1000, message="Details are required"),
)


def category_label(code: str) -> str:
    """Human-readable specialty category, or the code itself if unknown"""
    return SPECIALTY_CATEGORIES.get(code.upper(), code)


def render(record: Dict[str, str]) -> RenderedEmails:
    full_name = f"{record['firstName']} {record['lastName']}"
    category = category_label(record["specialtyCategory"])

    admin_body = templates.join_rows(
        templates.row("Name", full_name),
        templates.row("Email", record["email"]),
        templates.row("Phone", record["phone"]),
        templates.row("City", record["city"]),
        templates.row("Specialty Category", category),
        templates.row("Specialty", record["specialtySubcategory"]),
        templates.row("Years of Experience", record["yearsOfExperience"]),
        templates.optional_row("CDL License", record.get("cdlLicense")),
        templates.details_block(record["details"], "Additional Information:"),
    )

    acknowledgment_body = templates.join_rows(
        "<h3>Your Application Details:</h3>",
        templates.row("Specialty Category", category),
        templates.row("Specialty", record["specialtySubcategory"]),
        templates.row("Years of Experience", record["yearsOfExperience"]),
        templates.optional_row("CDL License", record.get("cdlLicense")),
    )

    return RenderedEmails(
        admin_html=templates.admin_document("New Fleet Worker Application", admin_body),
        acknowledgment_html=templates.acknowledgment_document(
            "Thank you for applying to Guard Armor Fleet Services!",
            record["firstName"],
            "We have received your application. Our fleet services team will review "
            "your experience and reach out about matching opportunities.",
            acknowledgment_body,
            "Guard Armor Fleet Services Team",
        ),
    )


DESCRIPTOR = FormDescriptor(
    key="fleet-worker",
    path="/submit-fleet-worker",
    rules=RULES,
    render=render,
    admin_subject="New Fleet Worker Application",
    acknowledgment_subject="Application Received - Guard Armor Fleet Services",
    success_message="Fleet worker application submitted successfully",
    log_fields=("email", "specialtyCategory"),
)
