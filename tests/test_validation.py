# =============================================================================
# tests/test_validation.py - Field Validator Tests
# =============================================================================
# Unit tests for the declarative rule tables:
# - every violated constraint is reported, in declaration order
# - normalization (trim, lowercase email) flows into the validated record
# - optional fields, aliases and non-text values
# =============================================================================

import pytest

from formgateway.forms import company, fleet_worker, guard, quote
from formgateway.services.validation import (
    FieldRule,
    Length,
    Pattern,
    Required,
    validate_submission,
)


def violations(outcome):
    return [(v.field, v.message) for v in outcome.errors]


# =============================================================================
# Quote Form Rules
# =============================================================================

class TestQuoteRules:
    """Tests for the quote rule table."""

    def test_valid_submission_is_normalized(self, quote_payload):
        outcome = validate_submission(quote.RULES, quote_payload)

        assert outcome.is_valid
        assert outcome.record == {
            "name": "Jo Smith",
            "email": "jo@example.com",
            "phone": "555-123-4567",
            "details": "Need a quote",
        }

    def test_invalid_submission_reports_every_field_in_order(self):
        raw = {"name": "J", "email": "not-an-email", "phone": "123", "details": ""}

        outcome = validate_submission(quote.RULES, raw)

        assert not outcome.is_valid
        assert outcome.record is None
        assert violations(outcome) == [
            ("name", "Name must be between 2 and 50 characters"),
            ("email", "Valid email is required"),
            ("phone", "Valid phone number is required"),
            ("details", "Details are required"),
        ]

    def test_empty_required_field_reports_each_violated_constraint(self, quote_payload):
        quote_payload["name"] = "   "

        outcome = validate_submission(quote.RULES, quote_payload)

        assert violations(outcome) == [
            ("name", "Name is required"),
            ("name", "Name must be between 2 and 50 characters"),
        ]

    @pytest.mark.parametrize("field", ["name", "email", "phone", "details"])
    def test_missing_required_field_is_reported(self, quote_payload, field):
        del quote_payload[field]

        outcome = validate_submission(quote.RULES, quote_payload)

        assert not outcome.is_valid
        assert field in {v.field for v in outcome.errors}

    def test_null_is_treated_as_missing(self, quote_payload):
        quote_payload["details"] = None

        outcome = validate_submission(quote.RULES, quote_payload)

        assert violations(outcome) == [("details", "Details are required")]

    def test_details_length_ceiling(self, quote_payload):
        quote_payload["details"] = "x" * 1001

        outcome = validate_submission(quote.RULES, quote_payload)

        assert violations(outcome) == [("details", "Details must not exceed 1000 characters")]

    def test_blank_optional_company_is_omitted(self, quote_payload):
        quote_payload["company"] = "   "

        outcome = validate_submission(quote.RULES, quote_payload)

        assert outcome.is_valid
        assert "company" not in outcome.record

    def test_optional_company_is_trimmed_and_bounded(self, quote_payload):
        quote_payload["company"] = "  Acme Corp  "
        assert validate_submission(quote.RULES, quote_payload).record["company"] == "Acme Corp"

        quote_payload["company"] = "A" * 101
        outcome = validate_submission(quote.RULES, quote_payload)
        assert violations(outcome) == [("company", "Company must not exceed 100 characters")]

    def test_unknown_keys_are_dropped(self, quote_payload):
        quote_payload["isAdmin"] = "true"

        outcome = validate_submission(quote.RULES, quote_payload)

        assert "isAdmin" not in outcome.record

    @pytest.mark.parametrize("number", ["+1 416 555 0199", "416-555-0199", "4165550199"])
    def test_phone_formats_accepted(self, quote_payload, number):
        quote_payload["phone"] = number
        assert validate_submission(quote.RULES, quote_payload).is_valid

    @pytest.mark.parametrize("value", [True, ["Jo"], {"first": "Jo"}])
    def test_non_text_value_is_rejected(self, quote_payload, value):
        quote_payload["name"] = value

        outcome = validate_submission(quote.RULES, quote_payload)

        assert violations(outcome) == [("name", "Name must be text")]


# =============================================================================
# Other Form Rules
# =============================================================================

class TestGuardRules:
    """Tests for the guard application rule table."""

    def test_valid(self, guard_payload):
        assert validate_submission(guard.RULES, guard_payload).is_valid

    def test_years_of_experience_must_be_numeric(self, guard_payload):
        guard_payload["yearsOfExperience"] = "a few"

        outcome = validate_submission(guard.RULES, guard_payload)

        assert violations(outcome) == [
            ("yearsOfExperience", "Years of experience must be a number"),
        ]

    def test_empty_submission_lists_every_required_field(self):
        outcome = validate_submission(guard.RULES, {})

        fields = []
        for v in outcome.errors:
            if v.field not in fields:
                fields.append(v.field)
        assert fields == [
            "fullName", "email", "phone", "city", "license", "yearsOfExperience", "details",
        ]


class TestCompanyRules:
    """Tests for the company request rule table."""

    def test_aliases_fill_primary_fields(self, company_payload):
        outcome = validate_submission(company.RULES, company_payload)

        assert outcome.is_valid
        assert outcome.record["city"] == "Mississauga, ON"
        assert outcome.record["securityGuardType"] == "Warehouse"
        assert "cityProvince" not in outcome.record
        assert "majorArea" not in outcome.record

    def test_primary_key_wins_over_alias(self, company_payload):
        company_payload["city"] = "Oakville"

        outcome = validate_submission(company.RULES, company_payload)

        assert outcome.record["city"] == "Oakville"

    def test_missing_alias_group_reports_primary_name(self, company_payload):
        del company_payload["cityProvince"]

        outcome = validate_submission(company.RULES, company_payload)

        assert violations(outcome) == [("city", "City is required")]


class TestFleetWorkerRules:
    """Tests for the fleet worker application rule table."""

    def test_numeric_years_are_accepted(self, fleet_worker_payload):
        outcome = validate_submission(fleet_worker.RULES, fleet_worker_payload)

        assert outcome.is_valid
        assert outcome.record["yearsOfExperience"] == "7"

    def test_cdl_license_is_optional(self, fleet_worker_payload):
        outcome = validate_submission(fleet_worker.RULES, fleet_worker_payload)
        assert "cdlLicense" not in outcome.record

        fleet_worker_payload["cdlLicense"] = "Class A"
        outcome = validate_submission(fleet_worker.RULES, fleet_worker_payload)
        assert outcome.record["cdlLicense"] == "Class A"


# =============================================================================
# Rule Building Blocks
# =============================================================================

class TestConstraints:
    """Tests for composing constraints directly."""

    def test_constraints_run_in_declaration_order(self):
        rules = (
            FieldRule("code", "Code", (
                Required("Code is required"),
                Length(3, 5, "Code must be 3-5 characters"),
                Pattern(r"^[A-Z]+$", "Code must be uppercase letters"),
            )),
        )

        outcome = validate_submission(rules, {"code": "a"})

        assert violations(outcome) == [
            ("code", "Code must be 3-5 characters"),
            ("code", "Code must be uppercase letters"),
        ]

    def test_validation_does_not_mutate_input(self, quote_payload):
        original = dict(quote_payload)

        validate_submission(quote.RULES, quote_payload)

        assert quote_payload == original
