# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets up the environment before any application import and provides the
# shared fixtures: a recording mail dispatcher, settings, and a TestClient
# wired to the recording dispatcher. Every app gets its own limiter, so rate
# limit windows never leak between tests.
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# formgateway.main builds the module-level app (and its settings) on import

os.environ.setdefault("SMTP_USERNAME", "forms@guardarmor.example.com")
os.environ.setdefault("SMTP_PASSWORD", "test-app-password")
os.environ.setdefault("ADMIN_EMAIL", "admin@guardarmor.example.com")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from fastapi.testclient import TestClient

from formgateway.config import Settings
from formgateway.exceptions import DeliveryError
from formgateway.main import create_app

ADMIN_ADDRESS = "admin@guardarmor.example.com"
SENDER_ADDRESS = "forms@guardarmor.example.com"


class RecordingDispatcher:
    """Stands in for MailDispatcher; records every attempted message"""

    def __init__(self, fail_for=()):
        self.attempts = []
        self.fail_for = set(fail_for)

    async def send(self, email):
        self.attempts.append(email)
        if email.to in self.fail_for:
            raise DeliveryError(f"SMTP refused {email.to}", recipient=email.to)


def make_settings(**overrides) -> Settings:
    values = {
        "smtp_username": SENDER_ADDRESS,
        "smtp_password": "test-app-password",
        "admin_email": ADMIN_ADDRESS,
        "environment": "development",
    }
    values.update(overrides)
    return Settings(**values)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def dispatcher():
    return RecordingDispatcher()


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def client(settings, dispatcher):
    app = create_app(settings=settings, dispatcher=dispatcher)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def quote_payload():
    """Valid quote request with padded, mixed-case email and no company."""
    return {
        "name": "Jo Smith",
        "email": " Jo@Example.com ",
        "phone": "555-123-4567",
        "details": "Need a quote",
    }


@pytest.fixture
def guard_payload():
    return {
        "fullName": "Sam Rivera",
        "email": "sam.rivera@example.com",
        "phone": "416 555-0199",
        "city": "Toronto",
        "license": "ON-123456",
        "yearsOfExperience": "4",
        "details": "Available for night shifts.",
    }


@pytest.fixture
def company_payload():
    return {
        "companyName": "Northwind Logistics",
        "email": "ops@northwind.example.com",
        "phone": "905-555-0142",
        "firstName": "Ava",
        "lastName": "Chen",
        "cityProvince": "Mississauga, ON",
        "majorArea": "Warehouse",
        "numberOfGuards": "6",
        "service": "Mobile patrol",
        "details": "Overnight coverage for two sites.",
    }


@pytest.fixture
def fleet_worker_payload():
    return {
        "firstName": "Liam",
        "lastName": "Osei",
        "email": "liam.osei@example.com",
        "phone": "+1 647 555 0110",
        "city": "Brampton",
        "specialtyCategory": "A",
        "specialtySubcategory": "Fleet Supervisor",
        "yearsOfExperience": 7,
        "details": "Managed a 40-vehicle fleet.",
    }
