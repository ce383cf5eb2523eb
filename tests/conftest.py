"""
Central pytest configuration for the clinic records tests.

This file provides common fixtures, test markers, and setup
for both unit and integration tests.
"""

import os
from base64 import b64encode

import pytest

os.environ["TESTING"] = "true"
os.environ.pop("CLINIC_USERNAME", None)
os.environ.pop("CLINIC_PASSWORD", None)

from clinic.main import create_app  # noqa: E402
from clinic.services.context import ClinicContext  # noqa: E402
from tests.config.markers import (  # noqa: E402,F401
    pytest_collection_modifyitems,
    pytest_configure,
)
from tests.fixtures.domain_fixtures import *  # noqa: E402,F401,F403
from tests.fixtures.domain_fixtures import FIXED_NOW  # noqa: E402

TEST_CREDENTIALS = ("frontdesk", "s3cret")


@pytest.fixture
def clinic() -> ClinicContext:
    """Fresh clinic state with a fixed billing clock."""
    return ClinicContext(clock=lambda: FIXED_NOW)


@pytest.fixture
def app(clinic):
    """Flask adapter serving the test clinic, credential check disabled."""
    app = create_app({"TESTING": True, "CLINIC_CREDENTIALS": None}, context=clinic)
    yield app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def secured_app(clinic):
    """Flask adapter requiring the fixed test credential on writes."""
    return create_app(
        {"TESTING": True, "CLINIC_CREDENTIALS": TEST_CREDENTIALS}, context=clinic
    )


@pytest.fixture
def secured_client(secured_app):
    with secured_app.test_client() as client:
        yield client


@pytest.fixture
def auth_headers() -> dict:
    token = b64encode(":".join(TEST_CREDENTIALS).encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}
