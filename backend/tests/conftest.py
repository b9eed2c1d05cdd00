"""Root conftest — shared test configuration.

Environment is set before freight_ledger.config is imported so the cached
Settings see test values (known operator, throwaway signing secret).
"""

import os

import bcrypt
import pytest

ADMIN_EMAIL = "owner@rtm.test"
ADMIN_PASSWORD = "correct horse battery"
ADMIN_NAME = "RTM Owner"

os.environ.setdefault("JWT_SECRET", "test-signing-secret")
os.environ.setdefault("JWT_EXPIRES_IN", "30m")
os.environ.setdefault("ADMIN_EMAIL", ADMIN_EMAIL)
os.environ.setdefault("ADMIN_NAME", ADMIN_NAME)
os.environ.setdefault(
    "ADMIN_PASSWORD_HASH",
    bcrypt.hashpw(ADMIN_PASSWORD.encode(), bcrypt.gensalt(4)).decode(),
)
os.environ.setdefault("STORAGE_BACKEND", "csv")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def operator_credentials():
    return {"username": ADMIN_EMAIL, "password": ADMIN_PASSWORD, "name": ADMIN_NAME}


@pytest.fixture
def sample_record():
    """The dashboard's canonical add-record payload."""
    return {
        "date": "2025-03-10",
        "vehicleNumber": "TN01",
        "city": "Chennai",
        "destination": "Bangalore",
        "weightInTons": 10,
        "ratePerTon": 100,
        "amountSpend": 900,
        "rateWeFixed": 150,
        "extraSpend": 50,
        "totalProfit": 500,
    }
