"""
Shared fixtures for tests
"""
import os
import re
import tempfile

# The app reads its configuration at import time, so the environment is set first
_TEST_DIR = tempfile.mkdtemp(prefix="booking-api-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DIR, 'test.db')}"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_DEFAULT_PASSWORD"] = "initial-pass-123"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.pop("REDIS_URL", None)
os.environ.pop("REDIS_HOST", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.database import Base, SessionLocal, engine  # noqa: E402
from app.domain.admin.sessions import session_store  # noqa: E402
from app.main import app  # noqa: E402

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "initial-pass-123"

JANE = {
    "name": "Jane Doe",
    "email": "jane@x.com",
    "phone": "5551234567",
    "serviceType": "carpet",
    "preferredDate": "2025-06-01",
}


@pytest.fixture
def client():
    """Test client on a fresh database; startup recreates the tables and seeds the admin"""
    Base.metadata.drop_all(bind=engine)
    session_store.clear()
    with TestClient(app) as test_client:
        yield test_client
    session_store.clear()


@pytest.fixture
def db_session(client):
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def login(client, username=ADMIN_USERNAME, password=ADMIN_PASSWORD):
    return client.post("/api/admin/login", json={"username": username, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_token(client):
    response = login(client)
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(admin_token):
    return bearer(admin_token)


def extract_reset_token(caplog):
    """Pull the raw reset token out of the operator log record"""
    for record in reversed(caplog.records):
        match = re.search(r"Reset token: ([0-9a-f]+)", record.getMessage())
        if match:
            return match.group(1)
    return None
