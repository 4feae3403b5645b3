"""
Tests for the password reset flow
"""
import logging
from datetime import datetime, timedelta, timezone

import pytest
from conftest import ADMIN_PASSWORD, ADMIN_USERNAME, bearer, extract_reset_token, login

from app.domain.admin.service import RESET_REQUESTED_MESSAGE, utc_now
from app.models import AdminUser
from app.security_utils import hash_token


@pytest.fixture
def reset_log(caplog):
    caplog.set_level(logging.INFO, logger="app.domain.admin.service")
    return caplog


def request_reset(client, reset_log, username=None):
    payload = {"username": username} if username else {}
    response = client.post("/api/admin/request-reset", json=payload)
    assert response.status_code == 200
    assert response.json() == {"message": RESET_REQUESTED_MESSAGE}
    return extract_reset_token(reset_log)


def test_reset_flow(client, reset_log):
    token = request_reset(client, reset_log)
    assert token

    response = client.post(
        "/api/admin/reset-password", json={"token": token, "newPassword": "reset-pass-456"}
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Password has been reset successfully."}

    assert login(client, password="reset-pass-456").status_code == 200
    assert login(client, password=ADMIN_PASSWORD).status_code == 401

    # One-time token
    response = client.post(
        "/api/admin/reset-password", json={"token": token, "newPassword": "another-pass-789"}
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid or expired reset token."}


def test_request_reset_without_body_targets_default_admin(client, reset_log):
    response = client.post("/api/admin/request-reset")
    assert response.status_code == 200
    assert extract_reset_token(reset_log)


def test_request_reset_unknown_user_same_response(client, reset_log):
    token = request_reset(client, reset_log, username="nobody")
    assert token is None


def test_token_is_stored_as_digest(client, reset_log, db_session):
    token = request_reset(client, reset_log, username=ADMIN_USERNAME)

    admin = db_session.query(AdminUser).filter_by(username=ADMIN_USERNAME).one()
    assert admin.reset_token == hash_token(token)
    assert admin.reset_token != token
    assert admin.reset_token_expiry > utc_now() + timedelta(minutes=55)


def test_new_request_supersedes_old_token(client, reset_log):
    old_token = request_reset(client, reset_log)
    new_token = request_reset(client, reset_log)
    assert old_token != new_token

    response = client.post(
        "/api/admin/reset-password", json={"token": old_token, "newPassword": "reset-pass-456"}
    )
    assert response.status_code == 400

    response = client.post(
        "/api/admin/reset-password", json={"token": new_token, "newPassword": "reset-pass-456"}
    )
    assert response.status_code == 200


def test_expired_token_is_rejected(client, reset_log, db_session):
    token = request_reset(client, reset_log)

    admin = db_session.query(AdminUser).filter_by(username=ADMIN_USERNAME).one()
    admin.reset_token_expiry = utc_now() - timedelta(minutes=1)
    db_session.commit()

    response = client.post(
        "/api/admin/reset-password", json={"token": token, "newPassword": "reset-pass-456"}
    )
    assert response.status_code == 400
    assert login(client).status_code == 200


def test_reset_rejects_short_password(client, reset_log):
    token = request_reset(client, reset_log)

    response = client.post(
        "/api/admin/reset-password", json={"token": token, "newPassword": "short"}
    )
    assert response.status_code == 400
    assert response.json() == {"message": "New password must be at least 8 characters."}


def test_reset_requires_token_and_password(client):
    response = client.post("/api/admin/reset-password", json={"newPassword": "reset-pass-456"})
    assert response.status_code == 400
    assert response.json() == {"message": "Token and new password are required."}


def test_reset_ends_live_session(client, reset_log, admin_token):
    token = request_reset(client, reset_log)

    client.post("/api/admin/reset-password", json={"token": token, "newPassword": "reset-pass-456"})

    assert client.get("/api/appointments", headers=bearer(admin_token)).status_code == 401


def test_utc_now_is_naive_utc():
    now = utc_now()
    assert now.tzinfo is None
    assert abs(now - datetime.now(timezone.utc).replace(tzinfo=None)) < timedelta(seconds=5)
