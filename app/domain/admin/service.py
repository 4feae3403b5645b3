"""Admin service - Login, password change and password reset for the admin panel"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...config import (
    ADMIN_DEFAULT_PASSWORD,
    ADMIN_RESET_PATH,
    ADMIN_USERNAME,
    PASSWORD_MIN_LENGTH,
    RESET_TOKEN_TTL_MINUTES,
)
from ...security_utils import (
    generate_secure_token,
    hash_password_bcrypt,
    hash_token,
    verify_password_bcrypt,
)
from .repository import AdminRepository
from .sessions import AdminSession, AdminSessionStore, session_store

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = "If the account exists, a reset token has been generated. Check the server log for the reset link."


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, matching the naive DateTime columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def check_new_password(new_password: str) -> None:
    if len(new_password) < PASSWORD_MIN_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"New password must be at least {PASSWORD_MIN_LENGTH} characters.",
        )


def seed_default_admin(db: Session) -> None:
    """Create the default admin account on first startup from ADMIN_DEFAULT_PASSWORD"""
    repo = AdminRepository()
    if repo.get_admin_by_username(db, ADMIN_USERNAME):
        return

    if not ADMIN_DEFAULT_PASSWORD:
        logger.warning("⚠️ No ADMIN_DEFAULT_PASSWORD set. Skipping admin seed.")
        return

    repo.create_admin(db, ADMIN_USERNAME, hash_password_bcrypt(ADMIN_DEFAULT_PASSWORD))
    logger.info(f"✅ Default admin account created (username: {ADMIN_USERNAME})")


class AdminService:
    """Service layer for admin authentication"""

    def __init__(self, db: Session, sessions: AdminSessionStore = session_store):
        self.db = db
        self.repo = AdminRepository()
        self.sessions = sessions

    def login(self, username: Optional[str], password: Optional[str]) -> AdminSession:
        """Check credentials and start the live admin session"""
        if not username or not password:
            raise HTTPException(status_code=400, detail="Username and password are required.")

        admin = self.repo.get_admin_by_username(self.db, username)
        # Same response for unknown user and wrong password
        if not admin or not verify_password_bcrypt(password, admin.password_hash):
            logger.warning(f"🔒 Failed admin login attempt for username '{username}'")
            raise HTTPException(status_code=401, detail="Invalid credentials.")

        session = self.sessions.issue(admin.username)
        logger.info(f"✅ Admin {admin.username} logged in")
        return session

    def logout(self, session: AdminSession) -> dict:
        self.sessions.revoke(session.token)
        logger.info(f"👋 Admin {session.username} logged out")
        return {"message": "Logged out."}

    def change_password(
        self, session: AdminSession, current_password: Optional[str], new_password: Optional[str]
    ) -> dict:
        """Change the password of the logged-in admin. The current session stays valid."""
        if not current_password or not new_password:
            raise HTTPException(
                status_code=400, detail="Current and new passwords are required."
            )
        check_new_password(new_password)

        admin = self.repo.get_admin_by_username(self.db, session.username)
        if not admin:
            raise HTTPException(status_code=404, detail="Admin not found.")

        if not verify_password_bcrypt(current_password, admin.password_hash):
            logger.warning(f"🔒 Wrong current password on change-password for {admin.username}")
            raise HTTPException(status_code=401, detail="Current password is incorrect.")

        self.repo.update_admin_password(self.db, admin, hash_password_bcrypt(new_password))
        logger.info(f"🔑 Password changed for admin {admin.username}")
        return {"message": "Password updated successfully."}

    def request_reset(self, username: Optional[str]) -> dict:
        """
        Generate a one-time reset token for username (default: the seeded admin).

        The raw token is written to the server log for the operator to relay; the
        response is the same whether or not the account exists.
        """
        target_username = username or ADMIN_USERNAME
        token = generate_secure_token()
        expiry = utc_now() + timedelta(minutes=RESET_TOKEN_TTL_MINUTES)

        found = self.repo.set_reset_token(self.db, target_username, hash_token(token), expiry)
        if not found:
            logger.info(f"Password reset requested for unknown username '{target_username}'")
            return {"message": RESET_REQUESTED_MESSAGE}

        logger.warning(
            "\n=== PASSWORD RESET ===\n"
            f"Username: {target_username}\n"
            f"Reset token: {token}\n"
            f"Use this at {ADMIN_RESET_PATH}?reset={token}\n"
            f"Expires in {RESET_TOKEN_TTL_MINUTES} minutes.\n"
            "======================"
        )
        return {"message": RESET_REQUESTED_MESSAGE}

    def reset_password(self, token: Optional[str], new_password: Optional[str]) -> dict:
        """Set a new password using a reset token. The token works once."""
        if not token or not new_password:
            raise HTTPException(status_code=400, detail="Token and new password are required.")
        check_new_password(new_password)

        admin = self.repo.get_admin_by_reset_token(self.db, hash_token(token))
        if (
            not admin
            or not admin.reset_token_expiry
            or admin.reset_token_expiry < utc_now()
        ):
            logger.warning("🔒 Invalid or expired password reset token used")
            raise HTTPException(status_code=400, detail="Invalid or expired reset token.")

        self.repo.reset_password(self.db, admin, hash_password_bcrypt(new_password))
        self.sessions.revoke_user(admin.username)
        logger.info(f"🔑 Password reset for admin {admin.username}")
        return {"message": "Password has been reset successfully."}
