"""Admin repository - Database operations for admin users"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from ...models import AdminUser


class AdminRepository:
    """Repository for admin user database operations"""

    @staticmethod
    def get_admin_by_username(db: Session, username: str) -> Optional[AdminUser]:
        return db.query(AdminUser).filter(AdminUser.username == username).first()

    @staticmethod
    def create_admin(db: Session, username: str, password_hash: str) -> AdminUser:
        admin = AdminUser(username=username, password_hash=password_hash)
        db.add(admin)
        db.commit()
        db.refresh(admin)
        return admin

    @staticmethod
    def update_admin_password(db: Session, admin: AdminUser, password_hash: str) -> None:
        admin.password_hash = password_hash
        db.commit()

    @staticmethod
    def set_reset_token(db: Session, username: str, token_digest: str, expiry: datetime) -> bool:
        """
        Store a reset token digest and expiry for username, replacing any earlier token.
        Returns False if no admin has that username.
        """
        updated = (
            db.query(AdminUser)
            .filter(AdminUser.username == username)
            .update(
                {AdminUser.reset_token: token_digest, AdminUser.reset_token_expiry: expiry},
                synchronize_session=False,
            )
        )
        db.commit()
        return updated > 0

    @staticmethod
    def get_admin_by_reset_token(db: Session, token_digest: str) -> Optional[AdminUser]:
        return db.query(AdminUser).filter(AdminUser.reset_token == token_digest).first()

    @staticmethod
    def reset_password(db: Session, admin: AdminUser, password_hash: str) -> None:
        """Store the new hash and clear the reset token"""
        admin.password_hash = password_hash
        admin.reset_token = None
        admin.reset_token_expiry = None
        db.commit()
