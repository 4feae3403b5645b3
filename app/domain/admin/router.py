"""Admin router - login, logout and password endpoints for the admin panel"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from ...rate_limiter import create_rate_limiter
from .schemas import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RequestResetRequest,
    ResetPasswordRequest,
)
from .service import AdminService
from .sessions import AdminSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Admin"])

# Rate limiters
rate_limit_login = create_rate_limiter(
    limit=10,
    window_seconds=900,  # 15 minutes
    key_prefix="admin_login",
    use_ip=True,
)

rate_limit_password_reset = create_rate_limiter(
    limit=10,
    window_seconds=3600,  # 1 hour
    key_prefix="password_reset",
    use_ip=True,
)


def get_admin_service(db: Session = Depends(get_db)) -> AdminService:
    """Dependency injection for AdminService"""
    return AdminService(db)


# Handlers are sync on purpose: bcrypt is CPU-bound and runs in the threadpool.


@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    _: None = Depends(rate_limit_login),
    service: AdminService = Depends(get_admin_service),
):
    """Authenticate the admin and return the bearer token of the new session"""
    session = service.login(data.username, data.password)
    return LoginResponse(token=session.token, username=session.username)


@router.post("/logout", response_model=MessageResponse)
def logout(
    session: AdminSession = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
):
    return service.logout(session)


@router.post("/change-password", response_model=MessageResponse)
def change_password(
    data: ChangePasswordRequest,
    session: AdminSession = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
):
    """Change the password of the logged-in admin"""
    return service.change_password(session, data.currentPassword, data.newPassword)


@router.post("/request-reset", response_model=MessageResponse)
def request_reset(
    data: Optional[RequestResetRequest] = None,
    _: None = Depends(rate_limit_password_reset),
    service: AdminService = Depends(get_admin_service),
):
    """Generate a password reset token; the token is written to the server log"""
    return service.request_reset(data.username if data else None)


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(
    data: ResetPasswordRequest,
    _: None = Depends(rate_limit_password_reset),
    service: AdminService = Depends(get_admin_service),
):
    """Set a new password using a reset token"""
    return service.reset_password(data.token, data.newPassword)
