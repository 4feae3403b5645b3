"""Admin domain schemas - Pydantic models for the admin auth endpoints"""

from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    token: str
    username: str


class ChangePasswordRequest(BaseModel):
    currentPassword: Optional[str] = None
    newPassword: Optional[str] = None


class RequestResetRequest(BaseModel):
    """Username defaults to the seeded admin account"""

    username: Optional[str] = None


class ResetPasswordRequest(BaseModel):
    token: Optional[str] = None
    newPassword: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
