from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from .database import Base

# Service codes accepted by the booking form
SERVICE_TYPES = ("carpet", "upholstery", "rugs", "multiple")


class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    # SHA-256 digest of the outstanding reset token; the raw token is only shown to the operator
    reset_token = Column(String(64), nullable=True, index=True)
    reset_token_expiry = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    service_type = Column(String(50), nullable=False)  # carpet, upholstery, rugs, multiple
    preferred_date = Column(String(50), nullable=False)  # yyyy-MM-dd as sent by the booking form
    preferred_time = Column(String(50), nullable=True)
    details = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)
