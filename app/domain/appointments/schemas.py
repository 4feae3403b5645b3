"""Appointment domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ValidationInfo, field_validator

from ...shared.validators import (
    validate_email,
    validate_phone,
    validate_required_text,
    validate_service_type,
)

REQUIRED_FIELDS = ("name", "email", "phone", "serviceType", "preferredDate")


class AppointmentCreate(BaseModel):
    """Schema for a booking request submitted from the public booking form"""

    name: str
    email: str
    phone: str
    serviceType: str
    preferredDate: str
    preferredTime: Optional[str] = None
    details: Optional[str] = None

    @field_validator(*REQUIRED_FIELDS)
    @classmethod
    def validate_required(cls, v, info: ValidationInfo):
        return validate_required_text(v, info.field_name)

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v):
        return validate_email(v)

    @field_validator("phone")
    @classmethod
    def validate_phone_number(cls, v):
        return validate_phone(v)

    @field_validator("serviceType")
    @classmethod
    def validate_service(cls, v):
        return validate_service_type(v)


class AppointmentUpdate(BaseModel):
    """
    Schema for editing an appointment from the admin dashboard.

    Only fields present in the request body are applied. Required fields may be
    changed but not cleared; preferredTime and details may be cleared with null.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    serviceType: Optional[str] = None
    preferredDate: Optional[str] = None
    preferredTime: Optional[str] = None
    details: Optional[str] = None

    @field_validator(*REQUIRED_FIELDS)
    @classmethod
    def validate_required(cls, v, info: ValidationInfo):
        return validate_required_text(v, info.field_name)

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v):
        return validate_email(v)

    @field_validator("phone")
    @classmethod
    def validate_phone_number(cls, v):
        return validate_phone(v)

    @field_validator("serviceType")
    @classmethod
    def validate_service(cls, v):
        return validate_service_type(v)


class AppointmentResponse(BaseModel):
    """Schema for appointment response"""

    id: int
    name: str
    email: str
    phone: str
    serviceType: str
    preferredDate: str
    preferredTime: Optional[str] = None
    details: Optional[str] = None
    createdAt: datetime

    @classmethod
    def from_model(cls, appointment) -> "AppointmentResponse":
        return cls(
            id=appointment.id,
            name=appointment.name,
            email=appointment.email,
            phone=appointment.phone,
            serviceType=appointment.service_type,
            preferredDate=appointment.preferred_date,
            preferredTime=appointment.preferred_time,
            details=appointment.details,
            createdAt=appointment.created_at,
        )
