"""Shared validation utilities"""

import re
from typing import Optional

from ..models import SERVICE_TYPES

# Same minimum as the booking form
PHONE_MIN_LENGTH = 10


def validate_required_text(value: Optional[str], field_name: str) -> str:
    """
    Strip a required text value and reject empty input.

    Raises:
        ValueError: If the value is missing or blank
    """
    if value is None or not value.strip():
        raise ValueError(f"{field_name} is required")
    return value.strip()


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """
    Check that a phone number is at least as long as the booking form requires.

    The number is stored as entered (stripped) so the admin sees what the customer typed.

    Raises:
        ValueError: If the number is shorter than PHONE_MIN_LENGTH characters
    """
    if not phone:
        return phone

    phone = phone.strip()
    if len(phone) < PHONE_MIN_LENGTH:
        raise ValueError("Please enter a valid phone number")

    return phone


def validate_service_type(service_type: Optional[str]) -> Optional[str]:
    """Normalize a service code and check it is one the business offers"""
    if not service_type:
        return service_type

    code = service_type.strip().lower()
    if code not in SERVICE_TYPES:
        raise ValueError(f"Service type must be one of: {', '.join(SERVICE_TYPES)}")
    return code
