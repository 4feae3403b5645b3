"""Appointment service - Business logic for booking requests"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Appointment
from .repository import AppointmentRepository
from .schemas import AppointmentCreate, AppointmentUpdate

logger = logging.getLogger(__name__)

# Largest value of the Integer primary key column
MAX_APPOINTMENT_ID = 2**31 - 1

# Request field -> column name
FIELD_COLUMNS = {
    "name": "name",
    "email": "email",
    "phone": "phone",
    "serviceType": "service_type",
    "preferredDate": "preferred_date",
    "preferredTime": "preferred_time",
    "details": "details",
}


def parse_appointment_id(raw_id: str) -> int:
    """Parse an appointment ID from the URL path, rejecting anything that is not a positive integer the id column can hold"""
    try:
        appointment_id = int(raw_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail="Invalid appointment ID.") from None

    if appointment_id < 1 or appointment_id > MAX_APPOINTMENT_ID:
        raise HTTPException(status_code=400, detail="Invalid appointment ID.")
    return appointment_id


class AppointmentService:
    """Service layer for appointment business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AppointmentRepository()

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        """Store a new booking request from the public form"""
        appointment_data = {
            FIELD_COLUMNS[field]: value for field, value in data.model_dump().items()
        }
        appointment = self.repo.create_appointment(self.db, **appointment_data)
        logger.info(
            f"📥 New appointment request {appointment.id} ({appointment.service_type} on {appointment.preferred_date})"
        )
        return appointment

    def get_appointments(self) -> list[Appointment]:
        return self.repo.get_appointments(self.db)

    def get_appointment(self, appointment_id: int) -> Appointment:
        appointment = self.repo.get_appointment_by_id(self.db, appointment_id)
        if not appointment:
            raise HTTPException(status_code=404, detail="Appointment not found.")
        return appointment

    def update_appointment(self, appointment_id: int, data: AppointmentUpdate) -> Appointment:
        """Apply only the fields that were sent in the request body"""
        appointment = self.get_appointment(appointment_id)

        updates = {
            FIELD_COLUMNS[field]: value
            for field, value in data.model_dump(exclude_unset=True).items()
        }
        if not updates:
            return appointment

        logger.info(f"✏️ Updating appointment {appointment_id}: {sorted(updates)}")
        return self.repo.update_appointment(self.db, appointment, **updates)

    def delete_appointment(self, appointment_id: int) -> dict:
        """Permanently delete an appointment"""
        if not self.repo.delete_appointment(self.db, appointment_id):
            raise HTTPException(status_code=404, detail="Appointment not found.")

        logger.info(f"🗑️ Appointment {appointment_id} deleted")
        return {"message": "Appointment deleted."}
