"""Appointment repository - Database operations for appointments"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Appointment


class AppointmentRepository:
    """Repository for appointment database operations"""

    @staticmethod
    def create_appointment(db: Session, **appointment_data) -> Appointment:
        """Insert a new appointment; id and created_at are assigned by the database"""
        appointment = Appointment(**appointment_data)
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def get_appointments(db: Session) -> list[Appointment]:
        """Get all appointments, newest first"""
        return (
            db.query(Appointment)
            .order_by(Appointment.created_at.desc(), Appointment.id.desc())
            .all()
        )

    @staticmethod
    def get_appointment_by_id(db: Session, appointment_id: int) -> Optional[Appointment]:
        return db.query(Appointment).filter(Appointment.id == appointment_id).first()

    @staticmethod
    def update_appointment(db: Session, appointment: Appointment, **updates) -> Appointment:
        """Apply the given column values to an appointment"""
        for key, value in updates.items():
            if hasattr(appointment, key):
                setattr(appointment, key, value)

        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def delete_appointment(db: Session, appointment_id: int) -> bool:
        """Delete an appointment by ID. Returns True if a row was removed."""
        deleted = (
            db.query(Appointment)
            .filter(Appointment.id == appointment_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted > 0
