"""Appointment router - FastAPI endpoints for booking requests"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from ..admin.sessions import AdminSession
from .schemas import AppointmentCreate, AppointmentResponse, AppointmentUpdate
from .service import AppointmentService, parse_appointment_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])


def get_appointment_service(db: Session = Depends(get_db)) -> AppointmentService:
    """Dependency injection for AppointmentService"""
    return AppointmentService(db)


# ============================================================================
# PUBLIC ROUTES
# ============================================================================


@router.post("", response_model=AppointmentResponse, status_code=201)
async def create_appointment(
    data: AppointmentCreate,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Submit a booking request from the public booking form"""
    appointment = service.create_appointment(data)
    return AppointmentResponse.from_model(appointment)


# ============================================================================
# ADMIN ROUTES
# ============================================================================


@router.get("", response_model=list[AppointmentResponse])
async def get_appointments(
    _admin: AdminSession = Depends(require_admin),
    service: AppointmentService = Depends(get_appointment_service),
):
    """List all booking requests, newest first"""
    return [AppointmentResponse.from_model(a) for a in service.get_appointments()]


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: str,
    _admin: AdminSession = Depends(require_admin),
    service: AppointmentService = Depends(get_appointment_service),
):
    appointment = service.get_appointment(parse_appointment_id(appointment_id))
    return AppointmentResponse.from_model(appointment)


@router.put("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: str,
    data: AppointmentUpdate,
    _admin: AdminSession = Depends(require_admin),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Update the fields provided in the body"""
    appointment = service.update_appointment(parse_appointment_id(appointment_id), data)
    return AppointmentResponse.from_model(appointment)


@router.delete("/{appointment_id}")
async def delete_appointment(
    appointment_id: str,
    _admin: AdminSession = Depends(require_admin),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Permanently remove a booking request"""
    return service.delete_appointment(parse_appointment_id(appointment_id))
