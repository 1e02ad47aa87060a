"""
Appointment Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from telecrm.domain.entities import Appointment, AppointmentStatus


class CreateAppointmentCommand(BaseModel):
    """Booking details for a new appointment"""

    lead_id: int
    owner_user_id: int
    start_at: datetime
    end_at: datetime
    title: Optional[str] = None
    description: Optional[str] = None


class UpdateAppointmentCommand(BaseModel):
    """Partial appointment update; only explicitly set fields are written"""

    status: Optional[AppointmentStatus] = None
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    title: Optional[str] = None
    description: Optional[str] = None


class AppointmentInfo(BaseModel):
    """Public view of an Appointment row"""

    id: int
    lead_id: int
    owner_user_id: int
    start_at: datetime
    end_at: datetime
    title: Optional[str] = None
    description: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, appointment: Appointment) -> "AppointmentInfo":
        return cls(
            id=appointment.id,
            lead_id=appointment.lead_id,
            owner_user_id=appointment.owner_user_id,
            start_at=appointment.start_at,
            end_at=appointment.end_at,
            title=appointment.title,
            description=appointment.description,
            status=AppointmentStatus(appointment.status).value,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )
