"""
Appointment Entity

A meeting booked with a lead, usually as the result of an appointed call.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from telecrm.domain.base import utcnow

from .enums import AppointmentStatus


class Appointment(SQLModel, table=True):
    """
    Appointment entity - a time slot owned by one user for one lead.

    Business Rules:
    - New appointments start as scheduled
    - end_at is strictly after start_at
    """

    __tablename__ = "appointments"

    id: Optional[int] = Field(default=None, primary_key=True)

    lead_id: int = Field(foreign_key="leads.id", nullable=False, index=True)
    owner_user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    status: AppointmentStatus = Field(default=AppointmentStatus.scheduled, nullable=False)

    # Timestamps
    start_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
