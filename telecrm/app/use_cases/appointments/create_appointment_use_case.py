"""
Create Appointment Use Case

Books a meeting with a lead for one of the team.
"""

import logging

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.entities import Appointment, AppointmentStatus
from telecrm.libs.result import Error, Result, Return

from .dtos import AppointmentInfo, CreateAppointmentCommand

logger = logging.getLogger(__name__)


class CreateAppointmentUseCase:
    """
    Use case for booking an appointment.

    Business Rules:
    - Lead and owner must exist
    - end_at must be after start_at
    - New appointments start scheduled
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateAppointmentCommand) -> Result[AppointmentInfo]:
        if command.end_at <= command.start_at:
            return Return.err(Error("INVALID_TIME_RANGE", "end_at must be after start_at"))

        async with self.uow:
            lead = await self.uow.leads.get_by_id(command.lead_id)
            if lead is None:
                return Return.err(Error("LEAD_NOT_FOUND", "Lead not found"))

            owner = await self.uow.users.get_by_id(command.owner_user_id)
            if owner is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            appointment = await self.uow.appointments.create(
                Appointment(**command.model_dump(), status=AppointmentStatus.scheduled)
            )
            await self.uow.commit()

            logger.info(f"Appointment {appointment.id} booked for lead {lead.id}")

            return Return.ok(AppointmentInfo.from_entity(appointment))
