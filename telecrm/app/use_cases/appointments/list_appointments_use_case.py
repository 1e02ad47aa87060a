from typing import List

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.libs.result import Result, Return

from .dtos import AppointmentInfo


class ListAppointmentsUseCase:
    """Use case for a user's appointments, latest start first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, owner_user_id: int) -> Result[List[AppointmentInfo]]:
        async with self.uow:
            appointments = await self.uow.appointments.list_by_owner(owner_user_id)
            return Return.ok([AppointmentInfo.from_entity(a) for a in appointments])
