from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.libs.result import Error, Result, Return

from .dtos import AppointmentInfo


class GetAppointmentUseCase:
    """Use case for reading one appointment."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, appointment_id: int) -> Result[AppointmentInfo]:
        async with self.uow:
            appointment = await self.uow.appointments.get_by_id(appointment_id)
            if appointment is None:
                return Return.err(Error("APPOINTMENT_NOT_FOUND", "Appointment not found"))
            return Return.ok(AppointmentInfo.from_entity(appointment))
