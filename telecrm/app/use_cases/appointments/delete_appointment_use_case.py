from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.libs.result import Error, Result, Return


class DeleteAppointmentUseCase:
    """Use case for removing an appointment outright."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, appointment_id: int) -> Result[bool]:
        async with self.uow:
            appointment = await self.uow.appointments.get_by_id(appointment_id)
            if appointment is None:
                return Return.err(Error("APPOINTMENT_NOT_FOUND", "Appointment not found"))

            await self.uow.appointments.delete(appointment)
            await self.uow.commit()

            return Return.ok(True)
