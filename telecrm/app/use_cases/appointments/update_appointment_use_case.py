from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.base import utcnow
from telecrm.libs.result import Error, Result, Return

from .dtos import AppointmentInfo, UpdateAppointmentCommand


class UpdateAppointmentUseCase:
    """
    Use case for rescheduling or changing the status of an appointment.

    The resulting slot must still end after it starts.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, appointment_id: int, command: UpdateAppointmentCommand
    ) -> Result[AppointmentInfo]:
        async with self.uow:
            appointment = await self.uow.appointments.get_by_id(appointment_id)
            if appointment is None:
                return Return.err(Error("APPOINTMENT_NOT_FOUND", "Appointment not found"))

            changes = command.model_dump(exclude_unset=True)
            start_at = changes.get("start_at", appointment.start_at)
            end_at = changes.get("end_at", appointment.end_at)
            if start_at is None or end_at is None or end_at <= start_at:
                return Return.err(Error("INVALID_TIME_RANGE", "end_at must be after start_at"))

            for field, value in changes.items():
                if field == "status" and value is None:
                    continue
                setattr(appointment, field, value)
            appointment.updated_at = utcnow()

            appointment = await self.uow.appointments.update(appointment)
            await self.uow.commit()

            return Return.ok(AppointmentInfo.from_entity(appointment))
