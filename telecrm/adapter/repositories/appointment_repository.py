from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from telecrm.app.repositories.appointment_repository import IAppointmentRepository
from telecrm.domain.entities import Appointment


class AppointmentRepository(IAppointmentRepository):
    """Appointment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        """Get appointment by ID"""
        stmt = select(Appointment).where(Appointment.id == appointment_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_owner(self, owner_user_id: int) -> List[Appointment]:
        """Get appointments of a user, latest start first"""
        stmt = (
            select(Appointment)
            .where(Appointment.owner_user_id == owner_user_id)
            .order_by(Appointment.start_at.desc(), Appointment.id.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, appointment: Appointment) -> Appointment:
        """Create a new appointment"""
        self.session.add(appointment)
        await self.session.flush()
        await self.session.refresh(appointment)
        return appointment

    async def update(self, appointment: Appointment) -> Appointment:
        """Update an existing appointment"""
        self.session.add(appointment)
        await self.session.flush()
        await self.session.refresh(appointment)
        return appointment

    async def delete(self, appointment: Appointment) -> None:
        """Delete an appointment"""
        await self.session.delete(appointment)
        await self.session.flush()
