from abc import ABC, abstractmethod
from typing import List, Optional

from telecrm.domain.entities import Appointment


class IAppointmentRepository(ABC):
    """Appointment repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        """Get appointment by ID"""
        pass

    @abstractmethod
    async def list_by_owner(self, owner_user_id: int) -> List[Appointment]:
        """Get appointments of a user, latest start first"""
        pass

    @abstractmethod
    async def create(self, appointment: Appointment) -> Appointment:
        """Create a new appointment"""
        pass

    @abstractmethod
    async def update(self, appointment: Appointment) -> Appointment:
        """Update an existing appointment"""
        pass

    @abstractmethod
    async def delete(self, appointment: Appointment) -> None:
        """Delete an appointment"""
        pass
