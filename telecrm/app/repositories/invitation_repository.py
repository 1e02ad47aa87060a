from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from telecrm.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def mark_accepted(self, invitation_id: int, accepted_at: datetime) -> bool:
        """
        Set accepted_at only if it is still unset.

        Returns False when another transaction accepted the invitation first.
        """
        pass
