from abc import ABC, abstractmethod
from typing import List, Optional

from telecrm.domain.entities import Lead, LeadStatus


class ILeadRepository(ABC):
    """Lead repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, lead_id: int) -> Optional[Lead]:
        """Get lead by ID"""
        pass

    @abstractmethod
    async def list_by_filters(
        self,
        status: Optional[LeadStatus] = None,
        owner_id: Optional[int] = None,
        list_id: Optional[int] = None,
        campaign_id: Optional[int] = None,
    ) -> List[Lead]:
        """Get leads matching every given filter, newest first"""
        pass

    @abstractmethod
    async def get_next_for_owner(self, owner_id: int) -> Optional[Lead]:
        """Get the owner's next lead still waiting for a call"""
        pass

    @abstractmethod
    async def find_duplicate(
        self,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        company: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Optional[Lead]:
        """Find a lead with the same phone, else email, else company and name"""
        pass

    @abstractmethod
    async def create(self, lead: Lead) -> Lead:
        """Create a new lead"""
        pass

    @abstractmethod
    async def update(self, lead: Lead) -> Lead:
        """Update existing lead"""
        pass
