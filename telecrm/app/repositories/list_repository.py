from abc import ABC, abstractmethod
from typing import List, Optional

from telecrm.domain.entities import LeadList


class IListRepository(ABC):
    """Lead list repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, list_id: int) -> Optional[LeadList]:
        """Get list by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[LeadList]:
        """Get all lists, newest first"""
        pass

    @abstractmethod
    async def create(self, lead_list: LeadList) -> LeadList:
        """Create a new list"""
        pass

    @abstractmethod
    async def update(self, lead_list: LeadList) -> LeadList:
        """Update an existing list"""
        pass
