from abc import ABC, abstractmethod
from typing import List, Optional

from telecrm.domain.entities import Campaign


class ICampaignRepository(ABC):
    """Campaign repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, campaign_id: int) -> Optional[Campaign]:
        """Get campaign by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Campaign]:
        """Get all campaigns, newest first"""
        pass

    @abstractmethod
    async def create(self, campaign: Campaign) -> Campaign:
        """Create a new campaign"""
        pass
