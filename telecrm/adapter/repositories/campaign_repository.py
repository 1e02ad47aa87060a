from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from telecrm.app.repositories.campaign_repository import ICampaignRepository
from telecrm.domain.entities import Campaign


class CampaignRepository(ICampaignRepository):
    """Campaign repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, campaign_id: int) -> Optional[Campaign]:
        """Get campaign by ID"""
        stmt = select(Campaign).where(Campaign.id == campaign_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Campaign]:
        """Get all campaigns, newest first"""
        stmt = select(Campaign).order_by(Campaign.created_at.desc(), Campaign.id.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, campaign: Campaign) -> Campaign:
        """Create a new campaign"""
        self.session.add(campaign)
        await self.session.flush()
        await self.session.refresh(campaign)
        return campaign
