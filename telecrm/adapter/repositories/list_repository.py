from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from telecrm.app.repositories.list_repository import IListRepository
from telecrm.domain.entities import LeadList


class ListRepository(IListRepository):
    """Lead list repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, list_id: int) -> Optional[LeadList]:
        """Get list by ID"""
        stmt = select(LeadList).where(LeadList.id == list_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[LeadList]:
        """Get all lists, newest first"""
        stmt = select(LeadList).order_by(LeadList.created_at.desc(), LeadList.id.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, lead_list: LeadList) -> LeadList:
        """Create a new list"""
        self.session.add(lead_list)
        await self.session.flush()
        await self.session.refresh(lead_list)
        return lead_list

    async def update(self, lead_list: LeadList) -> LeadList:
        """Update an existing list"""
        self.session.add(lead_list)
        await self.session.flush()
        await self.session.refresh(lead_list)
        return lead_list
