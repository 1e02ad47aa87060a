from typing import List, Optional

from sqlalchemy import and_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from telecrm.app.repositories.lead_repository import ILeadRepository
from telecrm.domain.entities import CALLABLE_STATUSES, Lead, LeadStatus


class LeadRepository(ILeadRepository):
    """Lead repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, lead_id: int) -> Optional[Lead]:
        """Get lead by ID"""
        stmt = select(Lead).where(Lead.id == lead_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_filters(
        self,
        status: Optional[LeadStatus] = None,
        owner_id: Optional[int] = None,
        list_id: Optional[int] = None,
        campaign_id: Optional[int] = None,
    ) -> List[Lead]:
        """Get leads matching every given filter, newest first"""
        stmt = select(Lead)
        if status is not None:
            stmt = stmt.where(Lead.status == status)
        if owner_id is not None:
            stmt = stmt.where(Lead.owner_id == owner_id)
        if list_id is not None:
            stmt = stmt.where(Lead.list_id == list_id)
        if campaign_id is not None:
            stmt = stmt.where(Lead.campaign_id == campaign_id)
        stmt = stmt.order_by(Lead.created_at.desc(), Lead.id.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_next_for_owner(self, owner_id: int) -> Optional[Lead]:
        """Get the owner's next lead still waiting for a call"""
        stmt = (
            select(Lead)
            .where(Lead.owner_id == owner_id, Lead.status.in_(CALLABLE_STATUSES))
            .order_by(Lead.next_action_at, Lead.created_at, Lead.id)
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def find_duplicate(
        self,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        company: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Optional[Lead]:
        """Find a lead with the same phone, else email, else company and name"""
        conditions = []
        if phone:
            conditions.append(Lead.phone == phone)
        if email:
            conditions.append(Lead.email == email)
        if company and name:
            conditions.append(and_(Lead.company == company, Lead.name == name))

        for condition in conditions:
            result = await self.session.exec(select(Lead).where(condition).limit(1))
            lead = result.first()
            if lead is not None:
                return lead
        return None

    async def create(self, lead: Lead) -> Lead:
        """Create a new lead"""
        self.session.add(lead)
        await self.session.flush()
        await self.session.refresh(lead)
        return lead

    async def update(self, lead: Lead) -> Lead:
        """Update existing lead"""
        self.session.add(lead)
        await self.session.flush()
        await self.session.refresh(lead)
        return lead
