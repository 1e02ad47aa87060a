"""
Lead Query Use Cases

Read-only lookups over leads.
"""

from typing import List, Optional

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.entities import LeadStatus
from telecrm.libs.result import Error, Result, Return

from .dtos import LeadInfo


class ListLeadsUseCase:
    """Use case for listing leads by status, owner, list and campaign."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        status: Optional[LeadStatus] = None,
        owner_id: Optional[int] = None,
        list_id: Optional[int] = None,
        campaign_id: Optional[int] = None,
    ) -> Result[List[LeadInfo]]:
        async with self.uow:
            leads = await self.uow.leads.list_by_filters(
                status=status,
                owner_id=owner_id,
                list_id=list_id,
                campaign_id=campaign_id,
            )
            return Return.ok([LeadInfo.from_entity(lead) for lead in leads])


class GetLeadUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, lead_id: int) -> Result[LeadInfo]:
        async with self.uow:
            lead = await self.uow.leads.get_by_id(lead_id)
            if lead is None:
                return Return.err(Error("LEAD_NOT_FOUND", "Lead not found"))
            return Return.ok(LeadInfo.from_entity(lead))


class GetNextLeadUseCase:
    """
    Use case for an agent's calling queue.

    Returns the agent's earliest-due lead that is unreached or waiting for a
    callback, or None when the queue is empty.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, agent_id: int) -> Result[Optional[LeadInfo]]:
        async with self.uow:
            lead = await self.uow.leads.get_next_for_owner(agent_id)
            return Return.ok(LeadInfo.from_entity(lead) if lead is not None else None)
