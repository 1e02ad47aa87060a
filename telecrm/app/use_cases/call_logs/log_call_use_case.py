"""
Log Call Use Case

Records a call outcome and moves the lead along.
"""

from datetime import datetime
from typing import Optional

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.authorization import AuthContext
from telecrm.domain.base import utcnow
from telecrm.domain.entities import CallLog, LeadStatus
from telecrm.libs.result import Error, Result, Return

from .dtos import CallLogInfo


class LogCallUseCase:
    """
    Use case for logging a call.

    Business Rules:
    - The calling agent is the request identity
    - Lead must exist
    - Lead status and next_action_at follow the logged call
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        agent: AuthContext,
        lead_id: int,
        result: LeadStatus,
        memo: Optional[str] = None,
        next_action_at: Optional[datetime] = None,
    ) -> Result[CallLogInfo]:
        async with self.uow:
            lead = await self.uow.leads.get_by_id(lead_id)
            if lead is None:
                return Return.err(Error("LEAD_NOT_FOUND", "Lead not found"))

            call_log = await self.uow.call_logs.create(
                CallLog(
                    lead_id=lead_id,
                    agent_id=agent.user_id,
                    result=result,
                    memo=memo,
                    next_action_at=next_action_at,
                )
            )

            lead.status = result
            lead.next_action_at = next_action_at
            lead.updated_at = utcnow()
            await self.uow.leads.update(lead)

            await self.uow.commit()

            return Return.ok(CallLogInfo.from_entity(call_log))
