from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from telecrm.app.repositories.call_log_repository import ICallLogRepository
from telecrm.domain.entities import CallLog, LeadStatus


class CallLogRepository(ICallLogRepository):
    """Call log repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, call_log: CallLog) -> CallLog:
        """Create a new call log"""
        self.session.add(call_log)
        await self.session.flush()
        await self.session.refresh(call_log)
        return call_log

    async def list_by_lead(self, lead_id: int) -> List[CallLog]:
        """Get call logs of a lead, newest first"""
        stmt = (
            select(CallLog)
            .where(CallLog.lead_id == lead_id)
            .order_by(CallLog.created_at.desc(), CallLog.id.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_agent(self, agent_id: int) -> List[CallLog]:
        """Get call logs made by an agent, newest first"""
        stmt = (
            select(CallLog)
            .where(CallLog.agent_id == agent_id)
            .order_by(CallLog.created_at.desc(), CallLog.id.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_result(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        agent_id: Optional[int] = None,
    ) -> Dict[LeadStatus, int]:
        """Count call logs per result within [start, end]"""
        stmt = select(CallLog.result, func.count(CallLog.id)).group_by(CallLog.result)
        if start is not None:
            stmt = stmt.where(CallLog.created_at >= start)
        if end is not None:
            stmt = stmt.where(CallLog.created_at <= end)
        if agent_id is not None:
            stmt = stmt.where(CallLog.agent_id == agent_id)
        result = await self.session.exec(stmt)
        return {LeadStatus(status): count for status, count in result.all()}
