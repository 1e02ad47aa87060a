from typing import List, Optional

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.libs.result import Error, Result, Return

from .dtos import CallLogInfo


class ListCallLogsUseCase:
    """Use case for call history of one lead or one agent."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, lead_id: Optional[int] = None, agent_id: Optional[int] = None
    ) -> Result[List[CallLogInfo]]:
        if (lead_id is None) == (agent_id is None):
            return Return.err(
                Error("INVALID_FILTER", "Exactly one of lead_id or agent_id is required")
            )

        async with self.uow:
            if lead_id is not None:
                call_logs = await self.uow.call_logs.list_by_lead(lead_id)
            else:
                call_logs = await self.uow.call_logs.list_by_agent(agent_id)
            return Return.ok([CallLogInfo.from_entity(c) for c in call_logs])
