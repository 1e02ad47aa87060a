"""
Get KPI Use Case

Call-centre conversion figures over a time window.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.entities import LeadStatus
from telecrm.libs.result import Result, Return


class KPIResponse(BaseModel):
    """Response for get KPI use case"""

    total_calls: int
    connected_calls: int
    appointed_calls: int
    connection_rate: float
    appointment_rate: float


def percentage(part: int, whole: int) -> float:
    """part/whole as a percentage rounded to one decimal, 0 for an empty whole"""
    if whole <= 0:
        return 0.0
    return round(part / whole * 100, 1)


class GetKPIUseCase:
    """
    Use case for dashboard KPIs.

    Business Rules:
    - Counts call logs created within [start, end], optionally for one agent
    - connection_rate = connected / total
    - appointment_rate = appointed / connected
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        agent_id: Optional[int] = None,
    ) -> Result[KPIResponse]:
        async with self.uow:
            counts = await self.uow.call_logs.count_by_result(
                start=start, end=end, agent_id=agent_id
            )

            total = sum(counts.values())
            connected = counts.get(LeadStatus.connected, 0)
            appointed = counts.get(LeadStatus.appointed, 0)

            return Return.ok(
                KPIResponse(
                    total_calls=total,
                    connected_calls=connected,
                    appointed_calls=appointed,
                    connection_rate=percentage(connected, total),
                    appointment_rate=percentage(appointed, connected),
                )
            )
