"""
Assign Leads Use Case

Hands a batch of leads to an agent.
"""

from typing import List

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.authorization import AuthContext
from telecrm.domain.base import utcnow
from telecrm.domain.entities import Assignment
from telecrm.libs.result import Error, Result, Return

from .dtos import AssignLeadsResponse


class AssignLeadsUseCase:
    """
    Use case for assigning leads.

    Business Rules:
    - Target agent must exist
    - Every lead must exist, otherwise nothing is assigned
    - Each lead's owner becomes the agent and an Assignment row is recorded
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: AuthContext, lead_ids: List[int], agent_id: int
    ) -> Result[AssignLeadsResponse]:
        async with self.uow:
            agent = await self.uow.users.get_by_id(agent_id)
            if agent is None:
                return Return.err(Error("USER_NOT_FOUND", "Agent not found"))

            for lead_id in lead_ids:
                lead = await self.uow.leads.get_by_id(lead_id)
                if lead is None:
                    await self.uow.rollback()
                    return Return.err(
                        Error("LEAD_NOT_FOUND", f"Lead {lead_id} not found")
                    )

                lead.owner_id = agent_id
                lead.updated_at = utcnow()
                await self.uow.leads.update(lead)
                await self.uow.assignments.create(
                    Assignment(lead_id=lead_id, agent_id=agent_id, assigned_by=actor.user_id)
                )

            await self.uow.commit()

            return Return.ok(AssignLeadsResponse(success=True, assigned_lead_ids=list(lead_ids)))
