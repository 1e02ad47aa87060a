"""
Create List Use Case
"""

import logging
from typing import Optional

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.authorization import AuthContext
from telecrm.domain.entities import LeadList
from telecrm.libs.result import Result, Return

from .dtos import LeadListInfo

logger = logging.getLogger(__name__)


class CreateListUseCase:
    """
    Use case for opening a new lead list.

    Business Rules:
    - The creator is the request identity
    - A new list holds no leads yet
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: AuthContext, name: str, description: Optional[str] = None
    ) -> Result[LeadListInfo]:
        async with self.uow:
            lead_list = await self.uow.lists.create(
                LeadList(
                    name=name,
                    description=description,
                    total_count=0,
                    created_by=actor.user_id,
                )
            )
            await self.uow.commit()

            logger.info(f"User {actor.user_id} created list {lead_list.id}")

            return Return.ok(LeadListInfo.from_entity(lead_list))
