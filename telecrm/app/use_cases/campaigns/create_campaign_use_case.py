from typing import Optional

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.authorization import AuthContext
from telecrm.domain.entities import Campaign
from telecrm.libs.result import Result, Return

from .dtos import CampaignInfo


class CreateCampaignUseCase:
    """Use case for starting a campaign. The creator is the request identity."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: AuthContext, name: str, description: Optional[str] = None
    ) -> Result[CampaignInfo]:
        async with self.uow:
            campaign = await self.uow.campaigns.create(
                Campaign(name=name, description=description, created_by=actor.user_id)
            )
            await self.uow.commit()

            return Return.ok(CampaignInfo.from_entity(campaign))
