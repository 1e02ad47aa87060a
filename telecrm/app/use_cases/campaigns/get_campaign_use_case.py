from typing import List

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.libs.result import Error, Result, Return

from .dtos import CampaignInfo


class GetCampaignUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, campaign_id: int) -> Result[CampaignInfo]:
        async with self.uow:
            campaign = await self.uow.campaigns.get_by_id(campaign_id)
            if campaign is None:
                return Return.err(Error("CAMPAIGN_NOT_FOUND", "Campaign not found"))
            return Return.ok(CampaignInfo.from_entity(campaign))


class ListCampaignsUseCase:
    """Use case for every campaign, newest first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[CampaignInfo]]:
        async with self.uow:
            campaigns = await self.uow.campaigns.list_all()
            return Return.ok([CampaignInfo.from_entity(c) for c in campaigns])
