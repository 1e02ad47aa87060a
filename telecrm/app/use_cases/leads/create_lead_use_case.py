from typing import Optional

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.entities import Lead, LeadStatus
from telecrm.libs.result import Result, Return

from .dtos import LeadFields, LeadInfo


class CreateLeadUseCase:
    """Use case for entering a single lead by hand. New leads start unreached."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        fields: LeadFields,
        list_id: Optional[int] = None,
        campaign_id: Optional[int] = None,
    ) -> Result[LeadInfo]:
        async with self.uow:
            lead = Lead(
                **fields.model_dump(),
                list_id=list_id,
                campaign_id=campaign_id,
                status=LeadStatus.unreached,
            )
            lead = await self.uow.leads.create(lead)
            await self.uow.commit()

            return Return.ok(LeadInfo.from_entity(lead))
