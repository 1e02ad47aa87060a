from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.base import utcnow
from telecrm.libs.result import Error, Result, Return

from .dtos import LeadInfo, UpdateLeadCommand


class UpdateLeadUseCase:
    """
    Use case for editing a lead.

    Any agent may edit any lead; ownership is not checked.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, lead_id: int, command: UpdateLeadCommand) -> Result[LeadInfo]:
        async with self.uow:
            lead = await self.uow.leads.get_by_id(lead_id)
            if lead is None:
                return Return.err(Error("LEAD_NOT_FOUND", "Lead not found"))

            for field, value in command.model_dump(exclude_unset=True).items():
                setattr(lead, field, value)
            lead.updated_at = utcnow()

            lead = await self.uow.leads.update(lead)
            await self.uow.commit()

            return Return.ok(LeadInfo.from_entity(lead))
