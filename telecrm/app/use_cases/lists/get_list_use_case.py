from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.libs.result import Error, Result, Return

from .dtos import LeadListInfo


class GetListUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, list_id: int) -> Result[LeadListInfo]:
        async with self.uow:
            lead_list = await self.uow.lists.get_by_id(list_id)
            if lead_list is None:
                return Return.err(Error("LIST_NOT_FOUND", "List not found"))
            return Return.ok(LeadListInfo.from_entity(lead_list))
