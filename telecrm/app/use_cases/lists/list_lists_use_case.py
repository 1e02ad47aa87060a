from typing import List

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.libs.result import Result, Return

from .dtos import LeadListInfo


class ListListsUseCase:
    """Use case for every lead list, newest first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[LeadListInfo]]:
        async with self.uow:
            lists = await self.uow.lists.list_all()
            return Return.ok([LeadListInfo.from_entity(item) for item in lists])
