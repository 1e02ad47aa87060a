from typing import List

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.libs.result import Result, Return

from .dtos import UserInfo


class ListUsersUseCase:
    """Use case for listing every user, newest first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[UserInfo]]:
        async with self.uow:
            users = await self.uow.users.list_all()
            return Return.ok([UserInfo.from_entity(u) for u in users])
