from typing import Optional

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.authorization import AuthContext
from telecrm.domain.base import utcnow
from telecrm.libs.result import Error, Result, Return

from .dtos import UserInfo


class UpdateProfileUseCase:
    """
    Self-service profile update.

    Only display name and email can be changed; open_id and role cannot.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: AuthContext, name: Optional[str] = None, email: Optional[str] = None
    ) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(actor.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if name is not None:
                user.name = name
            if email is not None:
                user.email = email
            user.updated_at = utcnow()

            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(UserInfo.from_entity(user))
