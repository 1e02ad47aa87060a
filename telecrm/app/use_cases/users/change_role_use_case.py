"""
Change User Role Use Case

Handles an admin changing another user's privilege tier.
"""

import logging

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.authorization import AuthContext
from telecrm.domain.base import utcnow
from telecrm.domain.entities import UserRole
from telecrm.libs.result import Error, Result, Return

from .dtos import ChangeRoleResponse, UserInfo

logger = logging.getLogger(__name__)


class ChangeRoleUseCase:
    """
    Use case for changing a user's role.

    Business Rules:
    - Only admins reach this use case (admin gate on the route)
    - Target user must exist
    - An admin cannot demote themselves, so at least one admin always remains
    - Existing sessions pick up the new role on their next request
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: AuthContext, target_user_id: int, new_role: str
    ) -> Result[ChangeRoleResponse]:
        """
        Execute change role use case.

        Args:
            actor: Identity of the admin making the change
            target_user_id: User whose role is being changed
            new_role: New role to assign (admin/manager/agent/viewer)

        Returns:
            Result with ChangeRoleResponse DTO, or Error
        """
        async with self.uow:
            try:
                role = UserRole(new_role)
            except ValueError:
                return Return.err(
                    Error(
                        "INVALID_ROLE",
                        f"Invalid role: {new_role}. Must be one of: admin, manager, agent, viewer",
                    )
                )

            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.id == actor.user_id and role != UserRole.admin:
                return Return.err(
                    Error("CANNOT_DEMOTE_SELF", "Admins cannot demote themselves")
                )

            old_role = user.role
            user.role = role
            user.updated_at = utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(
                f"User {actor.user_id} changed role of user {target_user_id}: "
                f"{UserRole(old_role).value} -> {role.value}"
            )

            return Return.ok(ChangeRoleResponse(success=True, user=UserInfo.from_entity(user)))
