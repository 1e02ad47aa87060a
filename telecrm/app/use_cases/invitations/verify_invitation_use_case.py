from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.base import utcnow
from telecrm.domain.entities import UserRole
from telecrm.libs.result import Result, Return

from .checks import invitation_error
from .dtos import InvitationDetails


class VerifyInvitationUseCase:
    """
    Use case for checking an invitation token before sign-up.

    Read-only and idempotent: it never writes, so a page reload can call it
    any number of times.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[InvitationDetails]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)

            error = invitation_error(invitation, utcnow())
            if error is not None:
                return Return.err(error)

            return Return.ok(
                InvitationDetails(
                    email=invitation.email, role=UserRole(invitation.role).value
                )
            )
