"""
Accept Invitation Use Case

Creates (or updates) the local account an invitation grants.
"""

import bcrypt

from config import ApplicationConfig
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.users.upsert_user import UpsertUserCommand, build_upserted_user
from telecrm.domain.base import utcnow
from telecrm.domain.entities import LOCAL_LOGIN_METHOD, local_open_id
from telecrm.libs.result import Result, Return

from .checks import INVITATION_ALREADY_USED, invitation_error
from .dtos import AcceptInvitationResponse


class AcceptInvitationUseCase:
    """
    Use case for accepting invitations.

    Business Rules:
    - Same checks as verification: unknown, expired and used tokens are rejected
    - Claiming the invitation, upserting the user and hashing the password
      happen in one transaction
    - The claim only succeeds while accepted_at is still null, so of two
      concurrent accepts exactly one wins
    - User is keyed by local:<email>, login_method=local, role from the invitation
    - Password stored as bcrypt hash
    """

    def __init__(self, uow: UnitOfWork, owner_open_id: str = ""):
        self.uow = uow
        self.owner_open_id = owner_open_id

    async def execute(
        self, token: str, name: str, password: str
    ) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            token: Invitation token
            name: Display name for the new account
            password: Initial password

        Returns:
            Result with AcceptInvitationResponse DTO, or Error
        """
        async with self.uow:
            now = utcnow()
            invitation = await self.uow.invitations.get_by_token(token)

            error = invitation_error(invitation, now)
            if error is not None:
                return Return.err(error)

            claimed = await self.uow.invitations.mark_accepted(invitation.id, now)
            if not claimed:
                await self.uow.rollback()
                return Return.err(INVITATION_ALREADY_USED)

            open_id = local_open_id(invitation.email)
            existing = await self.uow.users.get_by_open_id(open_id)
            user = build_upserted_user(
                existing,
                UpsertUserCommand(
                    open_id=open_id,
                    name=name,
                    email=invitation.email,
                    login_method=LOCAL_LOGIN_METHOD,
                    role=invitation.role,
                    last_signed_in=now,
                ),
                self.owner_open_id,
            )
            user.password_hash = bcrypt.hashpw(
                password.encode("utf-8"),
                bcrypt.gensalt(rounds=ApplicationConfig.BCRYPT_ROUNDS),
            ).decode("utf-8")

            if existing is None:
                await self.uow.users.create(user)
            else:
                await self.uow.users.update(user)

            # Commit transaction
            await self.uow.commit()

            return Return.ok(AcceptInvitationResponse(success=True))
