"""
Issue Invitation Use Case

Handles an admin inviting someone to create a local account.
"""

import logging
import secrets

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.authorization import AuthContext
from telecrm.domain.base import utcnow
from telecrm.domain.entities import INVITABLE_ROLES, INVITATION_TTL, Invitation, UserRole
from telecrm.libs.result import Error, Result, Return

from .dtos import IssueInvitationResponse

logger = logging.getLogger(__name__)


class IssueInvitationUseCase:
    """
    Use case for issuing invitations.

    Business Rules:
    - Only admins reach this use case (admin gate on the route)
    - Granted role must be manager, agent or viewer, never admin
    - Token is cryptographically secure and unique
    - Expires 7 days after issuance
    - Several outstanding invitations per email may coexist
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, inviter: AuthContext, email: str, role: str
    ) -> Result[IssueInvitationResponse]:
        """
        Execute issue invitation use case.

        Args:
            inviter: Identity of the admin sending the invite
            email: Email address to invite
            role: Role granted on acceptance (manager/agent/viewer)

        Returns:
            Result with the token for out-of-band delivery, or Error
        """
        async with self.uow:
            try:
                granted_role = UserRole(role)
            except ValueError:
                granted_role = None

            if granted_role not in INVITABLE_ROLES:
                return Return.err(
                    Error(
                        "INVALID_ROLE",
                        f"Invalid role: {role}. Must be one of: manager, agent, viewer",
                    )
                )

            invitation = Invitation(
                email=email,
                role=granted_role,
                token=secrets.token_urlsafe(32),
                invited_by=inviter.user_id,
                expires_at=utcnow() + INVITATION_TTL,
            )
            invitation = await self.uow.invitations.create(invitation)
            await self.uow.commit()

            logger.info(
                f"User {inviter.user_id} invited {email} as {granted_role.value}"
            )

            # Token is delivered out of band (e.g. an emailed link) by the caller
            return Return.ok(
                IssueInvitationResponse(
                    token=invitation.token,
                    email=invitation.email,
                    role=granted_role.value,
                    expires_at=invitation.expires_at,
                )
            )
