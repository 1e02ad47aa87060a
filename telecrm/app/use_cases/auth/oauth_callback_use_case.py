"""
OAuth Callback Use Case

Completes the authorization-code flow and signs the user in.
"""

import logging

from telecrm.api.utils.jwt import ONE_YEAR, issue_session_token
from telecrm.app.services.oauth_client import IOAuthClient, OAuthError
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.users.dtos import UserInfo
from telecrm.app.use_cases.users.upsert_user import UpsertUserCommand, build_upserted_user
from telecrm.domain.base import utcnow
from telecrm.libs.result import Error, Result, Return

from .dtos import SessionIssued

logger = logging.getLogger(__name__)


class OAuthCallbackUseCase:
    """
    Use case for the OAuth callback.

    Business Rules:
    - Provider must return an open_id
    - User row is upserted by open_id with last_signed_in=now
    - The owner identity is promoted to admin on upsert
    - Session issuance is identical to local login (one-year token)
    """

    def __init__(self, uow: UnitOfWork, oauth_client: IOAuthClient, owner_open_id: str = ""):
        self.uow = uow
        self.oauth_client = oauth_client
        self.owner_open_id = owner_open_id

    async def execute(self, code: str, state: str) -> Result[SessionIssued]:
        try:
            access_token = await self.oauth_client.exchange_code_for_token(code, state)
            user_info = await self.oauth_client.get_user_info(access_token)
        except OAuthError as exc:
            logger.error(f"OAuth callback failed: {exc}")
            return Return.err(Error("OAUTH_EXCHANGE_FAILED", "OAuth callback failed"))

        if not user_info.open_id:
            return Return.err(
                Error("OAUTH_USER_INFO_INVALID", "openId missing from user info")
            )

        async with self.uow:
            existing = await self.uow.users.get_by_open_id(user_info.open_id)
            user = build_upserted_user(
                existing,
                UpsertUserCommand(
                    open_id=user_info.open_id,
                    name=user_info.name,
                    email=user_info.email,
                    login_method=user_info.login_method,
                    last_signed_in=utcnow(),
                ),
                self.owner_open_id,
            )
            if existing is None:
                user = await self.uow.users.create(user)
            else:
                user = await self.uow.users.update(user)
            await self.uow.commit()

            token = issue_session_token(user.open_id, user.name or "", ONE_YEAR)
            return Return.ok(SessionIssued(session_token=token, user=UserInfo.from_entity(user)))
