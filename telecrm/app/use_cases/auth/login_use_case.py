"""
Login Use Case

Handles email/password authentication for local accounts.
"""

import bcrypt

from telecrm.api.utils.jwt import ONE_YEAR, issue_session_token
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.users.dtos import UserInfo
from telecrm.domain.base import utcnow
from telecrm.domain.entities import local_open_id
from telecrm.libs.result import Error, Result, Return

from .dtos import SessionIssued

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for local login and session issuance.

    Business Rules:
    - Account is looked up by its local identity key, local:<email>
    - Unknown email, account without password and wrong password all return
      the same INVALID_CREDENTIALS error
    - A hash check runs even when the user is unknown
    - Updates user.last_signed_in
    - Session token lives one year
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[SessionIssued]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with SessionIssued containing the session token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_open_id(local_open_id(email))

            if user is None or not user.password_hash:
                # Hash dummy password to maintain constant time
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(12))
                return Return.err(INVALID_CREDENTIALS)

            if not bcrypt.checkpw(password.encode(), user.password_hash.encode()):
                return Return.err(INVALID_CREDENTIALS)

            user.last_signed_in = utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            token = issue_session_token(user.open_id, user.name or "", ONE_YEAR)
            return Return.ok(SessionIssued(session_token=token, user=UserInfo.from_entity(user)))
