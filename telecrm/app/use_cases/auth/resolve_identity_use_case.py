"""
Resolve Identity Use Case

Turns a session cookie value into the request's AuthContext.
"""

from typing import Optional

from telecrm.api.utils.jwt import verify_session_token
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.authorization import AuthContext


class ResolveIdentityUseCase:
    """
    Use case for per-request identity resolution.

    Business Rules:
    - Never fails: every authentication problem degrades to anonymous
    - Missing, malformed, tampered or expired token -> anonymous
    - Valid token whose subject has no User row -> anonymous
    - Role always comes from the stored row, never from the token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: Optional[str]) -> AuthContext:
        claims = verify_session_token(token)
        if claims is None:
            return AuthContext.anonymous()

        async with self.uow:
            user = await self.uow.users.get_by_open_id(claims.open_id)
            if user is None:
                return AuthContext.anonymous()
            return AuthContext.from_user(user)
