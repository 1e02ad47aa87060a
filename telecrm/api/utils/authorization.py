"""
Authorization Gates

Role-ordered guards applied declaratively as route dependencies:

    @router.get("/users")
    async def list_users(auth: AuthContext = Depends(require_admin)): ...

A gate fails closed: anonymous callers get 401, callers below the tier 403.
"""

from fastapi import Depends, Request, status

from telecrm.api.error import ClientError
from telecrm.domain.authorization import AuthContext, has_role
from telecrm.domain.entities import UserRole
from telecrm.libs.result import Error


def get_auth_context(request: Request) -> AuthContext:
    """Identity resolved by AuthenticationMiddleware for this request"""
    auth = getattr(request.state, "auth", None)
    return auth if auth is not None else AuthContext.anonymous()


def require_role(minimum: UserRole):
    async def gate(auth: AuthContext = Depends(get_auth_context)) -> AuthContext:
        if not auth.is_authenticated:
            raise ClientError(
                Error("UNAUTHENTICATED", "Authentication required"),
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        if not has_role(auth.role, minimum):
            raise ClientError(
                Error("FORBIDDEN", "Insufficient role"),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return auth

    gate.__name__ = f"require_{minimum.value}"
    return gate


require_viewer = require_role(UserRole.viewer)
require_agent = require_role(UserRole.agent)
require_manager = require_role(UserRole.manager)
require_admin = require_role(UserRole.admin)
