"""
Authorization Model

Role ordering and the per-request identity handed to every handler.
"""

from dataclasses import dataclass
from typing import Optional

from telecrm.domain.entities import User, UserRole

ROLE_RANK = {
    UserRole.viewer: 0,
    UserRole.agent: 1,
    UserRole.manager: 2,
    UserRole.admin: 3,
}


def has_role(actual: UserRole, required: UserRole) -> bool:
    """True when `actual` is at or above the `required` tier"""
    return ROLE_RANK[UserRole(actual)] >= ROLE_RANK[UserRole(required)]


@dataclass(frozen=True)
class AuthContext:
    """
    Identity a request acts as, built once per request.

    Anonymous contexts have no user_id and the lowest role.
    """

    user_id: Optional[int] = None
    open_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: UserRole = UserRole.viewer

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @classmethod
    def anonymous(cls) -> "AuthContext":
        return cls()

    @classmethod
    def from_user(cls, user: User) -> "AuthContext":
        return cls(
            user_id=user.id,
            open_id=user.open_id,
            name=user.name,
            email=user.email,
            login_method=user.login_method,
            role=UserRole(user.role),
        )
