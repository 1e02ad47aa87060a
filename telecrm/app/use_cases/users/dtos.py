"""
User Use Case DTOs (Data Transfer Objects)

Response classes for the user domain.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from telecrm.domain.entities import User, UserRole


class UserInfo(BaseModel):
    """Public view of a User row"""

    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: str
    last_signed_in: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=user.id,
            open_id=user.open_id,
            name=user.name,
            email=user.email,
            login_method=user.login_method,
            role=UserRole(user.role).value,
            last_signed_in=user.last_signed_in,
        )


class ChangeRoleResponse(BaseModel):
    """Response for change role use case"""

    success: bool
    user: UserInfo
