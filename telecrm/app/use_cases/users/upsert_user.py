"""
User Upsert

Shared by the OAuth callback and invitation acceptance: both end in an
insert-or-update of the User row keyed by open_id.
"""

import logging
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from telecrm.domain.base import utcnow
from telecrm.domain.entities import User, UserRole

logger = logging.getLogger(__name__)


class UpsertUserCommand(BaseModel):
    """
    Fields to write on the User row.

    Only explicitly set fields are applied; setting a field to None clears it.
    """

    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: Optional[UserRole] = None
    last_signed_in: Optional[datetime] = None


def build_upserted_user(
    existing: Optional[User], command: UpsertUserCommand, owner_open_id: str
) -> User:
    """
    Apply an upsert command to an existing row or a new one.

    Business Rules:
    - open_id never changes on an existing row
    - The configured owner identity is always admin, whatever role was passed
    - Otherwise a passed role is applied; new rows default to viewer
    - last_signed_in defaults to now
    """
    fields = command.model_dump(exclude_unset=True, exclude={"open_id", "role"})
    if fields.get("last_signed_in") is None:
        fields["last_signed_in"] = utcnow()

    user = existing if existing is not None else User(open_id=command.open_id)
    for field, value in fields.items():
        setattr(user, field, value)

    if owner_open_id and command.open_id == owner_open_id:
        if user.role != UserRole.admin:
            logger.info(f"Promoting owner identity {command.open_id} to admin")
        user.role = UserRole.admin
    elif command.role is not None:
        user.role = command.role

    user.updated_at = utcnow()
    return user
