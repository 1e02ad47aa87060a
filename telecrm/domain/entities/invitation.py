"""
Invitation Entity

Single-use, time-boxed tokens that bootstrap local accounts.
"""

from datetime import datetime, timedelta
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from telecrm.domain.base import utcnow

from .enums import InvitationState, UserRole

INVITATION_TTL = timedelta(days=7)

INVITABLE_ROLES = (UserRole.manager, UserRole.agent, UserRole.viewer)


class Invitation(SQLModel, table=True):
    """
    Invitation entity - grants an email the right to create an account.

    Business Rules:
    - Created by an admin, never grants the admin role
    - Expires 7 days after issuance
    - Valid only while accepted_at is null and now < expires_at
    - accepted_at is set exactly once; expired rows are kept and rejected on read
    """

    __tablename__ = "invitations"

    id: Optional[int] = Field(default=None, primary_key=True)

    email: str = Field(max_length=320, nullable=False, index=True)
    token: str = Field(unique=True, index=True, max_length=64)
    role: UserRole = Field(nullable=False)

    invited_by: Optional[int] = Field(default=None, foreign_key="users.id")

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_invitation_expires_at", "expires_at"),)

    def state(self, now: datetime) -> InvitationState:
        if now >= self.expires_at:
            return InvitationState.expired
        if self.accepted_at is not None:
            return InvitationState.accepted
        return InvitationState.valid
