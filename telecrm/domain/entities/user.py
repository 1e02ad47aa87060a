"""
User Entity

Represents a person who signs in through OAuth or a local password.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from telecrm.domain.base import utcnow

from .enums import UserRole

LOCAL_LOGIN_METHOD = "local"


def local_open_id(email: str) -> str:
    """Identity key for accounts created from an invitation"""
    return f"{LOCAL_LOGIN_METHOD}:{email}"


class User(SQLModel, table=True):
    """
    User entity - an identity that can act in the CRM.

    Business Rules:
    - open_id is globally unique and never changes once created
    - Invite-created accounts use open_id "local:<email>" and login_method "local"
    - Password stored as bcrypt hash, only for local accounts
    - Never hard-deleted
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    open_id: str = Field(unique=True, index=True, max_length=320)

    name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, index=True, max_length=320)
    login_method: Optional[str] = Field(default=None, max_length=64)

    role: UserRole = Field(default=UserRole.viewer)
    password_hash: Optional[str] = Field(default=None, max_length=60)  # Bcrypt output

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_signed_in: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_role", "role"),)
