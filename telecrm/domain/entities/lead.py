"""
Lead Entity

A prospect to be called.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from telecrm.domain.base import utcnow

from .enums import LeadStatus

# Statuses that put a lead back into an agent's calling queue
CALLABLE_STATUSES = (LeadStatus.unreached, LeadStatus.callback_requested)


class Lead(SQLModel, table=True):
    """
    Lead entity - a prospect owned by at most one agent.

    Business Rules:
    - Created with status=unreached
    - Phone or email is required on manual creation
    - Duplicates (same phone, same email, or same company+name) are skipped on import
    """

    __tablename__ = "leads"

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(max_length=255)
    company: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20, index=True)
    email: Optional[str] = Field(default=None, max_length=320, index=True)
    prefecture: Optional[str] = Field(default=None, max_length=64)
    industry: Optional[str] = Field(default=None, max_length=128)
    memo: Optional[str] = None

    status: LeadStatus = Field(default=LeadStatus.unreached)

    owner_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)
    list_id: Optional[int] = Field(default=None, index=True)
    campaign_id: Optional[int] = Field(default=None, index=True)

    # Timestamps
    next_action_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_lead_status", "status"),
        Index("idx_lead_company_name", "company", "name"),
    )
