"""
CallLog Entity

Immutable record of a single call attempt.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from telecrm.domain.base import utcnow

from .enums import LeadStatus


class CallLog(SQLModel, table=True):
    """
    CallLog entity - outcome of one call made by an agent.

    Business Rules:
    - Never updated or deleted
    - Logging a call moves the lead to the call's result status
    """

    __tablename__ = "call_logs"

    id: Optional[int] = Field(default=None, primary_key=True)

    lead_id: int = Field(foreign_key="leads.id", nullable=False, index=True)
    agent_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    result: LeadStatus = Field(nullable=False)
    memo: Optional[str] = None

    # Timestamps
    next_action_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_call_log_created_at", "created_at"),)
