"""
LeadList Entity

A named batch of leads, typically one imported call list.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from telecrm.domain.base import utcnow


class LeadList(SQLModel, table=True):
    """
    LeadList entity - groups leads by the list they were loaded from.

    Business Rules:
    - total_count starts at 0 and grows with each import into the list
    """

    __tablename__ = "lists"

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(max_length=255, nullable=False)
    description: Optional[str] = None
    total_count: int = Field(default=0, nullable=False)
    created_by: int = Field(foreign_key="users.id", nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
