"""
Campaign Entity
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from telecrm.domain.base import utcnow


class Campaign(SQLModel, table=True):
    """Campaign entity - a calling effort that leads can be tagged with"""

    __tablename__ = "campaigns"

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(max_length=255, nullable=False)
    description: Optional[str] = None
    created_by: int = Field(foreign_key="users.id", nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
