"""
Assignment Entity

History of leads handed to agents.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from telecrm.domain.base import utcnow


class Assignment(SQLModel, table=True):
    """Assignment entity - who gave which lead to which agent, and when"""

    __tablename__ = "assignments"

    id: Optional[int] = Field(default=None, primary_key=True)

    lead_id: int = Field(foreign_key="leads.id", nullable=False, index=True)
    agent_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    assigned_by: int = Field(foreign_key="users.id", nullable=False)

    assigned_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
