from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from telecrm.domain.entities import LeadList


class LeadListInfo(BaseModel):
    """Public view of a lead list"""

    id: int
    name: str
    description: Optional[str] = None
    total_count: int
    created_by: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, lead_list: LeadList) -> "LeadListInfo":
        return cls(
            id=lead_list.id,
            name=lead_list.name,
            description=lead_list.description,
            total_count=lead_list.total_count,
            created_by=lead_list.created_by,
            created_at=lead_list.created_at,
            updated_at=lead_list.updated_at,
        )
