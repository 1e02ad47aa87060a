from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from telecrm.domain.entities import Campaign


class CampaignInfo(BaseModel):
    """Public view of a Campaign row"""

    id: int
    name: str
    description: Optional[str] = None
    created_by: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, campaign: Campaign) -> "CampaignInfo":
        return cls(
            id=campaign.id,
            name=campaign.name,
            description=campaign.description,
            created_by=campaign.created_by,
            created_at=campaign.created_at,
            updated_at=campaign.updated_at,
        )
