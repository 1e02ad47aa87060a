"""
Lead Use Case DTOs (Data Transfer Objects)

Command and Response classes for the lead domain.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from telecrm.domain.entities import Lead, LeadStatus


class LeadFields(BaseModel):
    """Contact fields of a lead, as entered or imported"""

    name: str
    company: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    prefecture: Optional[str] = None
    industry: Optional[str] = None
    memo: Optional[str] = None


class UpdateLeadCommand(BaseModel):
    """Partial lead update; only explicitly set fields are written"""

    name: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    prefecture: Optional[str] = None
    industry: Optional[str] = None
    memo: Optional[str] = None
    status: Optional[LeadStatus] = None
    next_action_at: Optional[datetime] = None
    owner_id: Optional[int] = None


class LeadInfo(BaseModel):
    """Public view of a Lead row"""

    id: int
    name: str
    company: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    prefecture: Optional[str] = None
    industry: Optional[str] = None
    memo: Optional[str] = None
    status: str
    owner_id: Optional[int] = None
    list_id: Optional[int] = None
    campaign_id: Optional[int] = None
    next_action_at: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, lead: Lead) -> "LeadInfo":
        return cls(
            id=lead.id,
            name=lead.name,
            company=lead.company,
            phone=lead.phone,
            email=lead.email,
            prefecture=lead.prefecture,
            industry=lead.industry,
            memo=lead.memo,
            status=LeadStatus(lead.status).value,
            owner_id=lead.owner_id,
            list_id=lead.list_id,
            campaign_id=lead.campaign_id,
            next_action_at=lead.next_action_at,
            created_at=lead.created_at,
        )


class ImportLeadsResponse(BaseModel):
    """Response for import leads use case"""

    success_count: int
    duplicate_count: int


class AssignLeadsResponse(BaseModel):
    """Response for assign leads use case"""

    success: bool
    assigned_lead_ids: List[int]
