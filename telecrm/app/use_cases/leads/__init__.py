"""
Lead Management Use Cases

All lead-related business logic.
"""

from .assign_leads_use_case import AssignLeadsUseCase
from .create_lead_use_case import CreateLeadUseCase
from .dtos import (
    AssignLeadsResponse,
    ImportLeadsResponse,
    LeadFields,
    LeadInfo,
    UpdateLeadCommand,
)
from .import_leads_use_case import ImportLeadsUseCase
from .query_leads_use_case import GetLeadUseCase, GetNextLeadUseCase, ListLeadsUseCase
from .update_lead_use_case import UpdateLeadUseCase

__all__ = [
    "CreateLeadUseCase",
    "ListLeadsUseCase",
    "GetLeadUseCase",
    "GetNextLeadUseCase",
    "UpdateLeadUseCase",
    "ImportLeadsUseCase",
    "AssignLeadsUseCase",
    "LeadFields",
    "LeadInfo",
    "UpdateLeadCommand",
    "ImportLeadsResponse",
    "AssignLeadsResponse",
]
