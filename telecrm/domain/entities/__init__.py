"""
CRM Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AppointmentStatus,
    InvitationState,
    LeadStatus,
    UserRole,
)

# Export all entities
from .user import LOCAL_LOGIN_METHOD, User, local_open_id
from .invitation import INVITABLE_ROLES, INVITATION_TTL, Invitation
from .lead import CALLABLE_STATUSES, Lead
from .call_log import CallLog
from .assignment import Assignment
from .appointment import Appointment
from .lead_list import LeadList
from .campaign import Campaign

__all__ = [
    # Enums
    "AppointmentStatus",
    "InvitationState",
    "LeadStatus",
    "UserRole",
    # Entities
    "User",
    "Invitation",
    "Lead",
    "CallLog",
    "Assignment",
    "Appointment",
    "LeadList",
    "Campaign",
    # Helpers
    "LOCAL_LOGIN_METHOD",
    "local_open_id",
    "INVITABLE_ROLES",
    "INVITATION_TTL",
    "CALLABLE_STATUSES",
]
