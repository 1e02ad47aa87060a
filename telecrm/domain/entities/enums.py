"""
CRM Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Privilege tier, ordered viewer < agent < manager < admin"""

    admin = "admin"
    manager = "manager"
    agent = "agent"
    viewer = "viewer"


class InvitationState(str, Enum):
    """Derived invitation state at a point in time"""

    valid = "valid"
    expired = "expired"
    accepted = "accepted"


class LeadStatus(str, Enum):
    """Lead progress, also used as the outcome of a single call"""

    unreached = "unreached"
    connected = "connected"
    no_answer = "no_answer"
    callback_requested = "callback_requested"
    retry_waiting = "retry_waiting"
    ng = "ng"
    considering = "considering"
    appointed = "appointed"
    lost = "lost"


class AppointmentStatus(str, Enum):
    """Lifecycle of a booked appointment"""

    scheduled = "scheduled"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"
