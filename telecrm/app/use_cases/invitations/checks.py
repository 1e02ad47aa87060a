from datetime import datetime
from typing import Optional

from telecrm.domain.entities import Invitation, InvitationState
from telecrm.libs.result import Error

INVITATION_NOT_FOUND = Error("INVITATION_NOT_FOUND", "Invitation not found")
INVITATION_EXPIRED = Error("INVITATION_EXPIRED", "Invitation expired")
INVITATION_ALREADY_USED = Error("INVITATION_ALREADY_USED", "Invitation already used")


def invitation_error(invitation: Optional[Invitation], now: datetime) -> Optional[Error]:
    """Reason an invitation cannot be used right now, or None if it is valid"""
    if invitation is None:
        return INVITATION_NOT_FOUND

    state = invitation.state(now)
    if state == InvitationState.expired:
        return INVITATION_EXPIRED
    if state == InvitationState.accepted:
        return INVITATION_ALREADY_USED
    return None
