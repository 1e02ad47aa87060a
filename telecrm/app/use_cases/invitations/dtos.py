"""
Invitation Use Case DTOs (Data Transfer Objects)

Response classes for the invitation lifecycle.
"""

from datetime import datetime

from pydantic import BaseModel


class IssueInvitationResponse(BaseModel):
    """Response for issue invitation use case"""

    token: str
    email: str
    role: str
    expires_at: datetime


class InvitationDetails(BaseModel):
    """What a still-valid invitation grants"""

    email: str
    role: str


class AcceptInvitationResponse(BaseModel):
    """Response for accept invitation use case"""

    success: bool
