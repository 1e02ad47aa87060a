"""
Invitation Use Cases

Issue, verify and accept single-use invitation tokens.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .dtos import (
    AcceptInvitationResponse,
    InvitationDetails,
    IssueInvitationResponse,
)
from .issue_invitation_use_case import IssueInvitationUseCase
from .verify_invitation_use_case import VerifyInvitationUseCase

__all__ = [
    "IssueInvitationUseCase",
    "VerifyInvitationUseCase",
    "AcceptInvitationUseCase",
    "IssueInvitationResponse",
    "InvitationDetails",
    "AcceptInvitationResponse",
]
