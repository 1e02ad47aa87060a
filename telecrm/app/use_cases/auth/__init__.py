"""
Authentication Use Cases

All authentication-related business logic.
"""

from .dtos import SessionIssued
from .login_use_case import LoginUseCase
from .oauth_callback_use_case import OAuthCallbackUseCase
from .resolve_identity_use_case import ResolveIdentityUseCase

__all__ = [
    "LoginUseCase",
    "OAuthCallbackUseCase",
    "ResolveIdentityUseCase",
    "SessionIssued",
]
