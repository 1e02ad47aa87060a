"""
User Management Use Cases

All user-related business logic.
"""

from .change_role_use_case import ChangeRoleUseCase
from .dtos import ChangeRoleResponse, UserInfo
from .list_users_use_case import ListUsersUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .upsert_user import UpsertUserCommand, build_upserted_user

__all__ = [
    "ChangeRoleUseCase",
    "ListUsersUseCase",
    "UpdateProfileUseCase",
    "UpsertUserCommand",
    "build_upserted_user",
    "ChangeRoleResponse",
    "UserInfo",
]
