"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the auth domain.
"""

from pydantic import BaseModel

from telecrm.app.use_cases.users.dtos import UserInfo


class SessionIssued(BaseModel):
    """A freshly signed session token and the user it belongs to"""

    session_token: str
    user: UserInfo
