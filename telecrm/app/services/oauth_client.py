import base64
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class OAuthUserInfo(BaseModel):
    """User info returned by the OAuth provider"""

    open_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None


class OAuthError(Exception):
    """OAuth flow error."""

    pass


def encode_state(redirect_uri: str) -> str:
    """The OAuth state carries the callback URL so the code exchange can replay it"""
    return base64.b64encode(redirect_uri.encode("utf-8")).decode("ascii")


def decode_state(state: str) -> str:
    try:
        return base64.b64decode(state.encode("ascii"), validate=True).decode("utf-8")
    except ValueError as exc:
        raise OAuthError("Malformed OAuth state") from exc


class IOAuthClient(ABC):
    """External identity provider - application layer"""

    @abstractmethod
    def get_authorize_redirect_url(self, redirect_uri: str, state: str) -> str:
        """URL the browser is sent to for sign-in"""
        pass

    @abstractmethod
    async def exchange_code_for_token(self, code: str, state: str) -> str:
        """Trade an authorization code for an access token"""
        pass

    @abstractmethod
    async def get_user_info(self, access_token: str) -> OAuthUserInfo:
        """Fetch the signed-in user's profile"""
        pass
