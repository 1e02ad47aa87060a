import logging
from typing import Optional
from urllib.parse import urlencode

import httpx

from telecrm.app.services.oauth_client import (
    IOAuthClient,
    OAuthError,
    OAuthUserInfo,
    decode_state,
)

logger = logging.getLogger(__name__)


class HttpOAuthClient(IOAuthClient):
    """OAuth 2.0 authorization-code client for the configured identity provider."""

    AUTHORIZE_PATH = "/oauth/authorize"
    TOKEN_PATH = "/oauth/token"
    USERINFO_PATH = "/oauth/userinfo"

    def __init__(
        self,
        server_url: str,
        app_id: str,
        client_secret: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.server_url = server_url.rstrip("/")
        self.app_id = app_id
        self.client_secret = client_secret
        self.timeout = timeout
        self.transport = transport

    def get_authorize_redirect_url(self, redirect_uri: str, state: str) -> str:
        if not self.server_url or not self.app_id:
            raise OAuthError("OAuth provider not configured")

        params = {
            "client_id": self.app_id,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "scope": "openid email profile",
            "state": state,
        }
        return f"{self.server_url}{self.AUTHORIZE_PATH}?{urlencode(params)}"

    async def exchange_code_for_token(self, code: str, state: str) -> str:
        redirect_uri = decode_state(state)

        async with httpx.AsyncClient(
            base_url=self.server_url, timeout=self.timeout, transport=self.transport
        ) as client:
            try:
                response = await client.post(
                    self.TOKEN_PATH,
                    data={
                        "client_id": self.app_id,
                        "client_secret": self.client_secret,
                        "code": code,
                        "redirect_uri": redirect_uri,
                        "grant_type": "authorization_code",
                    },
                )
            except httpx.HTTPError as exc:
                raise OAuthError(f"Token exchange failed: {exc}") from exc

        if response.status_code != 200:
            logger.error(f"OAuth token exchange failed: {response.text}")
            raise OAuthError(f"Token exchange failed: {response.status_code}")

        access_token = response.json().get("access_token")
        if not access_token:
            raise OAuthError("Token response has no access_token")
        return access_token

    async def get_user_info(self, access_token: str) -> OAuthUserInfo:
        async with httpx.AsyncClient(
            base_url=self.server_url, timeout=self.timeout, transport=self.transport
        ) as client:
            try:
                response = await client.get(
                    self.USERINFO_PATH,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
            except httpx.HTTPError as exc:
                raise OAuthError(f"Failed to get user info: {exc}") from exc

        if response.status_code != 200:
            logger.error(f"OAuth userinfo failed: {response.text}")
            raise OAuthError(f"Failed to get user info: {response.status_code}")

        data = response.json()
        return OAuthUserInfo(
            open_id=data.get("openId") or data.get("sub"),
            name=data.get("name"),
            email=data.get("email"),
            login_method=data.get("loginMethod") or data.get("platform"),
        )
