from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from telecrm.adapter.services.oauth_client import HttpOAuthClient
from telecrm.app.services.oauth_client import OAuthError, decode_state, encode_state

CALLBACK = "https://crm.example.com/api/oauth/callback"


def make_client(handler) -> HttpOAuthClient:
    return HttpOAuthClient(
        server_url="https://id.example.com/",
        app_id="app-1",
        client_secret="s3cret",
        transport=httpx.MockTransport(handler),
    )


def test_state_carries_redirect_uri():
    assert decode_state(encode_state(CALLBACK)) == CALLBACK


def test_malformed_state():
    with pytest.raises(OAuthError):
        decode_state("not base64!")


def test_authorize_url():
    client = make_client(lambda request: httpx.Response(500))

    url = urlparse(client.get_authorize_redirect_url(CALLBACK, encode_state(CALLBACK)))

    assert url.netloc == "id.example.com"
    assert url.path == "/oauth/authorize"
    query = parse_qs(url.query)
    assert query["client_id"] == ["app-1"]
    assert query["redirect_uri"] == [CALLBACK]
    assert query["response_type"] == ["code"]


def test_unconfigured_provider():
    client = HttpOAuthClient(server_url="", app_id="", client_secret="")

    with pytest.raises(OAuthError):
        client.get_authorize_redirect_url(CALLBACK, "state")


@pytest.mark.asyncio
async def test_exchange_and_user_info():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/oauth/token":
            seen["token_form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json={"access_token": "at-1"})
        if request.url.path == "/oauth/userinfo":
            seen["authorization"] = request.headers["authorization"]
            return httpx.Response(
                200,
                json={"openId": "u-1", "name": "Carol", "email": "c@example.com", "platform": "google"},
            )
        return httpx.Response(404)

    client = make_client(handler)

    access_token = await client.exchange_code_for_token("code-1", encode_state(CALLBACK))
    user_info = await client.get_user_info(access_token)

    assert access_token == "at-1"
    assert seen["token_form"]["redirect_uri"] == [CALLBACK]
    assert seen["token_form"]["code"] == ["code-1"]
    assert seen["authorization"] == "Bearer at-1"
    assert user_info.open_id == "u-1"
    assert user_info.login_method == "google"


@pytest.mark.asyncio
async def test_exchange_rejected_by_provider():
    client = make_client(lambda request: httpx.Response(400, json={"error": "invalid_grant"}))

    with pytest.raises(OAuthError):
        await client.exchange_code_for_token("code-1", encode_state(CALLBACK))
