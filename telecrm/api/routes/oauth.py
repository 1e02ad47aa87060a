import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from config import ApplicationConfig
from telecrm.api.error import ClientError, ServerError
from telecrm.api.utils.cookies import set_session_cookie
from telecrm.api.utils.jwt import ONE_YEAR
from telecrm.app.services.oauth_client import IOAuthClient, OAuthError, encode_state
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.auth import OAuthCallbackUseCase
from telecrm.depends import get_oauth_client, get_unit_of_work
from telecrm.libs.result import Error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/oauth", tags=["OAuth"])


def callback_url(request: Request) -> str:
    """Absolute URL of the callback route as seen by the browser"""
    host = request.headers.get("host") or request.url.netloc
    return f"{request.url.scheme}://{host}{ApplicationConfig.API_PREFIX}/oauth/callback"


@router.get("/login")
async def oauth_login(
    request: Request, oauth_client: IOAuthClient = Depends(get_oauth_client)
):
    """Send the browser to the identity provider's sign-in page"""
    redirect_uri = callback_url(request)
    try:
        url = oauth_client.get_authorize_redirect_url(redirect_uri, encode_state(redirect_uri))
    except OAuthError as exc:
        logger.error(f"OAuth login unavailable: {exc}")
        raise ServerError(Error("OAUTH_NOT_CONFIGURED", str(exc)))
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


@router.get("/callback")
async def oauth_callback(
    request: Request,
    code: Optional[str] = None,
    state: Optional[str] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
    oauth_client: IOAuthClient = Depends(get_oauth_client),
):
    """
    OAuth callback

    Exchanges the code, upserts the user, sets the session cookie and
    redirects to the app root.

    Raises:
        - 400 Bad Request: code or state missing, or provider returned no openId
        - 500 Internal Server Error: Code exchange or user info fetch failed
    """
    if not code or not state:
        raise ClientError(Error("MISSING_PARAMETERS", "code and state are required"))

    use_case = OAuthCallbackUseCase(
        uow, oauth_client, owner_open_id=ApplicationConfig.OWNER_OPEN_ID
    )
    result = await use_case.execute(code, state)

    if result.is_err():
        error = result.error
        if error.code == "OAUTH_USER_INFO_INVALID":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    response = RedirectResponse("/", status_code=status.HTTP_302_FOUND)
    set_session_cookie(
        response, request, result.value.session_token, int(ONE_YEAR.total_seconds())
    )
    return response
