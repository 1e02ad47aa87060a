from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, EmailStr, Field

from telecrm.api.error import ClientError, ServerError
from telecrm.api.utils.authorization import get_auth_context
from telecrm.api.utils.cookies import clear_session_cookie, set_session_cookie
from telecrm.api.utils.jwt import ONE_YEAR
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.auth import LoginUseCase
from telecrm.app.use_cases.users import UserInfo
from telecrm.depends import get_unit_of_work
from telecrm.domain.authorization import AuthContext

router = APIRouter(prefix="/auth", tags=["Authentication"])


class MeResponse(BaseModel):
    """GET /auth/me response payload"""

    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: str


@router.get("/me", status_code=status.HTTP_200_OK, response_model=Optional[MeResponse])
async def get_me(auth: AuthContext = Depends(get_auth_context)):
    """
    Current identity

    Never fails: anonymous callers get null instead of 401 so the frontend
    can decide whether to show the login page.
    """
    if not auth.is_authenticated:
        return None
    return MeResponse(
        id=auth.user_id,
        open_id=auth.open_id,
        name=auth.name,
        email=auth.email,
        login_method=auth.login_method,
        role=auth.role.value,
    )


class LogoutResponse(BaseModel):
    success: bool


@router.api_route(
    "/logout",
    methods=["GET", "POST"],
    status_code=status.HTTP_200_OK,
    response_model=LogoutResponse,
)
async def logout(request: Request, response: Response):
    """Clear the session cookie. Idempotent; works without a session."""
    clear_session_cookie(response, request)
    return LogoutResponse(success=True)


class LoginRequest(BaseModel):
    """
    Local login HTTP request payload

    Only accounts created through an invitation have a password.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class LoginResponse(BaseModel):
    success: bool
    user: UserInfo


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Email/password login

    Sets the session cookie on success.

    Raises:
        - 401 Unauthorized: Unknown email or wrong password (same message for both)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(body.email, body.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    issued = result.value
    set_session_cookie(
        response, request, issued.session_token, int(ONE_YEAR.total_seconds())
    )
    return LoginResponse(success=True, user=issued.user)
