from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from telecrm.api.error import ClientError, ServerError
from telecrm.api.utils.authorization import require_admin
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    InvitationDetails,
    IssueInvitationResponse,
    IssueInvitationUseCase,
    VerifyInvitationUseCase,
)
from telecrm.depends import get_unit_of_work
from telecrm.domain.authorization import AuthContext
from telecrm.libs.result import Error

router = APIRouter(prefix="/invitations", tags=["Invitations"])

INVITATION_ERROR_STATUS = {
    "INVITATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVITATION_EXPIRED": status.HTTP_410_GONE,
    "INVITATION_ALREADY_USED": status.HTTP_409_CONFLICT,
}


def raise_invitation_error(error: Error):
    if error.code in INVITATION_ERROR_STATUS:
        raise ClientError(error, status_code=INVITATION_ERROR_STATUS[error.code])
    raise ServerError(error)


class IssueInvitationRequest(BaseModel):
    """Issue invitation HTTP request payload"""

    email: EmailStr = Field(..., description="Email address to invite")
    role: str = Field(..., description="Role granted on acceptance: manager, agent or viewer")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=IssueInvitationResponse,
)
async def issue_invitation(
    request: IssueInvitationRequest,
    auth: AuthContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Issue Invitation

    Admin only. The token is returned to the caller for delivery.

    Raises:
        - 400 Bad Request: Role is not invitable
        - 401/403: Not signed in / not an admin
    """
    use_case = IssueInvitationUseCase(uow)
    result = await use_case.execute(auth, request.email, request.role)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_ROLE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get("/verify", status_code=status.HTTP_200_OK, response_model=InvitationDetails)
async def verify_invitation(
    token: str, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Verify Invitation

    Public. Lets the signup page show who is invited and as what.

    Raises:
        - 404 Not Found: Unknown token
        - 410 Gone: Expired
        - 409 Conflict: Already used
    """
    use_case = VerifyInvitationUseCase(uow)
    result = await use_case.execute(token)

    if result.is_err():
        raise_invitation_error(result.error)

    return result.value


class AcceptInvitationRequest(BaseModel):
    """Accept invitation HTTP request payload"""

    token: str = Field(..., min_length=8, description="Invitation token")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    password: str = Field(..., min_length=4, description="Account password (min 4 chars)")


@router.post(
    "/accept", status_code=status.HTTP_200_OK, response_model=AcceptInvitationResponse
)
async def accept_invitation(
    request: AcceptInvitationRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Accept Invitation

    Public. Creates the local account; the invitee then signs in with
    email and password.

    Raises:
        - 404 Not Found: Unknown token
        - 410 Gone: Expired
        - 409 Conflict: Already used
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    use_case = AcceptInvitationUseCase(uow, owner_open_id=ApplicationConfig.OWNER_OPEN_ID)
    result = await use_case.execute(request.token, request.name, request.password)

    if result.is_err():
        raise_invitation_error(result.error)

    return result.value
