from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from telecrm.api.error import ClientError, ServerError
from telecrm.api.utils.authorization import require_admin, require_viewer
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.users import (
    ChangeRoleResponse,
    ChangeRoleUseCase,
    ListUsersUseCase,
    UpdateProfileUseCase,
    UserInfo,
)
from telecrm.depends import get_unit_of_work
from telecrm.domain.authorization import AuthContext

router = APIRouter(prefix="/users", tags=["User"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[UserInfo])
async def list_users(
    auth: AuthContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List all users. Admin only."""
    result = await ListUsersUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


class UpdateProfileRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None


@router.patch("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def update_profile(
    request: UpdateProfileRequest,
    auth: AuthContext = Depends(require_viewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Update the caller's own display name and email"""
    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(auth, name=request.name, email=request.email)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ChangeRoleRequest(BaseModel):
    """Change role HTTP request payload"""

    role: str = Field(..., description="New role: admin, manager, agent or viewer")


@router.patch(
    "/{user_id}/role",
    status_code=status.HTTP_200_OK,
    response_model=ChangeRoleResponse,
)
async def change_role(
    user_id: int,
    request: ChangeRoleRequest,
    auth: AuthContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change User Role

    Admin only.

    Raises:
        - 400 Bad Request: Invalid role
        - 404 Not Found: User does not exist
        - 409 Conflict: Admin demoting themselves
    """
    use_case = ChangeRoleUseCase(uow)
    result = await use_case.execute(auth, user_id, request.role)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_ROLE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "CANNOT_DEMOTE_SELF":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
