from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from telecrm.api.error import ClientError, ServerError
from telecrm.api.utils.authorization import require_manager, require_viewer
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.lists import (
    CreateListUseCase,
    GetListUseCase,
    LeadListInfo,
    ListListsUseCase,
)
from telecrm.depends import get_unit_of_work
from telecrm.domain.authorization import AuthContext

router = APIRouter(prefix="/lists", tags=["Lists"])


class CreateListRequest(BaseModel):
    """Create list HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=LeadListInfo)
async def create_list(
    request: CreateListRequest,
    auth: AuthContext = Depends(require_manager),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Open an empty lead list owned by the caller"""
    result = await CreateListUseCase(uow).execute(auth, request.name, request.description)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[LeadListInfo])
async def list_lists(
    auth: AuthContext = Depends(require_viewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListListsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/{list_id}", status_code=status.HTTP_200_OK, response_model=LeadListInfo)
async def get_list(
    list_id: int,
    auth: AuthContext = Depends(require_viewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetListUseCase(uow).execute(list_id)

    if result.is_err():
        error = result.error
        if error.code == "LIST_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
