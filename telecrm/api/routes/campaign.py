from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from telecrm.api.error import ClientError, ServerError
from telecrm.api.utils.authorization import require_manager, require_viewer
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.campaigns import (
    CampaignInfo,
    CreateCampaignUseCase,
    GetCampaignUseCase,
    ListCampaignsUseCase,
)
from telecrm.depends import get_unit_of_work
from telecrm.domain.authorization import AuthContext

router = APIRouter(prefix="/campaigns", tags=["Campaigns"])


class CreateCampaignRequest(BaseModel):
    """Create campaign HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CampaignInfo)
async def create_campaign(
    request: CreateCampaignRequest,
    auth: AuthContext = Depends(require_manager),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateCampaignUseCase(uow).execute(auth, request.name, request.description)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[CampaignInfo])
async def list_campaigns(
    auth: AuthContext = Depends(require_viewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListCampaignsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/{campaign_id}", status_code=status.HTTP_200_OK, response_model=CampaignInfo)
async def get_campaign(
    campaign_id: int,
    auth: AuthContext = Depends(require_viewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetCampaignUseCase(uow).execute(campaign_id)

    if result.is_err():
        error = result.error
        if error.code == "CAMPAIGN_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
