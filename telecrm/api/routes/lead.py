from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field, model_validator

from telecrm.api.error import ClientError, ServerError
from telecrm.api.utils.authorization import require_agent, require_manager, require_viewer
from telecrm.api.utils.datetimes import UtcDatetime
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.leads import (
    AssignLeadsResponse,
    AssignLeadsUseCase,
    CreateLeadUseCase,
    GetLeadUseCase,
    GetNextLeadUseCase,
    ImportLeadsResponse,
    ImportLeadsUseCase,
    LeadFields,
    LeadInfo,
    ListLeadsUseCase,
    UpdateLeadCommand,
    UpdateLeadUseCase,
)
from telecrm.depends import get_unit_of_work
from telecrm.domain.authorization import AuthContext
from telecrm.domain.entities import LeadStatus

router = APIRouter(prefix="/leads", tags=["Leads"])

PHONE_PATTERN = r"^[0-9+\-()\s]+$"


class CreateLeadRequest(BaseModel):
    """
    Create lead HTTP request payload

    At least one of phone or email is required.
    """

    name: str = Field(..., min_length=1, max_length=255)
    company: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, min_length=7, max_length=20, pattern=PHONE_PATTERN)
    email: Optional[EmailStr] = None
    prefecture: Optional[str] = None
    industry: Optional[str] = None
    memo: Optional[str] = None
    list_id: Optional[int] = None
    campaign_id: Optional[int] = None

    @model_validator(mode="after")
    def require_contact(self):
        if not self.phone and not self.email:
            raise ValueError("phone or email is required")
        return self

    def to_fields(self) -> LeadFields:
        return LeadFields(**self.model_dump(exclude={"list_id", "campaign_id"}))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=LeadInfo)
async def create_lead(
    request: CreateLeadRequest,
    auth: AuthContext = Depends(require_manager),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateLeadUseCase(uow).execute(
        request.to_fields(), list_id=request.list_id, campaign_id=request.campaign_id
    )
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[LeadInfo])
async def list_leads(
    lead_status: Optional[LeadStatus] = Query(None, alias="status"),
    owner_id: Optional[int] = None,
    list_id: Optional[int] = None,
    campaign_id: Optional[int] = None,
    auth: AuthContext = Depends(require_viewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List leads; every filter is optional and they combine with AND"""
    result = await ListLeadsUseCase(uow).execute(
        status=lead_status, owner_id=owner_id, list_id=list_id, campaign_id=campaign_id
    )
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/mine", status_code=status.HTTP_200_OK, response_model=List[LeadInfo])
async def list_my_leads(
    auth: AuthContext = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListLeadsUseCase(uow).execute(owner_id=auth.user_id)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/next", status_code=status.HTTP_200_OK, response_model=Optional[LeadInfo])
async def get_next_lead(
    auth: AuthContext = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Next lead to call for the caller, or null when the queue is empty"""
    result = await GetNextLeadUseCase(uow).execute(auth.user_id)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


class ImportLeadsRequest(BaseModel):
    """Bulk import HTTP request payload"""

    leads: List[LeadFields] = Field(..., min_length=1)
    list_id: Optional[int] = None
    campaign_id: Optional[int] = None


@router.post("/import", status_code=status.HTTP_200_OK, response_model=ImportLeadsResponse)
async def import_leads(
    request: ImportLeadsRequest,
    auth: AuthContext = Depends(require_manager),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Import Leads

    Rows matching an existing lead by phone, email, or company and name are
    skipped and counted as duplicates.
    """
    result = await ImportLeadsUseCase(uow).execute(
        request.leads, list_id=request.list_id, campaign_id=request.campaign_id
    )
    if result.is_err():
        raise ServerError(result.error)
    return result.value


class AssignLeadsRequest(BaseModel):
    lead_ids: List[int] = Field(..., min_length=1)
    agent_id: int


@router.post("/assign", status_code=status.HTTP_200_OK, response_model=AssignLeadsResponse)
async def assign_leads(
    request: AssignLeadsRequest,
    auth: AuthContext = Depends(require_manager),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Assign Leads

    Raises:
        - 404 Not Found: Agent or one of the leads does not exist
    """
    result = await AssignLeadsUseCase(uow).execute(auth, request.lead_ids, request.agent_id)

    if result.is_err():
        error = result.error
        if error.code in ("USER_NOT_FOUND", "LEAD_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("/{lead_id}", status_code=status.HTTP_200_OK, response_model=LeadInfo)
async def get_lead(
    lead_id: int,
    auth: AuthContext = Depends(require_viewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetLeadUseCase(uow).execute(lead_id)

    if result.is_err():
        error = result.error
        if error.code == "LEAD_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class UpdateLeadRequest(BaseModel):
    """Partial lead update; omitted fields are left unchanged"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    company: Optional[str] = None
    phone: Optional[str] = Field(None, min_length=7, max_length=20, pattern=PHONE_PATTERN)
    email: Optional[EmailStr] = None
    prefecture: Optional[str] = None
    industry: Optional[str] = None
    memo: Optional[str] = None
    status: Optional[LeadStatus] = None
    next_action_at: Optional[UtcDatetime] = None
    owner_id: Optional[int] = None


@router.patch("/{lead_id}", status_code=status.HTTP_200_OK, response_model=LeadInfo)
async def update_lead(
    lead_id: int,
    request: UpdateLeadRequest,
    auth: AuthContext = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateLeadCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateLeadUseCase(uow).execute(lead_id, command)

    if result.is_err():
        error = result.error
        if error.code == "LEAD_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
