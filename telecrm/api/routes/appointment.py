from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from telecrm.api.error import ClientError, ServerError
from telecrm.api.utils.authorization import require_agent, require_viewer
from telecrm.api.utils.datetimes import UtcDatetime
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.appointments import (
    AppointmentInfo,
    CreateAppointmentCommand,
    CreateAppointmentUseCase,
    DeleteAppointmentUseCase,
    GetAppointmentUseCase,
    ListAppointmentsUseCase,
    UpdateAppointmentCommand,
    UpdateAppointmentUseCase,
)
from telecrm.depends import get_unit_of_work
from telecrm.domain.authorization import AuthContext
from telecrm.domain.entities import AppointmentStatus

router = APIRouter(prefix="/appointments", tags=["Appointments"])


class CreateAppointmentRequest(BaseModel):
    """Create appointment HTTP request payload"""

    lead_id: int
    owner_user_id: int
    start_at: UtcDatetime
    end_at: UtcDatetime
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None


class DeleteAppointmentResponse(BaseModel):
    success: bool


class UpdateAppointmentRequest(BaseModel):
    """Update appointment HTTP request payload; omitted fields are left as they are"""

    status: Optional[AppointmentStatus] = None
    start_at: Optional[UtcDatetime] = None
    end_at: Optional[UtcDatetime] = None
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AppointmentInfo)
async def create_appointment(
    request: CreateAppointmentRequest,
    auth: AuthContext = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Book Appointment

    Raises:
        - 400 Bad Request: end_at is not after start_at
        - 404 Not Found: Lead or owner does not exist
    """
    command = CreateAppointmentCommand(**request.model_dump())
    result = await CreateAppointmentUseCase(uow).execute(command)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TIME_RANGE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code in ("LEAD_NOT_FOUND", "USER_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[AppointmentInfo])
async def list_appointments(
    owner_id: int,
    auth: AuthContext = Depends(require_viewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Appointments owned by one user, latest start first"""
    result = await ListAppointmentsUseCase(uow).execute(owner_id)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/{appointment_id}", status_code=status.HTTP_200_OK, response_model=AppointmentInfo)
async def get_appointment(
    appointment_id: int,
    auth: AuthContext = Depends(require_viewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetAppointmentUseCase(uow).execute(appointment_id)

    if result.is_err():
        error = result.error
        if error.code == "APPOINTMENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.patch("/{appointment_id}", status_code=status.HTTP_200_OK, response_model=AppointmentInfo)
async def update_appointment(
    appointment_id: int,
    request: UpdateAppointmentRequest,
    auth: AuthContext = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateAppointmentCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateAppointmentUseCase(uow).execute(appointment_id, command)

    if result.is_err():
        error = result.error
        if error.code == "APPOINTMENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "INVALID_TIME_RANGE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.delete(
    "/{appointment_id}", status_code=status.HTTP_200_OK, response_model=DeleteAppointmentResponse
)
async def delete_appointment(
    appointment_id: int,
    auth: AuthContext = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteAppointmentUseCase(uow).execute(appointment_id)

    if result.is_err():
        error = result.error
        if error.code == "APPOINTMENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return DeleteAppointmentResponse(success=True)
