from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from telecrm.api.error import ClientError, ServerError
from telecrm.api.utils.authorization import require_agent, require_viewer
from telecrm.api.utils.datetimes import UtcDatetime
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.call_logs import CallLogInfo, ListCallLogsUseCase, LogCallUseCase
from telecrm.depends import get_unit_of_work
from telecrm.domain.authorization import AuthContext
from telecrm.domain.entities import LeadStatus

router = APIRouter(prefix="/call-logs", tags=["Call Logs"])


class LogCallRequest(BaseModel):
    """Log call HTTP request payload"""

    lead_id: int
    result: LeadStatus = Field(..., description="Call outcome; becomes the lead status")
    memo: Optional[str] = None
    next_action_at: Optional[UtcDatetime] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CallLogInfo)
async def log_call(
    request: LogCallRequest,
    auth: AuthContext = Depends(require_agent),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Log Call

    The caller is recorded as the agent.

    Raises:
        - 404 Not Found: Lead does not exist
    """
    use_case = LogCallUseCase(uow)
    result = await use_case.execute(
        auth,
        request.lead_id,
        request.result,
        memo=request.memo,
        next_action_at=request.next_action_at,
    )

    if result.is_err():
        error = result.error
        if error.code == "LEAD_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[CallLogInfo])
async def list_call_logs(
    lead_id: Optional[int] = None,
    agent_id: Optional[int] = None,
    auth: AuthContext = Depends(require_viewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Call history of one lead or one agent, newest first"""
    result = await ListCallLogsUseCase(uow).execute(lead_id=lead_id, agent_id=agent_id)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_FILTER":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
