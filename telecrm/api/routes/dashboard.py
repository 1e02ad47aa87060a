from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, status

from telecrm.api.error import ServerError
from telecrm.api.utils.authorization import require_viewer
from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.app.use_cases.dashboard import GetKPIUseCase, KPIResponse
from telecrm.depends import get_unit_of_work
from telecrm.domain.authorization import AuthContext
from telecrm.domain.base import as_naive_utc

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/kpi", status_code=status.HTTP_200_OK, response_model=KPIResponse)
async def get_kpi(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    agent_id: Optional[int] = None,
    auth: AuthContext = Depends(require_viewer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Call and conversion figures for [start, end], optionally for one agent"""
    result = await GetKPIUseCase(uow).execute(
        start=as_naive_utc(start), end=as_naive_utc(end), agent_id=agent_id
    )
    if result.is_err():
        raise ServerError(result.error)
    return result.value
