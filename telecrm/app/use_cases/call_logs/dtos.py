from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from telecrm.domain.entities import CallLog, LeadStatus


class CallLogInfo(BaseModel):
    """Public view of a CallLog row"""

    id: int
    lead_id: int
    agent_id: int
    result: str
    memo: Optional[str] = None
    next_action_at: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, call_log: CallLog) -> "CallLogInfo":
        return cls(
            id=call_log.id,
            lead_id=call_log.lead_id,
            agent_id=call_log.agent_id,
            result=LeadStatus(call_log.result).value,
            memo=call_log.memo,
            next_action_at=call_log.next_action_at,
            created_at=call_log.created_at,
        )
