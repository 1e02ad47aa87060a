from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional

from telecrm.domain.entities import CallLog, LeadStatus


class ICallLogRepository(ABC):
    """Call log repository interface - application layer"""

    @abstractmethod
    async def create(self, call_log: CallLog) -> CallLog:
        """Create a new call log"""
        pass

    @abstractmethod
    async def list_by_lead(self, lead_id: int) -> List[CallLog]:
        """Get call logs of a lead, newest first"""
        pass

    @abstractmethod
    async def list_by_agent(self, agent_id: int) -> List[CallLog]:
        """Get call logs made by an agent, newest first"""
        pass

    @abstractmethod
    async def count_by_result(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        agent_id: Optional[int] = None,
    ) -> Dict[LeadStatus, int]:
        """Count call logs per result within [start, end]"""
        pass
