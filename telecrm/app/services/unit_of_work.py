from abc import ABC, abstractmethod

from telecrm.app.repositories.appointment_repository import IAppointmentRepository
from telecrm.app.repositories.assignment_repository import IAssignmentRepository
from telecrm.app.repositories.call_log_repository import ICallLogRepository
from telecrm.app.repositories.campaign_repository import ICampaignRepository
from telecrm.app.repositories.invitation_repository import IInvitationRepository
from telecrm.app.repositories.lead_repository import ILeadRepository
from telecrm.app.repositories.list_repository import IListRepository
from telecrm.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    invitations: IInvitationRepository
    leads: ILeadRepository
    call_logs: ICallLogRepository
    assignments: IAssignmentRepository
    appointments: IAppointmentRepository
    lists: IListRepository
    campaigns: ICampaignRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
