from sqlmodel.ext.asyncio.session import AsyncSession

from telecrm.adapter.repositories.appointment_repository import AppointmentRepository
from telecrm.adapter.repositories.assignment_repository import AssignmentRepository
from telecrm.adapter.repositories.call_log_repository import CallLogRepository
from telecrm.adapter.repositories.campaign_repository import CampaignRepository
from telecrm.adapter.repositories.invitation_repository import InvitationRepository
from telecrm.adapter.repositories.lead_repository import LeadRepository
from telecrm.adapter.repositories.list_repository import ListRepository
from telecrm.adapter.repositories.user_repository import UserRepository
from telecrm.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.leads = LeadRepository(self.session)
        self.call_logs = CallLogRepository(self.session)
        self.assignments = AssignmentRepository(self.session)
        self.appointments = AppointmentRepository(self.session)
        self.lists = ListRepository(self.session)
        self.campaigns = CampaignRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
