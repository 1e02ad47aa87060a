from sqlmodel.ext.asyncio.session import AsyncSession

from telecrm.app.repositories.assignment_repository import IAssignmentRepository
from telecrm.domain.entities import Assignment


class AssignmentRepository(IAssignmentRepository):
    """Assignment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, assignment: Assignment) -> Assignment:
        """Record a lead assignment"""
        self.session.add(assignment)
        await self.session.flush()
        await self.session.refresh(assignment)
        return assignment
