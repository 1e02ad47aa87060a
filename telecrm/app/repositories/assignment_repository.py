from abc import ABC, abstractmethod

from telecrm.domain.entities import Assignment


class IAssignmentRepository(ABC):
    """Assignment repository interface - application layer"""

    @abstractmethod
    async def create(self, assignment: Assignment) -> Assignment:
        """Record a lead assignment"""
        pass
