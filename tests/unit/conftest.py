import pytest
from unittest.mock import AsyncMock, MagicMock


def _echo(entity):
    return entity


def _persist():
    """create() stand-in that assigns ids the way an INSERT would"""
    counter = iter(range(100, 10_000))

    async def create(entity):
        if entity.id is None:
            entity.id = next(counter)
        return entity

    return create


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories; create/update echo their argument"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_open_id = AsyncMock(return_value=None)
    uow.users.list_all = AsyncMock(return_value=[])
    uow.users.create = AsyncMock(side_effect=_persist())
    uow.users.update = AsyncMock(side_effect=_echo)

    uow.invitations = MagicMock()
    uow.invitations.get_by_token = AsyncMock(return_value=None)
    uow.invitations.create = AsyncMock(side_effect=_persist())
    uow.invitations.mark_accepted = AsyncMock(return_value=True)

    uow.leads = MagicMock()
    uow.leads.get_by_id = AsyncMock(return_value=None)
    uow.leads.list_by_filters = AsyncMock(return_value=[])
    uow.leads.get_next_for_owner = AsyncMock(return_value=None)
    uow.leads.find_duplicate = AsyncMock(return_value=None)
    uow.leads.create = AsyncMock(side_effect=_persist())
    uow.leads.update = AsyncMock(side_effect=_echo)

    uow.call_logs = MagicMock()
    uow.call_logs.create = AsyncMock(side_effect=_persist())
    uow.call_logs.list_by_lead = AsyncMock(return_value=[])
    uow.call_logs.list_by_agent = AsyncMock(return_value=[])
    uow.call_logs.count_by_result = AsyncMock(return_value={})

    uow.assignments = MagicMock()
    uow.assignments.create = AsyncMock(side_effect=_persist())

    uow.appointments = MagicMock()
    uow.appointments.get_by_id = AsyncMock(return_value=None)
    uow.appointments.list_by_owner = AsyncMock(return_value=[])
    uow.appointments.create = AsyncMock(side_effect=_persist())
    uow.appointments.update = AsyncMock(side_effect=_echo)
    uow.appointments.delete = AsyncMock(return_value=None)

    uow.lists = MagicMock()
    uow.lists.get_by_id = AsyncMock(return_value=None)
    uow.lists.list_all = AsyncMock(return_value=[])
    uow.lists.create = AsyncMock(side_effect=_persist())
    uow.lists.update = AsyncMock(side_effect=_echo)

    uow.campaigns = MagicMock()
    uow.campaigns.get_by_id = AsyncMock(return_value=None)
    uow.campaigns.list_all = AsyncMock(return_value=[])
    uow.campaigns.create = AsyncMock(side_effect=_persist())
    return uow
