from datetime import datetime

import pytest

from telecrm.app.use_cases.call_logs import ListCallLogsUseCase, LogCallUseCase
from telecrm.app.use_cases.leads import AssignLeadsUseCase, UpdateLeadCommand, UpdateLeadUseCase
from telecrm.domain.authorization import AuthContext
from telecrm.domain.entities import Lead, LeadStatus, User, UserRole

MANAGER = AuthContext(user_id=2, open_id="m", role=UserRole.manager)
AGENT = AuthContext(user_id=3, open_id="a", role=UserRole.agent)


@pytest.mark.asyncio
async def test_assign_leads(mock_uow):
    leads = {10: Lead(id=10, name="A"), 11: Lead(id=11, name="B")}
    mock_uow.users.get_by_id.return_value = User(id=3, open_id="a", role=UserRole.agent)
    mock_uow.leads.get_by_id.side_effect = lambda lead_id: leads.get(lead_id)

    result = await AssignLeadsUseCase(mock_uow).execute(MANAGER, [10, 11], 3)

    assert result.is_ok()
    assert result.value.assigned_lead_ids == [10, 11]
    assert all(lead.owner_id == 3 for lead in leads.values())
    assignment = mock_uow.assignments.create.await_args.args[0]
    assert assignment.assigned_by == 2
    assert mock_uow.assignments.create.await_count == 2


@pytest.mark.asyncio
async def test_assign_missing_lead_assigns_nothing(mock_uow):
    mock_uow.users.get_by_id.return_value = User(id=3, open_id="a")

    result = await AssignLeadsUseCase(mock_uow).execute(MANAGER, [10], 3)

    assert result.is_err()
    assert result.error.code == "LEAD_NOT_FOUND"
    mock_uow.rollback.assert_awaited_once()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_assign_unknown_agent(mock_uow):
    result = await AssignLeadsUseCase(mock_uow).execute(MANAGER, [10], 99)

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_log_call_moves_lead(mock_uow):
    lead = Lead(id=10, name="A", owner_id=3)
    mock_uow.leads.get_by_id.return_value = lead
    callback_at = datetime(2026, 1, 5, 10, 0)

    result = await LogCallUseCase(mock_uow).execute(
        AGENT, 10, LeadStatus.callback_requested, memo="call back Monday", next_action_at=callback_at
    )

    assert result.is_ok()
    assert result.value.agent_id == 3
    assert result.value.result == "callback_requested"
    assert lead.status == LeadStatus.callback_requested
    assert lead.next_action_at == callback_at
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_log_call_unknown_lead(mock_uow):
    result = await LogCallUseCase(mock_uow).execute(AGENT, 404, LeadStatus.connected)

    assert result.is_err()
    assert result.error.code == "LEAD_NOT_FOUND"
    mock_uow.call_logs.create.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("lead_id, agent_id", [(None, None), (1, 2)])
async def test_list_call_logs_needs_exactly_one_filter(mock_uow, lead_id, agent_id):
    result = await ListCallLogsUseCase(mock_uow).execute(lead_id=lead_id, agent_id=agent_id)

    assert result.is_err()
    assert result.error.code == "INVALID_FILTER"


@pytest.mark.asyncio
async def test_update_lead_writes_only_set_fields(mock_uow):
    lead = Lead(id=10, name="A", phone="03-1111-2222", memo="keep")
    mock_uow.leads.get_by_id.return_value = lead

    result = await UpdateLeadUseCase(mock_uow).execute(
        10, UpdateLeadCommand(status=LeadStatus.considering)
    )

    assert result.is_ok()
    assert result.value.status == "considering"
    assert lead.memo == "keep"
    assert lead.phone == "03-1111-2222"
