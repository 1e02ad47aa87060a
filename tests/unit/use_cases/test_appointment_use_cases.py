from datetime import datetime

import pytest

from telecrm.app.use_cases.appointments import (
    CreateAppointmentCommand,
    CreateAppointmentUseCase,
    DeleteAppointmentUseCase,
    GetAppointmentUseCase,
    ListAppointmentsUseCase,
    UpdateAppointmentCommand,
    UpdateAppointmentUseCase,
)
from telecrm.domain.entities import (
    Appointment,
    AppointmentStatus,
    Lead,
    User,
    UserRole,
)

START = datetime(2026, 10, 22, 1, 0)
END = datetime(2026, 10, 22, 2, 0)


def booking(**overrides) -> CreateAppointmentCommand:
    fields = dict(lead_id=10, owner_user_id=3, start_at=START, end_at=END, title="Visit")
    fields.update(overrides)
    return CreateAppointmentCommand(**fields)


def existing_appointment() -> Appointment:
    return Appointment(
        id=7,
        lead_id=10,
        owner_user_id=3,
        start_at=START,
        end_at=END,
        status=AppointmentStatus.scheduled,
    )


@pytest.mark.asyncio
async def test_create_appointment_starts_scheduled(mock_uow):
    mock_uow.leads.get_by_id.return_value = Lead(id=10, name="A")
    mock_uow.users.get_by_id.return_value = User(id=3, open_id="a", role=UserRole.agent)

    result = await CreateAppointmentUseCase(mock_uow).execute(booking())

    assert result.is_ok()
    assert result.value.status == "scheduled"
    assert result.value.id == 100
    created = mock_uow.appointments.create.await_args.args[0]
    assert created.owner_user_id == 3
    assert created.title == "Visit"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_appointment_for_missing_lead(mock_uow):
    result = await CreateAppointmentUseCase(mock_uow).execute(booking())

    assert result.is_err()
    assert result.error.code == "LEAD_NOT_FOUND"
    mock_uow.appointments.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_appointment_for_unknown_owner(mock_uow):
    mock_uow.leads.get_by_id.return_value = Lead(id=10, name="A")

    result = await CreateAppointmentUseCase(mock_uow).execute(booking(owner_user_id=99))

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
@pytest.mark.parametrize("end_at", [START, datetime(2026, 10, 21, 23, 0)])
async def test_create_appointment_rejects_empty_slot(mock_uow, end_at):
    result = await CreateAppointmentUseCase(mock_uow).execute(booking(end_at=end_at))

    assert result.is_err()
    assert result.error.code == "INVALID_TIME_RANGE"
    mock_uow.leads.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_missing_appointment(mock_uow):
    result = await GetAppointmentUseCase(mock_uow).execute(7)

    assert result.is_err()
    assert result.error.code == "APPOINTMENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_appointments_by_owner(mock_uow):
    mock_uow.appointments.list_by_owner.return_value = [existing_appointment()]

    result = await ListAppointmentsUseCase(mock_uow).execute(3)

    assert result.is_ok()
    assert [a.id for a in result.value] == [7]
    mock_uow.appointments.list_by_owner.assert_awaited_once_with(3)


@pytest.mark.asyncio
async def test_update_only_touches_given_fields(mock_uow):
    appointment = existing_appointment()
    appointment.title = "Visit"
    mock_uow.appointments.get_by_id.return_value = appointment

    result = await UpdateAppointmentUseCase(mock_uow).execute(
        7, UpdateAppointmentCommand(status=AppointmentStatus.confirmed)
    )

    assert result.is_ok()
    assert result.value.status == "confirmed"
    assert result.value.title == "Visit"
    assert result.value.start_at == START


@pytest.mark.asyncio
async def test_update_cannot_move_start_past_end(mock_uow):
    mock_uow.appointments.get_by_id.return_value = existing_appointment()

    result = await UpdateAppointmentUseCase(mock_uow).execute(
        7, UpdateAppointmentCommand(start_at=datetime(2026, 10, 22, 3, 0))
    )

    assert result.is_err()
    assert result.error.code == "INVALID_TIME_RANGE"
    mock_uow.appointments.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_appointment(mock_uow):
    appointment = existing_appointment()
    mock_uow.appointments.get_by_id.return_value = appointment

    result = await DeleteAppointmentUseCase(mock_uow).execute(7)

    assert result.is_ok()
    mock_uow.appointments.delete.assert_awaited_once_with(appointment)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_missing_appointment(mock_uow):
    result = await DeleteAppointmentUseCase(mock_uow).execute(7)

    assert result.is_err()
    assert result.error.code == "APPOINTMENT_NOT_FOUND"
    mock_uow.appointments.delete.assert_not_awaited()
