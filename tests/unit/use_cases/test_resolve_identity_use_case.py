from datetime import timedelta

import pytest

from telecrm.api.utils.jwt import issue_session_token
from telecrm.app.use_cases.auth import ResolveIdentityUseCase
from telecrm.domain.entities import User, UserRole


@pytest.mark.asyncio
async def test_valid_token_resolves_stored_role(mock_uow):
    mock_uow.users.get_by_open_id.return_value = User(
        id=5, open_id="u-5", name="Dana", role=UserRole.manager
    )
    token = issue_session_token("u-5", "Dana")

    auth = await ResolveIdentityUseCase(mock_uow).execute(token)

    assert auth.is_authenticated
    assert auth.user_id == 5
    assert auth.role == UserRole.manager


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "token",
    [
        None,
        "",
        "not-a-jwt",
        issue_session_token("u-5", "Dana", expires_in=timedelta(seconds=-10)),
    ],
)
async def test_bad_token_is_anonymous(mock_uow, token):
    auth = await ResolveIdentityUseCase(mock_uow).execute(token)

    assert not auth.is_authenticated
    mock_uow.users.get_by_open_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_token_for_unknown_user_is_anonymous(mock_uow):
    token = issue_session_token("ghost", "Ghost")

    auth = await ResolveIdentityUseCase(mock_uow).execute(token)

    assert not auth.is_authenticated
    assert auth.role == UserRole.viewer
