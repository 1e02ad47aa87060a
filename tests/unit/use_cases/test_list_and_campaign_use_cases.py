import pytest

from telecrm.app.use_cases.campaigns import (
    CreateCampaignUseCase,
    GetCampaignUseCase,
    ListCampaignsUseCase,
)
from telecrm.app.use_cases.lists import CreateListUseCase, GetListUseCase, ListListsUseCase
from telecrm.domain.authorization import AuthContext
from telecrm.domain.entities import Campaign, LeadList, UserRole

MANAGER = AuthContext(user_id=2, open_id="m", role=UserRole.manager)


@pytest.mark.asyncio
async def test_create_list_is_empty_and_owned_by_caller(mock_uow):
    result = await CreateListUseCase(mock_uow).execute(MANAGER, "October", "Trade show")

    assert result.is_ok()
    assert result.value.total_count == 0
    assert result.value.created_by == 2
    assert result.value.description == "Trade show"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_get_list(mock_uow):
    mock_uow.lists.get_by_id.return_value = LeadList(id=5, name="October", created_by=2)

    result = await GetListUseCase(mock_uow).execute(5)

    assert result.is_ok()
    assert result.value.name == "October"


@pytest.mark.asyncio
async def test_get_missing_list(mock_uow):
    result = await GetListUseCase(mock_uow).execute(5)

    assert result.is_err()
    assert result.error.code == "LIST_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_lists(mock_uow):
    mock_uow.lists.list_all.return_value = [
        LeadList(id=6, name="November", created_by=2),
        LeadList(id=5, name="October", created_by=2),
    ]

    result = await ListListsUseCase(mock_uow).execute()

    assert [item.id for item in result.value] == [6, 5]


@pytest.mark.asyncio
async def test_create_campaign(mock_uow):
    result = await CreateCampaignUseCase(mock_uow).execute(MANAGER, "Autumn")

    assert result.is_ok()
    assert result.value.created_by == 2
    assert result.value.description is None
    created = mock_uow.campaigns.create.await_args.args[0]
    assert created.name == "Autumn"


@pytest.mark.asyncio
async def test_get_missing_campaign(mock_uow):
    result = await GetCampaignUseCase(mock_uow).execute(9)

    assert result.is_err()
    assert result.error.code == "CAMPAIGN_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_campaigns(mock_uow):
    mock_uow.campaigns.list_all.return_value = [Campaign(id=1, name="Autumn", created_by=2)]

    result = await ListCampaignsUseCase(mock_uow).execute()

    assert [c.name for c in result.value] == ["Autumn"]
