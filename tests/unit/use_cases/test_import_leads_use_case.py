import pytest

from telecrm.app.use_cases.leads import ImportLeadsUseCase, LeadFields
from telecrm.domain.entities import Lead, LeadList, LeadStatus


@pytest.mark.asyncio
async def test_import_skips_duplicates(mock_uow):
    existing = Lead(id=1, name="Taro", company="Acme", phone="03-1234-5678")

    async def find_duplicate(phone, email, company, name):
        if phone == existing.phone or (company, name) == (existing.company, existing.name):
            return existing
        return None

    mock_uow.leads.find_duplicate.side_effect = find_duplicate
    rows = [
        LeadFields(name="Hanako", phone="03-1234-5678"),
        LeadFields(name="Taro", company="Acme", email="other@example.com"),
        LeadFields(name="Jiro", company="Beta", phone="06-0000-0000"),
    ]

    result = await ImportLeadsUseCase(mock_uow).execute(rows, list_id=3, campaign_id=4)

    assert result.is_ok()
    assert result.value.success_count == 1
    assert result.value.duplicate_count == 2

    created = mock_uow.leads.create.await_args.args[0]
    assert created.name == "Jiro"
    assert created.status == LeadStatus.unreached
    assert created.list_id == 3
    assert created.campaign_id == 4
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_import_empty_batch(mock_uow):
    result = await ImportLeadsUseCase(mock_uow).execute([])

    assert result.is_ok()
    assert result.value.success_count == 0
    assert result.value.duplicate_count == 0


@pytest.mark.asyncio
async def test_import_grows_target_list_count(mock_uow):
    lead_list = LeadList(id=3, name="October batch", created_by=1, total_count=5)
    mock_uow.lists.get_by_id.return_value = lead_list
    rows = [LeadFields(name="Hanako"), LeadFields(name="Jiro")]

    result = await ImportLeadsUseCase(mock_uow).execute(rows, list_id=3)

    assert result.is_ok()
    mock_uow.lists.get_by_id.assert_awaited_once_with(3)
    assert mock_uow.lists.update.await_args.args[0].total_count == 7


@pytest.mark.asyncio
async def test_import_into_unknown_list_still_imports(mock_uow):
    result = await ImportLeadsUseCase(mock_uow).execute([LeadFields(name="Hanako")], list_id=99)

    assert result.is_ok()
    assert result.value.success_count == 1
    mock_uow.lists.update.assert_not_awaited()
