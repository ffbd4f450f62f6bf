from uuid import uuid4

import pytest

from src.app.use_cases.sub_accounts import SubAccountCommand, UpsertSubAccountUseCase
from src.domain.entities import Role, SubAccount, User


@pytest.fixture
def owner():
    return User(
        id="user_owner",
        name="Owner",
        email="owner@agency.com",
        role=Role.agency_owner,
        agency_id=uuid4(),
    )


def make_command(agency_id, **overrides):
    fields = dict(agency_id=agency_id, name="Acme", company_email="acme@acme.com")
    fields.update(overrides)
    return SubAccountCommand(**fields)


@pytest.mark.asyncio
async def test_create_seeds_permission_pipeline_and_sidebar(mock_uow, owner):
    # Arrange
    mock_uow.users.get_agency_owner.return_value = owner
    command = make_command(owner.agency_id)

    # Act
    result = await UpsertSubAccountUseCase(mock_uow).execute(command)

    # Assert
    assert result.is_ok()
    assert result.value.created is True
    sub_account_id = mock_uow.sub_accounts.create.call_args[0][0].id

    permission = mock_uow.permissions.create.call_args[0][0]
    assert permission.email == "owner@agency.com"
    assert permission.sub_account_id == sub_account_id
    assert permission.access is True

    pipeline = mock_uow.pipelines.create.call_args[0][0]
    assert pipeline.name == "Lead Cycle"
    assert pipeline.sub_account_id == sub_account_id

    options = mock_uow.sidebar_options.create_many.call_args[0][0]
    assert len(options) == 8
    assert all(o.sub_account_id == sub_account_id for o in options)
    assert all(o.agency_id is None for o in options)
    assert options[-1].link == f"/subaccount/{sub_account_id}"

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_only_changes_fields(mock_uow, owner):
    existing = SubAccount(
        id=uuid4(), agency_id=owner.agency_id, name="Old", company_email="acme@acme.com"
    )
    mock_uow.users.get_agency_owner.return_value = owner
    mock_uow.sub_accounts.get_by_id.return_value = existing

    result = await UpsertSubAccountUseCase(mock_uow).execute(
        make_command(owner.agency_id, id=existing.id, name="New")
    )

    assert result.is_ok()
    assert result.value.created is False
    assert result.value.sub_account.name == "New"
    mock_uow.sub_accounts.create.assert_not_called()
    mock_uow.permissions.create.assert_not_called()
    mock_uow.pipelines.create.assert_not_called()
    mock_uow.sidebar_options.create_many.assert_not_called()


@pytest.mark.asyncio
async def test_agency_without_owner_is_rejected(mock_uow):
    result = await UpsertSubAccountUseCase(mock_uow).execute(make_command(uuid4()))

    assert result.is_err()
    assert result.error.code == "AGENCY_OWNER_NOT_FOUND"
    mock_uow.sub_accounts.create.assert_not_called()
    mock_uow.commit.assert_not_called()
