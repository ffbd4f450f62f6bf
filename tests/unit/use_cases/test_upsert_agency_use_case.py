from uuid import uuid4

import pytest

from src.app.use_cases.agencies import AgencyCommand, UpsertAgencyUseCase
from src.domain.entities import Agency, Role, User


@pytest.mark.asyncio
async def test_create_agency_seeds_sidebar_and_binds_owner(mock_uow):
    # Arrange
    owner = User(id="user_owner", name="Owner", email="owner@agency.com", role=Role.agency_owner)
    mock_uow.users.get_by_email.return_value = owner
    command = AgencyCommand(name="Agency", company_email="owner@agency.com")

    # Act
    result = await UpsertAgencyUseCase(mock_uow).execute(command)

    # Assert
    assert result.is_ok()
    assert result.value.created is True
    agency_id = mock_uow.agencies.create.call_args[0][0].id

    options = result.value.sidebar_options
    assert [o.name for o in options] == [
        "Dashboard",
        "Launchpad",
        "Billing",
        "Settings",
        "Sub Accounts",
        "Team",
    ]
    assert options[0].link == f"/agency/{agency_id}"
    assert owner.agency_id == agency_id
    mock_uow.users.update.assert_called_once_with(owner)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_existing_agency_does_not_reseed(mock_uow):
    existing = Agency(id=uuid4(), name="Old", company_email="owner@agency.com")
    mock_uow.agencies.get_by_id.return_value = existing
    mock_uow.sidebar_options.get_by_agency_id.return_value = []

    result = await UpsertAgencyUseCase(mock_uow).execute(
        AgencyCommand(id=existing.id, name="New", company_email="owner@agency.com")
    )

    assert result.is_ok()
    assert result.value.created is False
    assert result.value.agency.name == "New"
    mock_uow.sidebar_options.create_many.assert_not_called()
    mock_uow.users.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_create_agency_without_owner_user_is_rejected(mock_uow):
    result = await UpsertAgencyUseCase(mock_uow).execute(
        AgencyCommand(name="Agency", company_email="nobody@agency.com")
    )

    assert result.is_err()
    assert result.error.code == "OWNER_NOT_FOUND"
    mock_uow.agencies.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_agency_for_owner_of_another_agency_is_rejected(mock_uow):
    first_agency_id = uuid4()
    owner = User(
        id="user_owner",
        name="Owner",
        email="owner@agency.com",
        role=Role.agency_owner,
        agency_id=first_agency_id,
    )
    mock_uow.users.get_by_email.return_value = owner

    result = await UpsertAgencyUseCase(mock_uow).execute(
        AgencyCommand(name="Second", company_email="owner@agency.com")
    )

    assert result.is_err()
    assert result.error.code == "OWNER_HAS_AGENCY"
    assert owner.agency_id == first_agency_id
    mock_uow.agencies.create.assert_not_called()
    mock_uow.sidebar_options.create_many.assert_not_called()
    mock_uow.commit.assert_not_called()
