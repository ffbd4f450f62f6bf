from uuid import uuid4

import pytest

from src.app.use_cases.users import UpdateUserCommand, UpdateUserUseCase
from src.domain.entities import Role, User


@pytest.fixture
def agency_id():
    return uuid4()


@pytest.fixture
def owner(agency_id):
    return User(
        id="user_jane",
        name="Jane Doe",
        email="jane@acme.com",
        role=Role.agency_owner,
        agency_id=agency_id,
    )


@pytest.fixture
def member(agency_id):
    return User(
        id="user_bob",
        name="Bob",
        email="bob@acme.com",
        role=Role.subaccount_user,
        agency_id=agency_id,
    )


@pytest.mark.asyncio
async def test_update_applies_fields_and_syncs_role(mock_uow, mock_identity, member):
    mock_uow.users.get_by_email.return_value = member

    result = await UpdateUserUseCase(mock_uow, mock_identity).execute(
        UpdateUserCommand(email="bob@acme.com", role=Role.agency_admin)
    )

    assert result.is_ok()
    assert member.role == Role.agency_admin
    mock_identity.set_caller_role_metadata.assert_called_once_with(
        "user_bob", Role.agency_admin
    )


@pytest.mark.asyncio
async def test_second_agency_owner_is_refused(
    mock_uow, mock_identity, owner, member
):
    mock_uow.users.get_by_email.return_value = member
    mock_uow.users.get_agency_owner.return_value = owner

    result = await UpdateUserUseCase(mock_uow, mock_identity).execute(
        UpdateUserCommand(email="bob@acme.com", role=Role.agency_owner)
    )

    assert result.is_err()
    assert result.error.code == "OWNER_ALREADY_EXISTS"
    assert member.role == Role.subaccount_user
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()
    mock_identity.set_caller_role_metadata.assert_not_called()


@pytest.mark.asyncio
async def test_owner_keeping_owner_role_is_allowed(mock_uow, mock_identity, owner):
    mock_uow.users.get_by_email.return_value = owner
    mock_uow.users.get_agency_owner.return_value = owner

    result = await UpdateUserUseCase(mock_uow, mock_identity).execute(
        UpdateUserCommand(email="jane@acme.com", name="Jane D.", role=Role.agency_owner)
    )

    assert result.is_ok()
    assert owner.name == "Jane D."


@pytest.mark.asyncio
async def test_unknown_user_is_rejected(mock_uow, mock_identity):
    result = await UpdateUserUseCase(mock_uow, mock_identity).execute(
        UpdateUserCommand(email="ghost@acme.com", name="Ghost")
    )

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
