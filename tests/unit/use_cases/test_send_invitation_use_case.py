from uuid import uuid4

import pytest

from src.app.use_cases.invitations import SendInvitationUseCase
from src.domain.entities import Agency, Invitation, Role, User


@pytest.fixture
def agency():
    return Agency(id=uuid4(), name="Agency", company_email="jane@acme.com")


@pytest.fixture
def jane(agency):
    return User(
        id="user_jane",
        name="Jane Doe",
        email="jane@acme.com",
        role=Role.agency_owner,
        agency_id=agency.id,
    )


@pytest.mark.asyncio
async def test_invite_creates_pending_invitation_and_logs(mock_uow, mock_identity, agency, jane):
    # Arrange
    mock_uow.agencies.get_by_id.return_value = agency

    async def get_by_email(email):
        return jane if email == jane.email else None

    mock_uow.users.get_by_email.side_effect = get_by_email

    # Act
    result = await SendInvitationUseCase(mock_uow, mock_identity).execute(
        agency.id, "bob@acme.com", Role.subaccount_guest
    )

    # Assert
    assert result.is_ok()
    assert result.value.email == "bob@acme.com"
    assert result.value.status == "PENDING"
    assert result.value.role == "SUBACCOUNT_GUEST"

    notification = mock_uow.notifications.create.call_args[0][0]
    assert notification.notification == "Jane Doe | Invited bob@acme.com"


@pytest.mark.asyncio
async def test_owner_role_cannot_be_invited(mock_uow, mock_identity, agency):
    result = await SendInvitationUseCase(mock_uow, mock_identity).execute(
        agency.id, "bob@acme.com", Role.agency_owner
    )

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"
    mock_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
async def test_existing_user_cannot_be_invited(mock_uow, mock_identity, agency, jane):
    mock_uow.agencies.get_by_id.return_value = agency
    mock_uow.users.get_by_email.return_value = jane

    result = await SendInvitationUseCase(mock_uow, mock_identity).execute(
        agency.id, jane.email, Role.agency_admin
    )

    assert result.is_err()
    assert result.error.code == "ALREADY_MEMBER"


@pytest.mark.asyncio
async def test_duplicate_invitation_is_rejected(mock_uow, mock_identity, agency):
    mock_uow.agencies.get_by_id.return_value = agency
    mock_uow.invitations.get_by_email.return_value = Invitation(
        email="bob@acme.com", agency_id=agency.id
    )

    result = await SendInvitationUseCase(mock_uow, mock_identity).execute(
        agency.id, "bob@acme.com", Role.subaccount_user
    )

    assert result.is_err()
    assert result.error.code == "INVITE_ALREADY_EXISTS"
    mock_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_agency_is_rejected(mock_uow, mock_identity):
    result = await SendInvitationUseCase(mock_uow, mock_identity).execute(
        uuid4(), "bob@acme.com", Role.subaccount_user
    )

    assert result.is_err()
    assert result.error.code == "AGENCY_NOT_FOUND"
