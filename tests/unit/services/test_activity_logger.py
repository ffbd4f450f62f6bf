from uuid import uuid4

import pytest

from src.app.services.activity_logger import ActivityLogger
from src.domain.entities import Role, SubAccount, User
from src.domain.errors import MissingScopeError, ScopeMismatchError


@pytest.fixture
def jane():
    return User(
        id="user_jane", name="Jane Doe", email="jane@acme.com", role=Role.agency_owner
    )


@pytest.mark.asyncio
async def test_log_agency_scoped_activity(mock_uow, mock_identity, jane):
    """The message is '<actor name> | <description>' and is committed"""
    # Arrange
    agency_id = uuid4()
    mock_uow.users.get_by_email.return_value = jane

    # Act
    notification = await ActivityLogger(mock_uow, mock_identity).log(
        "Invited bob@acme.com", agency_id=agency_id
    )

    # Assert
    assert notification.notification == "Jane Doe | Invited bob@acme.com"
    assert notification.user_id == "user_jane"
    assert notification.agency_id == agency_id
    assert notification.sub_account_id is None
    mock_uow.notifications.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_log_sub_account_scoped_activity_resolves_agency(
    mock_uow, mock_identity, jane
):
    agency_id = uuid4()
    sub_account = SubAccount(
        id=uuid4(), agency_id=agency_id, name="Acme", company_email="acme@acme.com"
    )
    mock_uow.users.get_by_email.return_value = jane
    mock_uow.sub_accounts.get_by_id.return_value = sub_account

    notification = await ActivityLogger(mock_uow, mock_identity).log(
        "Deleted a subaccount | Acme", sub_account_id=sub_account.id
    )

    assert notification.notification == "Jane Doe | Deleted a subaccount | Acme"
    assert notification.agency_id == agency_id
    assert notification.sub_account_id == sub_account.id


@pytest.mark.asyncio
async def test_log_anonymous_uses_first_agency_user(mock_uow, anonymous_identity, jane):
    sub_account = SubAccount(
        id=uuid4(), agency_id=uuid4(), name="Acme", company_email="acme@acme.com"
    )
    mock_uow.users.get_first_by_sub_account.return_value = jane
    mock_uow.sub_accounts.get_by_id.return_value = sub_account

    notification = await ActivityLogger(mock_uow, anonymous_identity).log(
        "Updated funnel", sub_account_id=sub_account.id
    )

    assert notification.user_id == "user_jane"
    mock_uow.users.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_log_without_actor_is_skipped(mock_uow, anonymous_identity, caplog):
    """An unresolvable actor skips the log instead of failing"""
    sub_account = SubAccount(
        id=uuid4(), agency_id=uuid4(), name="Acme", company_email="acme@acme.com"
    )
    mock_uow.sub_accounts.get_by_id.return_value = sub_account

    notification = await ActivityLogger(mock_uow, anonymous_identity).log(
        "Updated funnel", sub_account_id=sub_account.id
    )

    assert notification is None
    mock_uow.notifications.create.assert_not_called()
    mock_uow.commit.assert_not_called()
    assert "Could not find a user" in caplog.text


@pytest.mark.asyncio
async def test_log_with_dangling_sub_account_is_skipped(mock_uow, mock_identity, jane):
    mock_uow.users.get_by_email.return_value = jane

    notification = await ActivityLogger(mock_uow, mock_identity).log(
        "Updated funnel", sub_account_id=uuid4()
    )

    assert notification is None
    mock_uow.notifications.create.assert_not_called()


@pytest.mark.asyncio
async def test_log_without_scope_raises(mock_uow, anonymous_identity):
    """Missing scope is raised even when no actor could be resolved"""
    with pytest.raises(MissingScopeError):
        await ActivityLogger(mock_uow, anonymous_identity).log("Did something")

    mock_uow.notifications.create.assert_not_called()


@pytest.mark.asyncio
async def test_log_under_foreign_agency_raises(mock_uow, anonymous_identity):
    """Raised before the actor is looked up, so anonymous calls see it too"""
    sub_account = SubAccount(
        id=uuid4(), agency_id=uuid4(), name="Acme", company_email="acme@acme.com"
    )
    mock_uow.sub_accounts.get_by_id.return_value = sub_account

    with pytest.raises(ScopeMismatchError):
        await ActivityLogger(mock_uow, anonymous_identity).log(
            "Updated funnel", agency_id=uuid4(), sub_account_id=sub_account.id
        )

    mock_uow.notifications.create.assert_not_called()
    mock_uow.users.get_first_by_sub_account.assert_not_called()
