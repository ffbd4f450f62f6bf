from uuid import uuid4

import pytest

from src.app.services.tenant_resolver import TenantResolver
from src.domain.entities import Role, SubAccount, User
from src.domain.errors import MissingScopeError, ScopeMismatchError


def make_user(email="jane@acme.com", agency_id=None):
    return User(
        id="user_jane",
        name="Jane Doe",
        email=email,
        role=Role.agency_owner,
        agency_id=agency_id,
    )


@pytest.mark.asyncio
async def test_acting_user_matches_caller_by_email(mock_uow, caller):
    """An authenticated caller is looked up by primary email"""
    user = make_user()
    mock_uow.users.get_by_email.return_value = user

    actor = await TenantResolver(mock_uow).resolve_acting_user(caller, uuid4())

    assert actor is user
    mock_uow.users.get_by_email.assert_called_once_with("jane@acme.com")
    mock_uow.users.get_first_by_sub_account.assert_not_called()


@pytest.mark.asyncio
async def test_acting_user_unknown_caller_is_none(mock_uow, caller):
    """A caller without a stored user does not fall back to the sub-account"""
    actor = await TenantResolver(mock_uow).resolve_acting_user(caller, uuid4())

    assert actor is None
    mock_uow.users.get_first_by_sub_account.assert_not_called()


@pytest.mark.asyncio
async def test_acting_user_falls_back_to_sub_account_agency(mock_uow):
    """Without a caller the first user of the sub-account's agency acts"""
    sub_account_id = uuid4()
    user = make_user()
    mock_uow.users.get_first_by_sub_account.return_value = user

    actor = await TenantResolver(mock_uow).resolve_acting_user(None, sub_account_id)

    assert actor is user
    mock_uow.users.get_first_by_sub_account.assert_called_once_with(sub_account_id)


@pytest.mark.asyncio
async def test_acting_user_without_context_is_none(mock_uow):
    actor = await TenantResolver(mock_uow).resolve_acting_user()

    assert actor is None
    mock_uow.users.get_by_email.assert_not_called()
    mock_uow.users.get_first_by_sub_account.assert_not_called()


@pytest.mark.asyncio
async def test_owning_agency_explicit_id_is_trusted(mock_uow):
    """An explicit agency id alone is returned without touching the store"""
    agency_id = uuid4()

    resolved = await TenantResolver(mock_uow).resolve_owning_agency(agency_id)

    assert resolved == agency_id
    mock_uow.sub_accounts.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_owning_agency_from_sub_account(mock_uow):
    agency_id = uuid4()
    sub_account = SubAccount(
        id=uuid4(), agency_id=agency_id, name="Acme", company_email="acme@acme.com"
    )
    mock_uow.sub_accounts.get_by_id.return_value = sub_account

    resolved = await TenantResolver(mock_uow).resolve_owning_agency(
        sub_account_id=sub_account.id
    )

    assert resolved == agency_id


@pytest.mark.asyncio
async def test_owning_agency_dangling_sub_account_is_none(mock_uow):
    resolved = await TenantResolver(mock_uow).resolve_owning_agency(
        sub_account_id=uuid4()
    )

    assert resolved is None


@pytest.mark.asyncio
async def test_owning_agency_without_scope_raises(mock_uow):
    with pytest.raises(MissingScopeError) as exc_info:
        await TenantResolver(mock_uow).resolve_owning_agency()

    assert exc_info.value.message == "You must provide an agency or sub-account id"


@pytest.mark.asyncio
async def test_owning_agency_matching_explicit_id_and_sub_account(mock_uow):
    agency_id = uuid4()
    sub_account = SubAccount(
        id=uuid4(), agency_id=agency_id, name="Acme", company_email="acme@acme.com"
    )
    mock_uow.sub_accounts.get_by_id.return_value = sub_account

    resolved = await TenantResolver(mock_uow).resolve_owning_agency(
        agency_id, sub_account.id
    )

    assert resolved == agency_id


@pytest.mark.asyncio
async def test_owning_agency_rejects_agency_that_does_not_own_sub_account(mock_uow):
    """A sub-account is never scoped to another agency"""
    sub_account = SubAccount(
        id=uuid4(), agency_id=uuid4(), name="Acme", company_email="acme@acme.com"
    )
    mock_uow.sub_accounts.get_by_id.return_value = sub_account
    other_agency_id = uuid4()

    with pytest.raises(ScopeMismatchError) as exc_info:
        await TenantResolver(mock_uow).resolve_owning_agency(
            other_agency_id, sub_account.id
        )

    assert exc_info.value.agency_id == other_agency_id
    assert exc_info.value.sub_account_id == sub_account.id
