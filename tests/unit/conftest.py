import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.identity_provider import AuthCaller

REPOSITORY_METHODS = {
    "agencies": ["get_by_id", "get_details", "create", "update", "delete"],
    "sub_accounts": ["get_by_id", "get_by_agency_id", "create", "update", "delete"],
    "users": [
        "get_by_email",
        "get_by_id",
        "get_first_by_sub_account",
        "get_agency_owner",
        "get_by_agency_id",
        "create",
        "update",
        "delete",
    ],
    "permissions": [
        "get_by_id",
        "get_by_email_and_sub_account",
        "get_by_email",
        "get_with_sub_accounts_by_email",
        "create",
        "update",
    ],
    "pipelines": ["get_by_sub_account_id", "create"],
    "sidebar_options": ["get_by_agency_id", "get_by_sub_account_id", "create_many"],
    "notifications": ["create", "get_by_agency_id"],
    "invitations": ["get_by_email", "get_pending_by_email", "create", "delete_by_email"],
}


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories; lookups find nothing by default"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for repository_name, methods in REPOSITORY_METHODS.items():
        repository = MagicMock()
        for method in methods:
            if method.startswith("get_"):
                setattr(repository, method, AsyncMock(return_value=None))
            else:
                # Writes hand back what they were given
                setattr(repository, method, AsyncMock(side_effect=lambda entity: entity))
        setattr(uow, repository_name, repository)

    return uow


@pytest.fixture
def caller():
    return AuthCaller(
        id="user_jane",
        primary_email="jane@acme.com",
        given_name="Jane",
        family_name="Doe",
        avatar_url="https://cdn.example.com/jane.png",
    )


@pytest.fixture
def mock_identity(caller):
    """Identity provider with a signed-in caller and a working role sync"""
    identity = MagicMock()
    identity.get_current_caller = AsyncMock(return_value=caller)
    identity.set_caller_role_metadata = AsyncMock()
    return identity


@pytest.fixture
def anonymous_identity():
    identity = MagicMock()
    identity.get_current_caller = AsyncMock(return_value=None)
    identity.set_caller_role_metadata = AsyncMock()
    return identity
