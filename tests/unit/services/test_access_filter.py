from uuid import uuid4

import pytest

from src.app.services.access_filter import (
    DEFAULT_SIDEBAR_LOGO,
    resolve_sidebar_logo,
    sidebar_options,
    visible_sub_accounts,
)
from src.domain.details import AgencyDetails, SubAccountDetails, UserDetails
from src.domain.entities import (
    Agency,
    Permission,
    Role,
    SubAccount,
    User,
    default_agency_sidebar,
    default_sub_account_sidebar,
)


def make_agency(agency_logo="/logos/agency.png", white_label=True):
    return Agency(
        id=uuid4(),
        name="Agency",
        company_email="owner@agency.com",
        agency_logo=agency_logo,
        white_label=white_label,
    )


def make_sub_account(agency, name, sub_account_logo=""):
    return SubAccount(
        id=uuid4(),
        agency_id=agency.id,
        name=name,
        company_email=f"{name.lower()}@agency.com",
        sub_account_logo=sub_account_logo,
    )


def make_agency_details(agency, *sub_accounts):
    return AgencyDetails(
        agency=agency,
        sidebar_options=default_agency_sidebar(agency.id),
        sub_accounts=[
            SubAccountDetails(
                sub_account=sub_account,
                sidebar_options=default_sub_account_sidebar(sub_account.id),
            )
            for sub_account in sub_accounts
        ],
    )


@pytest.fixture
def agency():
    return make_agency()


@pytest.fixture
def user(agency):
    return User(
        id="user_bob",
        name="Bob",
        email="bob@agency.com",
        role=Role.subaccount_user,
        agency_id=agency.id,
    )


def test_visible_sub_accounts_only_granted(agency, user):
    """Only sub-accounts with access=True permissions for the user's email"""
    alpha = make_sub_account(agency, "Alpha")
    beta = make_sub_account(agency, "Beta")
    gamma = make_sub_account(agency, "Gamma")
    details = UserDetails(
        user=user,
        permissions=[
            Permission(email=user.email, sub_account_id=gamma.id, access=True),
            Permission(email=user.email, sub_account_id=beta.id, access=False),
            Permission(email=user.email, sub_account_id=alpha.id, access=True),
        ],
        agency=make_agency_details(agency, alpha, beta, gamma),
    )

    visible = visible_sub_accounts(details)

    # Agency order, not permission order
    assert [s.name for s in visible] == ["Alpha", "Gamma"]


def test_visible_sub_accounts_ignores_other_emails(agency, user):
    alpha = make_sub_account(agency, "Alpha")
    details = UserDetails(
        user=user,
        permissions=[
            Permission(email="someone@agency.com", sub_account_id=alpha.id, access=True)
        ],
        agency=make_agency_details(agency, alpha),
    )

    assert visible_sub_accounts(details) == []


def test_visible_sub_accounts_without_permissions_or_agency(agency, user):
    alpha = make_sub_account(agency, "Alpha")

    assert visible_sub_accounts(
        UserDetails(user=user, agency=make_agency_details(agency, alpha))
    ) == []
    assert visible_sub_accounts(UserDetails(user=user)) == []


def test_sidebar_options_are_the_scoped_entity_own(agency):
    alpha = make_sub_account(agency, "Alpha")
    agency_details = make_agency_details(agency, alpha)

    agency_options = sidebar_options(agency_details)
    sub_account_options = sidebar_options(agency_details.sub_accounts[0])

    assert [o.name for o in agency_options] == [
        "Dashboard",
        "Launchpad",
        "Billing",
        "Settings",
        "Sub Accounts",
        "Team",
    ]
    assert len(sub_account_options) == 8
    assert all(o.sub_account_id == alpha.id for o in sub_account_options)


def test_logo_white_label_always_agency_logo():
    agency = make_agency(white_label=True)
    alpha = make_sub_account(agency, "Alpha", sub_account_logo="/logos/alpha.png")
    details = make_agency_details(agency, alpha)

    assert resolve_sidebar_logo(details) == "/logos/agency.png"
    assert resolve_sidebar_logo(details, alpha.id) == "/logos/agency.png"


def test_logo_not_white_label_uses_sub_account_logo():
    agency = make_agency(white_label=False)
    alpha = make_sub_account(agency, "Alpha", sub_account_logo="/logos/alpha.png")
    details = make_agency_details(agency, alpha)

    assert resolve_sidebar_logo(details, alpha.id) == "/logos/alpha.png"
    assert resolve_sidebar_logo(details) == "/logos/agency.png"


def test_logo_not_white_label_falls_back_to_agency_logo():
    agency = make_agency(white_label=False)
    alpha = make_sub_account(agency, "Alpha", sub_account_logo="")
    details = make_agency_details(agency, alpha)

    assert resolve_sidebar_logo(details, alpha.id) == "/logos/agency.png"


def test_logo_default_when_agency_has_none():
    agency = make_agency(agency_logo="")
    details = make_agency_details(agency)

    assert resolve_sidebar_logo(details) == DEFAULT_SIDEBAR_LOGO
    assert resolve_sidebar_logo(details, default_logo="/x.svg") == "/x.svg"


def test_logo_sub_account_scope_default_when_neither_has_logo():
    agency = make_agency(agency_logo="", white_label=False)
    alpha = make_sub_account(agency, "Alpha", sub_account_logo="")
    details = make_agency_details(agency, alpha)

    assert resolve_sidebar_logo(details, alpha.id) == DEFAULT_SIDEBAR_LOGO
    assert resolve_sidebar_logo(details, alpha.id, default_logo="/x.svg") == "/x.svg"
