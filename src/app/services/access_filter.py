"""
Access Filter

Decides which sub-accounts, navigation entries and logo a user sees.
Pure functions over already-loaded aggregates; nothing here is cached.
"""

from typing import List, Optional, Union
from uuid import UUID

from src.domain.details import AgencyDetails, SubAccountDetails, UserDetails
from src.domain.entities import SidebarOption, SubAccount

DEFAULT_SIDEBAR_LOGO = "/assets/default-logo.svg"


def visible_sub_accounts(details: UserDetails) -> List[SubAccount]:
    """
    Sub-accounts of the user's agency the user holds a granted permission on.

    A sub-account is visible iff a Permission exists with the user's email,
    the sub-account's id and access=True. Agency order is preserved.
    """
    if details.agency is None:
        return []

    granted = {
        permission.sub_account_id
        for permission in details.permissions
        if permission.access and permission.email == details.user.email
    }
    return [
        sub_account_details.sub_account
        for sub_account_details in details.agency.sub_accounts
        if sub_account_details.sub_account.id in granted
    ]


def sidebar_options(
    details: Union[AgencyDetails, SubAccountDetails],
) -> List[SidebarOption]:
    """The entity's own sidebar options (agency and sub-account sets never merge)"""
    return list(details.sidebar_options)


def resolve_sidebar_logo(
    agency_details: AgencyDetails,
    sub_account_id: Optional[UUID] = None,
    default_logo: str = DEFAULT_SIDEBAR_LOGO,
) -> str:
    """
    Logo shown at the top of the sidebar.

    White-labeled agencies always show the agency logo. Otherwise a
    sub-account scope shows the sub-account's own logo when it has one and
    falls back to the agency logo, then the default.
    """
    agency = agency_details.agency
    sidebar_logo = agency.agency_logo or default_logo

    if not agency.white_label and sub_account_id is not None:
        sub_account_details = agency_details.find_sub_account(sub_account_id)
        sub_account_logo = (
            sub_account_details.sub_account.sub_account_logo
            if sub_account_details
            else None
        )
        sidebar_logo = sub_account_logo or sidebar_logo

    return sidebar_logo
