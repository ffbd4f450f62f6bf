"""
Loaded aggregates

Read-side views assembled by the repositories for navigation and team pages.
They hold already-fetched entities so the access filter stays free of I/O.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from src.domain.entities import Agency, Permission, SidebarOption, SubAccount, User


@dataclass
class SubAccountDetails:
    sub_account: SubAccount
    sidebar_options: List[SidebarOption] = field(default_factory=list)


@dataclass
class AgencyDetails:
    agency: Agency
    sidebar_options: List[SidebarOption] = field(default_factory=list)
    # Agency's sub-accounts in store order
    sub_accounts: List[SubAccountDetails] = field(default_factory=list)

    def find_sub_account(self, sub_account_id) -> Optional[SubAccountDetails]:
        return next(
            (
                details
                for details in self.sub_accounts
                if details.sub_account.id == sub_account_id
            ),
            None,
        )


@dataclass
class UserDetails:
    user: User
    permissions: List[Permission] = field(default_factory=list)
    agency: Optional[AgencyDetails] = None
