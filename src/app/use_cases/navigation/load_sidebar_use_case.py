"""
Load Sidebar Use Case

Builds the navigation sidebar for an agency or one of its sub-accounts.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_filter import (
    DEFAULT_SIDEBAR_LOGO,
    resolve_sidebar_logo,
    sidebar_options,
    visible_sub_accounts,
)
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_details import load_user_details
from src.app.use_cases.agencies.dtos import to_sidebar_option_info
from src.app.use_cases.sub_accounts.dtos import to_sub_account_info
from src.domain.entities import SidebarScope

from .dtos import SidebarDetailsInfo, SidebarResponse


class LoadSidebarUseCase:
    """
    Use case for loading the sidebar of the signed-in user.

    Business Rules:
    - Agency scope renders the user's own agency and nothing else
    - Sub-account scope renders that sub-account of the user's agency
    - Options are the scoped entity's own set
    - Only sub-accounts the user has a granted permission on are listed
    - Logo: white-label agency logo, else sub-account logo, else agency logo
    """

    def __init__(
        self,
        uow: UnitOfWork,
        identity: IIdentityProvider,
        default_logo: str = DEFAULT_SIDEBAR_LOGO,
    ):
        self.uow = uow
        self.identity = identity
        self.default_logo = default_logo

    async def execute(self, scope: SidebarScope, scope_id: UUID) -> Result[SidebarResponse]:
        caller = await self.identity.get_current_caller()
        if caller is None:
            return Return.err(Error("UNAUTHENTICATED", "Not signed in"))

        async with self.uow:
            user_details = await load_user_details(self.uow, caller.primary_email)
            if user_details is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            agency_details = user_details.agency
            if agency_details is None:
                return Return.err(Error("NO_AGENCY", "User does not belong to an agency"))

            if scope == SidebarScope.agency:
                if agency_details.agency.id != scope_id:
                    return Return.err(
                        Error("DETAILS_NOT_FOUND", "Agency is not the user's agency")
                    )
                details = agency_details
                details_info = SidebarDetailsInfo(
                    id=str(agency_details.agency.id), name=agency_details.agency.name
                )
                sub_account_id = None
            else:
                details = agency_details.find_sub_account(scope_id)
                if details is None:
                    return Return.err(
                        Error("DETAILS_NOT_FOUND", "Sub-account not found in agency")
                    )
                details_info = SidebarDetailsInfo(
                    id=str(details.sub_account.id), name=details.sub_account.name
                )
                sub_account_id = scope_id

            return Return.ok(
                SidebarResponse(
                    scope=scope.value,
                    details=details_info,
                    sidebar_logo=resolve_sidebar_logo(
                        agency_details, sub_account_id, default_logo=self.default_logo
                    ),
                    sidebar_options=[
                        to_sidebar_option_info(option)
                        for option in sidebar_options(details)
                    ],
                    sub_accounts=[
                        to_sub_account_info(sub_account)
                        for sub_account in visible_sub_accounts(user_details)
                    ],
                )
            )
