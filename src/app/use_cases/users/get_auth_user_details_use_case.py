"""
Get Auth User Details Use Case

Loads the signed-in user with everything the navigation needs.
"""

from libs.result import Error, Result, Return
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_details import load_user_details

from .dtos import (
    AuthUserDetailsResponse,
    to_agency_navigation_info,
    to_permission_info,
    to_user_info,
)


class GetAuthUserDetailsUseCase:
    """
    Use case for loading the current caller's user record.

    Business Rules:
    - The caller is matched to a user by email
    - Includes the user's permissions, agency, agency sidebar options,
      sub-accounts and their sidebar options
    """

    def __init__(self, uow: UnitOfWork, identity: IIdentityProvider):
        self.uow = uow
        self.identity = identity

    async def execute(self) -> Result[AuthUserDetailsResponse]:
        caller = await self.identity.get_current_caller()
        if caller is None:
            return Return.err(Error("UNAUTHENTICATED", "Not signed in"))

        async with self.uow:
            details = await load_user_details(self.uow, caller.primary_email)
            if details is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(
                AuthUserDetailsResponse(
                    user=to_user_info(details.user),
                    permissions=[to_permission_info(p) for p in details.permissions],
                    agency=(
                        to_agency_navigation_info(details.agency)
                        if details.agency
                        else None
                    ),
                )
            )
