"""
Tenant Resolver

Works out who is acting and which agency an action belongs to when the
caller only supplies part of that context.
"""

from typing import Optional
from uuid import UUID

from src.app.services.identity_provider import AuthCaller
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.errors import MissingScopeError, ScopeMismatchError


class TenantResolver:
    """
    Resolves the acting user and the owning agency.

    Business Rules:
    - An authenticated caller is matched by email, exactly as stored
    - Without a caller, the first user (store order) of the agency owning
      the sub-account stands in; production callers should pass the
      acting identity explicitly instead of relying on this
    - An explicit agency id alone is trusted; the store's foreign keys
      reject unknown ids at write time
    - With a sub-account id the owning agency always comes from the
      sub-account; an explicit agency id that disagrees is a programming
      error (ScopeMismatchError)
    - With neither an agency id nor a sub-account id the call is a
      programming error (MissingScopeError)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def resolve_acting_user(
        self,
        caller: Optional[AuthCaller] = None,
        sub_account_id: Optional[UUID] = None,
    ) -> Optional[User]:
        """
        Resolve the user performing the current action.

        Returns:
            The acting User, or None when no actor is available
        """
        if caller is not None:
            return await self.uow.users.get_by_email(caller.primary_email)

        if sub_account_id is not None:
            return await self.uow.users.get_first_by_sub_account(sub_account_id)

        return None

    async def resolve_owning_agency(
        self,
        agency_id: Optional[UUID] = None,
        sub_account_id: Optional[UUID] = None,
    ) -> Optional[UUID]:
        """
        Resolve the agency an action is scoped to.

        Returns:
            The agency id, or None when the sub-account does not exist

        Raises:
            MissingScopeError: neither agency_id nor sub_account_id given
            ScopeMismatchError: agency_id is not the sub-account's agency
        """
        if agency_id is None and sub_account_id is None:
            raise MissingScopeError()

        if sub_account_id is None:
            return agency_id

        sub_account = await self.uow.sub_accounts.get_by_id(sub_account_id)
        if sub_account is None:
            return None

        if agency_id is not None and agency_id != sub_account.agency_id:
            raise ScopeMismatchError(agency_id, sub_account_id)

        return sub_account.agency_id
