from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.details import UserDetails


async def load_user_details(uow: UnitOfWork, email: str) -> Optional[UserDetails]:
    """
    Load a user with their permissions and, when they belong to one, their
    agency's navigation and sub-accounts.
    """
    user = await uow.users.get_by_email(email)
    if user is None:
        return None

    permissions = await uow.permissions.get_by_email(user.email)

    agency = None
    if user.agency_id is not None:
        agency = await uow.agencies.get_details(user.agency_id)

    return UserDetails(user=user, permissions=permissions, agency=agency)
