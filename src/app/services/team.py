"""
Team provisioning helpers shared by the user and invitation use cases.
"""

import logging
from typing import Optional

from src.app.services.identity_provider import AuthCaller, IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Role, User
from src.domain.errors import IdentitySyncError

logger = logging.getLogger(__name__)


async def create_team_user(uow: UnitOfWork, user: User) -> Optional[User]:
    """
    Create a user through the "add team member" path.

    Returns:
        The created User, or None for AGENCY_OWNER (owners are only
        assigned at agency creation)
    """
    if user.role == Role.agency_owner:
        return None

    return await uow.users.create(user)


async def would_duplicate_owner(
    uow: UnitOfWork, user: User, role: Optional[Role]
) -> bool:
    """
    Whether giving `user` the role would make a second owner of its agency.

    Users without an agency may take AGENCY_OWNER; the agency they later
    create is theirs alone.
    """
    if role != Role.agency_owner or user.agency_id is None:
        return False

    owner = await uow.users.get_agency_owner(user.agency_id)
    return owner is not None and owner.id != user.id


def display_name(caller: AuthCaller) -> str:
    """Name for a new user, from whichever name fields the provider sent"""
    parts = [part for part in (caller.given_name, caller.family_name) if part]
    if parts:
        return " ".join(parts)
    return caller.primary_email.split("@")[0]


async def sync_role(
    identity: IIdentityProvider, caller_id: str, role: Optional[Role]
) -> bool:
    """
    Push a role to the identity provider's metadata.

    Failures are logged and swallowed: the local record is already
    committed and is not undone.

    Returns:
        True if the provider accepted the update
    """
    try:
        await identity.set_caller_role_metadata(caller_id, role)
    except IdentitySyncError as exc:
        logger.warning("Role sync skipped: %s", exc.message)
        return False
    return True
