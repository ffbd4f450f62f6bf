"""
Activity Logger

Records what a user did as an agency (and optionally sub-account) scoped
notification.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.identity_provider import IIdentityProvider
from src.app.services.tenant_resolver import TenantResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Notification

logger = logging.getLogger(__name__)


class ActivityLogger:
    """
    Persists activity-log notifications.

    Business Rules:
    - Never blocks the action it describes: an unresolvable actor or
      agency skips the log with a warning
    - Supplying neither agency_id nor sub_account_id raises MissingScopeError
    - A sub-account is always logged under its own agency; a disagreeing
      agency_id raises ScopeMismatchError
    - Scope is checked before the actor, so contract errors surface even
      for anonymous calls
    - Commits its own write; call it before or after committing the
      primary mutation, never in the middle of it
    """

    def __init__(self, uow: UnitOfWork, identity: IIdentityProvider):
        self.uow = uow
        self.identity = identity
        self.resolver = TenantResolver(uow)

    async def log(
        self,
        description: str,
        agency_id: Optional[UUID] = None,
        sub_account_id: Optional[UUID] = None,
    ) -> Optional[Notification]:
        """
        Record an activity.

        Args:
            description: What happened, appended after the actor's name
            agency_id: Owning agency (optional when sub_account_id is given)
            sub_account_id: Sub-account the action was performed in

        Returns:
            The created Notification, or None when the log was skipped

        Raises:
            MissingScopeError: neither agency_id nor sub_account_id given
            ScopeMismatchError: agency_id is not the sub-account's agency
        """
        owning_agency_id = await self.resolver.resolve_owning_agency(
            agency_id, sub_account_id
        )
        if owning_agency_id is None:
            logger.warning(
                "Could not find the agency of sub-account %s for activity %r",
                sub_account_id,
                description,
            )
            return None

        caller = await self.identity.get_current_caller()
        actor = await self.resolver.resolve_acting_user(caller, sub_account_id)

        if actor is None:
            logger.warning(
                "Could not find a user for activity %r (sub_account_id=%s)",
                description,
                sub_account_id,
            )
            return None

        notification = Notification(
            notification=f"{actor.name} | {description}",
            user_id=actor.id,
            agency_id=owning_agency_id,
            sub_account_id=sub_account_id,
        )
        notification = await self.uow.notifications.create(notification)
        await self.uow.commit()

        return notification
