"""
Accept Invitation Use Case

Turns the caller's pending invitation into a user of the inviting agency.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.activity_logger import ActivityLogger
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.team import create_team_user, display_name, sync_role
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User

from .dtos import AcceptInvitationResponse

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting the caller's invitation.

    The steps are separate writes, not one transaction, so each is safe
    to run again after a partial failure:

    1. Pending invitation for the caller's email?
       - no: return the agency of the caller's existing user, or None
    2. User with that email already exists (earlier partial run)?
       - yes: reuse it, nothing new is logged
       - no: create it with the invitation's agency and role and log
         "Joined"; if creation yields no user (AGENCY_OWNER) stop and
         return None
    3. Push the role to the identity provider (failure logged only)
    4. Delete the invitation by email
    """

    def __init__(self, uow: UnitOfWork, identity: IIdentityProvider):
        self.uow = uow
        self.identity = identity
        self.activity = ActivityLogger(uow, identity)

    async def execute(self) -> Result[AcceptInvitationResponse]:
        caller = await self.identity.get_current_caller()
        if caller is None:
            return Return.err(Error("UNAUTHENTICATED", "Not signed in"))

        async with self.uow:
            invitation = await self.uow.invitations.get_pending_by_email(
                caller.primary_email
            )

            if invitation is None:
                user = await self.uow.users.get_by_email(caller.primary_email)
                if user is None:
                    return Return.ok(
                        AcceptInvitationResponse(agency_id=None, status="unknown")
                    )
                return Return.ok(
                    AcceptInvitationResponse(
                        agency_id=str(user.agency_id) if user.agency_id else None,
                        status="existing_user",
                    )
                )

            user = await self.uow.users.get_by_email(invitation.email)

            if user is None:
                user = await create_team_user(
                    self.uow,
                    User(
                        id=caller.id,
                        email=invitation.email,
                        name=display_name(caller),
                        avatar_url=caller.avatar_url or "",
                        role=invitation.role,
                        agency_id=invitation.agency_id,
                    ),
                )
                if user is None:
                    logger.warning(
                        "Invitation %s was not provisioned (role %s)",
                        invitation.id,
                        invitation.role.value,
                    )
                    return Return.ok(
                        AcceptInvitationResponse(agency_id=None, status="not_provisioned")
                    )

                await self.uow.commit()
                await self.activity.log("Joined", agency_id=invitation.agency_id)

            await sync_role(self.identity, user.id, user.role)

            await self.uow.invitations.delete_by_email(user.email)
            await self.uow.commit()

            return Return.ok(
                AcceptInvitationResponse(
                    agency_id=str(user.agency_id) if user.agency_id else None,
                    status="accepted",
                )
            )
