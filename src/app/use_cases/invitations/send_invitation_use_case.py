"""
Send Invitation Use Case

Creates a pending invitation for someone to join an agency.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.activity_logger import ActivityLogger
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Invitation, InvitationStatus, Role

from .dtos import InvitationInfo, to_invitation_info


class SendInvitationUseCase:
    """
    Use case for inviting a person to an agency.

    Business Rules:
    - AGENCY_OWNER is never granted by invitation
    - Emails that already belong to a user cannot be invited
    - One invitation per email
    - "Invited <email>" is logged against the agency after commit
    """

    def __init__(self, uow: UnitOfWork, identity: IIdentityProvider):
        self.uow = uow
        self.activity = ActivityLogger(uow, identity)

    async def execute(
        self, agency_id: UUID, email: str, role: Role
    ) -> Result[InvitationInfo]:
        if role == Role.agency_owner:
            return Return.err(
                Error("INVALID_ROLE", "The agency owner cannot be invited")
            )

        async with self.uow:
            agency = await self.uow.agencies.get_by_id(agency_id)
            if agency is None:
                return Return.err(Error("AGENCY_NOT_FOUND", "Agency not found"))

            existing_user = await self.uow.users.get_by_email(email)
            if existing_user is not None:
                return Return.err(
                    Error("ALREADY_MEMBER", "A user with this email already exists")
                )

            existing_invitation = await self.uow.invitations.get_by_email(email)
            if existing_invitation is not None:
                return Return.err(
                    Error(
                        "INVITE_ALREADY_EXISTS",
                        "An invitation already exists for this email",
                    )
                )

            invitation = await self.uow.invitations.create(
                Invitation(
                    email=email,
                    agency_id=agency_id,
                    role=role,
                    status=InvitationStatus.pending,
                )
            )
            await self.uow.commit()

            await self.activity.log(f"Invited {email}", agency_id=agency_id)

            return Return.ok(to_invitation_info(invitation))
