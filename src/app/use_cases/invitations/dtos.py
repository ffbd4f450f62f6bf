"""
Invitation Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Invitation


class InvitationInfo(BaseModel):
    """Invitation information in responses"""

    id: str
    email: str
    agency_id: str
    status: str
    role: str


class AcceptInvitationResponse(BaseModel):
    """
    Response for accept invitation use case

    agency_id is the agency the caller now belongs to, or None when the
    caller is unknown to the service.
    """

    agency_id: Optional[str]
    status: str


def to_invitation_info(invitation: Invitation) -> InvitationInfo:
    return InvitationInfo(
        id=str(invitation.id),
        email=invitation.email,
        agency_id=str(invitation.agency_id),
        status=invitation.status.value,
        role=invitation.role.value,
    )
