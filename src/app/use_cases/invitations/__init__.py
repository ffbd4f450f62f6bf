"""
Invitation Use Cases

Inviting people to an agency and onboarding them.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .dtos import AcceptInvitationResponse, InvitationInfo
from .send_invitation_use_case import SendInvitationUseCase

__all__ = [
    "SendInvitationUseCase",
    "AcceptInvitationUseCase",
    "AcceptInvitationResponse",
    "InvitationInfo",
]
