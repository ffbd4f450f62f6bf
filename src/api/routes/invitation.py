from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    InvitationInfo,
    SendInvitationUseCase,
)
from src.domain.entities import Role
from src.depends import get_identity_provider, get_unit_of_work

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class SendInvitationRequest(BaseModel):
    """
    Send invitation HTTP request payload

    Validates incoming request for inviting someone to an agency.
    """

    agency_id: UUID = Field(..., description="Inviting agency")
    email: EmailStr = Field(..., description="Email address to invite")
    role: Role = Field(Role.subaccount_user, description="Role granted on acceptance")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InvitationInfo)
async def send_invitation(
    request: SendInvitationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    identity: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Invite someone to an agency

    Raises:
        - 400 Bad Request: INVALID_ROLE (AGENCY_OWNER)
        - 404 Not Found: AGENCY_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER, INVITE_ALREADY_EXISTS
        - 500 Internal Server Error: Server error
    """
    use_case = SendInvitationUseCase(uow, identity)
    result = await use_case.execute(request.agency_id, request.email, request.role)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_ROLE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "AGENCY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in ("ALREADY_MEMBER", "INVITE_ALREADY_EXISTS"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.post(
    "/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    uow: UnitOfWork = Depends(get_unit_of_work),
    identity: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Accept the signed-in caller's invitation

    Safe to call again: once the invitation is consumed the caller's
    existing agency is returned. agency_id is null for unknown callers.

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 500 Internal Server Error: Server error
    """
    use_case = AcceptInvitationUseCase(uow, identity)
    result = await use_case.execute()

    if result.is_err():
        error = result.error
        if error.code == "UNAUTHENTICATED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value
