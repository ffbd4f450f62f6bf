from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    AuthUserDetailsResponse,
    ChangePermissionCommand,
    ChangeUserPermissionsUseCase,
    CreateTeamUserResponse,
    CreateTeamUserUseCase,
    DeleteUserResponse,
    DeleteUserUseCase,
    GetAuthUserDetailsUseCase,
    GetUserPermissionsUseCase,
    InitUserCommand,
    InitUserUseCase,
    ListTeamMembersUseCase,
    PermissionInfo,
    SubAccountPermissionInfo,
    TeamMemberInfo,
    TeamUserCommand,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserInfo,
)
from src.domain.entities import Role
from src.depends import get_identity_provider, get_unit_of_work

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=AuthUserDetailsResponse)
async def get_me(
    uow: UnitOfWork = Depends(get_unit_of_work),
    identity: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Load the signed-in user with permissions, agency and navigation

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 404 Not Found: USER_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = GetAuthUserDetailsUseCase(uow, identity)
    result = await use_case.execute()

    if result.is_err():
        error = result.error
        if error.code == "UNAUTHENTICATED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post("/users/init", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def init_user(
    request: InitUserCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    identity: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Create or refresh the signed-in caller's user record

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 409 Conflict: OWNER_ALREADY_EXISTS
        - 500 Internal Server Error: Server error
    """
    use_case = InitUserUseCase(uow, identity)
    result = await use_case.execute(request)

    if result.is_err():
        error = result.error
        if error.code == "UNAUTHENTICATED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "OWNER_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class UpdateUserRequest(BaseModel):
    """Update user HTTP request payload; only the fields sent are applied"""

    email: EmailStr = Field(..., description="Email of the user to update")
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    avatar_url: Optional[str] = None
    role: Optional[Role] = None


@router.patch("/users", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def update_user(
    request: UpdateUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    identity: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Update a user (by email) and sync their role to the identity provider

    Raises:
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: OWNER_ALREADY_EXISTS
        - 500 Internal Server Error: Server error
    """
    command = UpdateUserCommand(**request.model_dump(exclude_unset=True))

    use_case = UpdateUserUseCase(uow, identity)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "OWNER_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.delete(
    "/users/{user_id}", status_code=status.HTTP_200_OK, response_model=DeleteUserResponse
)
async def delete_user(
    user_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    identity: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Clear the user's identity-provider role and delete the user

    Raises:
        - 404 Not Found: USER_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = DeleteUserUseCase(uow, identity)
    result = await use_case.execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/users/{user_id}/permissions",
    status_code=status.HTTP_200_OK,
    response_model=List[SubAccountPermissionInfo],
)
async def get_user_permissions(
    user_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    A user's permissions with the sub-accounts they cover

    Raises:
        - 404 Not Found: USER_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = GetUserPermissionsUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ChangePermissionRequest(BaseModel):
    """Grant or revoke access to a sub-account"""

    permission_id: Optional[UUID] = Field(None, description="Existing permission, if known")
    email: EmailStr
    sub_account_id: UUID
    access: bool


@router.put("/permissions", status_code=status.HTTP_200_OK, response_model=PermissionInfo)
async def change_user_permissions(
    request: ChangePermissionRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    identity: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Upsert a permission for an (email, sub-account) pair

    Raises:
        - 404 Not Found: SUB_ACCOUNT_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    command = ChangePermissionCommand(**request.model_dump())

    use_case = ChangeUserPermissionsUseCase(uow, identity)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "SUB_ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/agencies/{agency_id}/team",
    status_code=status.HTTP_200_OK,
    response_model=List[TeamMemberInfo],
)
async def list_team_members(
    agency_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Agency users with their sub-account permissions

    Raises:
        - 404 Not Found: AGENCY_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = ListTeamMembersUseCase(uow)
    result = await use_case.execute(agency_id)

    if result.is_err():
        error = result.error
        if error.code == "AGENCY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class CreateTeamUserRequest(BaseModel):
    """Add team member HTTP request payload"""

    id: str = Field(..., min_length=1, description="Identity-provider user id")
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    avatar_url: str = ""
    role: Role = Role.subaccount_user


@router.post(
    "/agencies/{agency_id}/team",
    status_code=status.HTTP_200_OK,
    response_model=CreateTeamUserResponse,
)
async def create_team_user(
    agency_id: UUID,
    request: CreateTeamUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add a team member to an agency

    Requests for the AGENCY_OWNER role are skipped (status "skipped").

    Raises:
        - 404 Not Found: AGENCY_NOT_FOUND
        - 409 Conflict: USER_ALREADY_EXISTS
        - 500 Internal Server Error: Server error
    """
    command = TeamUserCommand(**request.model_dump())

    use_case = CreateTeamUserUseCase(uow)
    result = await use_case.execute(agency_id, command)

    if result.is_err():
        error = result.error
        if error.code == "AGENCY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "USER_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
