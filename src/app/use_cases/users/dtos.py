"""
User Use Case DTOs (Data Transfer Objects)

Command and Response classes for the user and permission domain.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.agencies.dtos import (
    AgencyInfo,
    SidebarOptionInfo,
    to_agency_info,
    to_sidebar_option_info,
)
from src.app.use_cases.sub_accounts.dtos import SubAccountInfo, to_sub_account_info
from src.domain.details import AgencyDetails
from src.domain.entities import Permission, Role, SubAccount, User


# ============================================================================
# Command DTOs
# ============================================================================


class InitUserCommand(BaseModel):
    """Fields applied when the caller's user record already exists"""

    name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Optional[Role] = None


class TeamUserCommand(BaseModel):
    """New team member; id is the member's identity-provider subject"""

    id: str
    name: str
    email: str
    avatar_url: str = ""
    role: Role = Role.subaccount_user


class UpdateUserCommand(BaseModel):
    """Partial user update keyed by email"""

    email: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Optional[Role] = None


class ChangePermissionCommand(BaseModel):
    """Grant or revoke one user's access to one sub-account"""

    permission_id: Optional[UUID] = None
    email: str
    sub_account_id: UUID
    access: bool


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User information in responses"""

    id: str
    name: str
    email: str
    avatar_url: str
    role: str
    agency_id: Optional[str]


class PermissionInfo(BaseModel):
    id: str
    email: str
    sub_account_id: str
    access: bool


class SubAccountPermissionInfo(PermissionInfo):
    """Permission together with the name of the sub-account it covers"""

    sub_account_name: str


class SubAccountNavigationInfo(BaseModel):
    sub_account: SubAccountInfo
    sidebar_options: List[SidebarOptionInfo]


class AgencyNavigationInfo(BaseModel):
    agency: AgencyInfo
    sidebar_options: List[SidebarOptionInfo]
    sub_accounts: List[SubAccountNavigationInfo]


class AuthUserDetailsResponse(BaseModel):
    """Response for get auth user details use case"""

    user: UserInfo
    permissions: List[PermissionInfo]
    agency: Optional[AgencyNavigationInfo]


class CreateTeamUserResponse(BaseModel):
    """Response for create team user use case; user is None when skipped"""

    status: str
    user: Optional[UserInfo]


class TeamMemberInfo(BaseModel):
    user: UserInfo
    permissions: List[SubAccountPermissionInfo]


class DeleteUserResponse(BaseModel):
    """Response for delete user use case"""

    status: str
    role_synced: bool


def to_user_info(user: User) -> UserInfo:
    return UserInfo(
        id=user.id,
        name=user.name,
        email=user.email,
        avatar_url=user.avatar_url,
        role=user.role.value,
        agency_id=str(user.agency_id) if user.agency_id else None,
    )


def to_permission_info(permission: Permission) -> PermissionInfo:
    return PermissionInfo(
        id=str(permission.id),
        email=permission.email,
        sub_account_id=str(permission.sub_account_id),
        access=permission.access,
    )


def to_sub_account_permission_info(
    permission: Permission, sub_account: SubAccount
) -> SubAccountPermissionInfo:
    return SubAccountPermissionInfo(
        id=str(permission.id),
        email=permission.email,
        sub_account_id=str(permission.sub_account_id),
        access=permission.access,
        sub_account_name=sub_account.name,
    )


def to_agency_navigation_info(details: AgencyDetails) -> AgencyNavigationInfo:
    return AgencyNavigationInfo(
        agency=to_agency_info(details.agency),
        sidebar_options=[to_sidebar_option_info(o) for o in details.sidebar_options],
        sub_accounts=[
            SubAccountNavigationInfo(
                sub_account=to_sub_account_info(sub_account_details.sub_account),
                sidebar_options=[
                    to_sidebar_option_info(o)
                    for o in sub_account_details.sidebar_options
                ],
            )
            for sub_account_details in details.sub_accounts
        ],
    )
