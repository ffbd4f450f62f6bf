"""
User Management Use Cases

All user- and permission-related business logic.
"""

from .change_user_permissions_use_case import ChangeUserPermissionsUseCase
from .create_team_user_use_case import CreateTeamUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import (
    AuthUserDetailsResponse,
    ChangePermissionCommand,
    CreateTeamUserResponse,
    DeleteUserResponse,
    InitUserCommand,
    PermissionInfo,
    SubAccountPermissionInfo,
    TeamMemberInfo,
    TeamUserCommand,
    UpdateUserCommand,
    UserInfo,
)
from .get_auth_user_details_use_case import GetAuthUserDetailsUseCase
from .get_user_permissions_use_case import GetUserPermissionsUseCase
from .init_user_use_case import InitUserUseCase
from .list_team_members_use_case import ListTeamMembersUseCase
from .update_user_use_case import UpdateUserUseCase

__all__ = [
    "GetAuthUserDetailsUseCase",
    "InitUserUseCase",
    "CreateTeamUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "ListTeamMembersUseCase",
    "GetUserPermissionsUseCase",
    "ChangeUserPermissionsUseCase",
    "AuthUserDetailsResponse",
    "ChangePermissionCommand",
    "CreateTeamUserResponse",
    "DeleteUserResponse",
    "InitUserCommand",
    "PermissionInfo",
    "SubAccountPermissionInfo",
    "TeamMemberInfo",
    "TeamUserCommand",
    "UpdateUserCommand",
    "UserInfo",
]
