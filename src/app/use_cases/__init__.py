"""
Use Cases

All use cases are organized into domain folders:
- agencies/: Agency management
- sub_accounts/: Sub-account management
- users/: Users, team members and permissions
- invitations/: Invitations and onboarding
- activity/: Activity log
- navigation/: Sidebar navigation

Import from subdirectories for better organization.
"""

from .activity import GetNotificationsUseCase, LogActivityUseCase
from .agencies import DeleteAgencyUseCase, UpdateAgencyDetailsUseCase, UpsertAgencyUseCase
from .invitations import AcceptInvitationUseCase, SendInvitationUseCase
from .navigation import LoadSidebarUseCase
from .sub_accounts import (
    DeleteSubAccountUseCase,
    GetSubAccountDetailsUseCase,
    UpsertSubAccountUseCase,
)
from .users import (
    ChangeUserPermissionsUseCase,
    CreateTeamUserUseCase,
    DeleteUserUseCase,
    GetAuthUserDetailsUseCase,
    GetUserPermissionsUseCase,
    InitUserUseCase,
    ListTeamMembersUseCase,
    UpdateUserUseCase,
)

__all__ = [
    # Activity
    "LogActivityUseCase",
    "GetNotificationsUseCase",
    # Agencies
    "UpsertAgencyUseCase",
    "UpdateAgencyDetailsUseCase",
    "DeleteAgencyUseCase",
    # Sub-accounts
    "UpsertSubAccountUseCase",
    "GetSubAccountDetailsUseCase",
    "DeleteSubAccountUseCase",
    # Users
    "GetAuthUserDetailsUseCase",
    "InitUserUseCase",
    "CreateTeamUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "ListTeamMembersUseCase",
    "GetUserPermissionsUseCase",
    "ChangeUserPermissionsUseCase",
    # Invitations
    "SendInvitationUseCase",
    "AcceptInvitationUseCase",
    # Navigation
    "LoadSidebarUseCase",
]
