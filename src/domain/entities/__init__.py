"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    InvitationStatus,
    Plan,
    Role,
    SidebarScope,
)

# Export all entities
from .agency import Agency
from .sub_account import SubAccount
from .user import User
from .permission import Permission
from .pipeline import DEFAULT_PIPELINE_NAME, Pipeline
from .sidebar_option import (
    SidebarOption,
    default_agency_sidebar,
    default_sub_account_sidebar,
)
from .notification import Notification
from .invitation import Invitation

__all__ = [
    # Enums
    "InvitationStatus",
    "Plan",
    "Role",
    "SidebarScope",
    # Entities
    "Agency",
    "SubAccount",
    "User",
    "Permission",
    "Pipeline",
    "SidebarOption",
    "Notification",
    "Invitation",
    # Seeding
    "DEFAULT_PIPELINE_NAME",
    "default_agency_sidebar",
    "default_sub_account_sidebar",
]
