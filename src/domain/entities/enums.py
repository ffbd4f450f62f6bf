"""
Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class Role(str, Enum):
    """User role within an agency"""

    agency_owner = "AGENCY_OWNER"
    agency_admin = "AGENCY_ADMIN"
    subaccount_user = "SUBACCOUNT_USER"
    subaccount_guest = "SUBACCOUNT_GUEST"


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "PENDING"
    accepted = "ACCEPTED"


class Plan(str, Enum):
    """Agency billing plan"""

    basic = "BASIC"
    unlimited = "UNLIMITED"


class SidebarScope(str, Enum):
    """Which entity a navigation sidebar is rendered for"""

    agency = "agency"
    subaccount = "subaccount"
