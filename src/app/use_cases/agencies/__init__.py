"""
Agency Management Use Cases

All agency-related business logic.
"""

from .delete_agency_use_case import DeleteAgencyUseCase
from .dtos import (
    AgencyCommand,
    AgencyDetailsUpdate,
    AgencyInfo,
    DeleteAgencyResponse,
    SidebarOptionInfo,
    UpsertAgencyResponse,
)
from .update_agency_details_use_case import UpdateAgencyDetailsUseCase
from .upsert_agency_use_case import UpsertAgencyUseCase

__all__ = [
    "UpsertAgencyUseCase",
    "UpdateAgencyDetailsUseCase",
    "DeleteAgencyUseCase",
    "AgencyCommand",
    "AgencyDetailsUpdate",
    "AgencyInfo",
    "DeleteAgencyResponse",
    "SidebarOptionInfo",
    "UpsertAgencyResponse",
]
