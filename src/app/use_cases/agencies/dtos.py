"""
Agency Use Case DTOs (Data Transfer Objects)

Command and Response classes for the agency domain.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import Agency, Plan, SidebarOption


# ============================================================================
# Command DTOs
# ============================================================================


class AgencyCommand(BaseModel):
    """Full agency payload for upsert (id chosen by the caller or generated)"""

    id: Optional[UUID] = None
    name: str
    company_email: str
    company_phone: str = ""
    agency_logo: str = ""
    white_label: bool = True
    address: str = ""
    city: str = ""
    zip_code: str = ""
    state: str = ""
    country: str = ""
    goal: int = 5
    plan: Optional[Plan] = None


class AgencyDetailsUpdate(BaseModel):
    """Partial agency update; only the fields that were set are applied"""

    name: Optional[str] = None
    company_email: Optional[str] = None
    company_phone: Optional[str] = None
    agency_logo: Optional[str] = None
    white_label: Optional[bool] = None
    address: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    goal: Optional[int] = None
    plan: Optional[Plan] = None


# ============================================================================
# Response DTOs
# ============================================================================


class SidebarOptionInfo(BaseModel):
    """Navigation entry"""

    id: str
    name: str
    icon: str
    link: str


class AgencyInfo(BaseModel):
    """Agency information in responses"""

    id: str
    name: str
    company_email: str
    company_phone: str
    agency_logo: str
    white_label: bool
    address: str
    city: str
    zip_code: str
    state: str
    country: str
    goal: int
    plan: Optional[str]


class UpsertAgencyResponse(BaseModel):
    """Response for upsert agency use case"""

    agency: AgencyInfo
    created: bool
    sidebar_options: List[SidebarOptionInfo]


class DeleteAgencyResponse(BaseModel):
    """Response for delete agency use case"""

    status: str


def to_agency_info(agency: Agency) -> AgencyInfo:
    return AgencyInfo(
        id=str(agency.id),
        name=agency.name,
        company_email=agency.company_email,
        company_phone=agency.company_phone,
        agency_logo=agency.agency_logo,
        white_label=agency.white_label,
        address=agency.address,
        city=agency.city,
        zip_code=agency.zip_code,
        state=agency.state,
        country=agency.country,
        goal=agency.goal,
        plan=agency.plan.value if agency.plan else None,
    )


def to_sidebar_option_info(option: SidebarOption) -> SidebarOptionInfo:
    return SidebarOptionInfo(
        id=str(option.id), name=option.name, icon=option.icon, link=option.link
    )
