"""
SubAccount Use Case DTOs (Data Transfer Objects)

Command and Response classes for the sub-account domain.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.agencies.dtos import SidebarOptionInfo
from src.domain.entities import Pipeline, SubAccount


# ============================================================================
# Command DTOs
# ============================================================================


class SubAccountCommand(BaseModel):
    """Full sub-account payload for upsert"""

    id: Optional[UUID] = None
    agency_id: UUID
    name: str
    company_email: str
    company_phone: str = ""
    sub_account_logo: str = ""
    address: str = ""
    city: str = ""
    zip_code: str = ""
    state: str = ""
    country: str = ""
    goal: int = 5


# ============================================================================
# Response DTOs
# ============================================================================


class SubAccountInfo(BaseModel):
    """Sub-account information in responses"""

    id: str
    agency_id: str
    name: str
    company_email: str
    company_phone: str
    sub_account_logo: str
    address: str
    city: str
    zip_code: str
    state: str
    country: str
    goal: int


class PipelineInfo(BaseModel):
    id: str
    name: str


class UpsertSubAccountResponse(BaseModel):
    """Response for upsert sub-account use case"""

    sub_account: SubAccountInfo
    created: bool


class SubAccountDetailsResponse(BaseModel):
    """Response for get sub-account details use case"""

    sub_account: SubAccountInfo
    pipelines: List[PipelineInfo]
    sidebar_options: List[SidebarOptionInfo]


class DeleteSubAccountResponse(BaseModel):
    """Response for delete sub-account use case"""

    status: str


def to_sub_account_info(sub_account: SubAccount) -> SubAccountInfo:
    return SubAccountInfo(
        id=str(sub_account.id),
        agency_id=str(sub_account.agency_id),
        name=sub_account.name,
        company_email=sub_account.company_email,
        company_phone=sub_account.company_phone,
        sub_account_logo=sub_account.sub_account_logo,
        address=sub_account.address,
        city=sub_account.city,
        zip_code=sub_account.zip_code,
        state=sub_account.state,
        country=sub_account.country,
        goal=sub_account.goal,
    )


def to_pipeline_info(pipeline: Pipeline) -> PipelineInfo:
    return PipelineInfo(id=str(pipeline.id), name=pipeline.name)
