"""
Navigation Use Case DTOs (Data Transfer Objects)
"""

from typing import List

from pydantic import BaseModel

from src.app.use_cases.agencies.dtos import SidebarOptionInfo
from src.app.use_cases.sub_accounts.dtos import SubAccountInfo


class SidebarDetailsInfo(BaseModel):
    """The agency or sub-account the sidebar is rendered for"""

    id: str
    name: str


class SidebarResponse(BaseModel):
    """Everything the sidebar renders"""

    scope: str
    details: SidebarDetailsInfo
    sidebar_logo: str
    sidebar_options: List[SidebarOptionInfo]
    sub_accounts: List[SubAccountInfo]
