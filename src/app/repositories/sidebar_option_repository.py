from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import SidebarOption


class ISidebarOptionRepository(ABC):
    """SidebarOption repository interface - application layer"""

    @abstractmethod
    async def get_by_agency_id(self, agency_id: UUID) -> List[SidebarOption]:
        """Get the agency's own sidebar options"""
        pass

    @abstractmethod
    async def get_by_sub_account_id(self, sub_account_id: UUID) -> List[SidebarOption]:
        """Get the sub-account's own sidebar options"""
        pass

    @abstractmethod
    async def create_many(self, options: List[SidebarOption]) -> List[SidebarOption]:
        """Create sidebar options in one flush"""
        pass
