from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.details import AgencyDetails
from src.domain.entities import Agency


class IAgencyRepository(ABC):
    """Agency repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, agency_id: UUID) -> Optional[Agency]:
        """Get agency by ID"""
        pass

    @abstractmethod
    async def get_details(self, agency_id: UUID) -> Optional[AgencyDetails]:
        """Get agency with its sidebar options and sub-accounts"""
        pass

    @abstractmethod
    async def create(self, agency: Agency) -> Agency:
        """Create a new agency"""
        pass

    @abstractmethod
    async def update(self, agency: Agency) -> Agency:
        """Update existing agency"""
        pass

    @abstractmethod
    async def delete(self, agency: Agency) -> None:
        """Delete agency (sub-accounts cascade)"""
        pass
