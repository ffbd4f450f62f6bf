from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import SubAccount


class ISubAccountRepository(ABC):
    """SubAccount repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, sub_account_id: UUID) -> Optional[SubAccount]:
        """Get sub-account by ID"""
        pass

    @abstractmethod
    async def get_by_agency_id(self, agency_id: UUID) -> List[SubAccount]:
        """Get all sub-accounts of an agency in store order"""
        pass

    @abstractmethod
    async def create(self, sub_account: SubAccount) -> SubAccount:
        """Create a new sub-account"""
        pass

    @abstractmethod
    async def update(self, sub_account: SubAccount) -> SubAccount:
        """Update existing sub-account"""
        pass

    @abstractmethod
    async def delete(self, sub_account: SubAccount) -> None:
        """Delete sub-account"""
        pass
