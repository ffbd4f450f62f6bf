from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Permission, SubAccount


class IPermissionRepository(ABC):
    """Permission repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, permission_id: UUID) -> Optional[Permission]:
        """Get permission by ID"""
        pass

    @abstractmethod
    async def get_by_email_and_sub_account(
        self, email: str, sub_account_id: UUID
    ) -> Optional[Permission]:
        """Get the permission row for an (email, sub-account) pair"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> List[Permission]:
        """Get all permissions held by an email"""
        pass

    @abstractmethod
    async def get_with_sub_accounts_by_email(
        self, email: str
    ) -> List[Tuple[Permission, SubAccount]]:
        """Get all permissions held by an email, each with its sub-account"""
        pass

    @abstractmethod
    async def create(self, permission: Permission) -> Permission:
        """Create a new permission"""
        pass

    @abstractmethod
    async def update(self, permission: Permission) -> Permission:
        """Update existing permission"""
        pass
