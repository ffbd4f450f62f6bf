from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_first_by_sub_account(self, sub_account_id: UUID) -> Optional[User]:
        """Get the first user (store order) whose agency owns the sub-account"""
        pass

    @abstractmethod
    async def get_agency_owner(self, agency_id: UUID) -> Optional[User]:
        """Get the AGENCY_OWNER of an agency"""
        pass

    @abstractmethod
    async def get_by_agency_id(self, agency_id: UUID) -> List[User]:
        """Get all users of an agency"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete user"""
        pass
