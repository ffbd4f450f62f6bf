from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Invitation]:
        """Get invitation by email, whatever its status"""
        pass

    @abstractmethod
    async def get_pending_by_email(self, email: str) -> Optional[Invitation]:
        """Get pending invitation by email"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def delete_by_email(self, email: str) -> int:
        """Delete the invitation for an email, returns deleted row count"""
        pass
