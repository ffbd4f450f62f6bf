from abc import ABC, abstractmethod
from typing import List, Tuple
from uuid import UUID

from src.domain.entities import Notification, User


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create a new notification (immutable)"""
        pass

    @abstractmethod
    async def get_by_agency_id(self, agency_id: UUID) -> List[Tuple[Notification, User]]:
        """Get agency notifications with their acting user, newest first"""
        pass
