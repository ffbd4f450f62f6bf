from typing import List, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.notification_repository import INotificationRepository
from src.domain.entities import Notification, User


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification: Notification) -> Notification:
        """Create a new notification (immutable)"""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def get_by_agency_id(self, agency_id: UUID) -> List[Tuple[Notification, User]]:
        """Get agency notifications with their acting user, newest first"""
        stmt = (
            select(Notification, User)
            .join(User, User.id == Notification.user_id)
            .where(Notification.agency_id == agency_id)
            .order_by(Notification.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())
