from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import NotificationInfo, to_notification_info


class GetNotificationsUseCase:
    """Lists an agency's activity log, newest first, with the acting users"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, agency_id: UUID) -> Result[List[NotificationInfo]]:
        async with self.uow:
            agency = await self.uow.agencies.get_by_id(agency_id)
            if agency is None:
                return Return.err(Error("AGENCY_NOT_FOUND", "Agency not found"))

            rows = await self.uow.notifications.get_by_agency_id(agency_id)

            return Return.ok(
                [to_notification_info(notification, user) for notification, user in rows]
            )
