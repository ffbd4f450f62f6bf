"""
Log Activity Use Case

Entry point for recording an activity on behalf of the presentation layer.
"""

from libs.result import Error, Result, Return
from src.app.services.activity_logger import ActivityLogger
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import MissingScopeError, ScopeMismatchError

from .dtos import LogActivityCommand, LogActivityResponse


class LogActivityUseCase:
    """
    Use case for recording an activity-log notification.

    Business Rules:
    - MISSING_SCOPE when neither agency_id nor sub_account_id is given
    - SCOPE_MISMATCH when agency_id does not own sub_account_id
    - No resolvable actor is not an error: the log is skipped
    """

    def __init__(self, uow: UnitOfWork, identity: IIdentityProvider):
        self.uow = uow
        self.activity = ActivityLogger(uow, identity)

    async def execute(self, command: LogActivityCommand) -> Result[LogActivityResponse]:
        async with self.uow:
            try:
                notification = await self.activity.log(
                    command.description,
                    agency_id=command.agency_id,
                    sub_account_id=command.sub_account_id,
                )
            except MissingScopeError as exc:
                return Return.err(Error("MISSING_SCOPE", exc.message))
            except ScopeMismatchError as exc:
                return Return.err(Error("SCOPE_MISMATCH", exc.message))

            if notification is None:
                return Return.ok(
                    LogActivityResponse(status="skipped", notification_id=None)
                )

            return Return.ok(
                LogActivityResponse(
                    status="logged", notification_id=str(notification.id)
                )
            )
