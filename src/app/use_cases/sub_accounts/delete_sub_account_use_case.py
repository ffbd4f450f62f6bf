"""
Delete SubAccount Use Case

Logs the deletion, then removes the sub-account.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.activity_logger import ActivityLogger
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteSubAccountResponse


class DeleteSubAccountUseCase:
    """
    Use case for deleting a sub-account.

    Business Rules:
    - "Deleted a subaccount | <name>" is logged against the sub-account
      before it is deleted, in its own commit
    - The store clears the log's sub-account reference on delete
      (ON DELETE SET NULL); the notification stays with the agency
    """

    def __init__(self, uow: UnitOfWork, identity: IIdentityProvider):
        self.uow = uow
        self.activity = ActivityLogger(uow, identity)

    async def execute(self, sub_account_id: UUID) -> Result[DeleteSubAccountResponse]:
        async with self.uow:
            sub_account = await self.uow.sub_accounts.get_by_id(sub_account_id)
            if sub_account is None:
                return Return.err(
                    Error("SUB_ACCOUNT_NOT_FOUND", "Sub-account not found")
                )

            await self.activity.log(
                f"Deleted a subaccount | {sub_account.name}",
                sub_account_id=sub_account_id,
            )

            await self.uow.sub_accounts.delete(sub_account)
            await self.uow.commit()

            return Return.ok(DeleteSubAccountResponse(status="deleted"))
