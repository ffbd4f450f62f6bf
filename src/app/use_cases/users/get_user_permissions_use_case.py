from typing import List

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import SubAccountPermissionInfo, to_sub_account_permission_info


class GetUserPermissionsUseCase:
    """Lists a user's permissions, each with its sub-account"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[List[SubAccountPermissionInfo]]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            rows = await self.uow.permissions.get_with_sub_accounts_by_email(user.email)

            return Return.ok(
                [
                    to_sub_account_permission_info(permission, sub_account)
                    for permission, sub_account in rows
                ]
            )
