"""
Change User Permissions Use Case

Grants or revokes one user's access to one sub-account.
"""

from libs.result import Error, Result, Return
from src.app.services.activity_logger import ActivityLogger
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Permission

from .dtos import ChangePermissionCommand, PermissionInfo, to_permission_info


class ChangeUserPermissionsUseCase:
    """
    Use case for upserting a Permission.

    Business Rules:
    - Keyed by permission id when given, else by (email, sub_account_id),
      so there is never more than one row per pair
    - Revoking keeps the row with access=False
    - The email need not belong to a user yet
    - The change is logged against the sub-account after commit
    """

    def __init__(self, uow: UnitOfWork, identity: IIdentityProvider):
        self.uow = uow
        self.activity = ActivityLogger(uow, identity)

    async def execute(self, command: ChangePermissionCommand) -> Result[PermissionInfo]:
        async with self.uow:
            sub_account = await self.uow.sub_accounts.get_by_id(command.sub_account_id)
            if sub_account is None:
                return Return.err(
                    Error("SUB_ACCOUNT_NOT_FOUND", "Sub-account not found")
                )

            permission = None
            if command.permission_id is not None:
                permission = await self.uow.permissions.get_by_id(command.permission_id)
            if permission is None:
                permission = await self.uow.permissions.get_by_email_and_sub_account(
                    command.email, command.sub_account_id
                )

            if permission is not None:
                permission.access = command.access
                permission = await self.uow.permissions.update(permission)
            else:
                permission = await self.uow.permissions.create(
                    Permission(
                        email=command.email,
                        sub_account_id=command.sub_account_id,
                        access=command.access,
                    )
                )

            await self.uow.commit()

            verb = "Gave" if command.access else "Revoked"
            await self.activity.log(
                f"{verb} {command.email} access to | {sub_account.name}",
                agency_id=sub_account.agency_id,
                sub_account_id=sub_account.id,
            )

            return Return.ok(to_permission_info(permission))
