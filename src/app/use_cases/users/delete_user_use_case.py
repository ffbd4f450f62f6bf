from libs.result import Error, Result, Return
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.team import sync_role
from src.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteUserResponse


class DeleteUserUseCase:
    """
    Removes a user.

    The identity provider's role is cleared first so the account loses
    its permissions outside this service even if the delete fails.
    """

    def __init__(self, uow: UnitOfWork, identity: IIdentityProvider):
        self.uow = uow
        self.identity = identity

    async def execute(self, user_id: str) -> Result[DeleteUserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            role_synced = await sync_role(self.identity, user.id, None)

            await self.uow.users.delete(user)
            await self.uow.commit()

            return Return.ok(DeleteUserResponse(status="deleted", role_synced=role_synced))
