"""
Update User Use Case

Updates a user by email and keeps the identity provider's role in step.
"""

from libs.result import Error, Result, Return
from src.app.services.activity_logger import ActivityLogger
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.team import sync_role, would_duplicate_owner
from src.app.services.unit_of_work import UnitOfWork

from .dtos import UpdateUserCommand, UserInfo, to_user_info


class UpdateUserUseCase:
    """
    Use case for updating a user's profile and role.

    Business Rules:
    - Users are addressed by email
    - AGENCY_OWNER is refused while another user owns the agency
    - The stored role is pushed to the identity provider after commit
    - "Updated <name> information" is logged when the user has an agency
    """

    def __init__(self, uow: UnitOfWork, identity: IIdentityProvider):
        self.uow = uow
        self.identity = identity
        self.activity = ActivityLogger(uow, identity)

    async def execute(self, command: UpdateUserCommand) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if await would_duplicate_owner(self.uow, user, command.role):
                return Return.err(
                    Error("OWNER_ALREADY_EXISTS", "The agency already has an owner")
                )

            for name, value in command.model_dump(
                exclude={"email"}, exclude_unset=True
            ).items():
                setattr(user, name, value)

            user = await self.uow.users.update(user)
            await self.uow.commit()

            await sync_role(self.identity, user.id, user.role)

            if user.agency_id is not None:
                await self.activity.log(
                    f"Updated {user.name} information", agency_id=user.agency_id
                )

            return Return.ok(to_user_info(user))
