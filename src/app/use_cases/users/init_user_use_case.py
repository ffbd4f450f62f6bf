"""
Init User Use Case

Creates or refreshes the signed-in caller's user record.
"""

from libs.result import Error, Result, Return
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.team import display_name, sync_role, would_duplicate_owner
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Role, User

from .dtos import InitUserCommand, UserInfo, to_user_info


class InitUserUseCase:
    """
    Use case for upserting the caller as a user, keyed by email.

    Business Rules:
    - Existing user: the command's set fields are applied
    - An existing user cannot become AGENCY_OWNER of an agency that
      already has one
    - New user: id, email and avatar come from the identity provider,
      role defaults to SUBACCOUNT_USER
    - The resulting role is pushed to the identity provider after commit;
      a failed push is logged, not rolled back
    """

    def __init__(self, uow: UnitOfWork, identity: IIdentityProvider):
        self.uow = uow
        self.identity = identity

    async def execute(self, command: InitUserCommand) -> Result[UserInfo]:
        caller = await self.identity.get_current_caller()
        if caller is None:
            return Return.err(Error("UNAUTHENTICATED", "Not signed in"))

        async with self.uow:
            user = await self.uow.users.get_by_email(caller.primary_email)

            if user is not None:
                if await would_duplicate_owner(self.uow, user, command.role):
                    error = Error(
                        "OWNER_ALREADY_EXISTS", "The agency already has an owner"
                    )
                    return Return.err(error)
                for name, value in command.model_dump(exclude_unset=True).items():
                    setattr(user, name, value)
                user = await self.uow.users.update(user)
            else:
                user = await self.uow.users.create(
                    User(
                        id=caller.id,
                        avatar_url=caller.avatar_url or "",
                        email=caller.primary_email,
                        name=display_name(caller),
                        role=command.role or Role.subaccount_user,
                    )
                )

            await self.uow.commit()

            await sync_role(self.identity, caller.id, user.role)

            return Return.ok(to_user_info(user))
