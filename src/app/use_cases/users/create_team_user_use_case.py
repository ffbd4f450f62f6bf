from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.team import create_team_user
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User

from .dtos import CreateTeamUserResponse, TeamUserCommand, to_user_info


class CreateTeamUserUseCase:
    """
    Adds a member to an agency's team.

    Business Rules:
    - AGENCY_OWNER cannot be created here; the request is a no-op
    - The email must not belong to an existing user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, agency_id: UUID, command: TeamUserCommand
    ) -> Result[CreateTeamUserResponse]:
        async with self.uow:
            agency = await self.uow.agencies.get_by_id(agency_id)
            if agency is None:
                return Return.err(Error("AGENCY_NOT_FOUND", "Agency not found"))

            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user is not None:
                return Return.err(
                    Error("USER_ALREADY_EXISTS", "A user with this email already exists")
                )

            user = await create_team_user(
                self.uow, User(agency_id=agency_id, **command.model_dump())
            )
            if user is None:
                return Return.ok(CreateTeamUserResponse(status="skipped", user=None))

            await self.uow.commit()

            return Return.ok(
                CreateTeamUserResponse(status="created", user=to_user_info(user))
            )
