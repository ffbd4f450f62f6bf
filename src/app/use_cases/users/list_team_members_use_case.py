from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import TeamMemberInfo, to_sub_account_permission_info, to_user_info


class ListTeamMembersUseCase:
    """Lists an agency's users with the sub-accounts they hold permissions on"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, agency_id: UUID) -> Result[List[TeamMemberInfo]]:
        async with self.uow:
            agency = await self.uow.agencies.get_by_id(agency_id)
            if agency is None:
                return Return.err(Error("AGENCY_NOT_FOUND", "Agency not found"))

            members = []
            for user in await self.uow.users.get_by_agency_id(agency_id):
                rows = await self.uow.permissions.get_with_sub_accounts_by_email(
                    user.email
                )
                members.append(
                    TeamMemberInfo(
                        user=to_user_info(user),
                        permissions=[
                            to_sub_account_permission_info(permission, sub_account)
                            for permission, sub_account in rows
                        ],
                    )
                )

            return Return.ok(members)
