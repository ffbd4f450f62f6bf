from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteAgencyResponse


class DeleteAgencyUseCase:
    """
    Deletes an agency.

    Sub-accounts, their permissions, pipelines and sidebar options, the
    agency's users, invitations and notifications go with it through the
    schema's ON DELETE CASCADE rules.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, agency_id: UUID) -> Result[DeleteAgencyResponse]:
        async with self.uow:
            agency = await self.uow.agencies.get_by_id(agency_id)
            if agency is None:
                return Return.err(Error("AGENCY_NOT_FOUND", "Agency not found"))

            await self.uow.agencies.delete(agency)
            await self.uow.commit()

            return Return.ok(DeleteAgencyResponse(status="deleted"))
