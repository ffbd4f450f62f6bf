from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AgencyDetailsUpdate, AgencyInfo, to_agency_info


class UpdateAgencyDetailsUseCase:
    """Applies a partial update to an existing agency"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, agency_id: UUID, update: AgencyDetailsUpdate
    ) -> Result[AgencyInfo]:
        async with self.uow:
            agency = await self.uow.agencies.get_by_id(agency_id)
            if agency is None:
                return Return.err(Error("AGENCY_NOT_FOUND", "Agency not found"))

            for name, value in update.model_dump(exclude_unset=True).items():
                setattr(agency, name, value)

            agency = await self.uow.agencies.update(agency)
            await self.uow.commit()

            return Return.ok(to_agency_info(agency))
