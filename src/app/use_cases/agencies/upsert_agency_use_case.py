"""
Upsert Agency Use Case

Creates an agency (seeding its navigation) or updates it in place.
"""

from uuid import uuid4

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Agency, default_agency_sidebar

from .dtos import (
    AgencyCommand,
    UpsertAgencyResponse,
    to_agency_info,
    to_sidebar_option_info,
)


class UpsertAgencyUseCase:
    """
    Use case for creating or updating an agency, keyed by id.

    Business Rules:
    - An existing agency is updated with the command's fields
    - A new agency seeds the six default agency sidebar options
    - A new agency is bound to the user whose email is the company email;
      that user must already exist
    - A user who already belongs to an agency cannot be bound to a new one
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: AgencyCommand) -> Result[UpsertAgencyResponse]:
        async with self.uow:
            fields = command.model_dump(exclude={"id"})
            agency_id = command.id or uuid4()

            agency = await self.uow.agencies.get_by_id(agency_id)

            if agency is not None:
                for name, value in fields.items():
                    setattr(agency, name, value)
                agency = await self.uow.agencies.update(agency)
                options = await self.uow.sidebar_options.get_by_agency_id(agency.id)
                await self.uow.commit()

                return Return.ok(
                    UpsertAgencyResponse(
                        agency=to_agency_info(agency),
                        created=False,
                        sidebar_options=[to_sidebar_option_info(o) for o in options],
                    )
                )

            owner = await self.uow.users.get_by_email(command.company_email)
            if owner is None:
                return Return.err(
                    Error(
                        "OWNER_NOT_FOUND",
                        "No user is registered with the agency's company email",
                    )
                )
            if owner.agency_id is not None:
                return Return.err(
                    Error(
                        "OWNER_HAS_AGENCY",
                        "The company email's user already belongs to an agency",
                    )
                )

            agency = await self.uow.agencies.create(Agency(id=agency_id, **fields))
            options = await self.uow.sidebar_options.create_many(
                default_agency_sidebar(agency.id)
            )

            owner.agency_id = agency.id
            await self.uow.users.update(owner)

            await self.uow.commit()

            return Return.ok(
                UpsertAgencyResponse(
                    agency=to_agency_info(agency),
                    created=True,
                    sidebar_options=[to_sidebar_option_info(o) for o in options],
                )
            )
