"""
Upsert SubAccount Use Case

Creates a sub-account with its seeded defaults, or updates it in place.
"""

from uuid import uuid4

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    DEFAULT_PIPELINE_NAME,
    Permission,
    Pipeline,
    SubAccount,
    default_sub_account_sidebar,
)

from .dtos import SubAccountCommand, UpsertSubAccountResponse, to_sub_account_info


class UpsertSubAccountUseCase:
    """
    Use case for creating or updating a sub-account, keyed by id.

    Business Rules:
    - The owning agency must have an AGENCY_OWNER
    - On first creation, in one commit:
        * a Permission granting the agency owner access
        * one "Lead Cycle" pipeline
        * the eight default sub-account sidebar options
    - An existing sub-account only has its fields updated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: SubAccountCommand
    ) -> Result[UpsertSubAccountResponse]:
        async with self.uow:
            agency_owner = await self.uow.users.get_agency_owner(command.agency_id)
            if agency_owner is None:
                return Return.err(
                    Error(
                        "AGENCY_OWNER_NOT_FOUND",
                        "The agency has no owner to grant access to",
                    )
                )

            fields = command.model_dump(exclude={"id"})
            sub_account_id = command.id or uuid4()

            sub_account = await self.uow.sub_accounts.get_by_id(sub_account_id)

            if sub_account is not None:
                for name, value in fields.items():
                    setattr(sub_account, name, value)
                sub_account = await self.uow.sub_accounts.update(sub_account)
                await self.uow.commit()

                return Return.ok(
                    UpsertSubAccountResponse(
                        sub_account=to_sub_account_info(sub_account), created=False
                    )
                )

            sub_account = await self.uow.sub_accounts.create(
                SubAccount(id=sub_account_id, **fields)
            )

            # The agency owner is always the first permission holder
            await self.uow.permissions.create(
                Permission(
                    email=agency_owner.email,
                    sub_account_id=sub_account.id,
                    access=True,
                )
            )
            await self.uow.pipelines.create(
                Pipeline(name=DEFAULT_PIPELINE_NAME, sub_account_id=sub_account.id)
            )
            await self.uow.sidebar_options.create_many(
                default_sub_account_sidebar(sub_account.id)
            )

            await self.uow.commit()

            return Return.ok(
                UpsertSubAccountResponse(
                    sub_account=to_sub_account_info(sub_account), created=True
                )
            )
