from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.agencies.dtos import to_sidebar_option_info

from .dtos import SubAccountDetailsResponse, to_pipeline_info, to_sub_account_info


class GetSubAccountDetailsUseCase:
    """Loads a sub-account with its pipelines and sidebar options"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, sub_account_id: UUID) -> Result[SubAccountDetailsResponse]:
        async with self.uow:
            sub_account = await self.uow.sub_accounts.get_by_id(sub_account_id)
            if sub_account is None:
                return Return.err(
                    Error("SUB_ACCOUNT_NOT_FOUND", "Sub-account not found")
                )

            pipelines = await self.uow.pipelines.get_by_sub_account_id(sub_account_id)
            options = await self.uow.sidebar_options.get_by_sub_account_id(
                sub_account_id
            )

            return Return.ok(
                SubAccountDetailsResponse(
                    sub_account=to_sub_account_info(sub_account),
                    pipelines=[to_pipeline_info(p) for p in pipelines],
                    sidebar_options=[to_sidebar_option_info(o) for o in options],
                )
            )
