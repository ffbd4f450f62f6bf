from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.activity import (
    LogActivityCommand,
    LogActivityResponse,
    LogActivityUseCase,
)
from src.depends import get_identity_provider, get_unit_of_work

router = APIRouter(prefix="/notifications", tags=["Activity"])


@router.post("", status_code=status.HTTP_200_OK, response_model=LogActivityResponse)
async def log_activity(
    request: LogActivityCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    identity: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Record an activity-log notification

    Anonymous requests are attributed to the first user of the
    sub-account's agency. When no user can be found the log is skipped
    (status "skipped"), never failed.

    Raises:
        - 400 Bad Request: MISSING_SCOPE (no agency_id and no sub_account_id),
          SCOPE_MISMATCH (agency_id does not own sub_account_id)
        - 500 Internal Server Error: Server error
    """
    use_case = LogActivityUseCase(uow, identity)
    result = await use_case.execute(request)

    if result.is_err():
        error = result.error
        if error.code in ("MISSING_SCOPE", "SCOPE_MISMATCH"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
