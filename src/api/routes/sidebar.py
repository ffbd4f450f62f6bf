from uuid import UUID

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.navigation import LoadSidebarUseCase, SidebarResponse
from src.domain.entities import SidebarScope
from src.depends import get_identity_provider, get_unit_of_work

router = APIRouter(prefix="/sidebar", tags=["Navigation"])


@router.get(
    "/{scope}/{scope_id}", status_code=status.HTTP_200_OK, response_model=SidebarResponse
)
async def load_sidebar(
    scope: SidebarScope,
    scope_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    identity: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Sidebar for the signed-in user's agency or one of its sub-accounts

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: NO_AGENCY
        - 404 Not Found: USER_NOT_FOUND, DETAILS_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = LoadSidebarUseCase(
        uow, identity, default_logo=ApplicationConfig.DEFAULT_SIDEBAR_LOGO
    )
    result = await use_case.execute(scope, scope_id)

    if result.is_err():
        error = result.error
        if error.code == "UNAUTHENTICATED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "NO_AGENCY":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code in ("USER_NOT_FOUND", "DETAILS_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
