from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.app.services.identity_provider import IIdentityProvider
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sub_accounts import (
    DeleteSubAccountResponse,
    DeleteSubAccountUseCase,
    GetSubAccountDetailsUseCase,
    SubAccountCommand,
    SubAccountDetailsResponse,
    UpsertSubAccountResponse,
    UpsertSubAccountUseCase,
)
from src.depends import get_identity_provider, get_unit_of_work

router = APIRouter(prefix="/subaccounts", tags=["SubAccount"])


class UpsertSubAccountRequest(BaseModel):
    """
    Upsert sub-account HTTP request payload

    Validates incoming request before converting to SubAccountCommand.
    """

    id: Optional[UUID] = Field(None, description="Sub-account ID (generated when omitted)")
    agency_id: UUID = Field(..., description="Owning agency")
    name: str = Field(..., min_length=1, max_length=255)
    company_email: EmailStr
    company_phone: str = ""
    sub_account_logo: str = ""
    address: str = ""
    city: str = ""
    zip_code: str = ""
    state: str = ""
    country: str = ""
    goal: int = Field(5, ge=1)


@router.put("", status_code=status.HTTP_200_OK, response_model=UpsertSubAccountResponse)
async def upsert_sub_account(
    request: UpsertSubAccountRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create or update a sub-account

    A new sub-account is seeded with a "Lead Cycle" pipeline, the default
    sub-account sidebar and a permission for the agency owner.

    Raises:
        - 404 Not Found: AGENCY_OWNER_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    command = SubAccountCommand(**request.model_dump())

    use_case = UpsertSubAccountUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "AGENCY_OWNER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/{sub_account_id}",
    status_code=status.HTTP_200_OK,
    response_model=SubAccountDetailsResponse,
)
async def get_sub_account_details(
    sub_account_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Sub-account with its pipelines and sidebar options

    Raises:
        - 404 Not Found: SUB_ACCOUNT_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = GetSubAccountDetailsUseCase(uow)
    result = await use_case.execute(sub_account_id)

    if result.is_err():
        error = result.error
        if error.code == "SUB_ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete(
    "/{sub_account_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteSubAccountResponse,
)
async def delete_sub_account(
    sub_account_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    identity: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Log the deletion, then delete the sub-account

    Raises:
        - 404 Not Found: SUB_ACCOUNT_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = DeleteSubAccountUseCase(uow, identity)
    result = await use_case.execute(sub_account_id)

    if result.is_err():
        error = result.error
        if error.code == "SUB_ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
