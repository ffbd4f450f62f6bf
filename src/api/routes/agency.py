from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.activity import GetNotificationsUseCase, NotificationInfo
from src.app.use_cases.agencies import (
    AgencyCommand,
    AgencyDetailsUpdate,
    AgencyInfo,
    DeleteAgencyResponse,
    DeleteAgencyUseCase,
    UpdateAgencyDetailsUseCase,
    UpsertAgencyResponse,
    UpsertAgencyUseCase,
)
from src.domain.entities import Plan
from src.depends import get_unit_of_work

router = APIRouter(prefix="/agencies", tags=["Agency"])


class UpsertAgencyRequest(BaseModel):
    """
    Upsert agency HTTP request payload

    Validates incoming request before converting to AgencyCommand.
    """

    id: Optional[UUID] = Field(None, description="Agency ID (generated when omitted)")
    name: str = Field(..., min_length=1, max_length=255)
    company_email: EmailStr = Field(..., description="Owner's email address")
    company_phone: str = ""
    agency_logo: str = ""
    white_label: bool = True
    address: str = ""
    city: str = ""
    zip_code: str = ""
    state: str = ""
    country: str = ""
    goal: int = Field(5, ge=1)
    plan: Optional[Plan] = None


@router.put("", status_code=status.HTTP_200_OK, response_model=UpsertAgencyResponse)
async def upsert_agency(
    request: UpsertAgencyRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create or update an agency

    A new agency gets the default agency sidebar and is bound to the
    user registered with its company email.

    Raises:
        - 404 Not Found: OWNER_NOT_FOUND
        - 409 Conflict: OWNER_HAS_AGENCY
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = AgencyCommand(**request.model_dump())

    use_case = UpsertAgencyUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "OWNER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "OWNER_HAS_AGENCY":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.patch("/{agency_id}", status_code=status.HTTP_200_OK, response_model=AgencyInfo)
async def update_agency_details(
    agency_id: UUID,
    request: AgencyDetailsUpdate,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Partially update an agency

    Raises:
        - 404 Not Found: AGENCY_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = UpdateAgencyDetailsUseCase(uow)
    result = await use_case.execute(agency_id, request)

    if result.is_err():
        error = result.error
        if error.code == "AGENCY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete(
    "/{agency_id}", status_code=status.HTTP_200_OK, response_model=DeleteAgencyResponse
)
async def delete_agency(
    agency_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete an agency and everything it owns

    Raises:
        - 404 Not Found: AGENCY_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = DeleteAgencyUseCase(uow)
    result = await use_case.execute(agency_id)

    if result.is_err():
        error = result.error
        if error.code == "AGENCY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/{agency_id}/notifications",
    status_code=status.HTTP_200_OK,
    response_model=List[NotificationInfo],
)
async def get_notifications(
    agency_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Agency activity log, newest first

    Raises:
        - 404 Not Found: AGENCY_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = GetNotificationsUseCase(uow)
    result = await use_case.execute(agency_id)

    if result.is_err():
        error = result.error
        if error.code == "AGENCY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
