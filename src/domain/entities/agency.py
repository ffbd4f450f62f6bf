"""
Agency Entity

Root tenant owning sub-accounts and agency-wide navigation.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from .enums import Plan


class Agency(SQLModel, table=True):
    """
    Agency entity - the root tenant.

    Business Rules:
    - Upserted by id; first creation seeds the default agency sidebar
    - Owns its sub-accounts exclusively (deleting an agency cascades)
    - Exactly one user holds the AGENCY_OWNER role
    - White-labeled agencies always show their own logo
    """

    __tablename__ = "agencies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    company_email: str = Field(max_length=255)
    company_phone: str = Field(default="", max_length=50)
    agency_logo: str = Field(default="")
    white_label: bool = Field(default=True)

    address: str = Field(default="")
    city: str = Field(default="", max_length=255)
    zip_code: str = Field(default="", max_length=20)
    state: str = Field(default="", max_length=255)
    country: str = Field(default="", max_length=255)
    goal: int = Field(default=5)

    plan: Optional[Plan] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
