"""
SubAccount Entity

Workspace owned by exactly one agency.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class SubAccount(SQLModel, table=True):
    """
    SubAccount entity - a workspace owned by exactly one agency.

    Business Rules:
    - Deleted together with its agency (ON DELETE CASCADE)
    - First creation seeds a "Lead Cycle" pipeline, the default
      sub-account sidebar and a Permission for the agency owner
    """

    __tablename__ = "sub_accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    agency_id: UUID = Field(
        foreign_key="agencies.id", nullable=False, index=True, ondelete="CASCADE"
    )

    name: str = Field(max_length=255)
    company_email: str = Field(max_length=255)
    company_phone: str = Field(default="", max_length=50)
    sub_account_logo: str = Field(default="")

    address: str = Field(default="")
    city: str = Field(default="", max_length=255)
    zip_code: str = Field(default="", max_length=20)
    state: str = Field(default="", max_length=255)
    country: str = Field(default="", max_length=255)
    goal: int = Field(default=5)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_sub_account_created_at", "created_at"),)
