"""
Pipeline Entity

Sales pipeline inside a sub-account.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

DEFAULT_PIPELINE_NAME = "Lead Cycle"


class Pipeline(SQLModel, table=True):
    __tablename__ = "pipelines"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    sub_account_id: UUID = Field(
        foreign_key="sub_accounts.id", nullable=False, index=True, ondelete="CASCADE"
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
