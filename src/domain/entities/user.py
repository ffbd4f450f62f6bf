"""
User Entity

A person working inside one agency.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import Role


class User(SQLModel, table=True):
    """
    User entity - a person working inside one agency.

    Business Rules:
    - id is the identity provider's subject, not generated here
    - Email must be unique across all users (primary lookup key)
    - AGENCY_OWNER is assigned at agency creation, never via the team path
    - Sub-account access is granted through Permission rows keyed by email
    """

    __tablename__ = "users"

    id: str = Field(primary_key=True, max_length=255)
    name: str = Field(max_length=255)
    avatar_url: str = Field(default="")
    email: str = Field(unique=True, index=True, max_length=255)

    role: Role = Field(default=Role.subaccount_user)

    agency_id: Optional[UUID] = Field(
        default=None, foreign_key="agencies.id", index=True, ondelete="CASCADE"
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_user_agency_role", "agency_id", "role"),)
