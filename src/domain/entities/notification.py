"""
Notification Entity

Immutable activity-log entry.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Notification(SQLModel, table=True):
    """
    Notification entity - immutable activity-log entry.

    Business Rules:
    - Never updated
    - Message is "<user name> | <description>"
    - Always references an agency, even when logged from a sub-account
    - sub_account_id set only for sub-account scoped actions; it is
      cleared, not cascaded, when the sub-account is deleted
    """

    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    notification: str

    user_id: str = Field(
        foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE"
    )
    agency_id: UUID = Field(
        foreign_key="agencies.id", nullable=False, index=True, ondelete="CASCADE"
    )
    sub_account_id: Optional[UUID] = Field(
        default=None, foreign_key="sub_accounts.id", index=True, ondelete="SET NULL"
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_notification_agency_created_at", "agency_id", "created_at"),
    )
