"""
Permission Entity

Grants a user (by email) access to one sub-account.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, Index, SQLModel


class Permission(SQLModel, table=True):
    """
    Permission entity - access grant for one (email, sub-account) pair.

    Business Rules:
    - Keyed by email, not user id, so access can be granted before the
      user account exists (invitations precede accounts)
    - (email, sub_account_id) must be unique
    - Revoking sets access=False; the row is kept
    """

    __tablename__ = "permissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    email: str = Field(max_length=255, nullable=False, index=True)
    sub_account_id: UUID = Field(
        foreign_key="sub_accounts.id", nullable=False, index=True, ondelete="CASCADE"
    )

    access: bool = Field(default=False)

    __table_args__ = (
        Index("idx_permission_email_sub_account", "email", "sub_account_id", unique=True),
    )
