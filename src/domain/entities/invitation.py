"""
Invitation Entity

Single-use pending grant binding an email to a future user of an agency.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, Index, SQLModel

from .enums import InvitationStatus, Role


class Invitation(SQLModel, table=True):
    """
    Invitation entity - pending invitation to join an agency.

    Business Rules:
    - One invitation per email
    - Consumed exactly once: acceptance creates the user and deletes
      the invitation
    - Never carries the AGENCY_OWNER role
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    email: str = Field(unique=True, index=True, max_length=255)
    agency_id: UUID = Field(
        foreign_key="agencies.id", nullable=False, index=True, ondelete="CASCADE"
    )

    status: InvitationStatus = Field(default=InvitationStatus.pending)
    role: Role = Field(default=Role.subaccount_user)

    __table_args__ = (Index("idx_invitation_status", "status"),)
