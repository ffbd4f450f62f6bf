from typing import Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import Invitation, InvitationStatus


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Invitation]:
        """Get invitation by email, whatever its status"""
        stmt = select(Invitation).where(Invitation.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_pending_by_email(self, email: str) -> Optional[Invitation]:
        """Get pending invitation by email"""
        stmt = select(Invitation).where(
            Invitation.email == email,
            Invitation.status == InvitationStatus.pending,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def delete_by_email(self, email: str) -> int:
        """Delete the invitation for an email, returns deleted row count"""
        stmt = delete(Invitation).where(Invitation.email == email)
        result = await self.session.execute(stmt)
        return result.rowcount
