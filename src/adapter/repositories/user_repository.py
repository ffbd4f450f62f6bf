from datetime import UTC, datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import Role, SubAccount, User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_first_by_sub_account(self, sub_account_id: UUID) -> Optional[User]:
        """
        Get the first user whose agency owns the sub-account.

        Several users usually qualify; the tie-break is store order
        (created_at, then id) so the pick is deterministic.
        """
        stmt = (
            select(User)
            .join(SubAccount, SubAccount.agency_id == User.agency_id)
            .where(SubAccount.id == sub_account_id)
            .order_by(User.created_at, User.id)
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_agency_owner(self, agency_id: UUID) -> Optional[User]:
        """Get the AGENCY_OWNER of an agency"""
        stmt = (
            select(User)
            .where(User.agency_id == agency_id, User.role == Role.agency_owner)
            .order_by(User.created_at, User.id)
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_agency_id(self, agency_id: UUID) -> List[User]:
        """Get all users of an agency"""
        stmt = (
            select(User)
            .where(User.agency_id == agency_id)
            .order_by(User.created_at, User.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        user.updated_at = datetime.now(UTC)
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        """Delete user"""
        await self.session.delete(user)
        await self.session.flush()
