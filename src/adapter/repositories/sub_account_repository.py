from datetime import UTC, datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.sub_account_repository import ISubAccountRepository
from src.domain.entities import SubAccount


class SubAccountRepository(ISubAccountRepository):
    """SubAccount repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, sub_account_id: UUID) -> Optional[SubAccount]:
        """Get sub-account by ID"""
        stmt = select(SubAccount).where(SubAccount.id == sub_account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_agency_id(self, agency_id: UUID) -> List[SubAccount]:
        """Get all sub-accounts of an agency in store order"""
        stmt = (
            select(SubAccount)
            .where(SubAccount.agency_id == agency_id)
            .order_by(SubAccount.created_at, SubAccount.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, sub_account: SubAccount) -> SubAccount:
        """Create a new sub-account"""
        self.session.add(sub_account)
        await self.session.flush()
        await self.session.refresh(sub_account)
        return sub_account

    async def update(self, sub_account: SubAccount) -> SubAccount:
        """Update existing sub-account"""
        sub_account.updated_at = datetime.now(UTC)
        self.session.add(sub_account)
        await self.session.flush()
        await self.session.refresh(sub_account)
        return sub_account

    async def delete(self, sub_account: SubAccount) -> None:
        """Delete sub-account"""
        await self.session.delete(sub_account)
        await self.session.flush()
