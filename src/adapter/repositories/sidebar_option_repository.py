from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.sidebar_option_repository import ISidebarOptionRepository
from src.domain.entities import SidebarOption


class SidebarOptionRepository(ISidebarOptionRepository):
    """SidebarOption repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_agency_id(self, agency_id: UUID) -> List[SidebarOption]:
        """Get the agency's own sidebar options"""
        stmt = (
            select(SidebarOption)
            .where(SidebarOption.agency_id == agency_id)
            .order_by(SidebarOption.position, SidebarOption.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_sub_account_id(self, sub_account_id: UUID) -> List[SidebarOption]:
        """Get the sub-account's own sidebar options"""
        stmt = (
            select(SidebarOption)
            .where(SidebarOption.sub_account_id == sub_account_id)
            .order_by(SidebarOption.position, SidebarOption.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create_many(self, options: List[SidebarOption]) -> List[SidebarOption]:
        """Create sidebar options in one flush"""
        self.session.add_all(options)
        await self.session.flush()
        return options
