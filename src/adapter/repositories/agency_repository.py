from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.agency_repository import IAgencyRepository
from src.domain.details import AgencyDetails, SubAccountDetails
from src.domain.entities import Agency, SidebarOption, SubAccount


class AgencyRepository(IAgencyRepository):
    """Agency repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, agency_id: UUID) -> Optional[Agency]:
        """Get agency by ID"""
        stmt = select(Agency).where(Agency.id == agency_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_details(self, agency_id: UUID) -> Optional[AgencyDetails]:
        """Get agency with its sidebar options and sub-accounts"""
        agency = await self.get_by_id(agency_id)
        if agency is None:
            return None

        stmt = (
            select(SidebarOption)
            .where(SidebarOption.agency_id == agency_id)
            .order_by(SidebarOption.position, SidebarOption.created_at)
        )
        result = await self.session.exec(stmt)
        agency_options = list(result.all())

        stmt = (
            select(SubAccount)
            .where(SubAccount.agency_id == agency_id)
            .order_by(SubAccount.created_at, SubAccount.id)
        )
        result = await self.session.exec(stmt)
        sub_accounts = list(result.all())

        # One query for every sub-account's options, grouped in memory
        options_by_sub_account = {sub_account.id: [] for sub_account in sub_accounts}
        if sub_accounts:
            stmt = (
                select(SidebarOption)
                .where(SidebarOption.sub_account_id.in_(list(options_by_sub_account)))
                .order_by(SidebarOption.position, SidebarOption.created_at)
            )
            result = await self.session.exec(stmt)
            for option in result.all():
                options_by_sub_account[option.sub_account_id].append(option)

        return AgencyDetails(
            agency=agency,
            sidebar_options=agency_options,
            sub_accounts=[
                SubAccountDetails(
                    sub_account=sub_account,
                    sidebar_options=options_by_sub_account[sub_account.id],
                )
                for sub_account in sub_accounts
            ],
        )

    async def create(self, agency: Agency) -> Agency:
        """Create a new agency"""
        self.session.add(agency)
        await self.session.flush()
        await self.session.refresh(agency)
        return agency

    async def update(self, agency: Agency) -> Agency:
        """Update existing agency"""
        agency.updated_at = datetime.now(UTC)
        self.session.add(agency)
        await self.session.flush()
        await self.session.refresh(agency)
        return agency

    async def delete(self, agency: Agency) -> None:
        """Delete agency (sub-accounts cascade)"""
        await self.session.delete(agency)
        await self.session.flush()
