from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.permission_repository import IPermissionRepository
from src.domain.entities import Permission, SubAccount


class PermissionRepository(IPermissionRepository):
    """Permission repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, permission_id: UUID) -> Optional[Permission]:
        """Get permission by ID"""
        stmt = select(Permission).where(Permission.id == permission_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email_and_sub_account(
        self, email: str, sub_account_id: UUID
    ) -> Optional[Permission]:
        """Get the permission row for an (email, sub-account) pair"""
        stmt = select(Permission).where(
            Permission.email == email, Permission.sub_account_id == sub_account_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> List[Permission]:
        """Get all permissions held by an email"""
        stmt = select(Permission).where(Permission.email == email)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_with_sub_accounts_by_email(
        self, email: str
    ) -> List[Tuple[Permission, SubAccount]]:
        """Get all permissions held by an email, each with its sub-account"""
        stmt = (
            select(Permission, SubAccount)
            .join(SubAccount, SubAccount.id == Permission.sub_account_id)
            .where(Permission.email == email)
            .order_by(SubAccount.created_at, SubAccount.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, permission: Permission) -> Permission:
        """Create a new permission"""
        self.session.add(permission)
        await self.session.flush()
        await self.session.refresh(permission)
        return permission

    async def update(self, permission: Permission) -> Permission:
        """Update existing permission"""
        self.session.add(permission)
        await self.session.flush()
        await self.session.refresh(permission)
        return permission
