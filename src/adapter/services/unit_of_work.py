from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.agency_repository import AgencyRepository
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.notification_repository import NotificationRepository
from src.adapter.repositories.permission_repository import PermissionRepository
from src.adapter.repositories.pipeline_repository import PipelineRepository
from src.adapter.repositories.sidebar_option_repository import SidebarOptionRepository
from src.adapter.repositories.sub_account_repository import SubAccountRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.agencies = AgencyRepository(self.session)
        self.sub_accounts = SubAccountRepository(self.session)
        self.users = UserRepository(self.session)
        self.permissions = PermissionRepository(self.session)
        self.pipelines = PipelineRepository(self.session)
        self.sidebar_options = SidebarOptionRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
