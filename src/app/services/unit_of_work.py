from abc import ABC, abstractmethod

from src.app.repositories.agency_repository import IAgencyRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.notification_repository import INotificationRepository
from src.app.repositories.permission_repository import IPermissionRepository
from src.app.repositories.pipeline_repository import IPipelineRepository
from src.app.repositories.sidebar_option_repository import ISidebarOptionRepository
from src.app.repositories.sub_account_repository import ISubAccountRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    agencies: IAgencyRepository
    sub_accounts: ISubAccountRepository
    users: IUserRepository
    permissions: IPermissionRepository
    pipelines: IPipelineRepository
    sidebar_options: ISidebarOptionRepository
    notifications: INotificationRepository
    invitations: IInvitationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
