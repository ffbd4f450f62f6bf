from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Role


class AuthCaller(BaseModel):
    """Authenticated caller as reported by the identity provider"""

    id: str
    primary_email: str
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    avatar_url: Optional[str] = None


class IIdentityProvider(ABC):
    """Identity provider interface - application layer"""

    @abstractmethod
    async def get_current_caller(self) -> Optional[AuthCaller]:
        """Get the authenticated caller of the current request, if any"""
        pass

    @abstractmethod
    async def set_caller_role_metadata(
        self, caller_id: str, role: Optional[Role]
    ) -> None:
        """
        Store the caller's role in the provider's private metadata.

        Raises:
            IdentitySyncError: the provider rejected or failed the update
        """
        pass
