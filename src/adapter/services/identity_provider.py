"""
HTTP Identity Provider

Reads the caller from verified token claims and writes role metadata
through the provider's admin API.
"""

from typing import Optional

import httpx

from src.app.services.identity_provider import AuthCaller, IIdentityProvider
from src.domain.entities import Role
from src.domain.errors import IdentitySyncError


class HttpIdentityProvider(IIdentityProvider):
    """
    Identity provider backed by bearer-token claims and an HTTP admin API.

    Claims used: sub, email, given_name, family_name, picture.
    """

    def __init__(
        self,
        claims: Optional[dict],
        client: httpx.AsyncClient,
        api_key: str = "",
    ):
        self.claims = claims
        self.client = client
        self.api_key = api_key

    async def get_current_caller(self) -> Optional[AuthCaller]:
        if not self.claims or not self.claims.get("sub") or not self.claims.get("email"):
            return None

        return AuthCaller(
            id=self.claims["sub"],
            primary_email=self.claims["email"],
            given_name=self.claims.get("given_name"),
            family_name=self.claims.get("family_name"),
            avatar_url=self.claims.get("picture"),
        )

    async def set_caller_role_metadata(
        self, caller_id: str, role: Optional[Role]
    ) -> None:
        payload = {"private_metadata": {"role": role.value if role else None}}
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}

        try:
            response = await self.client.patch(
                f"/users/{caller_id}/metadata", json=payload, headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise IdentitySyncError(caller_id, str(exc)) from exc
