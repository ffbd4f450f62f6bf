from typing import Optional

import httpx
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.engine import create_engine
from src.adapter.services.identity_provider import HttpIdentityProvider
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt

engine = create_engine(ApplicationConfig.DB_URI)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[dict]:
    """
    Dependency to extract and verify the caller's JWT, if one was sent.

    Requests without a bearer token are anonymous (None); the use cases
    decide whether they need a caller.

    Raises:
        HTTPException: 401 if a token was sent but is invalid or expired
    """
    if credentials is None:
        return None

    payload = verify_jwt(credentials.credentials)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload


async def get_identity_client():
    async with httpx.AsyncClient(
        base_url=ApplicationConfig.IDENTITY_PROVIDER_URL,
        timeout=ApplicationConfig.IDENTITY_PROVIDER_TIMEOUT,
    ) as client:
        yield client


async def get_identity_provider(
    claims: Optional[dict] = Depends(get_token_claims),
    client: httpx.AsyncClient = Depends(get_identity_client),
) -> HttpIdentityProvider:
    return HttpIdentityProvider(
        claims, client, api_key=ApplicationConfig.IDENTITY_PROVIDER_API_KEY
    )
