import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401  registers the tables on SQLModel.metadata
from src.adapter.services.engine import create_engine
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import generate_jwt
from src.depends import get_identity_client, get_unit_of_work


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path}/test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def identity_provider():
    """
    Stand-in for the identity provider's admin API.

    Records every request; set ``status_code`` to make it fail.
    """

    class FakeIdentityProvider:
        def __init__(self):
            self.requests = []
            self.status_code = 200

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(self.status_code, json={})

    return FakeIdentityProvider()


@pytest_asyncio.fixture
async def client(engine, identity_provider):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)
    Session = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    async def override_get_unit_of_work():
        async with Session() as session:
            yield SqlAlchemyUnitOfWork(session)

    async def override_get_identity_client():
        async with AsyncClient(
            transport=httpx.MockTransport(identity_provider.handler),
            base_url="http://identity.test",
        ) as identity_client:
            yield identity_client

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_identity_client] = override_get_identity_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    """Build bearer headers the way the identity provider would sign them"""

    def build(subject, email, given_name=None, family_name=None):
        token = generate_jwt(
            subject, email, given_name=given_name, family_name=family_name
        )
        return {"Authorization": f"Bearer {token}"}

    return build


@pytest.fixture
def owner_headers(auth_headers):
    return auth_headers("user_jane", "jane@acme.com", "Jane", "Doe")


@pytest_asyncio.fixture
async def agency(client, owner_headers):
    """Jane Doe owns a fresh agency"""
    response = await client.post(
        "/users/init", json={"role": "AGENCY_OWNER"}, headers=owner_headers
    )
    assert response.status_code == 200

    response = await client.put(
        "/agencies",
        json={
            "name": "Jane's Agency",
            "company_email": "jane@acme.com",
            "agency_logo": "/logos/agency.png",
        },
    )
    assert response.status_code == 200
    return response.json()["agency"]


@pytest.fixture
def create_sub_account(client):
    async def create(agency_id, name, **fields):
        response = await client.put(
            "/subaccounts",
            json={
                "agency_id": agency_id,
                "name": name,
                "company_email": f"{''.join(name.lower().split())}@acme.com",
                **fields,
            },
        )
        assert response.status_code == 200
        return response.json()["sub_account"]

    return create
