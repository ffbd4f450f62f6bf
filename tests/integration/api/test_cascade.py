import json

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import (
    Notification,
    Permission,
    Pipeline,
    SidebarOption,
    SubAccount,
    User,
)


@pytest.mark.asyncio
async def test_delete_agency_removes_everything_it_owns(
    client: AsyncClient, agency, owner_headers, create_sub_account, db_session
):
    sub_account = await create_sub_account(agency["id"], "Acme")
    await client.post(
        "/notifications",
        json={"description": "Updated funnel", "sub_account_id": sub_account["id"]},
        headers=owner_headers,
    )

    response = await client.delete(f"/agencies/{agency['id']}")
    assert response.status_code == 200
    assert response.json() == {"status": "deleted"}

    for entity in (SubAccount, User, Permission, Pipeline, SidebarOption, Notification):
        rows = (await db_session.exec(select(entity))).all()
        assert rows == [], entity.__name__

    response = await client.get("/me", headers=owner_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_unknown_agency(client: AsyncClient):
    response = await client.delete("/agencies/00000000-0000-0000-0000-000000000000")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_user_clears_identity_role(
    client: AsyncClient, agency, identity_provider
):
    response = await client.post(
        f"/agencies/{agency['id']}/team",
        json={"id": "user_bob", "name": "Bob Smith", "email": "bob@acme.com"},
    )
    assert response.status_code == 200

    response = await client.delete("/users/user_bob")

    assert response.status_code == 200
    assert response.json() == {"status": "deleted", "role_synced": True}
    request = identity_provider.requests[-1]
    assert request.url.path == "/users/user_bob/metadata"
    assert json.loads(request.content) == {"private_metadata": {"role": None}}
