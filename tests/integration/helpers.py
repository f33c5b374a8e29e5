from typing import Dict
from uuid import UUID

from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.utils.passwords import hash_password
from src.domain.entities import AccountStatus, AdminRole, AdminUser, User


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def register(client: AsyncClient, payload: dict) -> dict:
    """Register through the API and return {"id", "access_token", "refresh_token"}"""
    response = await client.post("/auth/register", json=payload)
    assert response.status_code == 201, response.text
    data = response.json()
    return {
        "id": data["user"]["id"],
        "access_token": data["tokens"]["access_token"],
        "refresh_token": data["tokens"]["refresh_token"],
    }


async def create_project(client: AsyncClient, token: str, payload: dict) -> dict:
    response = await client.post("/projects", json=payload, headers=bearer(token))
    assert response.status_code == 201, response.text
    return response.json()["project"]


async def seed_admin(
    db_session: AsyncSession,
    email: str = "admin@florkanewfun.com",
    password: str = "admin123456",
    status: AccountStatus = AccountStatus.active,
    role: AdminRole = AdminRole.super_admin,
) -> str:
    admin = AdminUser(
        email=email,
        password_hash=hash_password(password),
        name="Default Admin",
        role=role,
        status=status,
    )
    db_session.add(admin)
    await db_session.commit()
    return str(admin.id)


async def admin_token(client: AsyncClient, db_session: AsyncSession, **kwargs) -> str:
    email = kwargs.get("email", "admin@florkanewfun.com")
    password = kwargs.get("password", "admin123456")
    await seed_admin(db_session, **kwargs)
    response = await client.post("/auth/admin/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["tokens"]["access_token"]


async def set_user_status(db_session: AsyncSession, user_id: str, status: AccountStatus) -> None:
    user = await db_session.get(User, UUID(user_id))
    user.status = status
    db_session.add(user)
    await db_session.commit()
