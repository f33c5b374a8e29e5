from typing import Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.admin_user_repository import IAdminUserRepository
from src.domain.entities import AdminUser


class AdminUserRepository(IAdminUserRepository):
    """AdminUser repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[AdminUser]:
        """Get admin by email address"""
        stmt = select(AdminUser).where(AdminUser.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, admin_id: UUID) -> Optional[AdminUser]:
        """Get admin by ID"""
        stmt = select(AdminUser).where(AdminUser.id == admin_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, admin: AdminUser) -> AdminUser:
        """Create a new admin"""
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin

    async def update(self, admin: AdminUser) -> AdminUser:
        """Update existing admin"""
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin

    async def count(self) -> int:
        result = await self.session.exec(select(func.count()).select_from(AdminUser))
        return result.one()
