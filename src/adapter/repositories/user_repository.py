from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import AccountStatus, User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, user_ids: Sequence[UUID]) -> List[User]:
        if not user_ids:
            return []
        stmt = select(User).where(col(User.id).in_(list(user_ids)))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        await self.session.delete(user)
        await self.session.flush()

    async def list(
        self,
        offset: int,
        limit: int,
        search: Optional[str] = None,
        status: Optional[AccountStatus] = None,
    ) -> Tuple[List[User], int]:
        clauses = []
        if search:
            clauses.append(
                or_(
                    col(User.email).icontains(search, autoescape=True),
                    col(User.first_name).icontains(search, autoescape=True),
                    col(User.last_name).icontains(search, autoescape=True),
                )
            )
        if status is not None:
            clauses.append(User.status == status)

        stmt = (
            select(User)
            .where(*clauses)
            .order_by(User.created_at.desc(), User.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        users = list(result.all())

        count_stmt = select(func.count()).select_from(User).where(*clauses)
        total = (await self.session.exec(count_stmt)).one()
        return users, total

    async def count(self) -> int:
        result = await self.session.exec(select(func.count()).select_from(User))
        return result.one()

    async def count_by_status(self) -> Dict[str, int]:
        stmt = select(User.status, func.count()).group_by(User.status)
        result = await self.session.exec(stmt)
        return {AccountStatus(status).value: total for status, total in result.all()}

    async def count_created_since(self, since: datetime) -> int:
        stmt = select(func.count()).select_from(User).where(User.created_at >= since)
        result = await self.session.exec(stmt)
        return result.one()
