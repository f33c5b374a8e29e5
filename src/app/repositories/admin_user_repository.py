from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import AdminUser


class IAdminUserRepository(ABC):
    """AdminUser repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[AdminUser]:
        """Get admin by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, admin_id: UUID) -> Optional[AdminUser]:
        """Get admin by ID"""
        pass

    @abstractmethod
    async def create(self, admin: AdminUser) -> AdminUser:
        """Create a new admin"""
        pass

    @abstractmethod
    async def update(self, admin: AdminUser) -> AdminUser:
        """Update existing admin"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
