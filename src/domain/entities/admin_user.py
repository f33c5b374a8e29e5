"""
AdminUser Entity

Accounts in the separate admin credential store.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow
from .enums import AccountStatus, AdminRole


class AdminUser(SQLModel, table=True):
    """
    AdminUser entity - operators of the platform.

    Business Rules:
    - Lives apart from users; admin login never matches a user row
    - Only ACTIVE admins may log in or exercise admin rights
    """

    __tablename__ = "admin_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)
    name: str = Field(max_length=100)

    role: AdminRole = Field(default=AdminRole.admin)
    status: AccountStatus = Field(default=AccountStatus.active)
    department: Optional[str] = Field(default=None, max_length=100)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
