"""
User Entity

Represents a regular account that owns projects.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import AccountStatus, UserRole


class User(SQLModel, table=True):
    """
    User entity - a regular (non-admin) account.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash, never in plaintext
    - New registrations start as PENDING_VERIFICATION and may act immediately
    - SUSPENDED and INACTIVE accounts are denied every operation
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)

    role: UserRole = Field(default=UserRole.user)
    status: AccountStatus = Field(default=AccountStatus.pending_verification)
    email_verified: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_status", "status"),)
