"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.api.utils.jwt import TokenPair
from src.domain.entities import AdminUser, User


# ============================================================================
# Commands
# ============================================================================


class RegisterCommand(BaseModel):
    """Validated registration intent"""

    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User account as returned to clients (never includes the password hash)"""

    id: str
    email: str
    first_name: Optional[str]
    last_name: Optional[str]
    role: str
    status: str
    email_verified: bool
    created_at: datetime
    last_login_at: Optional[datetime]

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role.value,
            status=user.status.value,
            email_verified=user.email_verified,
            created_at=user.created_at,
            last_login_at=user.last_login_at,
        )


class AdminInfo(BaseModel):
    """Admin account as returned to clients"""

    id: str
    email: str
    name: str
    role: str
    status: str
    department: Optional[str]

    @classmethod
    def from_entity(cls, admin: AdminUser) -> "AdminInfo":
        return cls(
            id=str(admin.id),
            email=admin.email,
            name=admin.name,
            role=admin.role.value,
            status=admin.status.value,
            department=admin.department,
        )


class TokenInfo(BaseModel):
    access_token: str
    refresh_token: str

    @classmethod
    def from_pair(cls, pair: TokenPair) -> "TokenInfo":
        return cls(access_token=pair.access_token, refresh_token=pair.refresh_token)


class AuthResponse(BaseModel):
    """Response for register and login"""

    message: str
    user: UserInfo
    tokens: TokenInfo


class AdminAuthResponse(BaseModel):
    """Response for admin login"""

    message: str
    admin: AdminInfo
    tokens: TokenInfo


class RefreshTokenResponse(BaseModel):
    tokens: TokenInfo


class ProfileResponse(BaseModel):
    user: UserInfo


class AdminAccessResponse(BaseModel):
    message: str
    admin: AdminInfo


class MessageResponse(BaseModel):
    message: str
