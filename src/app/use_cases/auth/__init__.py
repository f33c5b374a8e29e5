"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .admin_login_use_case import AdminLoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .authenticate_use_case import AuthenticateUseCase
from .get_profile_use_case import GetProfileUseCase
from .get_admin_access_use_case import GetAdminAccessUseCase
from .dtos import (
    RegisterCommand,
    UserInfo,
    AdminInfo,
    TokenInfo,
    AuthResponse,
    AdminAuthResponse,
    RefreshTokenResponse,
    ProfileResponse,
    AdminAccessResponse,
    MessageResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "AdminLoginUseCase",
    "RefreshTokenUseCase",
    "AuthenticateUseCase",
    "GetProfileUseCase",
    "GetAdminAccessUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AuthResponse",
    "AdminAuthResponse",
    "RefreshTokenResponse",
    "ProfileResponse",
    "AdminAccessResponse",
    "MessageResponse",
    # DTOs - Nested Models
    "UserInfo",
    "AdminInfo",
    "TokenInfo",
]
