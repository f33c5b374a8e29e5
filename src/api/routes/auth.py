from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.api.error import raise_for_error
from src.api.utils.rate_limit import ADMIN_LOGIN, LOGIN, REGISTER, RateLimit
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AdminAccessResponse,
    AdminAuthResponse,
    AdminLoginUseCase,
    AuthResponse,
    GetAdminAccessUseCase,
    GetProfileUseCase,
    LoginUseCase,
    MessageResponse,
    ProfileResponse,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
)
from src.depends import get_current_subject, get_unit_of_work
from src.domain.access_policy import Subject

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    Names are accepted as firstName/lastName or first_name/last_name.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr = Field(..., description="User email address")
    # bcrypt only looks at the first 72 bytes
    password: str = Field(..., min_length=6, max_length=72, description="Password (min 6 chars)")
    first_name: Optional[str] = Field(None, alias="firstName", min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, alias="lastName", min_length=1, max_length=100)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    dependencies=[Depends(RateLimit(REGISTER))],
)
async def register(request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Register a new user account

    Returns the created user and a token pair.

    Raises:
        - 400 Bad Request: Invalid input
        - 409 Conflict: Email already exists
        - 429 Too Many Requests: Register throttle exceeded
    """
    command = RegisterCommand(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
    )

    result = await RegisterUseCase(uow).execute(command)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=1, description="Account password")


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
    dependencies=[Depends(RateLimit(LOGIN))],
)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 401 Unauthorized: Invalid credentials (unknown email or wrong password)
        - 403 Forbidden: Account suspended or inactive
        - 429 Too Many Requests: Login throttle exceeded
    """
    result = await LoginUseCase(uow).execute(request.email, request.password)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/admin/login",
    status_code=status.HTTP_200_OK,
    response_model=AdminAuthResponse,
    dependencies=[Depends(RateLimit(ADMIN_LOGIN))],
)
async def admin_login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Admin Login

    Authenticates against the admin store only.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: Admin account not active
        - 429 Too Many Requests: Admin login throttle exceeded
    """
    result = await AdminLoginUseCase(uow).execute(request.email, request.password)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1, description="Refresh token")


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=RefreshTokenResponse)
async def refresh(request: RefreshRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Exchange a refresh token for a new token pair

    Raises:
        - 401 Unauthorized: Invalid/expired token or account gone
        - 403 Forbidden: Account suspended or inactive
    """
    result = await RefreshTokenUseCase(uow).execute(request.refresh_token)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(subject: Subject = Depends(get_current_subject)):
    """
    Logout

    Tokens are stateless; the client discards them. The access token stays
    valid until it expires.
    """
    return MessageResponse(message="Logout successful")


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_profile(
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current user's profile

    Raises:
        - 401 Unauthorized: Missing/invalid token
        - 403 Forbidden: Account suspended or inactive
        - 404 Not Found: Token does not belong to a user account
    """
    result = await GetProfileUseCase(uow).execute(subject)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/admin/access", status_code=status.HTTP_200_OK, response_model=AdminAccessResponse)
async def admin_access(
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Check that the bearer holds active admin rights"""
    result = await GetAdminAccessUseCase(uow).execute(subject)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
