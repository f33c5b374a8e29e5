from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticateUseCase
from src.domain import entities  # noqa: F401  registers tables on SQLModel.metadata
from src.domain.access_policy import Subject
from src.domain.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Missing header resolves to None; the dependencies below turn it into TOKEN_MISSING
security = HTTPBearer(auto_error=False)


async def init_db() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_subject(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Subject:
    """
    Dependency resolving the bearer token into the requesting Subject.

    Only authenticates: the token must be valid and the account must exist.
    Account status travels in the Subject and is judged by the access policy.

    Raises:
        ClientError: 401 if the token is missing, invalid or expired,
            or the account no longer exists
    """
    if credentials is None:
        raise ClientError(
            Error("TOKEN_MISSING", "Access token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = await AuthenticateUseCase(uow).execute(credentials.credentials)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


async def get_optional_subject(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Optional[Subject]:
    """Like get_current_subject, but a missing or unusable token means anonymous"""
    if credentials is None:
        return None

    result = await AuthenticateUseCase(uow).execute(credentials.credentials)
    if result.is_err():
        return None
    return result.value
