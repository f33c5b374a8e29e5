"""
Login Use Case

Handles user authentication and returns a JWT pair.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.api.utils.jwt import issue_tokens
from src.api.utils.passwords import check_dummy_password, check_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import BLOCKED_STATUSES
from src.domain.base import utcnow
from src.domain.result import Error, Result, Return
from .dtos import AuthResponse, TokenInfo, UserInfo

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password fail identically (INVALID_CREDENTIALS)
    - SUSPENDED or INACTIVE users are refused (ACCOUNT_INACTIVE)
    - last_login_at is recorded best-effort; failing to record it does not fail the login
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse containing user and tokens, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                check_dummy_password(password)
                logger.warning("Login failed: unknown email")
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid credentials"))

            if not check_password(password, user.password_hash):
                logger.warning(f"Login failed: wrong password for user {user.id}")
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid credentials"))

            if user.status.value in BLOCKED_STATUSES:
                return Return.err(
                    Error("ACCOUNT_INACTIVE", "Account is suspended or inactive")
                )

            user.last_login_at = utcnow()
            user_info = UserInfo.from_entity(user)
            tokens = issue_tokens(user.id, user.role.value)

            try:
                await self.uow.users.update(user)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.warning(f"Could not record last login for user {user_info.id}: {exc}")
                await self.uow.rollback()

            logger.info(f"User logged in: {user_info.id}")

            return Return.ok(
                AuthResponse(
                    message="Login successful",
                    user=user_info,
                    tokens=TokenInfo.from_pair(tokens),
                )
            )
