"""
Refresh Token Use Case

Exchanges a refresh token for a new access/refresh pair.
"""

import logging
from uuid import UUID

from src.api.utils.jwt import (
    TokenExpiredError,
    TokenInvalidError,
    issue_tokens,
    verify_refresh_token,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import is_active
from src.domain.result import Error, Result, Return
from .accounts import load_account, subject_for
from .dtos import RefreshTokenResponse, TokenInfo

logger = logging.getLogger(__name__)


class RefreshTokenUseCase:
    """
    Business Rules:
    - Refresh token must be signed with the refresh secret and unexpired
    - The account must still exist and be allowed to act
    - Nothing is stored; the old refresh token stays valid until it expires
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        try:
            claims = verify_refresh_token(refresh_token)
        except TokenExpiredError:
            return Return.err(Error("TOKEN_EXPIRED", "Refresh token expired"))
        except TokenInvalidError:
            return Return.err(Error("INVALID_TOKEN", "Invalid refresh token"))

        async with self.uow:
            account = await load_account(self.uow, UUID(claims["user_id"]), claims["role"])
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "User no longer exists"))

            if not is_active(subject_for(account)):
                logger.warning(f"Refresh refused for inactive account {account.id}")
                return Return.err(Error("ACCOUNT_INACTIVE", "User account is not active"))

            tokens = issue_tokens(account.id, account.role.value)
            return Return.ok(RefreshTokenResponse(tokens=TokenInfo.from_pair(tokens)))
