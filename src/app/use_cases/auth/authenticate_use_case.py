"""
Authenticate Use Case

Turns a bearer access token into the requesting Subject.
"""

from uuid import UUID

from src.api.utils.jwt import TokenExpiredError, TokenInvalidError, verify_access_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject
from src.domain.result import Error, Result, Return
from .accounts import load_account, subject_for


class AuthenticateUseCase:
    """
    Business Rules:
    - Token signature and expiry must be valid
    - The account must still exist
    - Account status is NOT judged here; it is carried into the Subject
      and decided by the access policy together with everything else
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, access_token: str) -> Result[Subject]:
        try:
            claims = verify_access_token(access_token)
        except TokenExpiredError:
            return Return.err(Error("TOKEN_EXPIRED", "Token expired"))
        except TokenInvalidError:
            return Return.err(Error("INVALID_TOKEN", "Invalid token"))

        async with self.uow:
            account = await load_account(self.uow, UUID(claims["user_id"]), claims["role"])
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "User no longer exists"))

            return Return.ok(subject_for(account))
