"""
Admin Login Use Case

Same flow as user login, against the admin credential store.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.api.utils.jwt import issue_tokens
from src.api.utils.passwords import check_dummy_password, check_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AccountStatus
from src.domain.result import Error, Result, Return
from .dtos import AdminAuthResponse, AdminInfo, TokenInfo

logger = logging.getLogger(__name__)


class AdminLoginUseCase:
    """
    Business Rules:
    - Only accounts in the admin store can log in here
    - Admin must be ACTIVE (any other status is refused)
    - Tokens carry the admin role (ADMIN or SUPER_ADMIN)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AdminAuthResponse]:
        async with self.uow:
            admin = await self.uow.admins.get_by_email(email)

            if admin is None:
                check_dummy_password(password)
                logger.warning("Admin login failed: unknown email")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid admin credentials")
                )

            if not check_password(password, admin.password_hash):
                logger.warning(f"Admin login failed: wrong password for admin {admin.id}")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid admin credentials")
                )

            if admin.status != AccountStatus.active:
                return Return.err(
                    Error("ACCOUNT_INACTIVE", "Admin account is not active")
                )

            admin.last_login_at = utcnow()
            admin_info = AdminInfo.from_entity(admin)
            tokens = issue_tokens(admin.id, admin.role.value)

            try:
                await self.uow.admins.update(admin)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.warning(f"Could not record last login for admin {admin_info.id}: {exc}")
                await self.uow.rollback()

            logger.info(f"Admin logged in: {admin_info.id}")

            return Return.ok(
                AdminAuthResponse(
                    message="Admin login successful",
                    admin=admin_info,
                    tokens=TokenInfo.from_pair(tokens),
                )
            )
