"""
Create Admin Use Case

Seeds a SUPER_ADMIN into the admin credential store.
"""

import logging

from src.api.utils.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccountStatus, AdminRole, AdminUser
from src.domain.result import Result, Return
from ..auth.dtos import AdminInfo
from .dtos import CreateAdminCommand, CreateAdminResponse

logger = logging.getLogger(__name__)


class CreateAdminUseCase:
    """
    Business Rules:
    - Idempotent: an existing admin with the same email is returned untouched
    - New admins are ACTIVE SUPER_ADMINs
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateAdminCommand) -> Result[CreateAdminResponse]:
        async with self.uow:
            existing = await self.uow.admins.get_by_email(command.email)
            if existing is not None:
                logger.info(f"Admin {command.email} already exists, nothing to do")
                return Return.ok(
                    CreateAdminResponse(created=False, admin=AdminInfo.from_entity(existing))
                )

            admin = AdminUser(
                email=command.email,
                password_hash=hash_password(command.password),
                name=command.name,
                role=AdminRole.super_admin,
                status=AccountStatus.active,
                department=command.department,
            )
            admin = await self.uow.admins.create(admin)
            info = AdminInfo.from_entity(admin)
            await self.uow.commit()

            logger.info(f"Created super admin {info.email}")

            return Return.ok(CreateAdminResponse(created=True, admin=info))
