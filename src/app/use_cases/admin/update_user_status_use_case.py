"""
Update User Status Use Case

Activates, deactivates or suspends a user account.
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject
from src.domain.base import utcnow
from src.domain.entities import AccountStatus
from src.domain.result import Error, Result, Return
from ..access import admin_denial
from ..auth.dtos import UserInfo
from .dtos import UserStatusResponse

logger = logging.getLogger(__name__)


class UpdateUserStatusUseCase:
    """
    Business Rules:
    - Active admins only
    - The new status takes effect on the user's next request, since every
      request reloads the account status
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, subject: Subject, user_id: UUID, status: AccountStatus
    ) -> Result[UserStatusResponse]:
        error = admin_denial(subject)
        if error is not None:
            return Return.err(error)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            old_status = user.status.value
            user.status = status
            user.updated_at = utcnow()
            user = await self.uow.users.update(user)
            info = UserInfo.from_entity(user)
            await self.uow.commit()

            logger.info(
                f"Admin {subject.id} changed status of user {user_id}: {old_status} -> {status.value}"
            )

            return Return.ok(
                UserStatusResponse(message="User status updated successfully", user=info)
            )
