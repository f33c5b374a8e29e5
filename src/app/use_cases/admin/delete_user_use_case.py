import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject
from src.domain.result import Error, Result, Return
from ..access import admin_denial
from .dtos import AdminMessageResponse

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Delete a user together with every project they own.

    Projects are removed explicitly in the same transaction so the cascade
    does not depend on the database enforcing foreign keys.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, subject: Subject, user_id: UUID) -> Result[AdminMessageResponse]:
        error = admin_denial(subject)
        if error is not None:
            return Return.err(error)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            removed = await self.uow.projects.delete_by_owner(user.id)
            await self.uow.users.delete(user)
            await self.uow.commit()

            logger.info(f"Admin {subject.id} deleted user {user_id} and {removed} project(s)")

            return Return.ok(AdminMessageResponse(message="User deleted successfully"))
