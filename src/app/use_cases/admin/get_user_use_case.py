from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject
from src.domain.pagination import MAX_LIMIT
from src.domain.result import Error, Result, Return
from ..access import admin_denial
from ..auth.dtos import UserInfo
from .dtos import UserDetailResponse, UserProjectSummary


class GetUserUseCase:
    """One user with a summary of their projects, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, subject: Subject, user_id: UUID) -> Result[UserDetailResponse]:
        error = admin_denial(subject)
        if error is not None:
            return Return.err(error)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            projects, _ = await self.uow.projects.list_by_owner(user.id, 0, MAX_LIMIT)
            projects.sort(key=lambda project: project.created_at, reverse=True)

            return Return.ok(
                UserDetailResponse(
                    user=UserInfo.from_entity(user),
                    projects=[UserProjectSummary.from_entity(project) for project in projects],
                )
            )
