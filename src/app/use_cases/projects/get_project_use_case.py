from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Action, Subject, can
from src.domain.result import Error, Result, Return
from ..access import denial
from .dtos import ProjectResponse
from .owners import with_owners


class GetProjectUseCase:
    """
    Read a single project.

    Business Rules:
    - Unknown id -> PROJECT_NOT_FOUND
    - Readable when can(subject, READ, project); pass subject=None to
      evaluate the read as an anonymous visitor
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, subject: Optional[Subject], project_id: UUID) -> Result[ProjectResponse]:
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            if not can(subject, Action.read, project):
                return Return.err(denial(subject))

            [info] = await with_owners(self.uow, [project])
            return Return.ok(ProjectResponse(project=info))
