import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Action, Subject, can
from src.domain.result import Error, Result, Return
from ..access import denial
from .dtos import ProjectDeletedResponse

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    """
    Delete a project the subject may delete (owner or admin).

    Deleting an already deleted project reports PROJECT_NOT_FOUND.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, subject: Subject, project_id: UUID) -> Result[ProjectDeletedResponse]:
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            if not can(subject, Action.delete, project):
                return Return.err(denial(subject))

            await self.uow.projects.delete(project)
            await self.uow.commit()

            logger.info(f"Project {project_id} deleted by {subject.id}")

            return Return.ok(ProjectDeletedResponse(message="Project deleted successfully"))
