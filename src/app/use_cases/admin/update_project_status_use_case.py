"""
Update Project Status Use Case

Moderation entry point; the only place UNDER_REVIEW can be set.
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Action, Subject, can
from src.domain.base import utcnow
from src.domain.entities import ProjectStatus
from src.domain.result import Error, Result, Return
from ..access import admin_denial, denial
from ..projects.dtos import ProjectInfo
from .dtos import ProjectStatusResponse

logger = logging.getLogger(__name__)


class UpdateProjectStatusUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, subject: Subject, project_id: UUID, status: ProjectStatus
    ) -> Result[ProjectStatusResponse]:
        error = admin_denial(subject)
        if error is not None:
            return Return.err(error)

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            if not can(subject, Action.write, project):
                return Return.err(denial(subject))

            old_status = project.status.value
            project.status = status
            project.updated_at = utcnow()
            project = await self.uow.projects.update(project)
            info = ProjectInfo.from_entity(project)
            await self.uow.commit()

            logger.info(
                f"Admin {subject.id} moved project {project_id}: {old_status} -> {status.value}"
            )

            return Return.ok(
                ProjectStatusResponse(message="Project status updated successfully", project=info)
            )
