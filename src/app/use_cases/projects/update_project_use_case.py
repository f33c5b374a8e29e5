"""
Update Project Use Case

Partial update of a project's editable fields.
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Action, Subject, can
from src.domain.base import utcnow
from src.domain.entities import ProjectStatus
from src.domain.result import Error, Result, Return
from ..access import denial
from .dtos import ProjectInfo, ProjectMutationResponse, UpdateProjectCommand

logger = logging.getLogger(__name__)

# Columns that cannot be cleared with an explicit null
REQUIRED_FIELDS = ("title", "tags", "visibility", "status")


class UpdateProjectUseCase:
    """
    Business Rules:
    - Unknown id -> PROJECT_NOT_FOUND
    - Owner and admins may update (can(WRITE)); everyone else -> denied
    - Only fields present in the command are applied
    - owner_id is never touched
    - UNDER_REVIEW can only be set through the admin status endpoint
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, subject: Subject, project_id: UUID, command: UpdateProjectCommand
    ) -> Result[ProjectMutationResponse]:
        changes = command.model_dump(exclude_unset=True)

        for field in REQUIRED_FIELDS:
            if field in changes and changes[field] is None:
                return Return.err(
                    Error(
                        "VALIDATION_ERROR",
                        "Validation failed",
                        details=[{"field": field, "message": "Field cannot be null"}],
                    )
                )

        if changes.get("status") == ProjectStatus.under_review:
            return Return.err(
                Error("INVALID_STATUS", "Status must be one of DRAFT, PUBLISHED, ARCHIVED")
            )

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            if not can(subject, Action.write, project):
                return Return.err(denial(subject))

            for field, value in changes.items():
                setattr(project, field, value)
            project.updated_at = utcnow()

            project = await self.uow.projects.update(project)
            info = ProjectInfo.from_entity(project)
            await self.uow.commit()

            logger.info(f"Project {info.id} updated by {subject.id}: {sorted(changes)}")

            return Return.ok(
                ProjectMutationResponse(message="Project updated successfully", project=info)
            )
