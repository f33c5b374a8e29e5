"""
Create Project Use Case
"""

import logging

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Action, Subject, can
from src.domain.entities import Project, ProjectStatus
from src.domain.result import Error, Result, Return
from ..access import denial
from .dtos import CreateProjectCommand, ProjectInfo, ProjectMutationResponse

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    """
    Business Rules:
    - The requester becomes the owner
    - Blocked accounts cannot create (checked through can(WRITE) on the new project)
    - Only regular user accounts own projects
    - UNDER_REVIEW is reserved for moderation and cannot be chosen here
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, subject: Subject, command: CreateProjectCommand
    ) -> Result[ProjectMutationResponse]:
        if command.status == ProjectStatus.under_review:
            return Return.err(
                Error("INVALID_STATUS", "Status must be one of DRAFT, PUBLISHED, ARCHIVED")
            )

        project = Project(
            title=command.title,
            description=command.description,
            content=command.content,
            category=command.category,
            tags=list(command.tags),
            visibility=command.visibility,
            status=command.status,
            owner_id=subject.id,
        )

        if not can(subject, Action.write, project):
            return Return.err(denial(subject))

        async with self.uow:
            owner = await self.uow.users.get_by_id(subject.id)
            if owner is None:
                return Return.err(Error("USER_NOT_FOUND", "Projects can only be owned by users"))

            project = await self.uow.projects.create(project)
            info = ProjectInfo.from_entity(project)
            await self.uow.commit()

            logger.info(f"Project {info.id} created by user {subject.id}")

            return Return.ok(
                ProjectMutationResponse(message="Project created successfully", project=info)
            )
