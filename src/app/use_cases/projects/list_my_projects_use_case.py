from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject, is_active
from src.domain.entities import ProjectStatus
from src.domain.pagination import Pagination
from src.domain.result import Result, Return
from ..access import denial
from .dtos import PaginationInfo, ProjectInfo, ProjectListResponse


class ListMyProjectsUseCase:
    """The requester's own projects, most recently updated first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        subject: Subject,
        pagination: Pagination,
        status: Optional[ProjectStatus] = None,
    ) -> Result[ProjectListResponse]:
        if not is_active(subject):
            return Return.err(denial(subject))

        async with self.uow:
            projects, total = await self.uow.projects.list_by_owner(
                subject.id, pagination.offset, pagination.limit, status=status
            )
            return Return.ok(
                ProjectListResponse(
                    projects=[ProjectInfo.from_entity(project) for project in projects],
                    pagination=PaginationInfo(**pagination.summary(total)),
                )
            )
