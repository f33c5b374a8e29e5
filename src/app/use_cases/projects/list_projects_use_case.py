"""
List Projects Use Case

Paged project listing restricted to what the requester may read.
"""

from typing import Optional

from src.app.repositories.project_repository import ProjectFilters
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject, is_active, visibility_scope
from src.domain.pagination import Pagination
from src.domain.result import Result, Return
from ..access import denial
from .dtos import PaginationInfo, ProjectListResponse
from .owners import with_owners


class ListProjectsUseCase:
    """
    Business Rules:
    - Anonymous requesters see PUBLIC + PUBLISHED projects only
    - Users additionally see their own projects; admins see everything
    - Explicit filters narrow the visible set, never widen it
    - Blocked accounts are refused outright
    - Newest first; a page past the end is simply empty
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        subject: Optional[Subject],
        filters: ProjectFilters,
        pagination: Pagination,
    ) -> Result[ProjectListResponse]:
        if subject is not None and not is_active(subject):
            return Return.err(denial(subject))

        async with self.uow:
            projects, total = await self.uow.projects.list(
                visibility_scope(subject), filters, pagination.offset, pagination.limit
            )
            items = await with_owners(self.uow, projects)

            return Return.ok(
                ProjectListResponse(
                    projects=items,
                    pagination=PaginationInfo(**pagination.summary(total)),
                )
            )
