from src.app.repositories.project_repository import ProjectFilters
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject, visibility_scope
from src.domain.pagination import Pagination
from src.domain.result import Result, Return
from ..access import admin_denial
from ..projects.dtos import PaginationInfo
from ..projects.owners import with_owners
from .dtos import AdminProjectListResponse


class ListAllProjectsUseCase:
    """Every project regardless of visibility, with owner email (admins only)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, subject: Subject, filters: ProjectFilters, pagination: Pagination
    ) -> Result[AdminProjectListResponse]:
        error = admin_denial(subject)
        if error is not None:
            return Return.err(error)

        async with self.uow:
            projects, total = await self.uow.projects.list(
                visibility_scope(subject), filters, pagination.offset, pagination.limit
            )
            items = await with_owners(self.uow, projects, include_email=True)

            return Return.ok(
                AdminProjectListResponse(
                    projects=items,
                    pagination=PaginationInfo(**pagination.summary(total)),
                )
            )
