from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject
from src.domain.entities import AccountStatus
from src.domain.pagination import Pagination
from src.domain.result import Result, Return
from ..access import admin_denial
from ..projects.dtos import PaginationInfo
from .dtos import UserListResponse, UserSummary


class ListUsersUseCase:
    """Paged user listing with per-user project counts (admins only)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        subject: Subject,
        pagination: Pagination,
        search: Optional[str] = None,
        status: Optional[AccountStatus] = None,
    ) -> Result[UserListResponse]:
        error = admin_denial(subject)
        if error is not None:
            return Return.err(error)

        async with self.uow:
            users, total = await self.uow.users.list(
                pagination.offset, pagination.limit, search=search, status=status
            )
            counts = await self.uow.projects.count_by_owners([user.id for user in users])

            return Return.ok(
                UserListResponse(
                    users=[UserSummary.from_user(user, counts.get(user.id, 0)) for user in users],
                    pagination=PaginationInfo(**pagination.summary(total)),
                )
            )
