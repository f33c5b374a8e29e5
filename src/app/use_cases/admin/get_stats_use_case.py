"""
Get Platform Stats Use Case

Aggregated counters for the admin dashboard.
"""

from datetime import timedelta

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject
from src.domain.base import utcnow
from src.domain.result import Result, Return
from ..access import admin_denial
from .dtos import AdminStats, ProjectStats, StatsResponse, UserStats

RECENT_SIGNUP_DAYS = 7


class GetStatsUseCase:
    """
    Business Rules:
    - Active admins only
    - recent_signups counts users created in the last 7 days
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, subject: Subject) -> Result[StatsResponse]:
        error = admin_denial(subject)
        if error is not None:
            return Return.err(error)

        async with self.uow:
            since = utcnow() - timedelta(days=RECENT_SIGNUP_DAYS)
            return Return.ok(
                StatsResponse(
                    users=UserStats(
                        total=await self.uow.users.count(),
                        by_status=await self.uow.users.count_by_status(),
                        recent_signups=await self.uow.users.count_created_since(since),
                    ),
                    projects=ProjectStats(
                        total=await self.uow.projects.count(),
                        by_status=await self.uow.projects.count_by_status(),
                    ),
                    admins=AdminStats(total=await self.uow.admins.count()),
                )
            )
