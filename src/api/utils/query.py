from typing import Optional

from fastapi import Query

from src.app.repositories.project_repository import ProjectFilters
from src.domain.entities import ProjectStatus, ProjectVisibility
from src.domain.pagination import Pagination


def get_pagination(
    page: Optional[int] = Query(None, description="Page number (from 1)"),
    limit: Optional[int] = Query(None, description="Page size, clamped to 1..100"),
) -> Pagination:
    return Pagination.clamped(page, limit)


def get_project_filters(
    search: Optional[str] = Query(None, description="Substring of title or description"),
    status: Optional[ProjectStatus] = Query(None),
    visibility: Optional[ProjectVisibility] = Query(None),
    category: Optional[str] = Query(None),
) -> ProjectFilters:
    # Empty strings from query forms mean "no filter"
    return ProjectFilters(
        search=search or None, status=status, visibility=visibility, category=category or None
    )
