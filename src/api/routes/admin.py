from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.query import get_pagination, get_project_filters
from src.app.repositories.project_repository import ProjectFilters
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    AdminProjectListResponse,
    AdminMessageResponse,
    DeleteUserUseCase,
    GetStatsUseCase,
    GetUserUseCase,
    ListAllProjectsUseCase,
    ListUsersUseCase,
    ModerateDeleteProjectUseCase,
    ProjectStatusResponse,
    StatsResponse,
    UpdateProjectStatusUseCase,
    UpdateUserStatusUseCase,
    UserDetailResponse,
    UserListResponse,
    UserStatusResponse,
)
from src.app.use_cases.projects import ProjectDeletedResponse
from src.depends import get_current_subject, get_unit_of_work
from src.domain.access_policy import Subject
from src.domain.entities import AccountStatus, ProjectStatus
from src.domain.pagination import Pagination

# Every use case behind this router checks can_administer itself
router = APIRouter(prefix="/admin", tags=["Admin"])


class UserStatusRequest(BaseModel):
    status: AccountStatus = Field(..., description="New account status")


class ProjectStatusRequest(BaseModel):
    status: ProjectStatus = Field(..., description="New project status")


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=StatsResponse)
async def get_stats(
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Platform statistics for the admin dashboard"""
    result = await GetStatsUseCase(uow).execute(subject)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/users", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    search: Optional[str] = Query(None, description="Substring of email, first or last name"),
    status_filter: Optional[AccountStatus] = Query(None, alias="status"),
    pagination: Pagination = Depends(get_pagination),
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListUsersUseCase(uow).execute(
        subject, pagination, search=search or None, status=status_filter
    )
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/users/{user_id}", status_code=status.HTTP_200_OK, response_model=UserDetailResponse)
async def get_user(
    user_id: UUID,
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUserUseCase(uow).execute(subject, user_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/users/{user_id}/status", status_code=status.HTTP_200_OK, response_model=UserStatusResponse
)
async def update_user_status(
    user_id: UUID,
    request: UserStatusRequest,
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change a user's account status

    SUSPENDED / INACTIVE users are refused on their very next request.
    """
    result = await UpdateUserStatusUseCase(uow).execute(subject, user_id, request.status)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/users/{user_id}", status_code=status.HTTP_200_OK, response_model=AdminMessageResponse
)
async def delete_user(
    user_id: UUID,
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a user and all of their projects"""
    result = await DeleteUserUseCase(uow).execute(subject, user_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/projects", status_code=status.HTTP_200_OK, response_model=AdminProjectListResponse)
async def list_projects(
    filters: ProjectFilters = Depends(get_project_filters),
    pagination: Pagination = Depends(get_pagination),
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListAllProjectsUseCase(uow).execute(subject, filters, pagination)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/projects/{project_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=ProjectStatusResponse,
)
async def update_project_status(
    project_id: UUID,
    request: ProjectStatusRequest,
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Moderate a project; the only way to put it UNDER_REVIEW"""
    result = await UpdateProjectStatusUseCase(uow).execute(subject, project_id, request.status)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/projects/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectDeletedResponse
)
async def delete_project(
    project_id: UUID,
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete any project

    Raises:
        - 403 Forbidden: Requester is not an active admin
        - 404 Not Found: Unknown project
    """
    result = await ModerateDeleteProjectUseCase(uow).execute(subject, project_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
