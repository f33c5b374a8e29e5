from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.query import get_pagination, get_project_filters
from src.app.repositories.project_repository import ProjectFilters
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects import (
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListMyProjectsUseCase,
    ListProjectsUseCase,
    ProjectDeletedResponse,
    ProjectListResponse,
    ProjectMutationResponse,
    ProjectResponse,
    UpdateProjectCommand,
    UpdateProjectUseCase,
)
from src.depends import get_current_subject, get_optional_subject, get_unit_of_work
from src.domain.access_policy import Subject
from src.domain.entities import ProjectStatus, ProjectVisibility
from src.domain.pagination import Pagination

router = APIRouter(prefix="/projects", tags=["Projects"])


class CreateProjectRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    tags: List[str] = Field(default_factory=list)
    visibility: ProjectVisibility = ProjectVisibility.private
    status: ProjectStatus = ProjectStatus.draft


class UpdateProjectRequest(BaseModel):
    """Every field optional; omitted fields are left unchanged"""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    tags: Optional[List[str]] = None
    visibility: Optional[ProjectVisibility] = None
    status: Optional[ProjectStatus] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=ProjectListResponse)
async def list_projects(
    filters: ProjectFilters = Depends(get_project_filters),
    pagination: Pagination = Depends(get_pagination),
    subject: Optional[Subject] = Depends(get_optional_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List projects visible to the requester

    Anonymous: public + published. Users: also their own. Admins: all.
    """
    result = await ListProjectsUseCase(uow).execute(subject, filters, pagination)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/public", status_code=status.HTTP_200_OK, response_model=ProjectListResponse)
async def list_public_projects(
    filters: ProjectFilters = Depends(get_project_filters),
    pagination: Pagination = Depends(get_pagination),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListProjectsUseCase(uow).execute(None, filters, pagination)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/public/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse)
async def get_public_project(project_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Read a project as an anonymous visitor would"""
    result = await GetProjectUseCase(uow).execute(None, project_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/user/my-projects", status_code=status.HTTP_200_OK, response_model=ProjectListResponse
)
async def list_my_projects(
    status_filter: Optional[ProjectStatus] = Query(None, alias="status"),
    pagination: Pagination = Depends(get_pagination),
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMyProjectsUseCase(uow).execute(subject, pagination, status=status_filter)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    subject: Optional[Subject] = Depends(get_optional_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Read one project

    Raises:
        - 403 Forbidden: Not readable by the requester
        - 404 Not Found: Unknown project
    """
    result = await GetProjectUseCase(uow).execute(subject, project_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectMutationResponse)
async def create_project(
    request: CreateProjectRequest,
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = CreateProjectCommand(**request.model_dump())

    result = await CreateProjectUseCase(uow).execute(subject, command)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectMutationResponse)
async def update_project(
    project_id: UUID,
    request: UpdateProjectRequest,
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Partial update; only the fields present in the body are changed

    Raises:
        - 400 Bad Request: Invalid fields or UNDER_REVIEW status
        - 403 Forbidden: Requester is neither owner nor admin
        - 404 Not Found: Unknown project
    """
    command = UpdateProjectCommand(**request.model_dump(exclude_unset=True))

    result = await UpdateProjectUseCase(uow).execute(subject, project_id, command)
    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectDeletedResponse
)
async def delete_project(
    project_id: UUID,
    subject: Subject = Depends(get_current_subject),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteProjectUseCase(uow).execute(subject, project_id)
    if result.is_err():
        raise_for_error(result.error)

    return result.value
