"""
Project Use Cases

Listing, reading and editing projects under the access policy.
"""

from .list_projects_use_case import ListProjectsUseCase
from .list_my_projects_use_case import ListMyProjectsUseCase
from .get_project_use_case import GetProjectUseCase
from .create_project_use_case import CreateProjectUseCase
from .update_project_use_case import UpdateProjectUseCase
from .delete_project_use_case import DeleteProjectUseCase
from .dtos import (
    CreateProjectCommand,
    UpdateProjectCommand,
    OwnerInfo,
    ProjectInfo,
    PaginationInfo,
    ProjectListResponse,
    ProjectResponse,
    ProjectMutationResponse,
    ProjectDeletedResponse,
)

__all__ = [
    # Use Cases
    "ListProjectsUseCase",
    "ListMyProjectsUseCase",
    "GetProjectUseCase",
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    # DTOs - Commands
    "CreateProjectCommand",
    "UpdateProjectCommand",
    # DTOs - Responses
    "ProjectListResponse",
    "ProjectResponse",
    "ProjectMutationResponse",
    "ProjectDeletedResponse",
    # DTOs - Nested Models
    "OwnerInfo",
    "ProjectInfo",
    "PaginationInfo",
]
