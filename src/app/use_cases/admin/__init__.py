"""
Admin Use Cases

Platform administration: statistics, user and project moderation, seeding.
"""

from .get_stats_use_case import GetStatsUseCase
from .list_users_use_case import ListUsersUseCase
from .get_user_use_case import GetUserUseCase
from .update_user_status_use_case import UpdateUserStatusUseCase
from .delete_user_use_case import DeleteUserUseCase
from .list_projects_use_case import ListAllProjectsUseCase
from .update_project_status_use_case import UpdateProjectStatusUseCase
from .delete_project_use_case import ModerateDeleteProjectUseCase
from .create_admin_use_case import CreateAdminUseCase
from .dtos import (
    CreateAdminCommand,
    StatsResponse,
    UserListResponse,
    UserDetailResponse,
    UserStatusResponse,
    AdminProjectListResponse,
    ProjectStatusResponse,
    AdminMessageResponse,
    CreateAdminResponse,
)

__all__ = [
    # Use Cases
    "GetStatsUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserStatusUseCase",
    "DeleteUserUseCase",
    "ListAllProjectsUseCase",
    "UpdateProjectStatusUseCase",
    "ModerateDeleteProjectUseCase",
    "CreateAdminUseCase",
    # DTOs - Commands
    "CreateAdminCommand",
    # DTOs - Responses
    "StatsResponse",
    "UserListResponse",
    "UserDetailResponse",
    "UserStatusResponse",
    "AdminProjectListResponse",
    "ProjectStatusResponse",
    "AdminMessageResponse",
    "CreateAdminResponse",
]
