"""
Admin Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the admin surface.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from src.domain.entities import Project, User
from ..auth.dtos import AdminInfo, UserInfo
from ..projects.dtos import PaginationInfo, ProjectInfo


# ============================================================================
# Commands
# ============================================================================


class CreateAdminCommand(BaseModel):
    email: str
    password: str
    name: str
    department: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserStats(BaseModel):
    total: int
    by_status: Dict[str, int]
    recent_signups: int


class ProjectStats(BaseModel):
    total: int
    by_status: Dict[str, int]


class AdminStats(BaseModel):
    total: int


class StatsResponse(BaseModel):
    """Response for platform statistics"""

    users: UserStats
    projects: ProjectStats
    admins: AdminStats


class UserSummary(UserInfo):
    project_count: int

    @classmethod
    def from_user(cls, user: User, project_count: int) -> "UserSummary":
        return cls(**UserInfo.from_entity(user).model_dump(), project_count=project_count)


class UserListResponse(BaseModel):
    users: List[UserSummary]
    pagination: PaginationInfo


class UserProjectSummary(BaseModel):
    id: str
    title: str
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, project: Project) -> "UserProjectSummary":
        return cls(
            id=str(project.id),
            title=project.title,
            status=project.status.value,
            created_at=project.created_at,
        )


class UserDetailResponse(BaseModel):
    user: UserInfo
    projects: List[UserProjectSummary]


class UserStatusResponse(BaseModel):
    message: str
    user: UserInfo


class AdminProjectListResponse(BaseModel):
    projects: List[ProjectInfo]
    pagination: PaginationInfo


class ProjectStatusResponse(BaseModel):
    message: str
    project: ProjectInfo


class AdminMessageResponse(BaseModel):
    message: str


class CreateAdminResponse(BaseModel):
    created: bool
    admin: AdminInfo
