"""
Project Use Case DTOs (Data Transfer Objects)

All Command and Response classes for project domain.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import Project, ProjectStatus, ProjectVisibility, User


# ============================================================================
# Commands
# ============================================================================


class CreateProjectCommand(BaseModel):
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    visibility: ProjectVisibility = ProjectVisibility.private
    status: ProjectStatus = ProjectStatus.draft


class UpdateProjectCommand(BaseModel):
    """
    Partial update; only fields the client actually sent are applied.

    Has no owner field: ownership never changes.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    visibility: Optional[ProjectVisibility] = None
    status: Optional[ProjectStatus] = None


# ============================================================================
# Response DTOs
# ============================================================================


class OwnerInfo(BaseModel):
    """Public summary of a project owner; email is only filled in for admins"""

    id: str
    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User, include_email: bool = False) -> "OwnerInfo":
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email if include_email else None,
        )


class ProjectInfo(BaseModel):
    id: str
    title: str
    description: Optional[str]
    content: Optional[str]
    category: Optional[str]
    tags: List[str]
    visibility: str
    status: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
    owner: Optional[OwnerInfo] = None

    @classmethod
    def from_entity(cls, project: Project, owner: Optional[OwnerInfo] = None) -> "ProjectInfo":
        return cls(
            id=str(project.id),
            title=project.title,
            description=project.description,
            content=project.content,
            category=project.category,
            tags=list(project.tags or []),
            visibility=project.visibility.value,
            status=project.status.value,
            owner_id=str(project.owner_id),
            created_at=project.created_at,
            updated_at=project.updated_at,
            owner=owner,
        )


class PaginationInfo(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class ProjectListResponse(BaseModel):
    projects: List[ProjectInfo]
    pagination: PaginationInfo


class ProjectResponse(BaseModel):
    project: ProjectInfo


class ProjectMutationResponse(BaseModel):
    """Response for create and update"""

    message: str
    project: ProjectInfo


class ProjectDeletedResponse(BaseModel):
    message: str
