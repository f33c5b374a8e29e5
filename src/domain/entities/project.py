"""
Project Entity

Content owned by a user, readable by others when public and published.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import ProjectStatus, ProjectVisibility


class Project(SQLModel, table=True):
    """
    Project entity.

    Business Rules:
    - owner_id is set at creation and never reassigned
    - Deleting the owner deletes their projects
    - Non-owners only see PUBLIC + PUBLISHED projects
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    description: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=100, index=True)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    visibility: ProjectVisibility = Field(default=ProjectVisibility.private)
    status: ProjectStatus = Field(default=ProjectStatus.draft)

    owner_id: UUID = Field(
        foreign_key="users.id", ondelete="CASCADE", nullable=False, index=True
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_project_visibility_status", "visibility", "status"),
        Index("idx_project_created_at", "created_at"),
    )
