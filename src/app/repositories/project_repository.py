from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from src.domain.access_policy import ProjectScope
from src.domain.entities import Project, ProjectStatus, ProjectVisibility


@dataclass(frozen=True)
class ProjectFilters:
    """Explicit list filters; combined with each other and the scope using AND"""

    search: Optional[str] = None
    status: Optional[ProjectStatus] = None
    visibility: Optional[ProjectVisibility] = None
    category: Optional[str] = None


class IProjectRepository(ABC):
    """Project repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Create a new project"""
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        """Update existing project"""
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        """Delete a project"""
        pass

    @abstractmethod
    async def list(
        self,
        scope: ProjectScope,
        filters: ProjectFilters,
        offset: int,
        limit: int,
    ) -> Tuple[List[Project], int]:
        """
        Page through the projects visible within scope, newest first.

        Returns:
            Tuple of (projects on the page, total matching projects)
        """
        pass

    @abstractmethod
    async def list_by_owner(
        self,
        owner_id: UUID,
        offset: int,
        limit: int,
        status: Optional[ProjectStatus] = None,
    ) -> Tuple[List[Project], int]:
        """Page through one owner's projects, most recently updated first"""
        pass

    @abstractmethod
    async def delete_by_owner(self, owner_id: UUID) -> int:
        """Delete all projects of an owner, returning how many were removed"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def count_by_status(self) -> Dict[str, int]:
        pass

    @abstractmethod
    async def count_by_owners(self, owner_ids: Sequence[UUID]) -> Dict[UUID, int]:
        pass
