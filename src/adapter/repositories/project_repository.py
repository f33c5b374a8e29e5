from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import and_, func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.project_repository import IProjectRepository, ProjectFilters
from src.domain.access_policy import ProjectScope
from src.domain.entities import Project, ProjectStatus, ProjectVisibility


def _scope_clause(scope: ProjectScope):
    """Translate a visibility scope into a WHERE clause (None = unrestricted)"""
    if scope.unrestricted:
        return None
    public = and_(
        Project.visibility == ProjectVisibility.public,
        Project.status == ProjectStatus.published,
    )
    if scope.owner_id is not None:
        return or_(public, Project.owner_id == scope.owner_id)
    return public


def _filter_clauses(filters: ProjectFilters) -> list:
    clauses = []
    if filters.search:
        clauses.append(
            or_(
                col(Project.title).icontains(filters.search, autoescape=True),
                col(Project.description).icontains(filters.search, autoescape=True),
            )
        )
    if filters.status is not None:
        clauses.append(Project.status == filters.status)
    if filters.visibility is not None:
        clauses.append(Project.visibility == filters.visibility)
    if filters.category:
        clauses.append(Project.category == filters.category)
    return clauses


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        stmt = select(Project).where(Project.id == project_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, project: Project) -> Project:
        """Create a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def update(self, project: Project) -> Project:
        """Update existing project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        await self.session.delete(project)
        await self.session.flush()

    async def list(
        self,
        scope: ProjectScope,
        filters: ProjectFilters,
        offset: int,
        limit: int,
    ) -> Tuple[List[Project], int]:
        clauses = _filter_clauses(filters)
        scope_clause = _scope_clause(scope)
        if scope_clause is not None:
            clauses.append(scope_clause)

        stmt = (
            select(Project)
            .where(*clauses)
            .order_by(Project.created_at.desc(), Project.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        projects = list(result.all())

        count_stmt = select(func.count()).select_from(Project).where(*clauses)
        total = (await self.session.exec(count_stmt)).one()
        return projects, total

    async def list_by_owner(
        self,
        owner_id: UUID,
        offset: int,
        limit: int,
        status: Optional[ProjectStatus] = None,
    ) -> Tuple[List[Project], int]:
        clauses = [Project.owner_id == owner_id]
        if status is not None:
            clauses.append(Project.status == status)

        stmt = (
            select(Project)
            .where(*clauses)
            .order_by(Project.updated_at.desc(), Project.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        projects = list(result.all())

        count_stmt = select(func.count()).select_from(Project).where(*clauses)
        total = (await self.session.exec(count_stmt)).one()
        return projects, total

    async def delete_by_owner(self, owner_id: UUID) -> int:
        result = await self.session.exec(select(Project).where(Project.owner_id == owner_id))
        projects = list(result.all())
        for project in projects:
            await self.session.delete(project)
        await self.session.flush()
        return len(projects)

    async def count(self) -> int:
        result = await self.session.exec(select(func.count()).select_from(Project))
        return result.one()

    async def count_by_status(self) -> Dict[str, int]:
        stmt = select(Project.status, func.count()).group_by(Project.status)
        result = await self.session.exec(stmt)
        return {ProjectStatus(status).value: total for status, total in result.all()}

    async def count_by_owners(self, owner_ids: Sequence[UUID]) -> Dict[UUID, int]:
        if not owner_ids:
            return {}
        stmt = (
            select(Project.owner_id, func.count())
            .where(col(Project.owner_id).in_(list(owner_ids)))
            .group_by(Project.owner_id)
        )
        result = await self.session.exec(stmt)
        return {owner_id: total for owner_id, total in result.all()}
