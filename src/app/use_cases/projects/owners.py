from typing import Dict, List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Project
from .dtos import OwnerInfo, ProjectInfo


async def with_owners(
    uow: UnitOfWork, projects: List[Project], include_email: bool = False
) -> List[ProjectInfo]:
    """Attach owner summaries, fetching every owner on the page in one query"""
    owner_ids = list({project.owner_id for project in projects})
    owners: Dict[UUID, OwnerInfo] = {
        user.id: OwnerInfo.from_entity(user, include_email=include_email)
        for user in await uow.users.get_by_ids(owner_ids)
    }
    return [ProjectInfo.from_entity(project, owners.get(project.owner_id)) for project in projects]
