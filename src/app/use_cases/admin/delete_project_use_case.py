from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject
from src.domain.result import Result, Return
from ..access import admin_denial
from ..projects import DeleteProjectUseCase, ProjectDeletedResponse


class ModerateDeleteProjectUseCase:
    """Admin-surface delete: requires admin rights, then the regular can(DELETE) path"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, subject: Subject, project_id: UUID) -> Result[ProjectDeletedResponse]:
        error = admin_denial(subject)
        if error is not None:
            return Return.err(error)

        return await DeleteProjectUseCase(self.uow).execute(subject, project_id)
