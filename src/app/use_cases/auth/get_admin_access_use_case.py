from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject, can_administer
from src.domain.result import Error, Result, Return
from .dtos import AdminAccessResponse, AdminInfo


class GetAdminAccessUseCase:
    """Confirm the requester holds admin rights and return their admin record"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, subject: Subject) -> Result[AdminAccessResponse]:
        if not can_administer(subject):
            return Return.err(Error("INSUFFICIENT_ROLE", "Admin access required"))

        async with self.uow:
            admin = await self.uow.admins.get_by_id(subject.id)
            if admin is None:
                return Return.err(Error("ADMIN_NOT_FOUND", "Admin not found"))

            return Return.ok(
                AdminAccessResponse(
                    message="Admin access granted", admin=AdminInfo.from_entity(admin)
                )
            )
