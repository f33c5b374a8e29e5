from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import Subject, is_active
from src.domain.result import Error, Result, Return
from .dtos import ProfileResponse, UserInfo


class GetProfileUseCase:
    """Load the requesting user's own account (user store only)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, subject: Subject) -> Result[ProfileResponse]:
        if not is_active(subject):
            return Return.err(Error("ACCOUNT_INACTIVE", "User account is not active"))

        async with self.uow:
            user = await self.uow.users.get_by_id(subject.id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(ProfileResponse(user=UserInfo.from_entity(user)))
