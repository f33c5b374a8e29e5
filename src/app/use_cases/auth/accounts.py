from typing import Optional, Union
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_policy import ADMIN_ROLES, Subject
from src.domain.entities import AdminUser, User

Account = Union[User, AdminUser]


async def load_account(uow: UnitOfWork, account_id: UUID, role: str) -> Optional[Account]:
    """Look the account up in the store its token role points at"""
    if role in ADMIN_ROLES:
        return await uow.admins.get_by_id(account_id)
    return await uow.users.get_by_id(account_id)


def subject_for(account: Account) -> Subject:
    return Subject(id=account.id, role=account.role.value, status=account.status.value)
