import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.repositories.admin_user_repository import IAdminUserRepository
from src.app.repositories.project_repository import IProjectRepository
from src.app.repositories.user_repository import IUserRepository


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Repository methods are all coroutines
    uow.users = AsyncMock(spec=IUserRepository)
    uow.admins = AsyncMock(spec=IAdminUserRepository)
    uow.projects = AsyncMock(spec=IProjectRepository)
    uow.users.get_by_ids.return_value = []
    return uow
