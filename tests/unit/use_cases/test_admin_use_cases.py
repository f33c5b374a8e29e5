from uuid import uuid4

import pytest

from src.app.repositories.project_repository import ProjectFilters
from src.app.use_cases.admin import (
    CreateAdminCommand,
    CreateAdminUseCase,
    DeleteUserUseCase,
    GetStatsUseCase,
    GetUserUseCase,
    ListAllProjectsUseCase,
    ListUsersUseCase,
    ModerateDeleteProjectUseCase,
    UpdateProjectStatusUseCase,
    UpdateUserStatusUseCase,
)
from src.api.utils.passwords import check_password
from src.domain.entities import AccountStatus, AdminRole, ProjectStatus
from src.domain.pagination import Pagination
from tests.utils.factories import make_admin, make_project, make_user, subject_of


@pytest.fixture
def admin():
    return subject_of(make_admin())


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "use_case, args",
    [
        (GetStatsUseCase, ()),
        (ListUsersUseCase, (Pagination.clamped(None, None),)),
        (GetUserUseCase, (uuid4(),)),
        (UpdateUserStatusUseCase, (uuid4(), AccountStatus.suspended)),
        (DeleteUserUseCase, (uuid4(),)),
        (ListAllProjectsUseCase, (ProjectFilters(), Pagination.clamped(None, None))),
        (UpdateProjectStatusUseCase, (uuid4(), ProjectStatus.archived)),
        (ModerateDeleteProjectUseCase, (uuid4(),)),
    ],
)
async def test_admin_use_cases_refuse_regular_users(mock_uow, use_case, args):
    result = await use_case(mock_uow).execute(subject_of(make_user()), *args)

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_inactive_admin_is_refused(mock_uow):
    inactive = subject_of(make_admin(status=AccountStatus.inactive))

    result = await GetStatsUseCase(mock_uow).execute(inactive)

    assert result.is_err()
    assert result.error.code == "ACCOUNT_INACTIVE"


@pytest.mark.asyncio
async def test_stats(mock_uow, admin):
    mock_uow.users.count.return_value = 12
    mock_uow.users.count_by_status.return_value = {"ACTIVE": 10, "SUSPENDED": 2}
    mock_uow.users.count_created_since.return_value = 3
    mock_uow.projects.count.return_value = 40
    mock_uow.projects.count_by_status.return_value = {"DRAFT": 30, "PUBLISHED": 10}
    mock_uow.admins.count.return_value = 1

    result = await GetStatsUseCase(mock_uow).execute(admin)

    assert result.is_ok()
    assert result.value.model_dump() == {
        "users": {"total": 12, "by_status": {"ACTIVE": 10, "SUSPENDED": 2}, "recent_signups": 3},
        "projects": {"total": 40, "by_status": {"DRAFT": 30, "PUBLISHED": 10}},
        "admins": {"total": 1},
    }


@pytest.mark.asyncio
async def test_list_users_with_project_counts(mock_uow, admin):
    alice = make_user(email="alice@example.com")
    bob = make_user(email="bob@example.com")
    mock_uow.users.list.return_value = ([alice, bob], 2)
    mock_uow.projects.count_by_owners.return_value = {alice.id: 4}

    result = await ListUsersUseCase(mock_uow).execute(
        admin, Pagination.clamped(1, 20), search="example", status=AccountStatus.active
    )

    assert result.is_ok()
    counts = {user.email: user.project_count for user in result.value.users}
    assert counts == {"alice@example.com": 4, "bob@example.com": 0}
    mock_uow.users.list.assert_called_once_with(
        0, 20, search="example", status=AccountStatus.active
    )


@pytest.mark.asyncio
async def test_get_user_with_projects(mock_uow, admin):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user
    mock_uow.projects.list_by_owner.return_value = ([make_project(user.id, title="P1")], 1)

    result = await GetUserUseCase(mock_uow).execute(admin, user.id)

    assert result.is_ok()
    assert result.value.user.id == str(user.id)
    assert [project.title for project in result.value.projects] == ["P1"]


@pytest.mark.asyncio
async def test_get_unknown_user(mock_uow, admin):
    mock_uow.users.get_by_id.return_value = None

    result = await GetUserUseCase(mock_uow).execute(admin, uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_user_status(mock_uow, admin):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user
    mock_uow.users.update.side_effect = lambda u: u

    result = await UpdateUserStatusUseCase(mock_uow).execute(
        admin, user.id, AccountStatus.suspended
    )

    assert result.is_ok()
    assert result.value.user.status == "SUSPENDED"
    assert user.status == AccountStatus.suspended
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_user_removes_projects_first(mock_uow, admin):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user
    mock_uow.projects.delete_by_owner.return_value = 3

    result = await DeleteUserUseCase(mock_uow).execute(admin, user.id)

    assert result.is_ok()
    mock_uow.projects.delete_by_owner.assert_called_once_with(user.id)
    mock_uow.users.delete.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_list_all_projects_includes_owner_email(mock_uow, admin):
    owner = make_user(email="owner@example.com")
    mock_uow.projects.list.return_value = ([make_project(owner.id)], 1)
    mock_uow.users.get_by_ids.return_value = [owner]

    result = await ListAllProjectsUseCase(mock_uow).execute(
        admin, ProjectFilters(), Pagination.clamped(None, None)
    )

    assert result.is_ok()
    assert result.value.projects[0].owner.email == "owner@example.com"
    assert mock_uow.projects.list.call_args.args[0].unrestricted


@pytest.mark.asyncio
async def test_update_project_status_under_review(mock_uow, admin):
    project = make_project(uuid4(), status=ProjectStatus.published)
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.projects.update.side_effect = lambda p: p

    result = await UpdateProjectStatusUseCase(mock_uow).execute(
        admin, project.id, ProjectStatus.under_review
    )

    assert result.is_ok()
    assert result.value.project.status == "UNDER_REVIEW"


@pytest.mark.asyncio
async def test_moderate_delete_project(mock_uow, admin):
    project = make_project(uuid4())
    mock_uow.projects.get_by_id.return_value = project

    result = await ModerateDeleteProjectUseCase(mock_uow).execute(admin, project.id)

    assert result.is_ok()
    mock_uow.projects.delete.assert_called_once_with(project)


@pytest.mark.asyncio
async def test_create_admin(mock_uow):
    mock_uow.admins.get_by_email.return_value = None
    mock_uow.admins.create.side_effect = lambda a: a

    result = await CreateAdminUseCase(mock_uow).execute(
        CreateAdminCommand(email="root@example.com", password="admin123456", name="Root")
    )

    assert result.is_ok()
    assert result.value.created is True
    assert result.value.admin.role == "SUPER_ADMIN"
    created = mock_uow.admins.create.call_args.args[0]
    assert created.role == AdminRole.super_admin
    assert created.status == AccountStatus.active
    assert check_password("admin123456", created.password_hash)


@pytest.mark.asyncio
async def test_create_admin_is_idempotent(mock_uow):
    mock_uow.admins.get_by_email.return_value = make_admin(email="root@example.com")

    result = await CreateAdminUseCase(mock_uow).execute(
        CreateAdminCommand(email="root@example.com", password="other-password", name="Root")
    )

    assert result.is_ok()
    assert result.value.created is False
    mock_uow.admins.create.assert_not_called()
    mock_uow.commit.assert_not_called()
