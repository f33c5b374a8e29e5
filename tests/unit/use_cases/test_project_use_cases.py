from uuid import uuid4

import pytest

from src.app.repositories.project_repository import ProjectFilters
from src.app.use_cases.projects import (
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListMyProjectsUseCase,
    ListProjectsUseCase,
    UpdateProjectCommand,
    UpdateProjectUseCase,
)
from src.domain.entities import AccountStatus, ProjectStatus, ProjectVisibility
from src.domain.pagination import Pagination
from tests.utils.factories import make_admin, make_project, make_user, subject_of


@pytest.fixture
def owner():
    return make_user(email="owner@example.com", first_name="Olga")


@pytest.fixture
def stranger():
    return make_user(email="stranger@example.com")


# ---------------------------------------------------------------- list


@pytest.mark.asyncio
async def test_list_anonymous_uses_public_scope(mock_uow, owner):
    project = make_project(owner.id, visibility=ProjectVisibility.public, status=ProjectStatus.published)
    mock_uow.projects.list.return_value = ([project], 21)
    mock_uow.users.get_by_ids.return_value = [owner]

    result = await ListProjectsUseCase(mock_uow).execute(
        None, ProjectFilters(search="garden"), Pagination.clamped(2, 10)
    )

    assert result.is_ok()
    response = result.value
    assert response.pagination.model_dump() == {"page": 2, "limit": 10, "total": 21, "pages": 3}
    assert response.projects[0].owner.first_name == "Olga"
    assert response.projects[0].owner.email is None

    scope, filters, offset, limit = mock_uow.projects.list.call_args.args
    assert scope.public_only is True
    assert scope.owner_id is None
    assert filters.search == "garden"
    assert (offset, limit) == (10, 10)


@pytest.mark.asyncio
async def test_list_user_scope_includes_own(mock_uow, owner):
    mock_uow.projects.list.return_value = ([], 0)

    await ListProjectsUseCase(mock_uow).execute(
        subject_of(owner), ProjectFilters(), Pagination.clamped(None, None)
    )

    scope = mock_uow.projects.list.call_args.args[0]
    assert scope.public_only is True
    assert scope.owner_id == owner.id


@pytest.mark.asyncio
async def test_list_admin_scope_unrestricted(mock_uow):
    mock_uow.projects.list.return_value = ([], 0)

    await ListProjectsUseCase(mock_uow).execute(
        subject_of(make_admin()), ProjectFilters(), Pagination.clamped(None, None)
    )

    assert mock_uow.projects.list.call_args.args[0].unrestricted


@pytest.mark.asyncio
async def test_list_blocked_subject(mock_uow):
    blocked = make_user(status=AccountStatus.suspended)

    result = await ListProjectsUseCase(mock_uow).execute(
        subject_of(blocked), ProjectFilters(), Pagination.clamped(None, None)
    )

    assert result.is_err()
    assert result.error.code == "ACCOUNT_INACTIVE"
    mock_uow.projects.list.assert_not_called()


@pytest.mark.asyncio
async def test_list_my_projects(mock_uow, owner):
    mock_uow.projects.list_by_owner.return_value = ([make_project(owner.id)], 1)

    result = await ListMyProjectsUseCase(mock_uow).execute(
        subject_of(owner), Pagination.clamped(None, None), status=ProjectStatus.draft
    )

    assert result.is_ok()
    assert result.value.pagination.total == 1
    mock_uow.projects.list_by_owner.assert_called_once_with(
        owner.id, 0, 10, status=ProjectStatus.draft
    )


# ---------------------------------------------------------------- get


@pytest.mark.asyncio
async def test_get_private_project_by_stranger_is_denied(mock_uow, owner, stranger):
    mock_uow.projects.get_by_id.return_value = make_project(owner.id)

    result = await GetProjectUseCase(mock_uow).execute(subject_of(stranger), uuid4())

    assert result.is_err()
    assert result.error.code == "ACCESS_DENIED"


@pytest.mark.asyncio
async def test_get_private_project_by_owner(mock_uow, owner):
    project = make_project(owner.id, title="Mine")
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.users.get_by_ids.return_value = [owner]

    result = await GetProjectUseCase(mock_uow).execute(subject_of(owner), project.id)

    assert result.is_ok()
    assert result.value.project.title == "Mine"
    assert result.value.project.owner.id == str(owner.id)


@pytest.mark.asyncio
async def test_get_unknown_project(mock_uow, owner):
    mock_uow.projects.get_by_id.return_value = None

    result = await GetProjectUseCase(mock_uow).execute(subject_of(owner), uuid4())

    assert result.is_err()
    assert result.error.code == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
async def test_get_public_project_anonymously(mock_uow, owner):
    mock_uow.projects.get_by_id.return_value = make_project(
        owner.id, visibility=ProjectVisibility.public, status=ProjectStatus.published
    )

    result = await GetProjectUseCase(mock_uow).execute(None, uuid4())

    assert result.is_ok()


# ---------------------------------------------------------------- create


@pytest.mark.asyncio
async def test_create_project_owned_by_requester(mock_uow, owner):
    mock_uow.users.get_by_id.return_value = owner
    mock_uow.projects.create.side_effect = lambda project: project

    result = await CreateProjectUseCase(mock_uow).execute(
        subject_of(owner),
        CreateProjectCommand(title="New", tags=["a", "b"], visibility=ProjectVisibility.public),
    )

    assert result.is_ok()
    project = result.value.project
    assert project.owner_id == str(owner.id)
    assert project.tags == ["a", "b"]
    assert project.visibility == "PUBLIC"
    assert project.status == "DRAFT"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_project_blocked_user(mock_uow):
    blocked = make_user(status=AccountStatus.inactive)

    result = await CreateProjectUseCase(mock_uow).execute(
        subject_of(blocked), CreateProjectCommand(title="New")
    )

    assert result.is_err()
    assert result.error.code == "ACCOUNT_INACTIVE"
    mock_uow.projects.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_project_under_review_is_rejected(mock_uow, owner):
    result = await CreateProjectUseCase(mock_uow).execute(
        subject_of(owner), CreateProjectCommand(title="New", status=ProjectStatus.under_review)
    )

    assert result.is_err()
    assert result.error.code == "INVALID_STATUS"


@pytest.mark.asyncio
async def test_create_project_as_admin_needs_user_account(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    result = await CreateProjectUseCase(mock_uow).execute(
        subject_of(make_admin()), CreateProjectCommand(title="New")
    )

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


# ---------------------------------------------------------------- update


@pytest.mark.asyncio
async def test_update_applies_only_sent_fields(mock_uow, owner):
    project = make_project(owner.id, title="Old", tags=["keep"])
    project.description = "unchanged"
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.projects.update.side_effect = lambda p: p
    before = project.updated_at

    result = await UpdateProjectUseCase(mock_uow).execute(
        subject_of(owner), project.id, UpdateProjectCommand(title="New")
    )

    assert result.is_ok()
    updated = result.value.project
    assert updated.title == "New"
    assert updated.description == "unchanged"
    assert updated.tags == ["keep"]
    assert project.updated_at >= before


@pytest.mark.asyncio
async def test_update_never_changes_owner(mock_uow, owner):
    project = make_project(owner.id)
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.projects.update.side_effect = lambda p: p

    command = UpdateProjectCommand.model_validate({"title": "T", "owner_id": str(uuid4())})
    result = await UpdateProjectUseCase(mock_uow).execute(subject_of(owner), project.id, command)

    assert result.is_ok()
    assert project.owner_id == owner.id


@pytest.mark.asyncio
async def test_update_by_stranger_is_denied(mock_uow, owner, stranger):
    project = make_project(
        owner.id, visibility=ProjectVisibility.public, status=ProjectStatus.published
    )
    mock_uow.projects.get_by_id.return_value = project

    result = await UpdateProjectUseCase(mock_uow).execute(
        subject_of(stranger), project.id, UpdateProjectCommand(title="Hijacked")
    )

    assert result.is_err()
    assert result.error.code == "ACCESS_DENIED"
    assert project.title == "Project"
    mock_uow.projects.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_by_admin(mock_uow, owner):
    project = make_project(owner.id)
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.projects.update.side_effect = lambda p: p

    result = await UpdateProjectUseCase(mock_uow).execute(
        subject_of(make_admin()), project.id, UpdateProjectCommand(status=ProjectStatus.archived)
    )

    assert result.is_ok()
    assert result.value.project.status == "ARCHIVED"


@pytest.mark.asyncio
async def test_update_rejects_null_title(mock_uow, owner):
    result = await UpdateProjectUseCase(mock_uow).execute(
        subject_of(owner), uuid4(), UpdateProjectCommand(title=None)
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert result.error.details[0]["field"] == "title"


@pytest.mark.asyncio
async def test_update_rejects_under_review(mock_uow, owner):
    result = await UpdateProjectUseCase(mock_uow).execute(
        subject_of(owner), uuid4(), UpdateProjectCommand(status=ProjectStatus.under_review)
    )

    assert result.is_err()
    assert result.error.code == "INVALID_STATUS"


@pytest.mark.asyncio
async def test_update_can_clear_optional_fields(mock_uow, owner):
    project = make_project(owner.id, category="old")
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.projects.update.side_effect = lambda p: p

    result = await UpdateProjectUseCase(mock_uow).execute(
        subject_of(owner), project.id, UpdateProjectCommand(category=None)
    )

    assert result.is_ok()
    assert result.value.project.category is None


# ---------------------------------------------------------------- delete


@pytest.mark.asyncio
async def test_delete_by_owner(mock_uow, owner):
    project = make_project(owner.id)
    mock_uow.projects.get_by_id.return_value = project

    result = await DeleteProjectUseCase(mock_uow).execute(subject_of(owner), project.id)

    assert result.is_ok()
    mock_uow.projects.delete.assert_called_once_with(project)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_by_stranger(mock_uow, owner, stranger):
    mock_uow.projects.get_by_id.return_value = make_project(owner.id)

    result = await DeleteProjectUseCase(mock_uow).execute(subject_of(stranger), uuid4())

    assert result.is_err()
    assert result.error.code == "ACCESS_DENIED"
    mock_uow.projects.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_missing_project(mock_uow, owner):
    mock_uow.projects.get_by_id.return_value = None

    result = await DeleteProjectUseCase(mock_uow).execute(subject_of(owner), uuid4())

    assert result.is_err()
    assert result.error.code == "PROJECT_NOT_FOUND"
