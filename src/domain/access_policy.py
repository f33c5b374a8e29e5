"""
Access Policy

Single authorization pass used by every endpoint. Given who is asking
(subject, role, account status) and what they are asking about (owner,
visibility, publication status), decide whether the action is allowed.

Every function here is pure: no I/O, no hidden state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol
from uuid import UUID

from .entities.enums import AccountStatus, AdminRole, ProjectStatus, ProjectVisibility

ADMIN_ROLES = frozenset({AdminRole.admin.value, AdminRole.super_admin.value})
BLOCKED_STATUSES = frozenset({AccountStatus.suspended.value, AccountStatus.inactive.value})


class Action(str, Enum):
    read = "read"
    write = "write"
    delete = "delete"


@dataclass(frozen=True)
class Subject:
    """Authenticated requester; ``None`` stands for an anonymous one"""

    id: UUID
    role: str
    status: str

    @property
    def is_admin(self) -> bool:
        return _value(self.role) in ADMIN_ROLES


class OwnedResource(Protocol):
    owner_id: UUID
    visibility: ProjectVisibility
    status: ProjectStatus


@dataclass(frozen=True)
class ProjectScope:
    """
    List-level counterpart of ``can(subject, Action.read, ...)``.

    - public_only: restrict to PUBLIC + PUBLISHED rows
    - owner_id: additionally admit rows owned by this account
    Both unset means unrestricted.
    """

    public_only: bool
    owner_id: Optional[UUID] = None

    @property
    def unrestricted(self) -> bool:
        return not self.public_only


def _value(item) -> str:
    return item.value if isinstance(item, Enum) else str(item)


def is_public_and_published(resource: OwnedResource) -> bool:
    return (
        _value(resource.visibility) == ProjectVisibility.public.value
        and _value(resource.status) == ProjectStatus.published.value
    )


def is_active(subject: Optional[Subject]) -> bool:
    """
    Whether an account may act at all.

    Admins must be ACTIVE; other accounts only need to not be
    SUSPENDED or INACTIVE (PENDING_VERIFICATION may act).
    """
    if subject is None:
        return False
    status = _value(subject.status)
    if subject.is_admin:
        return status == AccountStatus.active.value
    return status not in BLOCKED_STATUSES


def can(subject: Optional[Subject], action: Action, resource: OwnedResource) -> bool:
    if subject is None:
        return action == Action.read and is_public_and_published(resource)

    if not is_active(subject):
        return False

    if subject.is_admin:
        return True

    if resource.owner_id == subject.id:
        return True

    return action == Action.read and is_public_and_published(resource)


def can_administer(subject: Optional[Subject]) -> bool:
    return subject is not None and subject.is_admin and is_active(subject)


def visibility_scope(subject: Optional[Subject]) -> ProjectScope:
    """
    Rows a subject may list. Callers must check ``is_active`` for
    authenticated subjects first; a blocked subject has no scope at all.
    """
    if subject is None:
        return ProjectScope(public_only=True)
    if subject.is_admin:
        return ProjectScope(public_only=False)
    return ProjectScope(public_only=True, owner_id=subject.id)
