"""
Florka Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class AccountStatus(str, Enum):
    """Status shared by user and admin accounts"""

    active = "ACTIVE"
    inactive = "INACTIVE"
    suspended = "SUSPENDED"
    pending_verification = "PENDING_VERIFICATION"


class UserRole(str, Enum):
    """Roles held by regular (non-admin) accounts"""

    user = "USER"
    premium_user = "PREMIUM_USER"
    moderator = "MODERATOR"


class AdminRole(str, Enum):
    """Roles held by accounts in the admin credential store"""

    admin = "ADMIN"
    super_admin = "SUPER_ADMIN"


class ProjectVisibility(str, Enum):
    """Who may read a project besides its owner"""

    public = "PUBLIC"
    private = "PRIVATE"


class ProjectStatus(str, Enum):
    """Project publication status"""

    draft = "DRAFT"
    published = "PUBLISHED"
    archived = "ARCHIVED"
    under_review = "UNDER_REVIEW"
