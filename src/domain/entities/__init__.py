"""
Florka Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AccountStatus,
    UserRole,
    AdminRole,
    ProjectVisibility,
    ProjectStatus,
)

# Export all entities
from .user import User
from .admin_user import AdminUser
from .project import Project

__all__ = [
    # Enums
    "AccountStatus",
    "UserRole",
    "AdminRole",
    "ProjectVisibility",
    "ProjectStatus",
    # Entities
    "User",
    "AdminUser",
    "Project",
]
