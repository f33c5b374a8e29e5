"""Map access policy refusals onto use case errors"""

from typing import Optional

from src.domain.access_policy import Subject, can_administer, is_active
from src.domain.result import Error


def denial(subject: Optional[Subject]) -> Error:
    """Error for a refused ``can(...)`` call"""
    if subject is not None and not is_active(subject):
        return Error("ACCOUNT_INACTIVE", "User account is not active")
    return Error("ACCESS_DENIED", "Access denied")


def admin_denial(subject: Optional[Subject]) -> Optional[Error]:
    """None when the subject may use the admin surface, otherwise the reason why not"""
    if can_administer(subject):
        return None
    if subject is not None and subject.is_admin:
        return Error("ACCOUNT_INACTIVE", "Admin account is not active")
    return Error("INSUFFICIENT_ROLE", "Admin access required")
