from typing import NoReturn

from fastapi import status

from src.domain.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Error code -> HTTP status; codes not listed here are server errors
ERROR_STATUS_CODES = {
    # Validation
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVALID_STATUS": status.HTTP_400_BAD_REQUEST,
    "INVALID_RELATION": status.HTTP_400_BAD_REQUEST,
    # Authentication
    "TOKEN_MISSING": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_EXPIRED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "ACCOUNT_NOT_FOUND": status.HTTP_401_UNAUTHORIZED,
    # Authorization
    "ACCOUNT_INACTIVE": status.HTTP_403_FORBIDDEN,
    "ACCESS_DENIED": status.HTTP_403_FORBIDDEN,
    "INSUFFICIENT_ROLE": status.HTTP_403_FORBIDDEN,
    # Not found
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ADMIN_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PROJECT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    # Conflict
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "DUPLICATE_VALUE": status.HTTP_409_CONFLICT,
    # Throttling
    "RATE_LIMITED": status.HTTP_429_TOO_MANY_REQUESTS,
}


def raise_for_error(error: Error) -> NoReturn:
    """Translate a use case error into the matching HTTP error"""
    status_code = ERROR_STATUS_CODES.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
