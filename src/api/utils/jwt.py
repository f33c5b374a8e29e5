from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from config import ApplicationConfig

ALGORITHM = "HS256"


class TokenError(Exception):
    pass


class TokenExpiredError(TokenError):
    pass


class TokenInvalidError(TokenError):
    pass


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


def _encode(user_id: str, role: str, secret: str, expires_delta: timedelta) -> str:
    now = datetime.now(UTC)
    payload = {
        "user_id": user_id,
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def issue_tokens(user_id: UUID, role: str) -> TokenPair:
    """
    Issue an access/refresh token pair

    Both tokens carry the same claims but are signed with distinct secrets
    and expire independently.

    Args:
        user_id: Account UUID (user or admin)
        role: Account role (USER, ADMIN, SUPER_ADMIN, ...)

    Returns:
        TokenPair of HS256 JWT strings
    """
    return TokenPair(
        access_token=_encode(
            str(user_id),
            role,
            ApplicationConfig.JWT_SECRET,
            timedelta(minutes=ApplicationConfig.JWT_ACCESS_EXPIRES_MINUTES),
        ),
        refresh_token=_encode(
            str(user_id),
            role,
            ApplicationConfig.JWT_REFRESH_SECRET,
            timedelta(minutes=ApplicationConfig.JWT_REFRESH_EXPIRES_MINUTES),
        ),
    )


def verify_token(token: str, secret: str) -> dict:
    """
    Verify signature and expiry of a JWT

    No revocation check: a validly signed token is accepted until it expires.

    Raises:
        TokenExpiredError: token is past its exp claim
        TokenInvalidError: bad signature, malformed token or missing claims
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except ExpiredSignatureError as exc:
        raise TokenExpiredError("Token expired") from exc
    except JWTError as exc:
        raise TokenInvalidError("Invalid token") from exc

    if not payload.get("user_id") or not payload.get("role"):
        raise TokenInvalidError("Invalid token")
    try:
        UUID(payload["user_id"])
    except (TypeError, ValueError) as exc:
        raise TokenInvalidError("Invalid token") from exc
    return payload


def verify_access_token(token: str) -> dict:
    return verify_token(token, ApplicationConfig.JWT_SECRET)


def verify_refresh_token(token: str) -> dict:
    return verify_token(token, ApplicationConfig.JWT_REFRESH_SECRET)
