import logging
from typing import Dict

from fastapi import Request, status

from src.adapter.services.rate_limiter import build_rate_limiter
from src.api.error import ClientError
from src.app.services.rate_limiter import RateLimiter
from src.domain.result import Error

logger = logging.getLogger(__name__)

REGISTER = "register"
LOGIN = "login"
ADMIN_LOGIN = "admin_login"


def build_rate_limiters(ApplicationConfig) -> Dict[str, RateLimiter]:
    """One limiter per throttled scope; login and admin login count separately"""
    return {
        REGISTER: build_rate_limiter(
            ApplicationConfig,
            ApplicationConfig.REGISTER_RATE_LIMIT,
            ApplicationConfig.REGISTER_RATE_WINDOW_SECONDS,
        ),
        LOGIN: build_rate_limiter(
            ApplicationConfig,
            ApplicationConfig.LOGIN_RATE_LIMIT,
            ApplicationConfig.LOGIN_RATE_WINDOW_SECONDS,
        ),
        ADMIN_LOGIN: build_rate_limiter(
            ApplicationConfig,
            ApplicationConfig.LOGIN_RATE_LIMIT,
            ApplicationConfig.LOGIN_RATE_WINDOW_SECONDS,
        ),
    }


class RateLimit:
    """
    Route dependency throttling a scope per client IP.

    Usage:
        @router.post("/login", dependencies=[Depends(RateLimit(LOGIN))])
    """

    def __init__(self, scope: str):
        self.scope = scope

    def __call__(self, request: Request) -> None:
        limiter: RateLimiter = request.app.state.rate_limiters[self.scope]
        client_ip = request.client.host if request.client else "unknown"

        if not limiter.allow(f"{self.scope}:{client_ip}"):
            logger.warning(f"Rate limit hit: scope={self.scope} ip={client_ip}")
            raise ClientError(
                Error("RATE_LIMITED", "Too many requests, please try again later"),
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            )
