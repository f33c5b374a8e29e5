import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from .error import ClientError, ServerError
from .utils.rate_limit import build_rate_limiters

logger = logging.getLogger(__name__)

# Location prefixes FastAPI puts in front of the offending field name
_LOCATION_PARTS = ("body", "query", "path", "header")


def _error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    error_dict = {"code": code, "message": message}
    if details:
        error_dict["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error_dict})


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    if exc.base_error.details:
        error_dict["details"] = exc.base_error.details
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, exc.base_error.code, "Internal server error"
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part not in _LOCATION_PARTS),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    logger.warning(f"Validation error on {request.method} {request.url.path}: {details}")
    return _error_response(
        status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "Validation failed", details
    )


async def handle_integrity_error(request: Request, exc: IntegrityError):
    text = str(exc.orig).lower()
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    if "foreign key" in text:
        return _error_response(
            status.HTTP_400_BAD_REQUEST, "INVALID_RELATION", "Related resource does not exist"
        )
    if "unique" in text or "duplicate" in text:
        return _error_response(
            status.HTTP_409_CONFLICT, "DUPLICATE_VALUE", "A resource with this value already exists"
        )
    return _error_response(status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "Invalid data")


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_TABLES:
            from src.depends import init_db

            await init_db()
        logger.info(f"{ApplicationConfig.SERVICE_NAME} started")
        yield

    app = FastAPI(title="Florka API", version="1.0.0", lifespan=lifespan)
    app.state.config = ApplicationConfig
    app.state.rate_limiters = build_rate_limiters(ApplicationConfig)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
            )
            return response

    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        message = str(exc) if ApplicationConfig.DEBUG else "Internal server error"
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", message
        )

    from src.api.routes import admin, auth, health_check, projects

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(projects.router, tags=["Projects"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
