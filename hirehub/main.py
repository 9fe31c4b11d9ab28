"""
HireHub API - FastAPI Application Entry Point.

Job board connecting employers and job seekers: postings, resumes,
applications and notifications.
"""
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError

from hirehub.api.routes import api_router
from hirehub.core.config import settings
from hirehub.core.database import close_db, init_db
from hirehub.core.exceptions import APIException
from hirehub.core.logging import RequestIDMiddleware, get_logger, setup_logging
from hirehub.core.rate_limit import limiter
from hirehub.schemas.base import ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - startup and shutdown."""
    setup_logging()
    logger.info("starting_app", app_name=settings.app_name, env=settings.environment)
    await init_db()
    logger.info("database_initialized")

    yield

    logger.info("shutting_down")
    await close_db()


app = FastAPI(
    title=settings.app_name,
    description="Job board API for employers and job seekers",
    version=settings.app_version,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Request ID correlation
app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
)


def _error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(error=message, code=code, details=details)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body, exclude_none=True))


@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions."""
    return _error_response(exc.status_code, exc.code, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error_response(
        422,
        "VALIDATION_ERROR",
        "Request validation failed",
        {"errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(IntegrityError)
async def integrity_exception_handler(request: Request, exc: IntegrityError):
    """Constraint violations that slipped past service-level checks."""
    logger.warning("integrity_error", path=request.url.path, error=str(exc.orig))
    return _error_response(409, "CONFLICT", "The request conflicts with existing data")


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions - log full detail, return sanitized message."""
    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        exc_message=str(exc),
        path=request.url.path,
        exc_info=True,
    )

    if settings.debug:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return _error_response(500, "INTERNAL_ERROR", str(exc), {"stack": stack})
    return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred")


app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint - API info."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs" if settings.debug else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hirehub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
