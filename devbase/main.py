"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

from devbase.config import Settings, get_settings
from devbase.infrastructure.auth.jwt_handler import TokenService
from devbase.infrastructure.auth.password_hasher import PasswordHasher
from devbase.infrastructure.db.database import Database
from devbase.infrastructure.rate_limiting.limiter import RateLimiter
from devbase.infrastructure.rate_limiting.middleware import RateLimitMiddleware
from devbase.infrastructure.web.middleware.cors import CorsGuardMiddleware
from devbase.infrastructure.web.middleware.error_handler import (
    ErrorHandlerMiddleware,
    register_exception_handlers,
)
from devbase.infrastructure.web.middleware.request_logging import RequestLoggingMiddleware
from devbase.infrastructure.web.routers import auth, projects, tasks

logger = logging.getLogger(__name__)

SERVICE_NAME = "devbase-api"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Setup and teardown operations.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    if settings.sentry_dsn and not settings.is_development:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            traces_sample_rate=settings.sentry_traces_sample_rate,
            environment=settings.environment,
            integrations=[
                FastApiIntegration(transaction_style="endpoint"),
                SqlalchemyIntegration(),
            ],
        )
        logger.info("Sentry initialized")

    database = Database(settings.database_url_async, echo=settings.debug)
    app.state.database = database
    if settings.database_auto_create:
        await database.create_all()
        logger.info("Database tables created")

    yield

    # Shutdown
    logger.info("Shutting down application")
    await database.dispose()


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    # Shared services, read by the dependencies
    app.state.settings = settings
    app.state.token_service = TokenService.from_settings(settings)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.rate_limiter = RateLimiter.from_settings(settings)

    # Middleware added last runs first
    app.add_middleware(
        RateLimitMiddleware,
        limiter=app.state.rate_limiter,
        path_prefix=settings.api_prefix
    )

    allowed_origins = settings.allowed_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins if allowed_origins is not None else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorsGuardMiddleware, allowed_origins=allowed_origins)

    app.add_middleware(RequestLoggingMiddleware)

    # Add trusted host middleware for production
    if settings.is_production:
        app.add_middleware(
            TrustedHostMiddleware,
            allowed_hosts=settings.trusted_hosts
        )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware)

    register_exception_handlers(app)

    # Include routers
    app.include_router(
        auth.router,
        prefix=f"{settings.api_prefix}/auth",
        tags=["Authentication"]
    )
    app.include_router(
        projects.router,
        prefix=f"{settings.api_prefix}/projects",
        tags=["Projects"]
    )
    app.include_router(
        tasks.router,
        prefix=f"{settings.api_prefix}/tasks",
        tags=["Tasks"]
    )

    @app.get("/health", tags=["Health"])
    async def health_check() -> Dict[str, Any]:
        """Liveness probe."""
        return {"ok": True, "name": SERVICE_NAME, "env": settings.environment}

    return app


settings = get_settings()
configure_logging(settings)

# Create application instance
app = create_application(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "devbase.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
