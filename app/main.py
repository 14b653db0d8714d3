"""FastAPI main application module."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config.database import dispose_engine, init_models
from app.config.logging_config import setup_logging
from app.config.settings import settings
from app.middleware.exception_handler import register_exception_handlers
from app.middleware.logging_middleware import RequestLoggingMiddleware
from app.routers import auth, services, users


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup and release the pool on shutdown."""
    await init_models()
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
        lifespan=lifespan,
    )

    # Register exception handlers
    register_exception_handlers(app)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=settings.ALLOWED_METHODS,
        allow_headers=settings.ALLOWED_HEADERS,
    )

    # Request/Response logging middleware
    app.add_middleware(
        RequestLoggingMiddleware,
        log_headers=settings.ENVIRONMENT == "development",
    )

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.API_VERSION,
            "environment": settings.ENVIRONMENT,
        }

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {
            "message": f"{settings.API_TITLE} is running",
            "version": settings.API_VERSION,
            "endpoints": {
                "auth": f"{settings.API_PREFIX}/auth",
                "users": f"{settings.API_PREFIX}/users",
                "services": f"{settings.API_PREFIX}/services",
            },
        }

    app.include_router(
        auth.router,
        prefix=f"{settings.API_PREFIX}/auth",
        tags=["Authentication"],
    )

    app.include_router(
        users.router,
        prefix=f"{settings.API_PREFIX}/users",
        tags=["Users"],
    )

    app.include_router(
        services.router,
        prefix=f"{settings.API_PREFIX}/services",
        tags=["Services"],
    )

    return app


app = create_app()
