"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Tests import the module-level app and override dependencies

2. Lifespan Events
   - startup: log configuration, optionally create tables
   - shutdown: dispose the database engine (the one long-lived store handle)

3. Exception Handlers
   - CatalogError subclasses become 400/404/409 JSON responses
   - Database and unexpected errors become a generic 500
   - Every error path ends in exactly one response and is logged
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog.config import get_settings
from catalog.database import create_tables, dispose_engine
from catalog.dependencies import DbSession
from catalog.exceptions import CatalogError
from catalog.routers import authors_router, books_router, genres_router
from catalog.services.rate_limiter import limiter, rate_limit_exceeded_handler

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"API version: {settings.api_version}")

    if settings.database_auto_create:
        create_tables()
        logger.info("Database tables created")

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    dispose_engine()


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Book Catalog API

Backing API for a book-catalog client.

### Resources
- **Authors**: name and year
- **Genres**: name
- **Books**: name, cover image, and many-to-many links to authors and genres

### Listing
Every list endpoint accepts `page`, `limit`, `name` (case-insensitive
substring) and `sort` (`name` or `-name`). Sorting reorders the returned
page only.
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------
    # Attach the limiter to the app state so it can be accessed by decorators
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(CatalogError)
    async def catalog_exception_handler(
        request: Request,
        exc: CatalogError,
    ) -> JSONResponse:
        """
        Map typed catalog errors to client responses.

        ValidationError -> 400, NotFoundError -> 404,
        StoreReferentialError -> 409.
        """
        logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code} {exc.error}: {exc.detail}"
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "database_error",
                "detail": "A database error occurred. Please try again later.",
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={"error": "internal_error", "detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"error": "internal_error", "detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    # prefix="/api/v1" creates versioned URLs: /api/v1/books, /api/v1/authors
    api_prefix = f"/api/{settings.api_version}"

    app.include_router(authors_router, prefix=api_prefix)
    app.include_router(genres_router, prefix=api_prefix)
    app.include_router(books_router, prefix=api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database is reachable.",
    )
    def health_check(db: DbSession) -> dict:
        """
        Health check endpoint.

        Used by load balancers and orchestrators. A failing database is
        reported rather than raised so the probe always gets an answer.
        """
        try:
            db.execute(text("SELECT 1"))
            database = "ok"
        except SQLAlchemyError as exc:
            logger.warning(f"Health check database probe failed: {exc}")
            database = "unavailable"

        return {
            "status": "healthy" if database == "ok" else "degraded",
            "app": settings.app_name,
            "version": settings.api_version,
            "database": database,
            "rate_limiting": {
                "enabled": settings.rate_limit_enabled,
                "default_limit": settings.rate_limit_default,
                "write_limit": settings.rate_limit_write,
            },
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn catalog.main:app
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
