# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up the plant medicine marketplace, connects to the database
# and the AI advisor, and makes sure everything is ready to handle requests from the web and mobile apps.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with lifespan-managed MongoDB and Gemini client
# resources, middleware setup, slowapi rate limiting, exception handlers and router registration.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn, slowapi
# - app.shared.config.settings
# - app.shared.infrastructure.database.connection
# - app.api.v1.router
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Development server commands

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from app.api.middleware.error_handling import ErrorHandlingMiddleware, register_exception_handlers
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.middleware.rate_limiting import limiter, rate_limit_exceeded_handler
from app.api.v1.router import api_v1_router
from app.modules.marketplace.infrastructure.database.medicine_repository_impl import (
    MongoMedicineRepository,
)
from app.modules.plant_advisor.infrastructure.database.prompt_repository_impl import (
    MongoPromptRepository,
)
from app.modules.plant_advisor.infrastructure.external.gemini_client import get_gemini_client
from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import (
    close_database,
    get_database,
    initialize_database,
)
from app.shared.utils.logging import get_logger, setup_logging

# Get application settings
settings = get_settings()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the MongoDB client and the Gemini HTTP session at startup and
    closes both at shutdown. Startup fails if the database is unreachable.
    """
    setup_logging()
    logger.info("🌱 Plant Medicine API starting up...")

    try:
        await initialize_database()
        logger.info("✅ Database connection initialized")

        if settings.MONGODB_CREATE_INDEXES:
            database = get_database()
            await MongoMedicineRepository(database).ensure_indexes()
            await MongoPromptRepository(database).ensure_indexes()
            logger.info("✅ Collection indexes ensured")

        gemini = get_gemini_client()
        await gemini.initialize()
        if not gemini.is_configured:
            logger.warning("⚠️ GEMINI_API_KEY is not set; AI endpoints will answer 401")
        logger.info("✅ External API clients initialized")

        logger.info("✅ Plant Medicine API startup complete")

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        await close_database()
        raise

    try:
        yield  # Application is running

    finally:
        logger.info("🔄 Plant Medicine API shutting down...")

        await get_gemini_client().close()
        logger.info("✅ API clients cleanup complete")

        await close_database()
        logger.info("✅ Database connections closed")

        logger.info("✅ Plant Medicine API shutdown complete")


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with all necessary
    middleware, routers, and settings based on the current environment.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    # Request logging middleware
    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    # Error handling middleware (wraps logging and the routes)
    app.add_middleware(ErrorHandlingMiddleware)

    # CORS middleware (outermost; error envelopes carry CORS headers)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    # Rate limiting for the AI endpoints
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api")

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.

    This function is used when running the application directly
    with python -m app.main or as a script entry point.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
