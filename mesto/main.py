# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging
import time

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

# Local application imports
from .api.v1 import auth_router, user_router, card_router
from .api.error_handlers import register_exception_handlers
from .core.config import get_settings
from .core.logging_config import REQUEST_LOGGER_NAME, setup_logging
from .infrastructure.db.mongo_connection import close_database, ensure_indexes

logger = logging.getLogger(__name__)
request_logger = logging.getLogger(REQUEST_LOGGER_NAME)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the MongoDB indexes on startup and closes the client on shutdown.
    """
    try:
        await ensure_indexes()
    except PyMongoError as e:
        # Requests will surface the storage failure themselves
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    close_database()
    logger.info("Application shutdown complete")


async def log_requests(request: Request, call_next):
    """Write one line per request to the request logger"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    request_logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
    )
    return response


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging setup
    - CORS and request logging middleware
    - Exception handlers translating failures to {"message": ...}
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    setup_logging()
    settings = get_settings()

    application = FastAPI(
        title="Mesto Backend API",
        version="1.0.0",
        description="Profiles and shared picture cards",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.middleware("http")(log_requests)

    register_exception_handlers(application)

    # Register API routers
    application.include_router(auth_router)
    application.include_router(user_router, prefix="/users")
    application.include_router(card_router, prefix="/cards")

    return application


# Create application instance
app = create_application()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("mesto.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
