# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError

# Local application imports
from .api.exceptions import register_exception_handlers
from .api.middleware import SecurityHeadersMiddleware
from .api.v1 import auth_router, image_router, travel_story_router
from .core.config import get_settings
from .core.logging import configure_logging
from .di.container import get_container, reset_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import connect_to_mongo, close_mongo_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the upload and asset directories, opens the MongoDB client,
    builds the DI container and makes sure the unique email index exists.
    Closes the client on shutdown.
    """
    settings = get_settings()
    for directory in (settings.upload_dir, settings.assets_dir):
        Path(directory).mkdir(parents=True, exist_ok=True)

    connect_to_mongo()
    container = get_container()

    try:
        await container.get(UserRepository).ensure_indexes()
        logger.info("MongoDB indexes ensured")
    except PyMongoError as e:
        # Don't fail app startup if MongoDB is briefly unavailable
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    reset_container()
    close_mongo_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS and security header middleware
    - Error handlers rendering `{"error": true, "message": ...}`
    - API route registration and static file mounts

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Travel Journal API",
        version="1.0.0",
        description="Accounts, image uploads and travel stories for the travel journal",
        lifespan=lifespan
    )

    application.add_middleware(SecurityHeadersMiddleware, development=settings.is_development)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(auth_router)
    application.include_router(image_router)
    application.include_router(travel_story_router)

    # Directories are created in lifespan
    for url_path, directory in (("/uploads", settings.upload_dir), ("/assets", settings.assets_dir)):
        application.mount(
            url_path,
            StaticFiles(directory=directory, check_dir=False),
            name=url_path.strip("/"),
        )

    return application


# Create application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
