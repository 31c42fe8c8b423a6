"""
Profile Site FastAPI Application

Main entry point for the profile site API: events, profiles, users,
accounts, name-card import and AI enhancement under /api.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Common library imports
from common.database import MongoDB
from common.utils import success_response
from common.utils.exceptions import APIException

# App-specific imports
from profilesite.config import Settings, get_settings
from profilesite.dependencies import init_all_services
from profilesite.middleware import api_exception_handler, error_handler_middleware
from profilesite.routers import (
    ai_router,
    auth_router,
    events_router,
    namecard_router,
    profiles_router,
    users_router,
)
from profilesite.storage import DocumentStore, JsonFileDocumentStore, MongoDocumentStore

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)

settings = get_settings()


# =============================================================================
# Database Instance
# =============================================================================
main_db = MongoDB()


async def create_store(app_settings: Settings) -> DocumentStore:
    """Build the document store selected by STORAGE_BACKEND."""
    if app_settings.use_file_storage():
        logger.info(f"Using JSON file storage in: {app_settings.DATA_DIR}")
        return JsonFileDocumentStore(app_settings.DATA_DIR)

    await main_db.connect(
        uri=app_settings.MONGODB_URI,
        database_name=app_settings.MONGODB_DATABASE,
    )
    logger.info(f"Using MongoDB database: {app_settings.MONGODB_DATABASE}")
    store = MongoDocumentStore(main_db.db)
    await store.ensure_indexes()
    return store


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, builds the store and initializes services.
    """
    logging.basicConfig(level=settings.get_log_level(), format=LOG_FORMAT)
    logger.info("Starting Profile Site API...")

    settings.validate_required()

    store = await create_store(settings)
    init_all_services(store=store, settings=settings)
    Path(settings.UPLOADS_DIR).mkdir(parents=True, exist_ok=True)

    logger.info("Profile Site API started successfully")

    yield

    logger.info("Shutting down Profile Site API...")
    await store.close()
    await main_db.disconnect()


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Profile Site API",
    description="Profiles, community events and name-card import",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# Error Handling
# =============================================================================
app.add_exception_handler(APIException, api_exception_handler)
app.middleware("http")(error_handler_middleware)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(events_router, prefix=API_PREFIX, tags=["Events"])
app.include_router(profiles_router, prefix=API_PREFIX, tags=["Profiles"])
app.include_router(users_router, prefix=API_PREFIX, tags=["Users"])
app.include_router(auth_router, prefix=API_PREFIX, tags=["Authentication"])
app.include_router(namecard_router, prefix=API_PREFIX, tags=["Name Card"])
app.include_router(ai_router, prefix=API_PREFIX, tags=["AI"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """Health check endpoint."""
    return success_response(
        status="ok",
        version="1.0.0",
        storage=settings.STORAGE_BACKEND,
        database=main_db.is_connected,
    )


# =============================================================================
# Static Files (mounted last so API routes take precedence)
# =============================================================================
app.mount(
    "/uploads",
    StaticFiles(directory=settings.UPLOADS_DIR, check_dir=False),
    name="uploads",
)

if settings.STATIC_DIR and Path(settings.STATIC_DIR).is_dir():
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
