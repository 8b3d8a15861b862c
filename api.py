"""
Social FastAPI Application

Main entry point for the social API: auth, users, posts and notifications
under /api.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Common library imports
from common.database import MongoDB
from common.utils import APIException, error_response

# App-specific imports
from social.config import settings
from social.models import DOCUMENT_MODELS
from social.routers import (
    auth_router,
    users_router,
    posts_router,
    notifications_router,
)
from social.dependencies import init_all_services

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Database Instance
# =============================================================================
main_db = MongoDB(server_selection_timeout_ms=settings.MONGODB_TIMEOUT_MS)


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Validates configuration, connects to the database and builds the
    services. A missing signing secret stops startup here.
    """
    logger.info("Starting social API...")
    settings.validate_required()

    await main_db.connect(
        uri=settings.MONGODB_URI,
        database_name=settings.MONGODB_DATABASE,
        document_models=DOCUMENT_MODELS,
    )

    init_all_services(db=main_db.db, settings=settings)
    logger.info("Social API started successfully")

    yield

    logger.info("Shutting down social API...")
    await main_db.disconnect()
    logger.info("Social API shut down complete")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Social API",
    description="Posts, likes, comments, follows and cookie-based auth",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

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
# Exception Handlers
# =============================================================================
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Render expected failures as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message),
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are a 400 with the first problem found."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    field_path = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid request")
    if field_path:
        message = f"{field_path}: {message}"
    return JSONResponse(status_code=400, content=error_response(message))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Anything unexpected becomes a generic 500 without internal detail."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=500, content=error_response("Internal server error"))


# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(auth_router, prefix=API_PREFIX, tags=["Authentication"])
app.include_router(users_router, prefix=API_PREFIX, tags=["Users"])
app.include_router(posts_router, prefix=API_PREFIX, tags=["Posts"])
app.include_router(notifications_router, prefix=API_PREFIX, tags=["Notifications"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Reports whether MongoDB answers a ping.
    """
    database_ok = await main_db.ping()
    return {
        "status": "ok" if database_ok else "degraded",
        "version": "1.0.0",
        "database": database_ok,
    }


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
