"""
Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logfire

from config import settings
from database import check_db_connection, get_db_info, init_db
from observability.logfire_config import LogfireConfig
from services.preferences import ThemePreference
from services.storage import DatabaseKeyValueStore
from wizard import create_wizard_controller
from api.routes import wizard_router, history_router, preferences_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(token=settings.logfire_token)

    logfire.info(
        "Starting Outreach Wizard",
        environment=settings.environment,
        debug=settings.debug,
    )

    init_db()

    db_info = get_db_info()
    if db_info["status"] == "connected" and db_info["table_ready"]:
        logfire.info(
            "Local store ready",
            backend=db_info["backend"],
            location=db_info["location"],
        )
    else:
        logfire.error(
            "Local store unavailable",
            location=db_info["location"],
            status=db_info["status"],
            table_ready=db_info["table_ready"],
        )

    if not settings.anthropic_api_key:
        logfire.error(
            "Anthropic API key missing",
            hint="Set ANTHROPIC_API_KEY in .env; resume parsing, contact search and drafting will fail",
        )

    storage = DatabaseKeyValueStore()
    app.state.theme_preference = ThemePreference(storage)
    try:
        app.state.controller = create_wizard_controller(storage)
    except ValueError as e:
        # Without a key the agents cannot be built; the API answers 503
        logfire.error("Wizard controller unavailable", error=str(e))
        app.state.controller = None

    logfire.info("Outreach Wizard startup complete")

    yield

    logfire.info("Shutting down Outreach Wizard")


# Initialize FastAPI app
app = FastAPI(
    title="Outreach Wizard API",
    description="Local backend for the academic cold-outreach wizard",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, str]:
    """
    Health check endpoint.

    Returns:
        dict: Health status of the application and its local database
    """
    db_connected = check_db_connection()

    return {
        "status": "healthy" if db_connected else "degraded",
        "service": "outreach-wizard",
        "version": "1.0.0",
        "database": "connected" if db_connected else "disconnected",
        "environment": settings.environment,
    }


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        dict: Basic API information
    """
    return {
        "name": "Outreach Wizard API",
        "version": "1.0.0",
        "description": "Resume-driven academic cold-outreach emails",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# API Routers
# ============================================================================

# Three-step wizard (details, select contacts, review & send)
app.include_router(wizard_router)

# Sent-email history
app.include_router(history_router)

# Theme preference
app.include_router(preferences_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
