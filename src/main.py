"""
Main application module.

This module builds and configures the FastAPI application:
- Loads the Google OAuth client configuration (fatal if missing or malformed)
- Creates the auth manager and the empty session store
- Registers CORS, error handlers and routers
"""

import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.middleware.error_handler import add_error_handlers
from src.providers.google.auth import GoogleAuthManager, SessionStore, load_client_config
from src.routes.calendars import router as calendars_router
from src.routes.google_auth import router as google_auth_router
from src.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    The client credentials file is read exactly once here. The service starts
    without a Google session; the first successful token exchange installs one.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        FastAPI: Configured application

    Raises:
        ConfigurationError: If the client credentials cannot be loaded
    """
    settings = settings or get_settings()
    client_config = load_client_config(settings.GOOGLE_CREDENTIALS_FILE, settings.GOOGLE_REDIRECT_URI)

    app = FastAPI(
        title="Ohana Calendar API",
        description="Google Calendar OAuth login, calendar and event management",
        version="1.0.0"
    )

    app.state.settings = settings
    app.state.auth_manager = GoogleAuthManager(client_config)
    app.state.session_store = SessionStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_error_handlers(app)

    app.include_router(google_auth_router)
    app.include_router(calendars_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.info(f"Application created (environment={settings.ENVIRONMENT})")
    return app
