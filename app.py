"""
Main application entry point for the Ohana Calendar API.

This module loads environment variables, configures logging and builds the
FastAPI application. Startup aborts if the Google client credentials file
is unreadable or malformed.
"""

from dotenv import load_dotenv

from src.main import create_app
from src.utils.config import get_settings
from src.utils.logger import setup_logging

# Load environment variables
load_dotenv()

settings = get_settings()
logger = setup_logging(settings.LOG_DIR, settings.LOG_LEVEL, settings.DEBUG)

# Create FastAPI app
app = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Ohana Calendar API on {settings.HOST}:{settings.PORT} (reload={settings.RELOAD})")

    # Run app with uvicorn server
    uvicorn.run(
        "app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level="info"
    )
