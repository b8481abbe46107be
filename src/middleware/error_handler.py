"""
Error handling middleware for the application.

This module provides centralized error handling. Every error response body
is a bare JSON string holding the message: 400 for missing authorization or
bad input, 500 for Google or local failures.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.exceptions import (
    CalendarGatewayError,
    CalendarServiceError,
    EventIdError,
    NotAuthenticatedError,
    TokenExchangeError
)

# Configure logging
logger = logging.getLogger(__name__)


def add_error_handlers(app: FastAPI) -> None:
    """
    Add error handlers to the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle HTTP exceptions."""
        logger.warning(f"HTTP exception: {exc.detail} (status_code={exc.status_code})")
        return JSONResponse(content=str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request validation errors."""
        error_messages = []
        for error in exc.errors():
            loc = " -> ".join(str(loc_item) for loc_item in error["loc"])
            error_messages.append(f"{loc}: {error['msg']}")

        error_msg = "; ".join(error_messages) or "Validation error"
        logger.warning(f"Validation error: {error_msg}")
        return JSONResponse(content=error_msg, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError) -> JSONResponse:
        """Handle calendar requests made before any token exchange."""
        logger.warning(f"Rejected {request.url.path}: no Google session")
        return JSONResponse(content=str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(TokenExchangeError)
    async def token_exchange_handler(request: Request, exc: TokenExchangeError) -> JSONResponse:
        """Handle authorization code exchange failures."""
        logger.error(f"Token exchange failed: {exc}")
        return JSONResponse(content=str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(CalendarServiceError)
    async def calendar_service_handler(request: Request, exc: CalendarServiceError) -> JSONResponse:
        """Handle Google Calendar API failures."""
        logger.error(f"Calendar service error: {exc}")
        return JSONResponse(content=str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(EventIdError)
    async def event_id_handler(request: Request, exc: EventIdError) -> JSONResponse:
        """Handle event id generation failures."""
        logger.error(f"Event id error: {exc}")
        return JSONResponse(content=str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(CalendarGatewayError)
    async def gateway_error_handler(request: Request, exc: CalendarGatewayError) -> JSONResponse:
        """Handle any other application error."""
        logger.error(f"Application error: {exc}")
        return JSONResponse(content=str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle all other exceptions."""
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
        return JSONResponse(
            content=str(exc) or "An unexpected error occurred",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
