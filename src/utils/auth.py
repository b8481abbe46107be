"""Request dependencies that resolve the Google auth state for route handlers."""

from fastapi import Depends, Request

from src.exceptions import NotAuthenticatedError
from src.providers.google.auth import CalendarSession, GoogleAuthManager, SessionStore
from src.providers.google.calendar import CalendarService
from src.utils.config import Settings


def get_auth_manager(request: Request) -> GoogleAuthManager:
    """Auth manager created at startup."""
    return request.app.state.auth_manager


def get_session_store(request: Request) -> SessionStore:
    """Process-wide holder of the current Google session."""
    return request.app.state.session_store


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_calendar_session(store: SessionStore = Depends(get_session_store)) -> CalendarSession:
    """
    Get the session installed by the last successful token exchange.

    Raises:
        NotAuthenticatedError: If no exchange has succeeded yet
    """
    session = store.current()
    if session is None:
        raise NotAuthenticatedError()
    return session


def get_calendar_service(
    session: CalendarSession = Depends(get_calendar_session),
    settings: Settings = Depends(get_app_settings)
) -> CalendarService:
    """Calendar service bound to the current session."""
    return CalendarService(
        session,
        timezone=settings.CALENDAR_TIMEZONE,
        calendar_summary=settings.CALENDAR_SUMMARY,
        calendar_description=settings.CALENDAR_DESCRIPTION
    )
