"""
Google provider module for the calendar API.

This module provides integration with Google services:
- Authentication (OAuth2 consent and code exchange)
- Calendar
"""

from .auth import GoogleAuthManager, SessionStore, CalendarSession
from .calendar import CalendarService

__all__ = [
    'GoogleAuthManager',
    'SessionStore',
    'CalendarSession',
    'CalendarService',
]
