"""
Google Calendar module.

This module provides integration with Google Calendar API.
"""

from .service import CalendarService, generate_event_id

__all__ = ['CalendarService', 'generate_event_id']
