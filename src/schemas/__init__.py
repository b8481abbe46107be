"""
This package contains Pydantic models for request/response validation.
"""

from src.schemas.calendar import (
    AuthUrlResponse,
    TokenResponse,
    CalendarCreatedResponse,
    EventCreate
)

__all__ = [
    'AuthUrlResponse',
    'TokenResponse',
    'CalendarCreatedResponse',
    'EventCreate'
]
