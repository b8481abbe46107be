"""
Schemas for the calendar API.

This module defines Pydantic models for the auth and calendar endpoints.
"""

from typing import Optional
from pydantic import BaseModel, Field


class AuthUrlResponse(BaseModel):
    """Consent URL returned by the auth endpoint."""

    auth_url: str = Field(..., description="Google consent page to send the user to")


class TokenResponse(BaseModel):
    """Token metadata returned after a successful code exchange."""

    token_type: str = Field(..., description="Token type, normally 'Bearer'")
    access_token: str = Field(..., description="OAuth2 access token")
    refresh_token: str = Field("", description="OAuth2 refresh token, empty if Google sent none")
    expire: Optional[str] = Field(None, description="Access token expiry (ISO-8601, UTC)")


class CalendarCreatedResponse(BaseModel):
    """Id of a newly created calendar."""

    calendar_id: str = Field(..., description="Google calendar id")


class EventCreate(BaseModel):
    """Request body for creating an event."""

    calendar_id: str = Field(..., description="Target calendar id, e.g. 'primary'")
    title: str = Field(..., description="Event summary")
    location: str = Field("", description="Free-form location")
    description: str = Field("", description="Event description")
    start_date: str = Field(..., description="First day of the event (YYYY-MM-DD)")
    end_date: str = Field(..., description="Day after the last day of the event (YYYY-MM-DD)")
