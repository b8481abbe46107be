"""
Router for calendar endpoints.
This module handles API routes for:
- Creating a calendar
- Listing calendars
- Creating events

Every route depends on an authorized session; without one the request fails
with 400 before any call to Google is made.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from src.providers.google.calendar import CalendarService
from src.schemas.calendar import CalendarCreatedResponse, EventCreate
from src.utils.auth import get_calendar_service

router = APIRouter(
    prefix="/api/calendars",
    tags=["calendars"]
)

logger = logging.getLogger(__name__)


@router.post("", response_model=CalendarCreatedResponse)
def create_calendar(service: CalendarService = Depends(get_calendar_service)):
    """Create a new calendar"""
    return {"calendar_id": service.create_calendar()}


@router.get("")
def list_calendars(service: CalendarService = Depends(get_calendar_service)) -> List[Dict[str, Any]]:
    """List calendars of the authorized account"""
    return service.list_calendars()


@router.post("/events")
def create_event(
    event: EventCreate,
    service: CalendarService = Depends(get_calendar_service)
) -> Dict[str, Any]:
    """Create a daily recurring event"""
    logger.debug(f"Creating event '{event.title}' in calendar {event.calendar_id}")
    return service.create_event(
        calendar_id=event.calendar_id,
        title=event.title,
        start_date=event.start_date,
        end_date=event.end_date,
        location=event.location,
        description=event.description
    )
