"""
Google Calendar service for the calendar API.
Performs one Calendar v3 call per operation using an authorized session.
"""

import base64
import logging
import uuid
from typing import Any, Dict, List, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from google.auth.exceptions import GoogleAuthError

from src.exceptions import CalendarServiceError, EventIdError
from src.providers.google.auth.session import CalendarSession

logger = logging.getLogger(__name__)

DAILY_RECURRENCE = "RRULE:FREQ=DAILY"
POPUP_REMINDER = {"method": "popup", "minutes": 60}
DEFAULT_TIMEZONE = "Asia/Jakarta"
DEFAULT_SUMMARY = "Ohana Customer"
DEFAULT_DESCRIPTION = "Google calendar for Ohana customer"


def generate_event_id() -> str:
    """
    Generate a Calendar event identifier.

    Google accepts ids made of the base32hex alphabet (lowercase ``0-9a-v``),
    so the 16 bytes of a fresh UUID4 are encoded with it, padding stripped.

    Returns:
        str: A 26 character identifier

    Raises:
        EventIdError: If no random value could be obtained
    """
    try:
        raw = uuid.uuid4().bytes
    except (OSError, NotImplementedError) as e:
        raise EventIdError(f"unable to generate event id: {e}") from e
    return base64.b32hexencode(raw).decode("ascii").rstrip("=").lower()


class CalendarService:
    """Service class for Google Calendar API interactions"""

    def __init__(self, session: CalendarSession, timezone: str = DEFAULT_TIMEZONE,
                 calendar_summary: str = DEFAULT_SUMMARY,
                 calendar_description: str = DEFAULT_DESCRIPTION):
        self.session = session
        self.timezone = timezone
        self.calendar_summary = calendar_summary
        self.calendar_description = calendar_description

    def _service(self):
        # A fresh resource per call; httplib2 transports are not thread-safe
        try:
            return build("calendar", "v3", credentials=self.session.credentials, cache_discovery=False)
        except (HttpError, GoogleAuthError) as e:
            logger.error(f"Error building Google Calendar service: {e}")
            raise CalendarServiceError(str(e)) from e

    def _execute(self, request, action: str) -> Dict[str, Any]:
        try:
            return request.execute()
        except (HttpError, GoogleAuthError) as e:
            logger.error(f"Error {action}: {e}")
            raise CalendarServiceError(str(e)) from e

    def create_calendar(self) -> str:
        """
        Create a secondary calendar with the configured summary and description.

        Returns:
            str: The id of the new calendar
        """
        service = self._service()
        body = {
            "summary": self.calendar_summary,
            "description": self.calendar_description,
        }
        created = self._execute(service.calendars().insert(body=body), "creating calendar")
        logger.info(f"Created calendar {created.get('id')}")
        return created.get("id")

    def list_calendars(self) -> List[Dict[str, Any]]:
        """Get the calendars visible to the authorized account, as returned by one list call."""
        service = self._service()
        calendar_list = self._execute(service.calendarList().list(), "listing calendars")
        calendars = calendar_list.get("items", [])
        logger.info(f"Retrieved {len(calendars)} calendars")
        return calendars

    def build_event(self, event_id: str, title: str, start_date: str, end_date: str,
                    location: Optional[str] = "", description: Optional[str] = "") -> Dict[str, Any]:
        """Event body with the fixed daily recurrence and popup reminder."""
        return {
            "id": event_id,
            "summary": title,
            "location": location or "",
            "description": description or "",
            "recurrence": [DAILY_RECURRENCE],
            "start": {"date": start_date, "timeZone": self.timezone},
            "end": {"date": end_date, "timeZone": self.timezone},
            "reminders": {
                "useDefault": False,
                "overrides": [dict(POPUP_REMINDER)],
            },
        }

    def create_event(self, calendar_id: str, title: str, start_date: str, end_date: str,
                     location: Optional[str] = "", description: Optional[str] = "") -> Dict[str, Any]:
        """
        Insert an all-day event into a calendar.

        Every event repeats daily and gets a single 60 minute popup reminder,
        whatever the caller sends. Dates are passed through unvalidated.

        Args:
            calendar_id: Target calendar, e.g. ``primary``
            title: Event summary
            start_date: First day, ``YYYY-MM-DD``
            end_date: Day after the last day, ``YYYY-MM-DD``
            location: Optional free-form location
            description: Optional description

        Returns:
            Dict[str, Any]: The created event as returned by Google
        """
        event_id = generate_event_id()
        service = self._service()
        body = self.build_event(event_id, title, start_date, end_date, location, description)
        created = self._execute(
            service.events().insert(calendarId=calendar_id, body=body),
            f"creating event in calendar {calendar_id}"
        )
        logger.info(f"Created event {event_id} in calendar {calendar_id}")
        return created
