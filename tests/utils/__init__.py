"""Shared helpers for tests."""

import json
from unittest.mock import MagicMock
from googleapiclient.errors import HttpError


def make_http_error(status: int, message: str) -> HttpError:
    """Build a Calendar API HttpError with a JSON error body."""
    resp = MagicMock(status=status, reason=message)
    content = json.dumps({"error": {"code": status, "message": message}}).encode("utf-8")
    return HttpError(resp, content, uri="https://www.googleapis.com/calendar/v3/calendars")
