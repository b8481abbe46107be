"""
Authorized Google sessions and the process-wide holder for the current one.

A CalendarSession is created by a successful code exchange and never changes
afterwards. The SessionStore only ever swaps whole session references, so a
request that picked up a session keeps a consistent view of it even if
another exchange installs a newer one meanwhile.
"""

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from google.oauth2.credentials import Credentials

from src.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TokenInfo:
    """Token metadata returned to the caller after an exchange."""
    token_type: str
    access_token: str
    refresh_token: Optional[str]
    expiry: Optional[datetime]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token_type": self.token_type,
            "access_token": self.access_token,
            "refresh_token": self.refresh_token or "",
            "expire": self.expiry.isoformat() + "Z" if self.expiry else None,
        }


@dataclass(frozen=True)
class CalendarSession:
    """
    An authorized Google session.

    Attributes:
        credentials: OAuth2 credentials that attach and refresh the bearer token
            on every Calendar API request built from them
        token: Metadata of the token the session was created from
    """
    credentials: Credentials
    token: TokenInfo


class SessionStore:
    """Holds the session installed by the most recent successful exchange."""

    def __init__(self, session: Optional[CalendarSession] = None):
        self._lock = threading.Lock()
        self._session = session

    def current(self) -> Optional[CalendarSession]:
        with self._lock:
            return self._session

    def install(self, session: CalendarSession) -> None:
        """Replace the current session. Last writer wins."""
        with self._lock:
            replaced = self._session is not None
            self._session = session
        logger.info(f"Installed new Google session (replaced existing: {replaced})")
