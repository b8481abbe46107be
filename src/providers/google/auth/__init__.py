"""
Google Authentication module.

This module provides the OAuth2 flow and session handling for Google APIs.
"""

from .manager import GoogleAuthManager, STATE_TOKEN
from .credentials import CALENDAR_SCOPE, ClientConfig, client_config_from_flow, load_client_config
from .session import CalendarSession, SessionStore, TokenInfo

__all__ = [
    'GoogleAuthManager',
    'CALENDAR_SCOPE',
    'STATE_TOKEN',
    'ClientConfig',
    'load_client_config',
    'client_config_from_flow',
    'CalendarSession',
    'SessionStore',
    'TokenInfo',
]
