"""
Custom exceptions for the application.
"""

class CalendarGatewayError(Exception):
    """Base exception for calendar gateway errors."""
    pass

class ConfigurationError(CalendarGatewayError):
    """Raised when the OAuth client configuration cannot be loaded."""
    pass

class NotAuthenticatedError(CalendarGatewayError):
    """Raised when a calendar operation is attempted before any token exchange."""

    def __init__(self, message: str = "authenticate first"):
        super().__init__(message)

class TokenExchangeError(CalendarGatewayError):
    """Raised when Google rejects an authorization code exchange."""
    pass

class CalendarServiceError(CalendarGatewayError):
    """Raised when the Google Calendar API returns an error."""
    pass

class EventIdError(CalendarGatewayError):
    """Raised when an event identifier cannot be generated."""
    pass
