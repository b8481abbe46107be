"""
Google authentication manager for the calendar API.

This module handles the OAuth2 authorization-code flow with Google:
- Generating the consent URL for the calendar scope
- Exchanging authorization codes for tokens
- Building an immutable CalendarSession from the exchanged credentials

Nothing is persisted here. The caller decides where the resulting session
lives (see SessionStore).

Security Note:
    The consent URL carries a static state token and PKCE is disabled, so any
    process holding the same client configuration can finish the exchange.
    Tokens are returned to the caller but never logged.
"""

from typing import List, Optional

from google_auth_oauthlib.flow import Flow
from google.auth.exceptions import GoogleAuthError
from oauthlib.oauth2.rfc6749.errors import OAuth2Error
import requests

from .credentials import CALENDAR_SCOPE, ClientConfig
from .session import CalendarSession, TokenInfo
from src.exceptions import TokenExchangeError
from src.utils.logger import get_logger

logger = get_logger(__name__)

STATE_TOKEN = "state-token"


class GoogleAuthManager:
    """
    Drives the OAuth consent and code-exchange steps.

    Attributes:
        client_config (ClientConfig): OAuth client loaded at startup
        scopes (List[str]): OAuth scopes requested during authorization
        state (str): Static state token placed in every consent URL
    """

    DEFAULT_SCOPES = [CALENDAR_SCOPE]

    def __init__(self, client_config: ClientConfig, scopes: Optional[List[str]] = None,
                 state: str = STATE_TOKEN):
        self.client_config = client_config
        self.scopes = list(scopes or self.DEFAULT_SCOPES)
        self.state = state

    def _build_flow(self) -> Flow:
        # A new Flow per call: Flow keeps the fetched token on its OAuth2Session
        return Flow.from_client_config(
            self.client_config.to_client_config(),
            scopes=self.scopes,
            redirect_uri=self.client_config.redirect_uri,
            autogenerate_code_verifier=False,
        )

    def get_authorization_url(self) -> str:
        """
        Get the Google consent URL.

        The URL requests offline access so the exchange yields a refresh token,
        and carries the static state token.

        Returns:
            str: The authorization URL to send the user to
        """
        flow = self._build_flow()
        auth_url, _ = flow.authorization_url(
            access_type="offline",
            state=self.state,
        )
        logger.debug("Generated Google consent URL")
        return auth_url

    def exchange_code(self, code: Optional[str]) -> CalendarSession:
        """
        Exchange an authorization code for a new session.

        A missing or empty code never reaches Google: requests-oauthlib rejects
        it locally with a ValueError, which is reported like a provider error.

        Args:
            code: The authorization code from the consent redirect

        Returns:
            CalendarSession: The new session; its ``token`` is handed back to the client

        Raises:
            TokenExchangeError: If the code is missing, or Google rejects the
                exchange or cannot be reached
        """
        flow = self._build_flow()
        try:
            token = flow.fetch_token(code=code or "")
        except (OAuth2Error, GoogleAuthError, requests.RequestException, ValueError) as e:
            logger.error(f"Error exchanging code for tokens: {e}")
            raise TokenExchangeError(str(e)) from e

        credentials = flow.credentials
        token_info = TokenInfo(
            token_type=token.get("token_type", "Bearer"),
            access_token=credentials.token,
            refresh_token=credentials.refresh_token,
            expiry=credentials.expiry,
        )
        logger.info("Exchanged authorization code for Google credentials")
        return CalendarSession(credentials=credentials, token=token_info)
