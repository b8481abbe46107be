"""
Google OAuth client configuration for the calendar API.
Loads the client-secrets JSON downloaded from the Google Cloud console through
google-auth-oauthlib and keeps the parts the auth flow needs.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from google_auth_oauthlib.flow import Flow

from src.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CALENDAR_SCOPE = "https://www.googleapis.com/auth/calendar"
REQUIRED_KEYS = ("client_id", "client_secret", "auth_uri", "token_uri")


@dataclass(frozen=True)
class ClientConfig:
    """OAuth client settings, immutable once loaded."""
    client_type: str
    client_id: str
    client_secret: str
    auth_uri: str
    token_uri: str
    redirect_uri: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def to_client_config(self) -> Dict[str, Any]:
        """Mapping in the shape ``Flow.from_client_config`` expects."""
        section = dict(self.raw)
        if self.redirect_uri:
            section["redirect_uris"] = [self.redirect_uri]
        return {self.client_type: section}


def client_config_from_flow(flow: Flow, redirect_uri: Optional[str] = None) -> ClientConfig:
    """
    Build a ClientConfig from a Flow created from client secrets.

    Args:
        flow: Flow whose ``client_config`` holds the ``web``/``installed`` section
        redirect_uri: Overrides the first entry of ``redirect_uris``

    Raises:
        ConfigurationError: If a required key is missing or empty
    """
    section = flow.client_config
    missing = [key for key in REQUIRED_KEYS if not section.get(key)]
    if missing:
        raise ConfigurationError(f"missing {', '.join(missing)} in '{flow.client_type}' credentials")

    if not redirect_uri:
        redirect_uris = section.get("redirect_uris") or []
        redirect_uri = redirect_uris[0] if redirect_uris else None

    return ClientConfig(
        client_type=flow.client_type,
        client_id=section["client_id"],
        client_secret=section["client_secret"],
        auth_uri=section["auth_uri"],
        token_uri=section["token_uri"],
        redirect_uri=redirect_uri,
        raw=dict(section),
    )


def load_client_config(path: str, redirect_uri: Optional[str] = None,
                       scopes: Optional[List[str]] = None) -> ClientConfig:
    """
    Read the client-secrets file once at startup.

    Args:
        path: Client-secrets JSON file
        redirect_uri: Overrides the file's first redirect URI
        scopes: Scopes to validate the client against; defaults to the calendar scope

    Returns:
        ClientConfig: Validated client configuration

    Raises:
        ConfigurationError: If the file is unreadable or malformed
    """
    try:
        flow = Flow.from_client_secrets_file(
            path,
            scopes=scopes or [CALENDAR_SCOPE],
            redirect_uri=redirect_uri,
        )
    except OSError as e:
        raise ConfigurationError(f"unable to read client credentials {path}: {e}") from e
    except ValueError as e:
        raise ConfigurationError(f"malformed client credentials {path}: {e}") from e

    config = client_config_from_flow(flow, redirect_uri)

    client_id_prefix = config.client_id[:8] if len(config.client_id) > 10 else "***"
    logger.info(f"Loaded {config.client_type} OAuth client with client_id prefix: {client_id_prefix}...")
    if not config.client_id.endswith(".apps.googleusercontent.com"):
        logger.warning("Client ID doesn't have expected format (should end with .apps.googleusercontent.com)")
    if not config.redirect_uri:
        logger.warning("No redirect URI configured; token exchange will fail")

    return config
