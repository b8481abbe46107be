"""
Unit tests for loading the Google OAuth client configuration.
"""

import json
import pytest

from src.exceptions import ConfigurationError
from src.providers.google.auth.credentials import load_client_config


@pytest.fixture
def write_secrets(tmp_path):
    """Write a client-secrets document and return its path."""
    def _write(document, name="credentials.json"):
        path = tmp_path / name
        path.write_text(document if isinstance(document, str) else json.dumps(document))
        return str(path)
    return _write


class TestLoadClientConfig:
    """Tests for load_client_config."""

    def test_web_client(self, credentials_file, client_secrets):
        """Test loading a web client-secrets file."""
        config = load_client_config(str(credentials_file))

        assert config.client_type == "web"
        assert config.client_id == client_secrets["web"]["client_id"]
        assert config.client_secret == "test_client_secret"
        assert config.token_uri == "https://oauth2.googleapis.com/token"
        assert config.redirect_uri == client_secrets["web"]["redirect_uris"][0]

    def test_installed_client(self, write_secrets):
        """Test that desktop (installed) clients are accepted."""
        config = load_client_config(write_secrets({
            "installed": {
                "client_id": "desktop.apps.googleusercontent.com",
                "client_secret": "secret",
                "auth_uri": "https://accounts.google.com/o/oauth2/auth",
                "token_uri": "https://oauth2.googleapis.com/token",
                "redirect_uris": ["http://localhost"]
            }
        }))
        assert config.client_type == "installed"
        assert config.redirect_uri == "http://localhost"

    def test_redirect_uri_override(self, credentials_file):
        """Test that an explicit redirect URI wins over the file."""
        config = load_client_config(str(credentials_file), "https://example.com/callback")
        assert config.redirect_uri == "https://example.com/callback"
        assert config.to_client_config()["web"]["redirect_uris"] == ["https://example.com/callback"]

    def test_no_redirect_uris(self, write_secrets, client_secrets):
        """Test that a missing redirect URI list leaves the redirect unset."""
        del client_secrets["web"]["redirect_uris"]
        config = load_client_config(write_secrets(client_secrets))
        assert config.redirect_uri is None
        assert "redirect_uris" not in config.to_client_config()["web"]

    def test_to_client_config(self, credentials_file, client_secrets):
        """Test the mapping handed to the OAuth flow keeps the whole section."""
        flow_config = load_client_config(str(credentials_file)).to_client_config()

        assert list(flow_config) == ["web"]
        assert flow_config["web"] == client_secrets["web"]

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_client_config(str(tmp_path / "nope.json"))
        assert "unable to read" in str(exc_info.value)

    def test_malformed_json(self, write_secrets):
        """Test that invalid JSON is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_client_config(write_secrets("{not json"))
        assert "malformed" in str(exc_info.value)

    @pytest.mark.parametrize("document", [
        [],
        {"service_account": {"client_id": "x"}},
    ])
    def test_unsupported_client_type(self, write_secrets, document):
        """Test that documents without a web/installed section are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_client_config(write_secrets(document))
        assert "malformed" in str(exc_info.value)

    def test_missing_library_keys(self, write_secrets, client_secrets):
        """Test that keys google-auth-oauthlib requires are checked on load."""
        del client_secrets["web"]["token_uri"]
        with pytest.raises(ConfigurationError) as exc_info:
            load_client_config(write_secrets(client_secrets))
        assert "malformed" in str(exc_info.value)

    def test_missing_client_secret(self, write_secrets, client_secrets):
        """Test that an empty client secret is reported by name."""
        client_secrets["web"]["client_secret"] = ""
        with pytest.raises(ConfigurationError) as exc_info:
            load_client_config(write_secrets(client_secrets))
        assert "client_secret" in str(exc_info.value)
