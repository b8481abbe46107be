"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures and configuration for all tests.
"""

import sys
import json
import pytest
from pathlib import Path
from datetime import datetime, timedelta
from unittest.mock import patch, MagicMock
from fastapi import FastAPI
from fastapi.testclient import TestClient
from google.oauth2.credentials import Credentials

# Add the project root directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.main import create_app
from src.providers.google.auth import CalendarSession, TokenInfo
from src.utils.config import Settings

TEST_CLIENT_ID = "test-client-id.apps.googleusercontent.com"
TEST_REDIRECT_URI = "http://localhost:8080/api/google/calendars/token"


@pytest.fixture
def client_secrets() -> dict:
    """Client-secrets document as downloaded from the Google Cloud console."""
    return {
        "web": {
            "client_id": TEST_CLIENT_ID,
            "project_id": "ohana-test",
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "client_secret": "test_client_secret",
            "redirect_uris": [TEST_REDIRECT_URI]
        }
    }


@pytest.fixture
def credentials_file(tmp_path, client_secrets) -> Path:
    """Client-secrets file on disk."""
    path = tmp_path / "credentials.json"
    path.write_text(json.dumps(client_secrets))
    return path


@pytest.fixture
def test_settings(tmp_path, credentials_file) -> Settings:
    """Settings pointing at the test credentials file."""
    return Settings(
        GOOGLE_CREDENTIALS_FILE=str(credentials_file),
        GOOGLE_REDIRECT_URI=None,
        CALENDAR_TIMEZONE="Asia/Jakarta",
        CALENDAR_SUMMARY="Ohana Customer",
        CALENDAR_DESCRIPTION="Google calendar for Ohana customer",
        ALLOWED_ORIGINS="*",
        LOG_DIR=str(tmp_path / "logs"),
        ENVIRONMENT="test"
    )


@pytest.fixture
def test_app(test_settings) -> FastAPI:
    """Create a new test application instance."""
    return create_app(test_settings)


@pytest.fixture
def client(test_app) -> TestClient:
    """Test client for an application with no Google session yet."""
    return TestClient(test_app, base_url="http://testserver")


@pytest.fixture
def test_credentials() -> Credentials:
    """Authorized Google credentials."""
    return Credentials(
        token="test_token",
        refresh_token="test_refresh_token",
        token_uri="https://oauth2.googleapis.com/token",
        client_id=TEST_CLIENT_ID,
        client_secret="test_client_secret",
        scopes=["https://www.googleapis.com/auth/calendar"],
        expiry=datetime.utcnow() + timedelta(hours=1)
    )


@pytest.fixture
def calendar_session(test_credentials) -> CalendarSession:
    """Session as produced by a successful code exchange."""
    token = TokenInfo(
        token_type="Bearer",
        access_token=test_credentials.token,
        refresh_token=test_credentials.refresh_token,
        expiry=test_credentials.expiry
    )
    return CalendarSession(credentials=test_credentials, token=token)


@pytest.fixture
def authorized_client(test_app, calendar_session) -> TestClient:
    """Test client for an application that already holds a Google session."""
    test_app.state.session_store.install(calendar_session)
    return TestClient(test_app, base_url="http://testserver")


@pytest.fixture
def mock_calendar_api():
    """
    Mock googleapiclient's build() for the calendar service.

    Yields the mocked Calendar v3 resource. Event inserts echo the request
    body back with a status, like the real API does.
    """
    with patch("src.providers.google.calendar.service.build") as mock_build:
        service = mock_build.return_value

        def insert_event(calendarId=None, body=None):
            created = dict(body, status="confirmed", organizer={"email": calendarId})
            return MagicMock(execute=MagicMock(return_value=created))

        service.events.return_value.insert.side_effect = insert_event
        service.calendars.return_value.insert.return_value.execute.return_value = {
            "id": "c_123@group.calendar.google.com",
            "summary": "Ohana Customer",
            "description": "Google calendar for Ohana customer"
        }
        service.calendarList.return_value.list.return_value.execute.return_value = {
            "kind": "calendar#calendarList",
            "items": [
                {"id": "primary-user@example.com", "summary": "Primary", "primary": True},
                {"id": "c_123@group.calendar.google.com", "summary": "Ohana Customer"}
            ]
        }
        service.build_mock = mock_build
        yield service


@pytest.fixture
def mock_google_flow():
    """Mock google_auth_oauthlib's Flow used by the auth manager."""
    with patch("src.providers.google.auth.manager.Flow") as mock_flow:
        flow = mock_flow.from_client_config.return_value
        flow.credentials = Credentials(
            token="exchanged_token",
            refresh_token="exchanged_refresh_token",
            token_uri="https://oauth2.googleapis.com/token",
            client_id=TEST_CLIENT_ID,
            client_secret="test_client_secret",
            scopes=["https://www.googleapis.com/auth/calendar"],
            expiry=datetime(2030, 1, 1, 12, 0, 0)
        )
        flow.fetch_token.return_value = {
            "access_token": "exchanged_token",
            "refresh_token": "exchanged_refresh_token",
            "token_type": "Bearer",
            "expires_in": 3599
        }
        flow.factory = mock_flow
        yield flow
