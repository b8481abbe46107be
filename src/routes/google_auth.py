"""
FastAPI router for the Google OAuth endpoints.

Two steps of the authorization-code flow:
- GET /api/google/calendars/auth returns the consent URL
- GET /api/google/calendars/token exchanges the redirect's ?code= and installs
  the resulting session for the calendar endpoints
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from src.providers.google.auth import GoogleAuthManager, SessionStore
from src.schemas.calendar import AuthUrlResponse, TokenResponse
from src.utils.auth import get_auth_manager, get_session_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/google/calendars", tags=["Google Auth"])


@router.get("/auth", response_model=AuthUrlResponse)
def get_auth_url(auth_manager: GoogleAuthManager = Depends(get_auth_manager)):
    """Get Google OAuth consent URL"""
    return {"auth_url": auth_manager.get_authorization_url()}


@router.get("/token", response_model=TokenResponse)
def exchange_token(
    code: Optional[str] = None,
    auth_manager: GoogleAuthManager = Depends(get_auth_manager),
    store: SessionStore = Depends(get_session_store)
):
    """Exchange an authorization code and install the new session"""
    # A failed exchange raises before install, keeping any previous session
    session = auth_manager.exchange_code(code)
    store.install(session)
    return session.token.to_dict()
