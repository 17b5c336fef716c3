"""
Google API service initialization.

Shared by all adapters. Loads token.json, builds service objects.
Uses lru_cache for thread-safe caching.

All services use an HTTP timeout (OUTLINE_API_TIMEOUT, default 60s) to
prevent indefinite hangs when Google APIs are slow or connections stall.
"""

from functools import lru_cache

import google_auth_httplib2
import httplib2
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build, Resource

from config import API_TIMEOUT
from models import OutlineError, ErrorKind
from oauth_config import TOKEN_FILE, SCOPES

__all__ = [
    "get_drive_service",
    "get_docs_service",
    "clear_service_cache",
]


def _get_credentials() -> Credentials:
    """Load OAuth credentials from token.json, refreshing if expired."""
    if not TOKEN_FILE.exists():
        raise OutlineError(
            ErrorKind.AUTH_EXPIRED,
            f"{TOKEN_FILE} not found. Run: python -m auth",
        )
    creds = Credentials.from_authorized_user_file(str(TOKEN_FILE), SCOPES)
    if creds.expired and creds.refresh_token:
        creds.refresh(Request())
        TOKEN_FILE.write_text(creds.to_json())
    if not creds.valid:
        raise OutlineError(
            ErrorKind.AUTH_EXPIRED,
            f"{TOKEN_FILE} holds no usable credentials. Run: python -m auth",
        )
    return creds


def _get_authorized_http(creds: Credentials) -> google_auth_httplib2.AuthorizedHttp:
    """Create authorized HTTP client with timeout."""
    http = httplib2.Http(timeout=API_TIMEOUT)
    return google_auth_httplib2.AuthorizedHttp(creds, http=http)


@lru_cache(maxsize=1)
def get_drive_service() -> Resource:
    """Get authenticated Google Drive API service (cached, thread-safe)."""
    creds = _get_credentials()
    return build("drive", "v3", http=_get_authorized_http(creds))


@lru_cache(maxsize=1)
def get_docs_service() -> Resource:
    """Get authenticated Google Docs API service (cached, thread-safe)."""
    creds = _get_credentials()
    return build("docs", "v1", http=_get_authorized_http(creds))


def clear_service_cache() -> None:
    """Clear cached services. Useful for testing or after re-auth."""
    get_drive_service.cache_clear()
    get_docs_service.cache_clear()
