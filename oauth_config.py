"""
OAuth Configuration - Single Source of Truth

All OAuth parameters defined here. Do not duplicate elsewhere.
"""

from pathlib import Path

# Package root (where this file lives)
_PACKAGE_ROOT = Path(__file__).parent

SCOPES = [
    # Walk folder trees (names, types, links)
    'https://www.googleapis.com/auth/drive.readonly',

    # Create documents and write the outline into them
    'https://www.googleapis.com/auth/documents',
]

# OAuth server port (localhost callback receiver)
OAUTH_PORT = 3000

# OAuth client secrets downloaded from the GCP Console
LOCAL_CREDENTIALS_FILE = _PACKAGE_ROOT / 'credentials.json'

# Local token storage (user's OAuth tokens, not shared)
# Absolute path so it works regardless of cwd when the MCP server runs
TOKEN_FILE = _PACKAGE_ROOT / 'token.json'
