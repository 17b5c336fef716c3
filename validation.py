"""
Input validation and ID extraction utilities.

Handles:
- Google Drive folder URL → folder ID extraction
- Drive ID alphabet checks
- Escaping IDs for Drive query strings
"""

import re

from models import OutlineError, ErrorKind

# =============================================================================
# PATTERNS
# =============================================================================

# Marks a folder-style path, e.g. https://drive.google.com/drive/folders/<id>
FOLDER_PATH_MARKER = "folders/"

# Drive IDs: letters, digits, hyphen, underscore. Real IDs are 25+ chars long,
# which is what lets us pick one out of an arbitrary URL.
DRIVE_ID_RUN_PATTERN = re.compile(r'[A-Za-z0-9_-]{25,}')
DRIVE_ID_PATTERN = re.compile(r'[A-Za-z0-9_-]+')


# =============================================================================
# DRIVE ID EXTRACTION
# =============================================================================

def extract_identifier(url: str) -> str | None:
    """
    Extract a Drive resource ID from a URL.

    Rules, in order:
    - URL contains "folders/": the ID is everything after the last "/".
    - Otherwise: the first run of 25+ ID characters anywhere in the string.
    - Otherwise: None.

    Examples:
        >>> extract_identifier("https://drive.google.com/drive/folders/1A2b3C")
        '1A2b3C'
        >>> extract_identifier("https://drive.google.com/open?id=1aBcDeFgHiJkLmNoPqRsTuVwXyZ")
        '1aBcDeFgHiJkLmNoPqRsTuVwXyZ'
        >>> extract_identifier("not a url") is None
        True
    """
    if FOLDER_PATH_MARKER in url:
        return url.rsplit("/", 1)[-1]

    match = DRIVE_ID_RUN_PATTERN.search(url)
    if match:
        return match.group(0)

    return None


def require_identifier(url: str) -> str:
    """
    Extract a folder ID from user input or raise a user-facing error.

    Share links often carry a query string (".../folders/<id>?usp=sharing");
    that suffix is dropped before the ID is checked.

    Raises:
        OutlineError: INVALID_INPUT if no usable ID can be found
    """
    if not url or not url.strip():
        raise OutlineError(ErrorKind.INVALID_INPUT, "Folder URL or ID is required")

    url = url.strip()

    # A bare ID is its own identifier, whatever its length
    if DRIVE_ID_PATTERN.fullmatch(url):
        return url

    identifier = extract_identifier(url)
    if identifier is not None:
        identifier = re.split(r'[?#]', identifier, maxsplit=1)[0]

    if not identifier or not DRIVE_ID_PATTERN.fullmatch(identifier):
        raise OutlineError(
            ErrorKind.INVALID_INPUT,
            f"Could not find a folder ID in: {url}\n"
            "Expected a Drive folder link like "
            "https://drive.google.com/drive/folders/{id} or a bare folder ID",
            details={"input": url},
        )

    return identifier


def validate_drive_id(drive_id: str, param_name: str = "folder_id") -> None:
    """Raise OutlineError if drive_id contains characters outside the Drive ID alphabet."""
    if not drive_id or not DRIVE_ID_PATTERN.fullmatch(drive_id):
        raise OutlineError(
            ErrorKind.INVALID_INPUT,
            f"Invalid {param_name}: must contain only alphanumeric characters, hyphens, and underscores",
            details={param_name: drive_id},
        )


def escape_drive_query(value: str) -> str:
    """
    Escape a value for use inside a single-quoted Drive query clause.

    Example:
        >>> escape_drive_query("it's")
        "it\\\\'s"
    """
    if not value:
        return value

    # Escape backslashes first (before we add more with quote escaping)
    escaped = value.replace('\\', '\\\\')
    return escaped.replace("'", "\\'")
