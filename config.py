"""
Runtime settings for drive-outline, read from the environment at import.

    OUTLINE_LOG_LEVEL    Log level for cli.py / server.py (default INFO)
    OUTLINE_PAGE_SIZE    Drive files.list page size, 1..1000 (default 1000)
    OUTLINE_API_TIMEOUT  HTTP timeout for Google API calls in seconds (default 60)
"""

import os


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


LOG_LEVEL = os.environ.get("OUTLINE_LOG_LEVEL", "INFO")

# Drive API caps pageSize at 1000
PAGE_SIZE = min(max(_int_env("OUTLINE_PAGE_SIZE", 1000), 1), 1000)

API_TIMEOUT = _int_env("OUTLINE_API_TIMEOUT", 60)
