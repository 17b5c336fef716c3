"""
Extractors — Pure functions for outline building.

No Google API calls, no logging. Just transform input → output.
Easily testable with in-memory folder trees.
"""

from .categories import classify, decoration_for, FOLDER_DECORATION, GENERIC_DECORATION
from .hierarchy import flatten, summarize
from .outline import build_outline_requests, extract_outline_text, entry_line

__all__ = [
    "classify",
    "decoration_for",
    "FOLDER_DECORATION",
    "GENERIC_DECORATION",
    "flatten",
    "summarize",
    "build_outline_requests",
    "extract_outline_text",
    "entry_line",
]
