"""
Type definitions for drive-outline.

Dataclasses defining the contracts between layers:
- Adapters produce handles over Drive folders and files
- Extractors consume handles and entries and return entries, requests, or text
- Tools wire everything together

These types make the adapter→extractor contract explicit and IDE-checkable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Protocol


# ============================================================================
# ERROR TYPES
# ============================================================================

class ErrorKind(Enum):
    """Categories of errors for consistent handling."""
    AUTH_EXPIRED = "auth_expired"        # Token needs refresh
    NOT_FOUND = "not_found"              # Folder or document doesn't exist
    PERMISSION_DENIED = "permission_denied"  # No access to resource
    RATE_LIMITED = "rate_limited"        # Hit API quota
    NETWORK_ERROR = "network_error"      # Connection failed
    TIMEOUT = "timeout"                  # Request timed out
    INVALID_INPUT = "invalid_input"      # Bad URL, bad ID, not a folder
    UNKNOWN = "unknown"                  # Unexpected error


class OutlineError(Exception):
    """
    Structured error for consistent handling across layers.

    Adapters raise these on API failures.
    Tools catch and format for CLI / MCP response.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for CLI / MCP response."""
        return {
            "error": True,
            "kind": self.kind.value,
            "message": self.message,
            "retryable": self.retryable,
            **self.details,
        }


# ============================================================================
# PROVIDER HANDLES
# ============================================================================

class FileHandle(Protocol):
    """A file as seen by the flattener."""

    @property
    def name(self) -> str: ...

    @property
    def link(self) -> str: ...

    @property
    def content_type(self) -> str: ...


class FolderHandle(Protocol):
    """
    A folder as seen by the flattener.

    Enumeration order is whatever the provider yields. Enumeration may raise
    (permissions, network); the flattener lets that propagate.
    """

    @property
    def name(self) -> str: ...

    @property
    def link(self) -> str: ...

    def list_files(self) -> Iterable[FileHandle]: ...

    def list_subfolders(self) -> Iterable["FolderHandle"]: ...


# ============================================================================
# OUTLINE TYPES
# ============================================================================

class FileCategory(Enum):
    """Classification of a file, derived from its MIME type."""
    SPREADSHEET = "spreadsheet"
    DOCUMENT = "document"
    PRESENTATION = "presentation"
    FORM = "form"
    SITE = "site"
    JAMBOARD = "jamboard"
    SCRIPT = "script"
    DRAWING = "drawing"
    PDF = "pdf"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """
    One flattened row of an outline.

    depth is relative to the traversal root: the root's direct children
    are at 0. A folder's own entry sits at its siblings' depth; its
    contents start at depth + 1.
    """
    name: str
    link: str
    is_container: bool
    depth: int
    decoration: str = ""


@dataclass
class OutlineResult:
    """Successful result from do_outline()."""
    folder_id: str
    folder_name: str
    document_id: str
    title: str
    web_link: str
    entry_count: int
    folder_count: int
    file_count: int
    max_depth: int
    decorated: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "folder_id": self.folder_id,
            "folder_name": self.folder_name,
            "document_id": self.document_id,
            "title": self.title,
            "web_link": self.web_link,
            "operation": "outline",
            "cues": {
                "entry_count": self.entry_count,
                "folder_count": self.folder_count,
                "file_count": self.file_count,
                "max_depth": self.max_depth,
                "decorated": self.decorated,
            },
        }
