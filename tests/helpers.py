"""
Shared test helpers for drive-outline.

Centralizes mock wiring patterns and in-memory folder trees.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator
from unittest.mock import MagicMock, seal


def mock_api_chain(
    mock_service: MagicMock,
    chain: str,
    response: Any = None,
    *,
    side_effect: Any = None,
) -> MagicMock:
    """Set up a mock Google API response for a chained call.

    Navigates the MagicMock attribute chain and sets return_value (or side_effect)
    on the final method. Returns the final mock method for adding assertions.

    Args:
        mock_service: The mocked service object
        chain: Dot-separated chain. Each part except the last is treated as
               a callable method (traversed via .return_value).
               Examples: "files.get.execute", "documents.batchUpdate.execute"
        response: The return value for the final method
        side_effect: Alternative to response — sets side_effect instead

    Examples:
        mock_api_chain(service, "files.get.execute", {"id": "f1"})
        # equivalent to: service.files().get().execute.return_value = {"id": "f1"}
    """
    parts = chain.split(".")
    obj = mock_service
    for part in parts[:-1]:
        obj = getattr(obj, part).return_value
    final = getattr(obj, parts[-1])
    if side_effect is not None:
        final.side_effect = side_effect
    elif response is not None:
        final.return_value = response
    return final


def seal_service(mock_service: MagicMock) -> None:
    """Seal a mock service after all mock_api_chain() calls.

    Prevents MagicMock from silently creating new attributes when
    production code renames an API method.
    """
    seal(mock_service)


# ============================================================================
# In-memory folder trees
# ============================================================================


@dataclass
class FakeFile:
    name: str
    content_type: str = "text/plain"
    link: str = ""

    def __post_init__(self) -> None:
        if not self.link:
            self.link = f"https://example.com/file/{self.name}"


@dataclass
class FakeFolder:
    """FolderHandle over plain lists. Counts enumerations for assertions."""
    name: str
    files: list[FakeFile] = field(default_factory=list)
    subfolders: list["FakeFolder"] = field(default_factory=list)
    link: str = ""
    list_calls: int = 0

    def __post_init__(self) -> None:
        if not self.link:
            self.link = f"https://example.com/folder/{self.name}"

    def list_files(self) -> Iterator[FakeFile]:
        self.list_calls += 1
        return iter(self.files)

    def list_subfolders(self) -> Iterator["FakeFolder"]:
        self.list_calls += 1
        return iter(self.subfolders)


@dataclass
class BrokenFolder(FakeFolder):
    """Folder whose subfolder enumeration fails, like a revoked share."""
    error: Exception = field(default_factory=lambda: PermissionError("access denied"))

    def list_subfolders(self) -> Iterator[FakeFolder]:
        raise self.error


def folder(name: str, *children: FakeFile | FakeFolder) -> FakeFolder:
    """Build a FakeFolder; children are split into files and subfolders in order."""
    return FakeFolder(
        name=name,
        files=[c for c in children if isinstance(c, FakeFile)],
        subfolders=[c for c in children if isinstance(c, FakeFolder)],
    )


def file(name: str, content_type: str = "text/plain") -> FakeFile:
    return FakeFile(name=name, content_type=content_type)


def count_items(root: FakeFolder) -> int:
    """Files plus folders strictly below root."""
    return len(root.files) + sum(1 + count_items(sf) for sf in root.subfolders)
