"""
Hierarchy flattener — turns a folder tree into a flat, depth-tagged list.

Works on any FolderHandle (see models.py), so tests can drive it with an
in-memory tree. Enumeration errors from the handles propagate unchanged.
"""

from typing import Any

from models import Entry, FolderHandle
from .categories import FOLDER_DECORATION, classify, decoration_for


def flatten(folder: FolderHandle, depth: int = 0, decorate: bool = False) -> list[Entry]:
    """
    Flatten a folder tree depth-first.

    At each level the folder's files come first, in provider order. Then each
    subfolder, in provider order: its own entry at `depth`, immediately
    followed by its flattened contents at `depth + 1`.

    Args:
        folder: Root of the traversal. The root itself is not emitted.
        depth: Depth assigned to the root's direct children (conventionally 0)
        decorate: Attach a category emoji to each entry

    Returns:
        Entries in outline order. Empty for an empty folder.

    Example:
        root: A.txt, B.txt, C/ (D.txt)
        → A(0), B(0), C(0, folder), D(1)
    """
    entries: list[Entry] = []

    for file in folder.list_files():
        decoration = decoration_for(classify(file.content_type)) if decorate else ""
        entries.append(Entry(
            name=file.name,
            link=file.link,
            is_container=False,
            depth=depth,
            decoration=decoration,
        ))

    for subfolder in folder.list_subfolders():
        entries.append(Entry(
            name=subfolder.name,
            link=subfolder.link,
            is_container=True,
            depth=depth,
            decoration=FOLDER_DECORATION if decorate else "",
        ))
        entries.extend(flatten(subfolder, depth + 1, decorate))

    return entries


def summarize(entries: list[Entry]) -> dict[str, Any]:
    """Counts and depth of a flattened outline, for results and logs."""
    folder_count = sum(1 for e in entries if e.is_container)
    return {
        "entry_count": len(entries),
        "folder_count": folder_count,
        "file_count": len(entries) - folder_count,
        "max_depth": max((e.depth for e in entries), default=0),
    }
