#!/usr/bin/env python3
"""
Drive Outline MCP Server

Two tools:
- outline: Walk a Drive folder tree and write it into a Google Doc as an
  indented, styled, hyperlinked outline
- preview: Same walk, returned as plain text

Architecture:
- extractors/: Pure functions (no MCP, no API calls)
- adapters/: Thin Google API wrappers
- tools/: Tool implementations (business logic)
- server.py: Thin MCP wrappers (this file)
"""

import os
import signal
from typing import Any

from mcp.server.fastmcp import FastMCP

from config import LOG_LEVEL
from logging_config import configure_logging
from tools import do_outline, do_preview


# Initialize MCP server
mcp = FastMCP("Drive Outline")


# ============================================================================
# TOOLS (thin wrappers)
# ============================================================================

@mcp.tool()
def outline(
    folder: str,
    document_id: str | None = None,
    title: str | None = None,
    emoji: bool = False,
) -> dict[str, Any]:
    """
    Write a Drive folder tree into a Google Doc as an outline.

    Files of each folder come first, then its subfolders, each followed by
    its own contents one indent level deeper. Folders are bold; every
    entry links to its Drive item.

    Args:
        folder: Drive folder URL or bare folder ID
        document_id: Existing Doc to append to. Omit to create a new Doc.
        title: Title for the new Doc (default: "<folder name> outline")
        emoji: Prefix each entry with a type emoji (📁 📝 📊 ...)

    Returns:
        document_id, web_link, title, cues (entry/file/folder counts, max depth)
        or {error, kind, message}
    """
    result = do_outline(folder, document_id, title, emoji)
    if isinstance(result, dict):
        return result
    return result.to_dict()


@mcp.tool()
def preview(folder: str, emoji: bool = False) -> dict[str, Any]:
    """
    Return a Drive folder tree as an indented plain-text outline.

    Read-only: nothing is written to Docs.

    Args:
        folder: Drive folder URL or bare folder ID
        emoji: Prefix each entry with a type emoji

    Returns:
        folder_id, folder_name, outline, entry_count, file_count,
        folder_count, max_depth, or {error, kind, message}
    """
    return do_preview(folder, emoji)


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================

def _shutdown_handler(signum: int, frame: object) -> None:
    """Handle termination signals by exiting immediately.

    os._exit() is required because sys.exit() raises SystemExit,
    which asyncio's event loop catches and ignores.
    """
    os._exit(0)


if __name__ == "__main__":
    signal.signal(signal.SIGTERM, _shutdown_handler)
    signal.signal(signal.SIGINT, _shutdown_handler)
    configure_logging(LOG_LEVEL)
    mcp.run()
