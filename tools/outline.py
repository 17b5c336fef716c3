"""
Outline tool implementation.

Resolves a folder URL, walks the folder tree, and writes the flattened
outline into a Google Doc (existing or new). Also offers a text preview
that skips the Docs side entirely.
"""

from typing import Any

from adapters.docs import apply_requests, create_document, document_url, get_document_end
from adapters.drive import get_folder
from extractors.hierarchy import flatten, summarize
from extractors.outline import build_outline_requests, extract_outline_text
from logging_config import logger
from models import OutlineError, OutlineResult
from validation import require_identifier


def do_outline(
    folder_url: str,
    document_id: str | None = None,
    title: str | None = None,
    decorate: bool = False,
) -> OutlineResult | dict[str, Any]:
    """
    Write an outline of a Drive folder tree into a Google Doc.

    Args:
        folder_url: Drive folder URL or bare folder ID
        document_id: Existing Doc to append to. If omitted, a new Doc is created.
        title: Title for the new Doc (default: "<folder name> outline").
            Ignored when document_id is given.
        decorate: Prefix each entry with a category emoji

    Returns:
        OutlineResult on success, error dict on failure
    """
    try:
        return _outline(folder_url, document_id, title, decorate)
    except OutlineError as e:
        logger.warning(f"outline failed ({e.kind.value}): {e.message}")
        return e.to_dict()


def do_preview(folder_url: str, decorate: bool = False) -> dict[str, Any]:
    """
    Walk a Drive folder tree and return the outline as plain text.

    Returns:
        {folder_id, folder_name, outline, entry_count, ...} or error dict
    """
    try:
        folder_id = require_identifier(folder_url)
        folder = get_folder(folder_id)
        entries = flatten(folder, 0, decorate)
    except OutlineError as e:
        logger.warning(f"preview failed ({e.kind.value}): {e.message}")
        return e.to_dict()

    return {
        "folder_id": folder_id,
        "folder_name": folder.name,
        "outline": extract_outline_text(entries),
        **summarize(entries),
    }


def _outline(
    folder_url: str,
    document_id: str | None,
    title: str | None,
    decorate: bool,
) -> OutlineResult:
    folder_id = require_identifier(folder_url)
    folder = get_folder(folder_id)

    # Walk the whole tree before touching Docs: a failed walk writes nothing
    entries = flatten(folder, 0, decorate)
    summary = summarize(entries)
    logger.info(
        f"Flattened '{folder.name}': {summary['file_count']} files, "
        f"{summary['folder_count']} folders, max depth {summary['max_depth']}"
    )

    created = not document_id
    if document_id:
        meta = get_document_end(document_id)
        doc_title = meta["title"]
        insert_index = max(meta["end_index"] - 1, 1)
    else:
        doc_title = title or f"{folder.name} outline"
        document_id = create_document(doc_title)
        insert_index = 1

    requests = build_outline_requests(entries, insert_index)
    if requests:
        try:
            apply_requests(document_id, requests)
        except OutlineError as e:
            # The token can't delete files, so report the Doc instead of orphaning it
            e.details.update({
                "document_id": document_id,
                "web_link": document_url(document_id),
                "document_created": created,
            })
            raise
    else:
        logger.info(f"'{folder.name}' is empty; nothing written")

    return OutlineResult(
        folder_id=folder_id,
        folder_name=folder.name,
        document_id=document_id,
        title=doc_title,
        web_link=document_url(document_id),
        decorated=decorate,
        **summary,
    )
