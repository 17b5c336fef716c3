"""
Docs adapter — Google Docs API wrapper.

Creates documents, reads where their body ends, and applies batchUpdate
requests built by extractors.outline.
"""

from typing import Any

from logging_config import log_api_call, log_api_result
from retry import with_retry
from validation import validate_drive_id
from adapters.services import get_docs_service


def document_url(document_id: str) -> str:
    return f"https://docs.google.com/document/d/{document_id}/edit"


@with_retry(max_attempts=3, delay_ms=1000)
def get_document_end(document_id: str) -> dict[str, Any]:
    """
    Fetch document title and body end index.

    Returns:
        {"title": str, "end_index": int}. end_index is 1 past the body's
        final newline; an empty document has end_index 2.
    """
    validate_drive_id(document_id, "document_id")
    service = get_docs_service()

    log_api_call("docs", "documents.get", documentId=document_id)
    doc = (
        service.documents()
        .get(documentId=document_id, fields="title,body(content(endIndex))")
        .execute()
    )
    body_content = doc.get("body", {}).get("content", [])
    end_index = body_content[-1].get("endIndex", 1) if body_content else 1
    return {"title": doc.get("title", "Untitled"), "end_index": end_index}


@with_retry(max_attempts=3, delay_ms=1000)
def create_document(title: str) -> str:
    """Create an empty Google Doc and return its ID."""
    service = get_docs_service()

    log_api_call("docs", "documents.create", title=title)
    doc = service.documents().create(body={"title": title}).execute()
    return str(doc["documentId"])


@with_retry(max_attempts=3, delay_ms=1000)
def apply_requests(document_id: str, requests: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Apply batchUpdate requests to a document.

    batchUpdate is atomic: either every request applies or none does.
    """
    validate_drive_id(document_id, "document_id")
    service = get_docs_service()

    log_api_call("docs", "documents.batchUpdate", documentId=document_id, requests=len(requests))
    result = (
        service.documents()
        .batchUpdate(documentId=document_id, body={"requests": requests})
        .execute()
    )
    log_api_result("docs", "documents.batchUpdate", len(result.get("replies", [])))
    return dict(result)
