"""
Drive adapter — Google Drive API wrapper.

Provides folder metadata and child listings, and exposes them as
DriveFolder / DriveFile handles that the flattener can walk.
"""

from dataclasses import dataclass
from typing import Any, Iterator

from config import PAGE_SIZE
from logging_config import log_api_call, log_api_result
from models import OutlineError, ErrorKind
from retry import with_retry
from validation import escape_drive_query, validate_drive_id
from adapters.services import get_drive_service


GOOGLE_FOLDER_MIME = "application/vnd.google-apps.folder"

# Fields for folder metadata, only what we need
FOLDER_METADATA_FIELDS = "id,name,mimeType,webViewLink"

# Fields for child listings
CHILD_LIST_FIELDS = "nextPageToken,files(id,name,mimeType,webViewLink)"


def folder_url(folder_id: str) -> str:
    return f"https://drive.google.com/drive/folders/{folder_id}"


def file_url(file_id: str) -> str:
    return f"https://drive.google.com/open?id={file_id}"


@dataclass(frozen=True)
class DriveFile:
    """A Drive file, shaped as a FileHandle."""
    id: str
    name: str
    link: str
    content_type: str

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "DriveFile":
        return cls(
            id=item["id"],
            name=item.get("name", ""),
            link=item.get("webViewLink") or file_url(item["id"]),
            content_type=item.get("mimeType", ""),
        )


@dataclass(frozen=True)
class DriveFolder:
    """
    A Drive folder, shaped as a FolderHandle.

    Each list_* call hits the API; nothing is cached between calls.
    """
    id: str
    name: str
    link: str

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "DriveFolder":
        return cls(
            id=item["id"],
            name=item.get("name", ""),
            link=item.get("webViewLink") or folder_url(item["id"]),
        )

    def list_files(self) -> Iterator[DriveFile]:
        for item in list_children(self.id, folders=False):
            yield DriveFile.from_api(item)

    def list_subfolders(self) -> Iterator["DriveFolder"]:
        for item in list_children(self.id, folders=True):
            yield DriveFolder.from_api(item)


@with_retry(max_attempts=3, delay_ms=1000)
def get_folder(folder_id: str) -> DriveFolder:
    """
    Load a folder's metadata.

    Args:
        folder_id: The folder's Drive file ID

    Returns:
        DriveFolder handle

    Raises:
        OutlineError: INVALID_INPUT if the ID is malformed or not a folder;
            NOT_FOUND / PERMISSION_DENIED / ... on API failure
    """
    validate_drive_id(folder_id)
    service = get_drive_service()

    log_api_call("drive", "files.get", fileId=folder_id)
    item = (
        service.files()
        .get(fileId=folder_id, fields=FOLDER_METADATA_FIELDS, supportsAllDrives=True)
        .execute()
    )

    if item.get("mimeType") != GOOGLE_FOLDER_MIME:
        raise OutlineError(
            ErrorKind.INVALID_INPUT,
            f"'{item.get('name', folder_id)}' is not a folder",
            details={"folder_id": folder_id, "mime_type": item.get("mimeType")},
        )

    return DriveFolder.from_api(item)


@with_retry(max_attempts=3, delay_ms=1000)
def list_children(folder_id: str, folders: bool) -> list[dict[str, Any]]:
    """
    List direct children of a Drive folder: subfolders or non-folder files.

    Pages through every result; an outline must not silently drop items.
    Ordered by name. Does not recurse.

    CRITICAL: Both supportsAllDrives=True AND includeItemsFromAllDrives=True
    are required for shared drives — omitting either returns 0 results with no error.

    Args:
        folder_id: The parent folder's Drive file ID
        folders: True for subfolders only, False for everything else

    Returns:
        Raw API items with id, name, mimeType, webViewLink

    Raises:
        OutlineError: On API failure
    """
    validate_drive_id(folder_id)
    service = get_drive_service()

    op = "=" if folders else "!="
    query = (
        f"'{escape_drive_query(folder_id)}' in parents and trashed = false "
        f"and mimeType {op} '{GOOGLE_FOLDER_MIME}'"
    )

    items: list[dict[str, Any]] = []
    page_token = None

    while True:
        kwargs: dict[str, Any] = dict(
            q=query,
            pageSize=PAGE_SIZE,
            fields=CHILD_LIST_FIELDS,
            orderBy="name",
            supportsAllDrives=True,
            includeItemsFromAllDrives=True,
        )
        if page_token:
            kwargs["pageToken"] = page_token

        log_api_call("drive", "files.list", q=query, pageToken=page_token)
        response = service.files().list(**kwargs).execute()
        items.extend(response.get("files", []))

        page_token = response.get("nextPageToken")
        if not page_token:
            break

    log_api_result("drive", "files.list", len(items))
    return items
