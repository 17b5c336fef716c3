"""
Category classifier — pure functions, no I/O.

MIME type → FileCategory → decoration emoji. Both lookups are total:
unknown MIME types classify as OTHER, and OTHER renders as a generic page.
"""

from models import FileCategory

GOOGLE_APPS_PREFIX = "application/vnd.google-apps."

CATEGORY_BY_MIME: dict[str, FileCategory] = {
    GOOGLE_APPS_PREFIX + "spreadsheet": FileCategory.SPREADSHEET,
    GOOGLE_APPS_PREFIX + "document": FileCategory.DOCUMENT,
    GOOGLE_APPS_PREFIX + "presentation": FileCategory.PRESENTATION,
    GOOGLE_APPS_PREFIX + "form": FileCategory.FORM,
    GOOGLE_APPS_PREFIX + "site": FileCategory.SITE,
    GOOGLE_APPS_PREFIX + "jam": FileCategory.JAMBOARD,
    GOOGLE_APPS_PREFIX + "script": FileCategory.SCRIPT,
    GOOGLE_APPS_PREFIX + "drawing": FileCategory.DRAWING,
    "application/pdf": FileCategory.PDF,
}

GENERIC_DECORATION = "📄"
FOLDER_DECORATION = "📁"

DECORATION_BY_CATEGORY: dict[FileCategory, str] = {
    FileCategory.SPREADSHEET: "📊",
    FileCategory.DOCUMENT: "📝",
    FileCategory.PRESENTATION: "📽️",
    FileCategory.FORM: "📋",
    FileCategory.SITE: "🌐",
    FileCategory.JAMBOARD: "🖍️",
    FileCategory.SCRIPT: "📜",
    FileCategory.DRAWING: "🎨",
    FileCategory.PDF: "📕",
    FileCategory.OTHER: GENERIC_DECORATION,
}


def classify(content_type: str) -> FileCategory:
    """Classify a file by exact MIME type match."""
    return CATEGORY_BY_MIME.get(content_type, FileCategory.OTHER)


def decoration_for(category: FileCategory) -> str:
    return DECORATION_BY_CATEGORY.get(category, GENERIC_DECORATION)
