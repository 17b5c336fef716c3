"""
Outline renderer — pure functions, no I/O.

Converts a flattened entry list into either:
- Docs API batchUpdate requests (indented, styled, hyperlinked paragraphs)
- A plain-text preview for the terminal

Docs API indices count UTF-16 code units, not Python characters. Emoji
decorations are outside the BMP (two units each, plus one for a variation
selector where present), so every offset goes through _utf16_len().
"""

from typing import Any

from models import Entry

# Indentation per depth level, in points
INDENT_PT = 18

# Font sizes, in points
FOLDER_FONT_SIZE = 12
FILE_FONT_SIZE = 10


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def entry_line(entry: Entry) -> str:
    """Visible text of one outline row (no newline)."""
    if entry.decoration:
        return f"{entry.decoration} {entry.name}"
    return entry.name


def _paragraph_style_request(start: int, end: int, depth: int) -> dict[str, Any]:
    indent = {"magnitude": depth * INDENT_PT, "unit": "PT"}
    return {
        "updateParagraphStyle": {
            "range": {"startIndex": start, "endIndex": end},
            "paragraphStyle": {
                "namedStyleType": "NORMAL_TEXT",
                "indentStart": indent,
                "indentFirstLine": indent,
            },
            "fields": "namedStyleType,indentStart,indentFirstLine",
        }
    }


def _text_style_request(start: int, end: int, is_container: bool) -> dict[str, Any]:
    size = FOLDER_FONT_SIZE if is_container else FILE_FONT_SIZE
    return {
        "updateTextStyle": {
            "range": {"startIndex": start, "endIndex": end},
            "textStyle": {
                "bold": is_container,
                "fontSize": {"magnitude": size, "unit": "PT"},
            },
            "fields": "bold,fontSize",
        }
    }


def _link_request(start: int, end: int, url: str) -> dict[str, Any]:
    return {
        "updateTextStyle": {
            "range": {"startIndex": start, "endIndex": end},
            "textStyle": {"link": {"url": url}},
            "fields": "link",
        }
    }


def build_outline_requests(entries: list[Entry], insert_index: int = 1) -> list[dict[str, Any]]:
    """
    Build batchUpdate requests that write the outline at insert_index.

    One insertText carries the whole outline (one paragraph per entry), then
    each paragraph is reset to NORMAL_TEXT before getting its indentation,
    its bold/size styling, and a link on the name span. Folders are bold at
    FOLDER_FONT_SIZE; files are plain at FILE_FONT_SIZE.

    Args:
        entries: Output of flatten()
        insert_index: Docs body index to insert at; must sit just before a
            paragraph's newline. 1 is the start of an empty document;
            anything greater is treated as "after existing content" and the
            outline opens with a newline.

    Returns:
        Requests in application order. Empty if there are no entries.
    """
    if not entries:
        return []

    lead = "\n" if insert_index > 1 else ""
    lines = [entry_line(e) for e in entries]
    # The last paragraph is closed by the newline already at the insert point
    text = lead + "\n".join(lines)

    requests: list[dict[str, Any]] = []
    # A lone unnamed entry is just the empty paragraph already at insert_index
    if text:
        requests.append({"insertText": {"location": {"index": insert_index}, "text": text}})

    cursor = insert_index + _utf16_len(lead)
    for entry, line in zip(entries, lines):
        para_start = cursor
        text_end = para_start + _utf16_len(line)
        para_end = text_end + 1

        name_start = text_end - _utf16_len(entry.name)

        requests.append(_paragraph_style_request(para_start, para_end, entry.depth))
        if text_end > para_start:
            requests.append(_text_style_request(para_start, text_end, entry.is_container))
        if entry.link and text_end > name_start:
            requests.append(_link_request(name_start, text_end, entry.link))

        cursor = para_end

    return requests


def extract_outline_text(entries: list[Entry], indent: str = "  ") -> str:
    """
    Render entries as an indented plain-text outline.

    Folders get a trailing "/" so the tree reads without styling.
    """
    lines: list[str] = []
    for entry in entries:
        suffix = "/" if entry.is_container else ""
        lines.append(f"{indent * entry.depth}{entry_line(entry)}{suffix}")
    return "\n".join(lines)
