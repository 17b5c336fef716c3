"""
Tests for tools/outline.py — orchestration of lookup, flatten, render, write.

Drive and Docs adapters are patched; folder trees are in-memory fakes.
"""

from unittest.mock import MagicMock, patch

import pytest

from models import OutlineError, ErrorKind, OutlineResult
from tests.helpers import BrokenFolder, FakeFolder, file, folder
from tools.outline import do_outline, do_preview

FOLDER_ID = "1aBcDeFgHiJkLmNoPqRsTuVwXyZ"
FOLDER_URL = f"https://drive.google.com/drive/folders/{FOLDER_ID}?usp=sharing"

PREFIX = "tools.outline"


@pytest.fixture
def docs_mocks():
    """Patch every Docs adapter call used by the tool."""
    with (
        patch(f"{PREFIX}.create_document", return_value="newdoc") as m_create,
        patch(f"{PREFIX}.get_document_end", return_value={"title": "Existing", "end_index": 30}) as m_end,
        patch(f"{PREFIX}.apply_requests", return_value={"replies": []}) as m_apply,
    ):
        yield {"create": m_create, "end": m_end, "apply": m_apply}


class TestDoOutline:
    def test_creates_new_doc(self, simple_tree: FakeFolder, docs_mocks: dict[str, MagicMock]) -> None:
        with patch(f"{PREFIX}.get_folder", return_value=simple_tree) as m_folder:
            result = do_outline(FOLDER_URL)

        m_folder.assert_called_once_with(FOLDER_ID)
        docs_mocks["create"].assert_called_once_with("root outline")
        docs_mocks["end"].assert_not_called()

        assert isinstance(result, OutlineResult)
        assert result.document_id == "newdoc"
        assert result.title == "root outline"
        assert result.web_link == "https://docs.google.com/document/d/newdoc/edit"
        assert (result.entry_count, result.file_count, result.folder_count) == (4, 3, 1)
        assert result.max_depth == 1

        doc_id, requests = docs_mocks["apply"].call_args.args
        assert doc_id == "newdoc"
        assert requests[0]["insertText"]["location"]["index"] == 1
        assert requests[0]["insertText"]["text"] == "A.txt\nB.txt\nC\nD.txt"

    def test_custom_title(self, simple_tree: FakeFolder, docs_mocks: dict[str, MagicMock]) -> None:
        with patch(f"{PREFIX}.get_folder", return_value=simple_tree):
            result = do_outline(FOLDER_ID, title="Map")

        docs_mocks["create"].assert_called_once_with("Map")
        assert result.title == "Map"

    def test_appends_to_existing_doc(self, simple_tree: FakeFolder, docs_mocks: dict[str, MagicMock]) -> None:
        with patch(f"{PREFIX}.get_folder", return_value=simple_tree):
            result = do_outline(FOLDER_ID, document_id="doc9", title="ignored")

        docs_mocks["create"].assert_not_called()
        docs_mocks["end"].assert_called_once_with("doc9")
        assert result.title == "Existing"
        _, requests = docs_mocks["apply"].call_args.args
        # end_index 30 → insert before the final newline, on a fresh paragraph
        assert requests[0]["insertText"]["location"]["index"] == 29
        assert requests[0]["insertText"]["text"].startswith("\n")

    def test_decorate(self, simple_tree: FakeFolder, docs_mocks: dict[str, MagicMock]) -> None:
        with patch(f"{PREFIX}.get_folder", return_value=simple_tree):
            result = do_outline(FOLDER_ID, decorate=True)

        _, requests = docs_mocks["apply"].call_args.args
        assert requests[0]["insertText"]["text"].startswith("📄 A.txt\n")
        assert result.decorated is True

    def test_empty_folder_writes_nothing(self, docs_mocks: dict[str, MagicMock]) -> None:
        with patch(f"{PREFIX}.get_folder", return_value=folder("Nothing")):
            result = do_outline(FOLDER_ID)

        docs_mocks["apply"].assert_not_called()
        assert result.entry_count == 0

    def test_invalid_url_returns_error(self, docs_mocks: dict[str, MagicMock]) -> None:
        with patch(f"{PREFIX}.get_folder") as m_folder:
            result = do_outline("https://example.com/nope")

        assert result["error"] is True
        assert result["kind"] == "invalid_input"
        m_folder.assert_not_called()
        docs_mocks["create"].assert_not_called()

    def test_provider_failure_writes_nothing(self, docs_mocks: dict[str, MagicMock]) -> None:
        """A walk that fails part-way never reaches Docs."""
        root = folder("root", file("ok.txt"))
        root.subfolders.append(BrokenFolder(
            name="locked",
            error=OutlineError(ErrorKind.PERMISSION_DENIED, "no access to locked"),
        ))

        with patch(f"{PREFIX}.get_folder", return_value=root):
            result = do_outline(FOLDER_ID)

        assert result == {
            "error": True,
            "kind": "permission_denied",
            "message": "no access to locked",
            "retryable": False,
        }
        docs_mocks["create"].assert_not_called()
        docs_mocks["apply"].assert_not_called()

    def test_write_failure_reports_created_doc(
        self, simple_tree: FakeFolder, docs_mocks: dict[str, MagicMock],
    ) -> None:
        """A new Doc that couldn't be filled is still surfaced to the caller."""
        docs_mocks["apply"].side_effect = OutlineError(
            ErrorKind.NETWORK_ERROR, "write failed", retryable=True,
        )

        with patch(f"{PREFIX}.get_folder", return_value=simple_tree):
            result = do_outline(FOLDER_ID)

        docs_mocks["create"].assert_called_once()
        assert result == {
            "error": True,
            "kind": "network_error",
            "message": "write failed",
            "retryable": True,
            "document_id": "newdoc",
            "web_link": "https://docs.google.com/document/d/newdoc/edit",
            "document_created": True,
        }

    def test_write_failure_on_existing_doc(
        self, simple_tree: FakeFolder, docs_mocks: dict[str, MagicMock],
    ) -> None:
        docs_mocks["apply"].side_effect = OutlineError(ErrorKind.PERMISSION_DENIED, "read-only")

        with patch(f"{PREFIX}.get_folder", return_value=simple_tree):
            result = do_outline(FOLDER_ID, document_id="doc9")

        docs_mocks["create"].assert_not_called()
        assert result["kind"] == "permission_denied"
        assert result["document_id"] == "doc9"
        assert result["document_created"] is False

    def test_to_dict(self, simple_tree: FakeFolder, docs_mocks: dict[str, MagicMock]) -> None:
        with patch(f"{PREFIX}.get_folder", return_value=simple_tree):
            result = do_outline(FOLDER_ID)

        assert result.to_dict() == {
            "folder_id": FOLDER_ID,
            "folder_name": "root",
            "document_id": "newdoc",
            "title": "root outline",
            "web_link": "https://docs.google.com/document/d/newdoc/edit",
            "operation": "outline",
            "cues": {
                "entry_count": 4,
                "folder_count": 1,
                "file_count": 3,
                "max_depth": 1,
                "decorated": False,
            },
        }


class TestDoPreview:
    def test_returns_text_and_counts(self, simple_tree: FakeFolder) -> None:
        with patch(f"{PREFIX}.get_folder", return_value=simple_tree):
            result = do_preview(FOLDER_URL)

        assert result == {
            "folder_id": FOLDER_ID,
            "folder_name": "root",
            "outline": "A.txt\nB.txt\nC/\n  D.txt",
            "entry_count": 4,
            "folder_count": 1,
            "file_count": 3,
            "max_depth": 1,
        }

    def test_error(self) -> None:
        with patch(
            f"{PREFIX}.get_folder",
            side_effect=OutlineError(ErrorKind.NOT_FOUND, "File not found"),
        ):
            result = do_preview(FOLDER_ID)

        assert result["error"] is True
        assert result["kind"] == "not_found"
