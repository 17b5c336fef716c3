"""
Shared pytest fixtures for drive-outline tests.

Folder trees are built in memory (tests/helpers.py) so the flattener and
renderer can be exercised without Google APIs.
"""

import pytest

from adapters.services import clear_service_cache
from tests.helpers import FakeFolder, file, folder

GOOGLE_DOC = "application/vnd.google-apps.document"
GOOGLE_SHEET = "application/vnd.google-apps.spreadsheet"
GOOGLE_SLIDES = "application/vnd.google-apps.presentation"


@pytest.fixture(autouse=True)
def _fresh_services():
    """Never let a cached real service leak between tests."""
    clear_service_cache()
    yield
    clear_service_cache()


@pytest.fixture
def simple_tree() -> FakeFolder:
    """root: A.txt, B.txt, C/ (D.txt)."""
    return folder(
        "root",
        file("A.txt"),
        file("B.txt"),
        folder("C", file("D.txt")),
    )


@pytest.fixture
def project_tree() -> FakeFolder:
    """
    A realistic three-level tree with mixed Workspace types.

    Project/
      Brief (doc)
      Budget (sheet)
      Design/
        Mockups (slides)
        Assets/
          logo.png
      Notes/            (empty)
      Archive/
        2023/
          old.pdf
    """
    return folder(
        "Project",
        file("Brief", GOOGLE_DOC),
        file("Budget", GOOGLE_SHEET),
        folder(
            "Design",
            file("Mockups", GOOGLE_SLIDES),
            folder("Assets", file("logo.png", "image/png")),
        ),
        folder("Notes"),
        folder("Archive", folder("2023", file("old.pdf", "application/pdf"))),
    )
