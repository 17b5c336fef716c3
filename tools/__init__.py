"""
Tools — outline tool implementations.

cli.py and server.py provide thin wrappers that call into these.

- outline: Folder tree → styled outline in a Google Doc
- preview: Folder tree → plain-text outline, no Docs writes
"""

from .outline import do_outline, do_preview

__all__ = ["do_outline", "do_preview"]
