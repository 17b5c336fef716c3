#!/usr/bin/env python3
"""
CLI interface for drive-outline.

Usage:
    outline outline <folder_url_or_id> [--doc ID] [--title T] [--emoji]
    outline preview <folder_url_or_id> [--emoji]

Provides the same functionality as the MCP tools but via command line.
"""

import argparse
import json
import sys

from config import LOG_LEVEL
from logging_config import configure_logging
from tools import do_outline, do_preview


def cmd_outline(args: argparse.Namespace) -> int:
    """Write a folder outline into a Google Doc."""
    result = do_outline(args.folder, args.doc, args.title, args.emoji)
    if isinstance(result, dict):
        print(json.dumps(result, indent=2, ensure_ascii=False))
        return 1
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    """Print a folder outline as text."""
    result = do_preview(args.folder, args.emoji)
    if result.get("error"):
        print(json.dumps(result, indent=2, ensure_ascii=False))
        return 1
    print(result["outline"])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="outline",
        description="Render a Google Drive folder tree as a Google Docs outline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    outline preview "https://drive.google.com/drive/folders/1abc..."
    outline preview 1abc... --emoji
    outline outline 1abc... --title "Project map"
    outline outline 1abc... --doc 1xyz... --emoji
""",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help=f"Log level (default: {LOG_LEVEL})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # outline
    outline_p = subparsers.add_parser("outline", help="Write the outline into a Google Doc")
    outline_p.add_argument("folder", help="Drive folder URL or ID")
    outline_p.add_argument("--doc", help="Existing document ID to append to (default: create a new Doc)")
    outline_p.add_argument("--title", help="Title for the new Doc")
    outline_p.add_argument("--emoji", action="store_true", help="Prefix entries with a type emoji")
    outline_p.set_defaults(func=cmd_outline)

    # preview
    preview_p = subparsers.add_parser("preview", help="Print the outline as text")
    preview_p.add_argument("folder", help="Drive folder URL or ID")
    preview_p.add_argument("--emoji", action="store_true", help="Prefix entries with a type emoji")
    preview_p.set_defaults(func=cmd_preview)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
