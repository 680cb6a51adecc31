"""Command-line front door for lazysheets.

Parses CLI options, resolves the directory to browse, and sets up logging.
Then dispatches into the interactive browser runtime, or prints the file
list when no terminal is attached.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import SourceReadError
from .reconfigure import BrowseOptions
from .runtime import run_browser
from .runtime.app import stdin_is_terminal
from .runtime.config import (
    load_extension,
    load_max_preview_rows,
    load_show_hidden,
    load_theme_name,
    save_theme_name,
)
from .runtime.logs import configure_logging
from .sources.fs import list_matching_files, normalize_extension
from .ui_theme import available_theme_names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazysheets",
        description="Browse spreadsheet files and their sheets in the terminal.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to browse. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--extension", default=None, help="File extension to list (default: .xlsx).")
    parser.add_argument("--show-hidden", action="store_true", help="Include hidden and lock files.")
    parser.add_argument("--list", action="store_true", help="Print matching files and exit.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write the session log to this file.")
    parser.add_argument("--debug", action="store_true", help="Log debug messages.")
    return parser


def resolve_options(args: argparse.Namespace) -> BrowseOptions:
    """Merge CLI flags over persisted config values."""
    extension = normalize_extension(args.extension) if args.extension else load_extension()
    return BrowseOptions(
        extension=extension,
        show_hidden=bool(args.show_hidden) or load_show_hidden(),
        max_preview_rows=load_max_preview_rows(),
    )


def print_listing(root: Path, options: BrowseOptions) -> None:
    try:
        paths = list_matching_files(root, options.extension, options.show_hidden)
    except SourceReadError as exc:
        raise SystemExit(str(exc)) from exc
    for path in paths:
        sys.stdout.write(f"{path.name}\n")


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch lazysheets on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)

    if default_path is None:
        default_path = Path.cwd()
    root = Path(args.path or default_path)
    if not root.exists():
        raise SystemExit(f"Path not found: {root}")
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")

    options = resolve_options(args)
    if args.list or not stdin_is_terminal():
        print_listing(root, options)
        return

    configure_logging(args.log_file, debug=args.debug)
    theme_name = args.theme
    if theme_name is not None:
        save_theme_name(theme_name)
    else:
        theme_name = load_theme_name()

    try:
        run_browser(root, options, theme_name=theme_name, no_color=args.no_color)
    except SourceReadError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
