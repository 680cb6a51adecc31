"""Directory scanning for spreadsheet files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import SourceReadError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".xlsx"


def normalize_extension(extension: str | None) -> str:
    """Return ``extension`` lower-cased with a leading dot."""
    value = (extension or "").strip().lower()
    if not value:
        return DEFAULT_EXTENSION
    return value if value.startswith(".") else f".{value}"


def _is_hidden(name: str) -> bool:
    # "~$" prefixes are office lock files next to an open workbook.
    return name.startswith(".") or name.startswith("~$")


def list_matching_files(directory: Path, extension: str = DEFAULT_EXTENSION, show_hidden: bool = False) -> list[Path]:
    """Return regular files in ``directory`` whose suffix matches ``extension``.

    The scan is not recursive. Results are sorted case-insensitively by name.
    Raises ``SourceReadError`` when the directory cannot be read.
    """
    wanted = normalize_extension(extension)
    matches: list[Path] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if not show_hidden and _is_hidden(entry.name):
                    continue
                try:
                    is_file = entry.is_file()
                except OSError:
                    continue
                if not is_file:
                    continue
                if os.path.splitext(entry.name)[1].lower() != wanted:
                    continue
                matches.append(Path(entry.path))
    except OSError as exc:
        raise SourceReadError(f"cannot read directory {directory}: {exc.strerror or exc}") from exc

    matches.sort(key=lambda path: (path.name.lower(), path.name))
    logger.debug("found %d %s files in %s", len(matches), wanted, directory)
    return matches
