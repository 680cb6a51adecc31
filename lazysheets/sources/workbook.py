"""Spreadsheet access through openpyxl.

Workbooks are opened read-only, read, and closed again within one call, so
no file handle outlives the operation that needed it.
"""

from __future__ import annotations

import logging
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..errors import WorkbookError

logger = logging.getLogger(__name__)

CELL_TEXT = "text"
CELL_INT = "int"
CELL_REAL = "real"
CELL_BOOL = "bool"
CELL_EMPTY = "empty"

# SyntaxError covers malformed XML from both ElementTree (ParseError) and lxml
# (XMLSyntaxError); zlib.error covers corrupt deflate streams inside the zip.
_OPEN_ERRORS = (
    InvalidFileException,
    zipfile.BadZipFile,
    zlib.error,
    SyntaxError,
    KeyError,
    OSError,
    ValueError,
    TypeError,
)


@dataclass(frozen=True)
class SheetCell:
    """Typed spreadsheet value."""

    kind: str
    value: object = None

    @classmethod
    def from_value(cls, value: object) -> SheetCell:
        if value is None:
            return cls(CELL_EMPTY)
        if isinstance(value, bool):
            return cls(CELL_BOOL, value)
        if isinstance(value, int):
            return cls(CELL_INT, value)
        if isinstance(value, float):
            return cls(CELL_REAL, value)
        if isinstance(value, str) and value == "":
            return cls(CELL_EMPTY)
        # Dates, times and anything exotic are shown as text.
        return cls(CELL_TEXT, str(value))


@dataclass(frozen=True)
class WorkbookInfo:
    path: Path
    sheet_names: tuple[str, ...]


def _load(path: Path):
    try:
        return load_workbook(filename=str(path), read_only=True, data_only=True)
    except _OPEN_ERRORS as exc:
        raise WorkbookError(f"cannot open {path.name}: {exc}") from exc


def open_workbook(path: Path) -> WorkbookInfo:
    """Open ``path`` and return its sheet names in workbook order."""
    workbook = _load(path)
    try:
        names = tuple(workbook.sheetnames)
    finally:
        workbook.close()
    logger.info("opened %s with %d sheet(s)", path, len(names))
    return WorkbookInfo(path=path, sheet_names=names)


def read_sheet(path: Path, sheet_name: str, max_rows: int | None = None) -> list[list[SheetCell]]:
    """Return the row-major cells of one sheet, at most ``max_rows`` rows."""
    workbook = _load(path)
    try:
        if sheet_name not in workbook.sheetnames:
            raise WorkbookError(f"{path.name} has no sheet named {sheet_name!r}")
        rows: list[list[SheetCell]] = []
        try:
            worksheet = workbook[sheet_name]
            if not hasattr(worksheet, "iter_rows"):
                raise WorkbookError(f"{sheet_name!r} in {path.name} is not a worksheet")
            for values in worksheet.iter_rows(values_only=True, max_row=max_rows):
                rows.append([SheetCell.from_value(value) for value in values])
        except _OPEN_ERRORS as exc:
            raise WorkbookError(f"cannot read sheet {sheet_name!r} of {path.name}: {exc}") from exc
    finally:
        workbook.close()
    logger.debug("read %d row(s) from %s[%s]", len(rows), path, sheet_name)
    return rows
