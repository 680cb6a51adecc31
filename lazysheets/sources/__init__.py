"""External data sources: directory listings and spreadsheet workbooks."""

from __future__ import annotations

from .fs import DEFAULT_EXTENSION, list_matching_files, normalize_extension
from .workbook import (
    CELL_BOOL,
    CELL_EMPTY,
    CELL_INT,
    CELL_REAL,
    CELL_TEXT,
    SheetCell,
    WorkbookInfo,
    open_workbook,
    read_sheet,
)

__all__ = [
    "CELL_BOOL",
    "CELL_EMPTY",
    "CELL_INT",
    "CELL_REAL",
    "CELL_TEXT",
    "DEFAULT_EXTENSION",
    "SheetCell",
    "WorkbookInfo",
    "list_matching_files",
    "normalize_extension",
    "open_workbook",
    "read_sheet",
]
