"""Exception types raised across collaborators and reconfiguration."""

from __future__ import annotations


class LazySheetsError(Exception):
    """Base class for recoverable browser errors."""


class SourceReadError(LazySheetsError):
    """Directory listing could not be read."""


class WorkbookError(LazySheetsError):
    """Workbook could not be opened or a sheet could not be read."""


class InputClosedError(OSError):
    """Terminal input reached end-of-file while waiting for an event."""
