"""Exception classes raised by xls-tables.

Exception Hierarchy:
    XlsTablesError (base)
    ├── UnsupportedFormatError
    ├── WorkbookReadError
    └── MissingHeaderRowError

Every concrete error is also a ``ValueError`` so callers that predate the
hierarchy keep working. A missing input file is reported with the built-in
``FileNotFoundError`` and write failures with ``OSError``.
"""

from __future__ import annotations

from pathlib import Path


class XlsTablesError(Exception):
    """Base exception for all xls-tables errors."""


class UnsupportedFormatError(XlsTablesError, ValueError):
    """Raised when a file suffix maps to no known workbook format."""

    def __init__(self, path: str | Path, expected: tuple[str, ...] | None = None) -> None:
        self.path = Path(path)
        self.expected = expected or ()
        message = f"Not a supported Excel file: {self.path}"
        if self.expected:
            message += f" (expected one of: {', '.join(self.expected)})"
        super().__init__(message)


class WorkbookReadError(XlsTablesError, ValueError):
    """Raised when the spreadsheet engine cannot decode a workbook."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not open Excel file {self.path}: {reason}")


class MissingHeaderRowError(XlsTablesError, ValueError):
    """Raised when a sheet has no row 0 to take its column count from."""

    def __init__(self, sheet_name: str) -> None:
        self.sheet_name = sheet_name
        super().__init__(
            f"Sheet {sheet_name!r} has no first row; its column count is undefined"
        )
