"""
Table extraction.

Every sheet of a workbook is turned into a row-major table of strings. The
traversal is shared; a ``TableSink`` decides the container shape:

- ``ArrayTableSink`` pre-allocates ``(last_row_index + 1) x columns`` slots
  and leaves absent rows as a row of ``None``.
- ``ListTableSink`` appends rows and skips absent rows entirely.

The column count of a sheet always comes from its first row. Cells to the
right of the first row's last cell are not read, and a sheet without a
first row raises ``MissingHeaderRowError``.

Example:
    >>> from xls_tables import export_workbook_as_string_list
    >>> tables = export_workbook_as_string_list("people.xls")
    >>> tables[0][0]
    ['Name', 'Age']
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Generic, TypeVar

import openpyxl
from openpyxl.worksheet.worksheet import Worksheet

from .cells import cell_value_as_string, last_row_index, present_rows
from .errors import MissingHeaderRowError
from .models import SheetTable
from .workbook import WorkbookHandle, load_workbook, read_xls_workbook

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TableSink(ABC, Generic[T]):
    """Receives the rows of one sheet and builds its table."""

    @abstractmethod
    def start(self, rows: int, columns: int) -> None:
        """Begin a sheet of ``rows + 1`` rows and ``columns`` columns."""

    @abstractmethod
    def add_row(self, index: int, values: list[str]) -> None:
        """Store the text of an existing row."""

    @abstractmethod
    def missing_row(self, index: int) -> None:
        """Record that the row at ``index`` is absent."""

    @abstractmethod
    def table(self) -> T:
        """Return the finished table."""


class ArrayTableSink(TableSink[list[list[str | None]]]):
    """Fixed-size table; absent rows keep their unset slots."""

    def __init__(self) -> None:
        self._rows: list[list[str | None]] = []

    def start(self, rows: int, columns: int) -> None:
        self._rows = [[None] * columns for _ in range(rows + 1)]

    def add_row(self, index: int, values: list[str]) -> None:
        self._rows[index][:] = values

    def missing_row(self, index: int) -> None:
        pass

    def table(self) -> list[list[str | None]]:
        return self._rows


class ListTableSink(TableSink[list[list[str]]]):
    """Growing table; absent rows are skipped."""

    def __init__(self) -> None:
        self._rows: list[list[str]] = []

    def start(self, rows: int, columns: int) -> None:
        self._rows = []

    def add_row(self, index: int, values: list[str]) -> None:
        self._rows.append(values)

    def missing_row(self, index: int) -> None:
        pass

    def table(self) -> list[list[str]]:
        return self._rows


def export_workbook(file_path: str | Path) -> list[list[list[str | None]]]:
    """Extract every sheet of a legacy ``.xls`` file as a fixed-size table.

    Formula cells of a legacy file hold only their cached result, because
    xlrd does not decode formula text. A formula saved without a cached
    result reads as ``""``.

    Args:
        file_path: Path to the ``.xls`` file.

    Returns:
        One table per sheet, in sheet order. Each table has
        ``last_row_index + 1`` rows of the first row's width; absent rows
        are rows of ``None``.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        WorkbookReadError: If the file cannot be decoded.
        MissingHeaderRowError: If a sheet has no first row.
    """
    workbook = read_xls_workbook(file_path)
    return _walk_workbook(workbook, ArrayTableSink)


def export_workbook_as_string_list(file_path: str | Path) -> list[list[list[str]]]:
    """Extract every sheet of a legacy ``.xls`` file as nested lists.

    Same traversal as ``export_workbook`` but absent rows are left out.
    Formulas read as their cached results, as in ``export_workbook``.
    """
    return workbook_to_string_lists(read_xls_workbook(file_path))


def workbook_to_string_lists(
    workbook: openpyxl.Workbook | WorkbookHandle,
) -> list[list[list[str]]]:
    """Extract every sheet of an already open workbook as nested lists.

    Use this for workbooks read with ``read_xlsx_workbook`` or any other
    open workbook. Ownership passes to this function: the workbook is
    closed before it returns, also when extraction fails.
    """
    if isinstance(workbook, WorkbookHandle):
        handle = workbook
    else:
        handle = WorkbookHandle(workbook)
    with handle:
        return _walk_sheets(handle.workbook, ListTableSink)


def read_sheet_tables(file_path: str | Path) -> list[SheetTable]:
    """Extract every sheet of a ``.xls`` or ``.xlsx`` file with its name.

    Args:
        file_path: Path to the workbook; the format follows the suffix.

    Returns:
        One SheetTable per sheet, absent rows left out.
    """
    path = Path(file_path)
    with WorkbookHandle(load_workbook(path), path) as handle:
        names = handle.sheet_names
        tables = _walk_sheets(handle.workbook, ListTableSink)
    return [SheetTable(name=name, rows=rows) for name, rows in zip(names, tables)]


def sheet_to_table(sheet: Worksheet, sink: TableSink[T]) -> T:
    """Run the shared traversal over one sheet.

    Raises:
        MissingHeaderRowError: If the sheet has no first row.
    """
    rows = present_rows(sheet)
    header = rows.get(0)
    if header is None:
        raise MissingHeaderRowError(sheet.title)

    last_row = last_row_index(sheet)
    columns = max(header) + 1
    sink.start(last_row, columns)

    for index in range(last_row + 1):
        row = rows.get(index)
        if row is None:
            sink.missing_row(index)
            continue
        sink.add_row(index, [cell_value_as_string(row.get(column)) for column in range(columns)])

    logger.debug(
        "Extracted sheet %r: %d row(s) x %d column(s)", sheet.title, last_row + 1, columns
    )
    return sink.table()


def _walk_workbook(workbook: openpyxl.Workbook, sink_factory: Callable[[], TableSink[T]]) -> list[T]:
    """Extract all sheets and close the workbook on every exit path."""
    try:
        return _walk_sheets(workbook, sink_factory)
    finally:
        workbook.close()


def _walk_sheets(workbook: openpyxl.Workbook, sink_factory: Callable[[], TableSink[T]]) -> list[T]:
    return [sheet_to_table(sheet, sink_factory()) for sheet in workbook.worksheets]
