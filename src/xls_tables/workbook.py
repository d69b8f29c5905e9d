"""
Opening workbooks.

Both on-disk formats end up as an in-memory ``openpyxl.Workbook``:

- ``.xlsx``/``.xlsm``/``.xltx``/``.xltm`` are loaded by openpyxl directly.
- Legacy ``.xls`` files are decoded by xlrd and copied cell by cell into a
  new openpyxl workbook. Cells missing from the file stay absent, explicit
  blank records become present cells without a value. xlrd does not expose
  formula text, so legacy formulas arrive as their cached results.

Example:
    >>> from xls_tables import open_workbook
    >>> with open_workbook("report.xls") as wb:
    ...     print(wb.sheet_names)
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import openpyxl
import xlrd
from openpyxl.cell.cell import TYPE_ERROR, TYPE_STRING
from openpyxl.worksheet.worksheet import Worksheet
from xlrd.biffh import error_text_from_code

from .errors import UnsupportedFormatError, WorkbookReadError

logger = logging.getLogger(__name__)

XLSX_SUFFIXES = (".xlsx", ".xlsm", ".xltx", ".xltm")
XLS_SUFFIXES = (".xls",)


def read_xlsx_workbook(file_path: str | Path) -> openpyxl.Workbook:
    """Read a workbook in the zipped XML format.

    Args:
        file_path: Path to the ``.xlsx`` file.

    Returns:
        The open workbook. The caller is responsible for closing it.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        WorkbookReadError: If openpyxl cannot decode the file.
    """
    path = _existing_path(file_path)
    try:
        workbook = openpyxl.load_workbook(path, data_only=False)
    except OSError:
        raise
    except Exception as e:
        raise WorkbookReadError(path, str(e)) from e

    logger.debug("Opened %s with %d sheet(s)", path.name, len(workbook.sheetnames))
    return workbook


def read_xls_workbook(file_path: str | Path) -> openpyxl.Workbook:
    """Read a workbook in the legacy binary format.

    Args:
        file_path: Path to the ``.xls`` file.

    Returns:
        An in-memory openpyxl copy of the workbook. The caller is
        responsible for closing it.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        WorkbookReadError: If xlrd cannot decode the file.
    """
    path = _existing_path(file_path)
    try:
        book = xlrd.open_workbook(str(path), formatting_info=True)
    except OSError:
        raise
    except Exception as e:
        raise WorkbookReadError(path, str(e)) from e

    try:
        workbook = openpyxl.Workbook()
        workbook.remove(workbook.active)
        for source in book.sheets():
            _copy_legacy_sheet(source, workbook.create_sheet(source.name))
    finally:
        book.release_resources()

    logger.debug("Opened %s with %d sheet(s)", path.name, len(workbook.sheetnames))
    return workbook


def load_workbook(file_path: str | Path) -> openpyxl.Workbook:
    """Read a workbook of either format, chosen by file suffix."""
    suffix = Path(file_path).suffix.lower()
    if suffix in XLS_SUFFIXES:
        return read_xls_workbook(file_path)
    if suffix in XLSX_SUFFIXES:
        return read_xlsx_workbook(file_path)
    raise UnsupportedFormatError(file_path, XLS_SUFFIXES + XLSX_SUFFIXES)


@contextmanager
def open_workbook(file_path: str | Path) -> Iterator["WorkbookHandle"]:
    """Open a workbook of either format for the duration of a block.

    Yields:
        WorkbookHandle that is closed when the block exits.
    """
    handle = WorkbookHandle(load_workbook(file_path), Path(file_path))
    try:
        yield handle
    finally:
        handle.close()


class WorkbookHandle:
    """Open workbook whose release is the holder's responsibility.

    Functions that return a ``WorkbookHandle`` transfer ownership: the
    workbook stays open until ``close()`` is called or a ``with`` block
    around the handle exits.
    """

    def __init__(self, workbook: openpyxl.Workbook, file_path: Path | None = None):
        self._workbook = workbook
        self._file_path = file_path
        self._closed = False

    def __enter__(self) -> "WorkbookHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<WorkbookHandle {self._file_path} ({state})>"

    @property
    def workbook(self) -> openpyxl.Workbook:
        """The underlying openpyxl workbook."""
        if self._closed:
            raise ValueError("Workbook handle is closed")
        return self._workbook

    @property
    def file_path(self) -> Path | None:
        """Path the workbook was read from."""
        return self._file_path

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def sheet_names(self) -> list[str]:
        """List of sheet names in the workbook."""
        return self.workbook.sheetnames

    def sheet(self, sheet_name: str) -> Worksheet:
        """Get a sheet by name.

        Raises:
            ValueError: If the sheet does not exist.
        """
        if sheet_name not in self.sheet_names:
            raise ValueError(f"Sheet not found: {sheet_name}")
        return self.workbook[sheet_name]

    def save(self, file_path: str | Path) -> Path:
        """Write the workbook in the zipped XML format.

        Args:
            file_path: Destination path, must have an ``.xlsx`` style suffix.

        Returns:
            The destination path.
        """
        path = Path(file_path)
        if path.suffix.lower() not in XLSX_SUFFIXES:
            raise UnsupportedFormatError(path, XLSX_SUFFIXES)
        self.workbook.save(path)
        return path

    def close(self) -> None:
        """Release the workbook. Closing twice is a no-op."""
        if self._closed:
            return
        self._workbook.close()
        self._closed = True
        logger.debug("Closed workbook %s", self._file_path)


def _existing_path(file_path: str | Path) -> Path:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path


def _copy_legacy_sheet(source: xlrd.sheet.Sheet, target: Worksheet) -> None:
    """Copy the present cells of an xlrd sheet into an openpyxl sheet."""
    for row_index in range(source.nrows):
        types = source.row_types(row_index)
        values = source.row_values(row_index)
        for column_index, (ctype, value) in enumerate(zip(types, values)):
            if ctype == xlrd.XL_CELL_EMPTY:
                continue

            cell = target.cell(row=row_index + 1, column=column_index + 1)
            if ctype == xlrd.XL_CELL_BLANK:
                continue
            if ctype == xlrd.XL_CELL_BOOLEAN:
                cell.value = bool(value)
            elif ctype == xlrd.XL_CELL_ERROR:
                cell.value = error_text_from_code.get(value, "#N/A")
                cell.data_type = TYPE_ERROR
            elif ctype in (xlrd.XL_CELL_NUMBER, xlrd.XL_CELL_DATE):
                cell.value = float(value)
            else:
                # Text such as "=1+1" or "#N/A" must stay text
                cell.value = value
                cell.data_type = TYPE_STRING
