"""Null-cell normalization.

Makes every absent cell inside the used range of a legacy workbook an
explicit blank cell, so that later per-cell processing never sees a gap.
"""

from __future__ import annotations

import logging
from pathlib import Path

from openpyxl.worksheet.worksheet import Worksheet

from .cells import last_row_index, present_rows
from .errors import MissingHeaderRowError
from .workbook import WorkbookHandle, read_xls_workbook

logger = logging.getLogger(__name__)


def replace_null_cells_into_empty_cells(file_path: str | Path) -> WorkbookHandle:
    """Fill the gaps of every existing row of a ``.xls`` file with blank cells.

    For each sheet, each existing row between the first and the last row
    gets a blank cell at every missing column index below the first row's
    width. Absent rows stay absent.

    Args:
        file_path: Path to the ``.xls`` file. The file itself is not changed.

    Returns:
        Handle to the still open, normalized workbook. The caller owns it
        and must close it, and decides whether to save it.

    Raises:
        FileNotFoundError: If the file does not exist.
        WorkbookReadError: If the file cannot be decoded.
        MissingHeaderRowError: If a sheet has no first row.
    """
    path = Path(file_path)
    handle = WorkbookHandle(read_xls_workbook(path), path)
    try:
        for sheet in handle.workbook.worksheets:
            created = fill_missing_cells(sheet)
            logger.debug("Sheet %r: created %d blank cell(s)", sheet.title, created)
    except Exception:
        handle.close()
        raise
    return handle


def fill_missing_cells(sheet: Worksheet) -> int:
    """Create blank cells for the gaps of one sheet.

    Returns:
        Number of cells created.

    Raises:
        MissingHeaderRowError: If the sheet has no first row.
    """
    rows = present_rows(sheet)
    header = rows.get(0)
    if header is None:
        raise MissingHeaderRowError(sheet.title)

    columns = max(header) + 1
    created = 0
    for index in range(last_row_index(sheet) + 1):
        row = rows.get(index)
        if row is None:
            continue
        for column in range(columns):
            if column not in row:
                sheet.cell(row=index + 1, column=column + 1)
                created += 1
    return created
