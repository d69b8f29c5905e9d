"""Table export.

Writes a header row and string content to a new ``.xlsx`` workbook.
Content is stored verbatim as text: ``"42"`` stays the string ``"42"`` and
``"=A1"`` is not turned into a formula. Every content row is written, so an
empty row or a ``None`` entry reads back as blank cells.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import openpyxl
from openpyxl.cell.cell import TYPE_STRING, Cell
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .models import ExportOptions

logger = logging.getLogger(__name__)

DEFAULT_SHEET_NAME = "Sheet1"


def export_to_excel(
    file_path: str | Path,
    headers: Sequence[str],
    content: Sequence[Sequence[str | None]],
    sheet_name: str = DEFAULT_SHEET_NAME,
    options: ExportOptions | None = None,
) -> Path:
    """Write a table to a new Excel workbook.

    Args:
        file_path: Destination ``.xlsx`` file. Existing files are replaced.
        headers: Text of the header row.
        content: Data rows; rows may have different lengths. ``None``
            entries become blank cells, and an empty row gets one blank
            cell so that the row still exists.
        sheet_name: Name of the single sheet.
        options: Header font and column sizing; defaults to ExportOptions().

    Returns:
        The destination path.

    Raises:
        OSError: If the file cannot be written. A partially written file is
            not removed.
    """
    if options is None:
        options = ExportOptions()

    path = Path(file_path)
    workbook = openpyxl.Workbook()
    try:
        workbook.remove(workbook.active)
        sheet = workbook.create_sheet(sheet_name)

        header_font = Font(
            name=options.header_font_name,
            bold=options.header_bold,
            size=options.header_font_size,
        )
        for column, header in enumerate(headers, start=1):
            cell = _write_text(sheet, 1, column, header)
            cell.font = header_font

        for row, values in enumerate(content, start=2):
            if not values:
                sheet.cell(row=row, column=1)
            for column, value in enumerate(values, start=1):
                if value is None:
                    sheet.cell(row=row, column=column)
                else:
                    _write_text(sheet, row, column, value)

        _auto_size_columns(sheet, len(headers), options)

        workbook.save(path)
    finally:
        workbook.close()

    logger.debug(
        "Exported %d header(s) and %d row(s) to %s", len(headers), len(content), path
    )
    return path


def _write_text(sheet: Worksheet, row: int, column: int, text: str) -> Cell:
    """Store text in a cell without formula or error detection."""
    cell = sheet.cell(row=row, column=column, value=str(text))
    cell.data_type = TYPE_STRING
    return cell


def _auto_size_columns(sheet: Worksheet, column_count: int, options: ExportOptions) -> None:
    """Fit the first ``column_count`` columns to their longest text."""
    lengths: dict[int, int] = {}
    for (_, column), cell in sheet._cells.items():
        if column <= column_count and cell.value is not None:
            lengths[column] = max(lengths.get(column, 0), len(str(cell.value)))

    for column in range(1, column_count + 1):
        width = min(lengths.get(column, 0) + options.column_padding, options.max_column_width)
        sheet.column_dimensions[get_column_letter(column)].width = float(width)
