"""Cell value coercion.

Turns openpyxl cells into plain Python values or display strings. Cells are
classified in a fixed order (see ``CellType``) and exactly one branch
applies to each present cell. An absent cell, passed as ``None``, always
yields an empty string.

Row and column indexes in this module are 0-based; openpyxl's own
coordinates are 1-based.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Iterable

from openpyxl.cell.cell import TYPE_ERROR, TYPE_FORMULA, Cell
from openpyxl.utils.datetime import WINDOWS_EPOCH, to_excel
from openpyxl.worksheet.formula import ArrayFormula, DataTableFormula
from openpyxl.worksheet.worksheet import Worksheet

from .models import CellType
from .number_text import number_to_text

_DATE_TYPES = (datetime, date, time, timedelta)
_NUMBER_TYPES = (int, float, Decimal)


def cell_type(cell: Cell) -> CellType:
    """Classify a present cell."""
    value = cell.value

    if value is None:
        return CellType.BLANK
    if isinstance(value, bool):
        return CellType.BOOLEAN
    if cell.data_type == TYPE_ERROR:
        return CellType.ERROR
    if cell.data_type == TYPE_FORMULA or isinstance(value, (ArrayFormula, DataTableFormula)):
        return CellType.FORMULA
    if isinstance(value, _NUMBER_TYPES + _DATE_TYPES):
        return CellType.NUMERIC
    return CellType.STRING


def cell_value(cell: Cell | None) -> Any:
    """Get the value of a cell as a native Python object.

    Args:
        cell: The cell, or None for an absent cell.

    Returns:
        ``""`` for absent, blank and error cells, ``bool`` for booleans,
        the formula source text for formulas, ``float`` for numbers and
        ``str`` for text.
    """
    if cell is None:
        return ""

    kind = cell_type(cell)
    if kind is CellType.BLANK:
        return ""
    if kind is CellType.BOOLEAN:
        return cell.value
    if kind is CellType.ERROR:
        # Error code (#DIV/0!, #N/A, ...) is not kept
        return ""
    if kind is CellType.FORMULA:
        return _formula_text(cell.value)
    if kind is CellType.NUMERIC:
        return _numeric_value(cell)
    return str(cell.value)


def cell_value_as_string(cell: Cell | None) -> str:
    """Get the value of a cell as display text.

    Same classification as ``cell_value``; booleans render as ``"true"`` or
    ``"false"`` and numbers in Excel's General format.
    """
    if cell is None:
        return ""

    kind = cell_type(cell)
    if kind is CellType.BOOLEAN:
        return "true" if cell.value else "false"
    if kind is CellType.NUMERIC:
        return number_to_text(_numeric_value(cell))
    return cell_value(cell)


def is_empty(row: Iterable[Cell] | None) -> bool:
    """Check whether a row has no visible content.

    Only the cells actually present in the row are inspected.

    Args:
        row: Present cells of the row, or None for an absent row.

    Returns:
        True if the row is absent or every cell renders as ``""``.
    """
    if row is None:
        return True
    return all(cell_value_as_string(cell) == "" for cell in row)


def present_rows(sheet: Worksheet) -> dict[int, dict[int, Cell]]:
    """Index the present cells of a sheet by 0-based row and column.

    Reading ``sheet.cell()`` or iterating ``sheet.iter_rows()`` creates the
    cells it visits, so the cell store is read directly.
    """
    rows: dict[int, dict[int, Cell]] = {}
    for (row, column), cell in sheet._cells.items():
        rows.setdefault(row - 1, {})[column - 1] = cell
    return rows


def row_cells(sheet: Worksheet, row_index: int) -> list[Cell] | None:
    """Get the present cells of a row in column order.

    Returns:
        The cells, or None if the row has no present cell.
    """
    row = row_index + 1
    cells = sorted(
        (column, cell) for (cell_row, column), cell in sheet._cells.items() if cell_row == row
    )
    if not cells:
        return None
    return [cell for _, cell in cells]


def get_cell(sheet: Worksheet, row_index: int, column_index: int) -> Cell | None:
    """Look up a cell without creating it."""
    return sheet._cells.get((row_index + 1, column_index + 1))


def last_row_index(sheet: Worksheet) -> int:
    """Index of the last row holding a present cell, 0 for an empty sheet."""
    if not sheet._cells:
        return 0
    return max(row for row, _ in sheet._cells) - 1


def _formula_text(value: Any) -> str:
    if isinstance(value, ArrayFormula):
        value = value.text or ""
    elif isinstance(value, DataTableFormula):
        return ""
    text = str(value)
    return text[1:] if text.startswith("=") else text


def _numeric_value(cell: Cell) -> float:
    value = cell.value
    if isinstance(value, _DATE_TYPES):
        return float(to_excel(value, _workbook_epoch(cell)))
    return float(value)


def _workbook_epoch(cell: Cell) -> datetime:
    worksheet = cell.parent
    workbook = getattr(worksheet, "parent", None)
    return getattr(workbook, "epoch", WINDOWS_EPOCH)
