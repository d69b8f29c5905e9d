"""Pytest fixtures for xls-tables tests."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
import xlwt
from openpyxl import Workbook

TWO_DIM_ARRAY = [["1", "a", "!"], ["2", "b", "?"], ["3", "c", "%"]]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


@pytest.fixture
def worksheet():
    """In-memory worksheet for cell level tests."""
    wb = Workbook()
    ws = wb.active
    ws.title = "TestSheet"
    yield ws
    wb.close()


@pytest.fixture
def content_xls(temp_dir) -> Path:
    """Legacy workbook holding TWO_DIM_ARRAY on its only sheet."""
    wb = xlwt.Workbook()
    ws = wb.add_sheet("first sheet")
    for row, values in enumerate(TWO_DIM_ARRAY):
        for column, value in enumerate(values):
            ws.write(row, column, value)

    path = temp_dir / "content.xls"
    wb.save(str(path))
    return path


@pytest.fixture
def typed_xls(temp_dir) -> Path:
    """Legacy workbook with one cell of every type in its data row.

    The last column holds text that looks like a formula, not a formula.
    """
    wb = xlwt.Workbook()
    ws = wb.add_sheet("Types")

    headers = ["text", "int", "float", "bool", "error", "blank", "formula text"]
    for column, header in enumerate(headers):
        ws.write(0, column, header)

    ws.write(1, 0, "hello")
    ws.write(1, 1, 42)
    ws.write(1, 2, 123.45)
    ws.write(1, 3, True)
    ws.row(1).set_cell_error(4, "#DIV/0!")
    ws.write(1, 5, None)
    ws.write(1, 6, "=1+1")

    path = temp_dir / "typed.xls"
    wb.save(str(path))
    return path


@pytest.fixture
def formula_xls(temp_dir) -> Path:
    """Legacy workbook with a formula record that has no cached result."""
    wb = xlwt.Workbook()
    ws = wb.add_sheet("Formulas")
    ws.write(0, 0, "sum")
    ws.write(1, 0, xlwt.Formula("1+1"))

    path = temp_dir / "formula.xls"
    wb.save(str(path))
    return path


@pytest.fixture
def gap_row_xls(temp_dir) -> Path:
    """Legacy workbook whose row 2 was never created."""
    wb = xlwt.Workbook()
    ws = wb.add_sheet("Gaps")
    for row in (0, 1, 3):
        for column, value in enumerate(["r%d" % row, "x", "y"]):
            ws.write(row, column, value)

    path = temp_dir / "gap_row.xls"
    wb.save(str(path))
    return path


@pytest.fixture
def sparse_xls(temp_dir) -> Path:
    """Legacy workbook with a full header and sparse data rows.

    Row 1 only has column 0 (blank), row 2 only column 2 (text), row 3 is
    absent and row 4 has a cell beyond the header width.
    """
    wb = xlwt.Workbook()
    ws = wb.add_sheet("Sparse")
    for column, header in enumerate(["A", "B", "C"]):
        ws.write(0, column, header)

    ws.write(1, 0, None)
    ws.write(2, 2, "z")
    ws.write(4, 1, "b")
    ws.write(4, 3, "beyond")

    path = temp_dir / "sparse.xls"
    wb.save(str(path))
    return path


@pytest.fixture
def null_cells_xls(temp_dir) -> Path:
    """Legacy workbook with a styled header and rows of null cells."""
    wb = xlwt.Workbook()
    ws = wb.add_sheet("Foo")
    header_style = xlwt.easyxf("font: bold on, height 240, colour blue")

    for column, values in enumerate(TWO_DIM_ARRAY):
        ws.write(0, column, values[0], header_style)

    for row in range(1, len(TWO_DIM_ARRAY) + 1):
        for column in range(3):
            ws.write(row, column, None)

    path = temp_dir / "null_cells.xls"
    wb.save(str(path))
    return path


@pytest.fixture
def headerless_xls(temp_dir) -> Path:
    """Legacy workbook whose first row is absent."""
    wb = xlwt.Workbook()
    ws = wb.add_sheet("NoHeader")
    ws.write(1, 0, "data")
    ws.write(1, 1, "more")

    path = temp_dir / "headerless.xls"
    wb.save(str(path))
    return path


@pytest.fixture
def multi_sheet_xls(temp_dir) -> Path:
    """Legacy workbook with two sheets of different widths."""
    wb = xlwt.Workbook()
    first = wb.add_sheet("First")
    first.write(0, 0, "only")
    first.write(1, 0, 1)

    second = wb.add_sheet("Second")
    for column, value in enumerate(["a", "b", "c", "d"]):
        second.write(0, column, value)

    path = temp_dir / "multi_sheet.xls"
    wb.save(str(path))
    return path


@pytest.fixture
def simple_xlsx(temp_dir) -> Path:
    """Workbook in the zipped XML format with mixed types."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Data"

    ws["A1"] = "Name"
    ws["B1"] = "Value"
    ws["A2"] = "Item 1"
    ws["B2"] = 100
    ws["A3"] = "Item 2"
    ws["B3"] = 2.5
    ws["A5"] = "Total"
    ws["B5"] = "=SUM(B2:B3)"

    path = temp_dir / "simple.xlsx"
    wb.save(path)
    wb.close()
    return path
