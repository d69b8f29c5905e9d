"""Tests for null-cell normalization."""

from __future__ import annotations

from unittest import mock

import pytest

from xls_tables import (
    CellType,
    MissingHeaderRowError,
    WorkbookHandle,
    cell_type,
    cell_value_as_string,
    get_cell,
    read_xls_workbook,
    replace_null_cells_into_empty_cells,
)
from xls_tables.normalize import fill_missing_cells


class TestReplaceNullCellsIntoEmptyCells:
    """Tests for replace_null_cells_into_empty_cells."""

    def test_null_cells_become_blank(self, null_cells_xls):
        handle = replace_null_cells_into_empty_cells(null_cells_xls)
        try:
            sheet = handle.sheet("Foo")
            for row in range(1, 4):
                for column in range(3):
                    cell = get_cell(sheet, row, column)
                    assert cell is not None
                    assert cell_type(cell) == CellType.BLANK
                    assert cell_value_as_string(cell) == ""
        finally:
            handle.close()

    def test_fills_gaps_in_existing_rows(self, sparse_xls):
        with replace_null_cells_into_empty_cells(sparse_xls) as handle:
            sheet = handle.sheet("Sparse")

            for row in (1, 2, 4):
                for column in range(3):
                    assert get_cell(sheet, row, column) is not None

            assert get_cell(sheet, 2, 2).value == "z"
            assert get_cell(sheet, 4, 1).value == "b"
            assert get_cell(sheet, 4, 3).value == "beyond"

    def test_absent_rows_stay_absent(self, sparse_xls):
        with replace_null_cells_into_empty_cells(sparse_xls) as handle:
            sheet = handle.sheet("Sparse")
            for column in range(4):
                assert get_cell(sheet, 3, column) is None

    def test_workbook_is_left_open(self, content_xls):
        handle = replace_null_cells_into_empty_cells(content_xls)

        assert isinstance(handle, WorkbookHandle)
        assert handle.closed is False
        assert handle.sheet_names == ["first sheet"]

        handle.close()
        assert handle.closed is True

    def test_missing_first_row_raises_and_closes(self, headerless_xls):
        workbook = read_xls_workbook(headerless_xls)
        workbook.close = mock.Mock()

        with mock.patch("xls_tables.normalize.read_xls_workbook", return_value=workbook):
            with pytest.raises(MissingHeaderRowError):
                replace_null_cells_into_empty_cells(headerless_xls)

        workbook.close.assert_called_once()

    def test_source_file_is_unchanged(self, sparse_xls):
        before = sparse_xls.read_bytes()
        with replace_null_cells_into_empty_cells(sparse_xls):
            pass

        assert sparse_xls.read_bytes() == before


class TestFillMissingCells:
    """Tests for fill_missing_cells."""

    def test_counts_created_cells(self, worksheet):
        worksheet["A1"] = "h1"
        worksheet["B1"] = "h2"
        worksheet["A2"] = "x"
        worksheet["B4"] = "y"

        assert fill_missing_cells(worksheet) == 2
        assert get_cell(worksheet, 1, 1) is not None
        assert get_cell(worksheet, 3, 0) is not None
        assert get_cell(worksheet, 2, 0) is None

    def test_nothing_to_fill(self, worksheet):
        worksheet["A1"] = "h1"
        worksheet["A2"] = "x"

        assert fill_missing_cells(worksheet) == 0
