"""
xls-tables: Excel workbooks as plain string tables.

This library reads legacy ``.xls`` and ``.xlsx`` workbooks into row-major
string tables, writes string tables back to ``.xlsx`` and fills the gaps of
sparse sheets with blank cells.

Basic usage:
    >>> from xls_tables import export_workbook_as_string_list
    >>> tables = export_workbook_as_string_list("workbook.xls")
    >>> print(tables[0])

Writing a table:
    >>> from xls_tables import export_to_excel
    >>> export_to_excel("out.xlsx", ["A", "B"], [["1", "x"], ["2", "y"]])
"""

from .cells import (
    cell_type,
    cell_value,
    cell_value_as_string,
    get_cell,
    is_empty,
    row_cells,
)
from .errors import (
    MissingHeaderRowError,
    UnsupportedFormatError,
    WorkbookReadError,
    XlsTablesError,
)
from .export import export_to_excel
from .extract import (
    export_workbook,
    export_workbook_as_string_list,
    read_sheet_tables,
    workbook_to_string_lists,
)
from .models import CellType, ExportOptions, SheetTable
from .normalize import replace_null_cells_into_empty_cells
from .number_text import number_to_text
from .workbook import (
    WorkbookHandle,
    load_workbook,
    open_workbook,
    read_xls_workbook,
    read_xlsx_workbook,
)

__version__ = "0.1.0"
__author__ = "Brian Chan"

__all__ = [
    # Cell coercion
    "cell_type",
    "cell_value",
    "cell_value_as_string",
    "get_cell",
    "is_empty",
    "row_cells",
    "number_to_text",
    # Extraction
    "export_workbook",
    "export_workbook_as_string_list",
    "read_sheet_tables",
    "workbook_to_string_lists",
    # Export
    "export_to_excel",
    # Normalization
    "replace_null_cells_into_empty_cells",
    # Workbooks
    "WorkbookHandle",
    "load_workbook",
    "open_workbook",
    "read_xls_workbook",
    "read_xlsx_workbook",
    # Models
    "CellType",
    "ExportOptions",
    "SheetTable",
    # Errors
    "XlsTablesError",
    "UnsupportedFormatError",
    "WorkbookReadError",
    "MissingHeaderRowError",
]
