"""
Data models for workbook table extraction and export.

This module contains the enums and dataclasses shared by the extraction,
export and normalization helpers.

Example:
    >>> from xls_tables import read_sheet_tables
    >>> for table in read_sheet_tables("workbook.xls"):
    ...     print(f"{table.name}: {len(table.rows)} rows")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# =============================================================================
# Enums
# =============================================================================


class CellType(Enum):
    """Type tag of a spreadsheet cell.

    Exactly one tag applies to a present cell. The order of the members is
    the order in which cells are classified.

    Attributes:
        BLANK: Cell is present but carries no value.
        BOOLEAN: TRUE/FALSE value.
        ERROR: Formula error such as #DIV/0! (the code itself is discarded).
        FORMULA: Formula; its source text is used, not its cached result.
        NUMERIC: Number, including dates stored as serial numbers.
        STRING: Text (rich text is flattened to plain text).
    """

    BLANK = "blank"
    BOOLEAN = "boolean"
    ERROR = "error"
    FORMULA = "formula"
    NUMERIC = "numeric"
    STRING = "string"


# =============================================================================
# Options
# =============================================================================


@dataclass
class ExportOptions:
    """Options for controlling how tables are written to a workbook.

    Attributes:
        header_font_name: Font family of the header row (default: Arial).
        header_bold: Whether header cells are bold (default: True).
        header_font_size: Header font size in points (default: 12).
        column_padding: Extra characters added to auto-sized columns.
        max_column_width: Upper bound for auto-sized columns.

    Example:
        >>> options = ExportOptions(header_font_name="Calibri", header_font_size=11)
        >>> export_to_excel("out.xlsx", ["A", "B"], [["1", "2"]], options=options)
    """

    header_font_name: str = "Arial"
    header_bold: bool = True
    header_font_size: int = 12
    column_padding: int = 2
    max_column_width: int = 60


# =============================================================================
# Results
# =============================================================================


@dataclass
class SheetTable:
    """String table extracted from a single sheet.

    Attributes:
        name: Sheet name.
        rows: Row-major cell text. Absent rows are omitted.
    """

    name: str
    rows: list[list[str]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        """Width of the widest row."""
        return max((len(row) for row in self.rows), default=0)

    def to_dict(self) -> dict:
        return {"name": self.name, "rows": self.rows}
