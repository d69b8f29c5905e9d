"""CLI entry point for xls-tables.

Usage:
    python -m xls_tables workbook.xls
    xls-tables workbook.xlsx --sheet Summary --format json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .workbook import XLS_SUFFIXES, XLSX_SUFFIXES


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="xls-tables",
        description="Print the sheets of an Excel workbook as string tables",
    )
    parser.add_argument(
        "input",
        help="Path to Excel file (.xls, .xlsx, .xlsm)",
    )
    parser.add_argument(
        "--sheet",
        help="Only print the sheet with this name",
    )
    parser.add_argument(
        "--format",
        choices=("tsv", "json"),
        default="tsv",
        help="Output format (default: tsv)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Validate input file
    file_path = Path(args.input)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    if file_path.suffix.lower() not in XLS_SUFFIXES + XLSX_SUFFIXES:
        print(f"Error: Not an Excel file: {file_path}", file=sys.stderr)
        return 1

    try:
        from . import read_sheet_tables

        tables = read_sheet_tables(file_path)

        if args.sheet is not None:
            tables = [table for table in tables if table.name == args.sheet]
            if not tables:
                print(f"Error: Sheet not found: {args.sheet}", file=sys.stderr)
                return 1

        if args.format == "json":
            print(json.dumps([table.to_dict() for table in tables], indent=2, ensure_ascii=False))
        else:
            for table in tables:
                print(f"# {table.name}")
                for row in table.rows:
                    print("\t".join(row))

        return 0

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.getLogger(__name__).debug("Extraction failed", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
