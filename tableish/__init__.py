"""Extract HTML tables (and table-like markup) as grids of strings.

    from tableish import extract_table

    extract_table(html, "table#tools tr", "td,th")
"""

from tableish.compare import CellMismatch, TableDiff, assert_table_equal, diff_tables
from tableish.exceptions import InvalidSelector, SourceUnavailable, TableishError, TableMismatch
from tableish.extraction import ByFunction, ByQuery, Table, extract_table, tableish

__version__ = "0.1.0"

__all__ = [
    "ByFunction",
    "ByQuery",
    "CellMismatch",
    "InvalidSelector",
    "SourceUnavailable",
    "Table",
    "TableDiff",
    "TableMismatch",
    "TableishError",
    "assert_table_equal",
    "diff_tables",
    "extract_table",
    "tableish",
]
