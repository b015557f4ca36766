"""Row/cell selection and grid assembly."""

from tableish.extraction.cells import EmptyCell, NodeCell, TextCell, parse_span, wrap_cell
from tableish.extraction.grid import GridAssembler
from tableish.extraction.selectors import ByFunction, ByQuery, as_selector, resolve_cells, resolve_rows
from tableish.extraction.table import Table, extract_table, html_of, parse_document, tableish

__all__ = [
    "ByFunction",
    "ByQuery",
    "EmptyCell",
    "GridAssembler",
    "NodeCell",
    "Table",
    "TextCell",
    "as_selector",
    "extract_table",
    "html_of",
    "parse_document",
    "parse_span",
    "resolve_cells",
    "resolve_rows",
    "tableish",
    "wrap_cell",
]
