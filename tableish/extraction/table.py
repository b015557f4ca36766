"""Table extraction: HTML in, rectangular grid of strings out.

Example with a table:

    <table id="tools">
      <tr><th>tool</th><th>dude</th></tr>
      <tr><td>webrat</td><td>bryan</td></tr>
    </table>

    extract_table(html, "table#tools tr", "td,th")
    # [["tool", "dude"], ["webrat", "bryan"]]

Example with a definition list:

    <dl id="tools">
      <dt>webrat</dt><dd>bryan</dd>
      <dt>cucumber</dt><dd>aslak</dd>
    </dl>

    extract_table(html, "dl#tools dt", lambda dt: [dt, dt.getnext()])
    # [["webrat", "bryan"], ["cucumber", "aslak"]]
"""

import logging
import time
from typing import Any, List, Optional, Union

from lxml import etree, html

from tableish.config import TableishConfig, get_config
from tableish.exceptions import SourceUnavailable
from tableish.extraction.cells import wrap_cell
from tableish.extraction.grid import GridAssembler
from tableish.extraction.selectors import as_selector, resolve_cells, resolve_rows

logger = logging.getLogger(__name__)

Grid = List[List[str]]

# Attributes that hold the current page markup on common response and driver
# objects, in lookup order
SOURCE_ATTRIBUTES = ("html", "body", "page_source", "response_body", "text", "content")


def parse_document(source: Union[str, bytes, Any], encoding: Optional[str] = None):
    """
    Parse markup into an lxml document.

    Fragments are wrapped in <html><body> so descendant selectors such as
    "table#tools tr" match however much markup was supplied. Blank markup
    gives an empty <html> document. Other parse errors from lxml propagate
    unchanged.

    Args:
        source: HTML string or bytes, or an already parsed lxml element/tree
        encoding: Encoding for bytes input (None lets lxml detect it)

    Returns:
        Root element of the document
    """
    if isinstance(source, etree._ElementTree):
        return source.getroot()
    if isinstance(source, etree._Element):
        return source
    if isinstance(source, (str, bytes)) and not source.strip():
        return html.Element("html")
    if isinstance(source, str):
        # lxml rejects str input carrying an <?xml ... encoding=...?> declaration
        source = source.encode("utf-8")
        encoding = "utf-8"
    if isinstance(source, bytes) and encoding:
        return html.document_fromstring(source, parser=html.HTMLParser(encoding=encoding))
    return html.document_fromstring(source)


class Table:
    """
    A table extracted from an HTML document.

    Selectors are validated before the markup is parsed; the grid is
    assembled on construction and ``table`` returns a fresh dense copy.
    """

    def __init__(
        self,
        source,
        row_selector,
        column_selector,
        config: Optional[TableishConfig] = None,
    ):
        self.config = config or get_config()
        detect_xpath = self.config.extraction.detect_xpath
        self.row_selector = as_selector(row_selector, role="row", detect_xpath=detect_xpath)
        self.column_selector = as_selector(column_selector, role="column", detect_xpath=detect_xpath)
        self.doc = parse_document(source, encoding=self.config.extraction.encoding)
        self._assembler = GridAssembler()
        self._parse_table()

    def _parse_table(self) -> None:
        for row_index, row in enumerate(resolve_rows(self.doc, self.row_selector)):
            self._assembler.ensure_row(row_index)
            for raw in resolve_cells(row, self.column_selector):
                cell = wrap_cell(raw)
                self._assembler.add_cell(
                    row_index,
                    cell.value(),
                    colspan=cell.colspan,
                    rowspan=cell.rowspan,
                )

    @property
    def rows(self) -> int:
        return self._assembler.rows

    @property
    def columns(self) -> int:
        return self._assembler.width

    @property
    def table(self) -> Grid:
        """Rectangular grid of trimmed cell text."""
        return self._assembler.to_grid()


def extract_table(
    html_source,
    row_selector,
    column_selector,
    config: Optional[TableishConfig] = None,
) -> Grid:
    """
    Extract a table-like structure from HTML as a grid of strings.

    Args:
        html_source: HTML string or bytes (or a parsed lxml document)
        row_selector: CSS/XPath query string or callable(document) -> rows
        column_selector: CSS/XPath query string or callable(row) -> cells

    Returns:
        List of rows, every row a list of strings of the same length

    Raises:
        InvalidSelector: If a selector is neither a string nor a callable
    """
    start_time = time.time()
    table = Table(html_source, row_selector, column_selector, config=config)
    grid = table.table
    elapsed_ms = int((time.time() - start_time) * 1000)
    logger.debug(f"Extracted {table.rows}x{table.columns} grid ({elapsed_ms}ms)")
    return grid


def html_of(source) -> Union[str, bytes]:
    """
    Get page markup from a response or browser object.

    Strings and bytes are returned as-is. Otherwise the first attribute in
    SOURCE_ATTRIBUTES that the object has is used; callables (such as
    Playwright's ``page.content``) are called.

    Raises:
        SourceUnavailable: If no markup can be found
    """
    if isinstance(source, (str, bytes)):
        return source

    for attribute in SOURCE_ATTRIBUTES:
        value = getattr(source, attribute, None)
        if value is None:
            continue
        if callable(value):
            value = value()
        if isinstance(value, (str, bytes)):
            return value

    raise SourceUnavailable(source)


def tableish(source, row_selector, column_selector, config: Optional[TableishConfig] = None) -> Grid:
    """
    Extract a table from whatever page object a test has at hand.

    Works with raw markup, HTTP responses (``.text``), browser drivers
    (``.page_source``) and anything else exposing one of SOURCE_ATTRIBUTES.
    """
    return extract_table(html_of(source), row_selector, column_selector, config=config)
