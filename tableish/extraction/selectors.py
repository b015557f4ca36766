"""Row and cell selector resolution.

A selector is either a structural query (CSS, or XPath when the expression
looks like a path) or a caller-supplied function. Callers may pass a plain
string or callable; ``as_selector`` turns it into one of the two variants
before any document traversal happens.

Example (definition list, one row per <dt>):

    rows = as_selector("dl#tools dt", role="row")
    cells = as_selector(lambda dt: [dt, dt.getnext()], role="column")
"""

import logging
import re
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional, Union

from lxml import etree
from lxml.cssselect import CSSSelector
from cssselect import SelectorError

from tableish.exceptions import InvalidSelector

logger = logging.getLogger(__name__)

# Absolute, relative and parenthesised XPath location paths
_XPATH_PATTERN = re.compile(r"^\s*(\.{0,2}/|\()")


def looks_like_xpath(expression: str) -> bool:
    """Check if a query string is an XPath path rather than a CSS selector."""
    return bool(_XPATH_PATTERN.match(expression))


@dataclass(frozen=True)
class ByQuery:
    """
    Structural query evaluated against a node.

    The expression is compiled on construction, so an expression that is
    neither valid CSS nor valid XPath fails before any traversal.
    """

    expression: str
    xpath: bool = False
    role: Optional[str] = field(default=None, compare=False)
    _compiled: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        try:
            if self.xpath:
                compiled = etree.XPath(self.expression)
            else:
                compiled = CSSSelector(self.expression)
        except (SelectorError, etree.XPathError) as e:
            kind = "XPath" if self.xpath else "CSS"
            raise InvalidSelector(
                f"Invalid {kind} expression {self.expression!r}: {e}",
                role=self.role,
                value=self.expression,
            ) from e
        object.__setattr__(self, "_compiled", compiled)

    def select(self, node) -> List[Any]:
        """Return matches in document order."""
        result = self._compiled(node)
        # XPath expressions like count(...) evaluate to a scalar
        if isinstance(result, list):
            return result
        return [result]


@dataclass(frozen=True)
class ByFunction:
    """Caller-supplied function returning an ordered sequence of nodes."""

    function: Callable[[Any], Any]
    role: Optional[str] = field(default=None, compare=False)

    def select(self, node) -> List[Any]:
        result = self.function(node)
        if isinstance(result, (str, bytes)) or not hasattr(result, "__iter__"):
            raise InvalidSelector(
                f"Selector function must return a sequence, got {type(result).__name__}",
                role=self.role,
                value=result,
            )
        return list(result)


Selector = Union[ByQuery, ByFunction]


def as_selector(value: Any, role: Optional[str] = None, detect_xpath: bool = True) -> Selector:
    """
    Normalize a selector argument.

    Args:
        value: ByQuery/ByFunction, query string, or callable
        role: "row" or "column", used in error messages
        detect_xpath: Treat path-like strings as XPath instead of CSS

    Returns:
        ByQuery or ByFunction

    Raises:
        InvalidSelector: If value is none of the supported shapes
    """
    if isinstance(value, (ByQuery, ByFunction)):
        if role and value.role is None:
            return replace(value, role=role)
        return value
    if isinstance(value, str):
        return ByQuery(value, xpath=detect_xpath and looks_like_xpath(value), role=role)
    if callable(value):
        return ByFunction(value, role=role)

    label = f"{role} selector" if role else "selector"
    raise InvalidSelector(
        f"The {label} must be a query string or a callable, got {type(value).__name__}",
        role=role,
        value=value,
    )


def resolve_rows(document, row_selector: Selector) -> List[Any]:
    """
    Find all row nodes in a document.

    Args:
        document: Parsed lxml document
        row_selector: Normalized row selector

    Returns:
        Row nodes in document order
    """
    rows = row_selector.select(document)
    logger.debug(f"Row selector {row_selector!r} matched {len(rows)} rows")
    return rows


def resolve_cells(row, column_selector: Selector) -> List[Any]:
    """
    Find the cells of a single row.

    Args:
        row: A row node (or whatever the row selector returned)
        column_selector: Normalized column selector

    Returns:
        Cell nodes or values in document order
    """
    return column_selector.select(row)
