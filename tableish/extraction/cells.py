"""Cell content variants.

A matched cell is one of three things: an lxml element (which may carry
``rowspan``/``colspan`` attributes), a pre-extracted string, or nothing at
all. ``wrap_cell`` classifies raw values once so the grid assembler only
deals with ``value()``, ``rowspan`` and ``colspan``.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional, Union

from lxml import etree

logger = logging.getLogger(__name__)

_SPAN_PATTERN = re.compile(r"^\s*([+-]?[0-9]+)", re.ASCII)

# Upper bounds browsers apply to table cell spans
MAX_COLSPAN = 1000
MAX_ROWSPAN = 65534


def parse_span(raw: Optional[str], limit: Optional[int] = None) -> int:
    """
    Parse a ``rowspan``/``colspan`` attribute value.

    Only the leading ASCII integer is used ("2px" is 2). Missing,
    non-numeric, zero and negative values all resolve to 1; values above
    ``limit`` are clamped to it.

    Args:
        raw: Attribute value, or None when absent
        limit: Largest span allowed (None for no limit)

    Returns:
        Span between 1 and limit
    """
    if raw is None:
        return 1

    match = _SPAN_PATTERN.match(raw)
    # int() refuses very long digit strings; 12 characters already exceed any limit
    span = int(match.group(1)[:12]) if match else 0
    if span < 1:
        logger.debug(f"Ignoring malformed span attribute {raw!r}")
        return 1
    if limit is not None and span > limit:
        logger.debug(f"Clamping span attribute {raw!r} to {limit}")
        return limit
    return span


@dataclass(frozen=True)
class NodeCell:
    """A cell backed by a parsed element."""

    node: Any

    def value(self) -> str:
        if hasattr(self.node, "text_content"):
            return self.node.text_content().strip()
        # Plain etree elements (e.g. from an XML parser)
        return "".join(self.node.itertext()).strip()

    @property
    def rowspan(self) -> int:
        return parse_span(self.node.get("rowspan"), MAX_ROWSPAN)

    @property
    def colspan(self) -> int:
        return parse_span(self.node.get("colspan"), MAX_COLSPAN)


@dataclass(frozen=True)
class TextCell:
    """A cell whose value was extracted by the caller."""

    text: str
    rowspan = 1
    colspan = 1

    def value(self) -> str:
        return self.text.strip()


@dataclass(frozen=True)
class EmptyCell:
    """A missing cell, e.g. a sibling lookup that found nothing."""

    rowspan = 1
    colspan = 1

    def value(self) -> str:
        return ""


Cell = Union[NodeCell, TextCell, EmptyCell]


def wrap_cell(raw: Any) -> Cell:
    """
    Classify a raw cell value.

    Args:
        raw: lxml element, string, None, or anything else

    Returns:
        NodeCell for elements, TextCell for strings (other objects are
        converted with ``str()``), EmptyCell for None
    """
    if raw is None:
        return EmptyCell()
    if isinstance(raw, (NodeCell, TextCell, EmptyCell)):
        return raw
    if isinstance(raw, str):
        return TextCell(raw)
    if isinstance(raw, etree._Element):
        return NodeCell(raw)
    return TextCell(str(raw))
