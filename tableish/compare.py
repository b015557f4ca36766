"""Compare an expected table against an extracted grid.

    diff = diff_tables([["tool", "dude"], ["webrat", "bryan"]], grid)
    if not diff.matches:
        print(diff.summary())

Expected cells are converted with ``str()`` and compared exactly; the
extracted side is already trimmed by the extractor.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from tableish.exceptions import TableMismatch


@dataclass
class CellMismatch:
    """A single cell whose text differs."""

    row: int
    column: int
    expected: str
    actual: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "row": self.row,
            "column": self.column,
            "expected": self.expected,
            "actual": self.actual,
        }


@dataclass
class TableDiff:
    """Result of comparing two grids."""

    mismatches: List[CellMismatch] = field(default_factory=list)
    missing_rows: List[List[str]] = field(default_factory=list)
    surplus_rows: List[List[str]] = field(default_factory=list)

    @property
    def matches(self) -> bool:
        """Check if both grids are identical."""
        return not (self.mismatches or self.missing_rows or self.surplus_rows)

    def summary(self) -> str:
        """One-line human readable description."""
        if self.matches:
            return "Tables match"

        parts = []
        if self.mismatches:
            first = self.mismatches[0]
            parts.append(
                f"{len(self.mismatches)} cell(s) differ, first at row {first.row} "
                f"column {first.column}: expected {first.expected!r}, got {first.actual!r}"
            )
        if self.missing_rows:
            parts.append(f"{len(self.missing_rows)} expected row(s) missing")
        if self.surplus_rows:
            parts.append(f"{len(self.surplus_rows)} unexpected row(s)")
        return "; ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {
            "matches": self.matches,
            "mismatches": [m.to_dict() for m in self.mismatches],
            "missing_rows": self.missing_rows,
            "surplus_rows": self.surplus_rows,
        }


def diff_tables(expected: Sequence[Sequence[Any]], actual: Sequence[Sequence[str]]) -> TableDiff:
    """
    Compare two grids row by row, cell by cell.

    When a row exists on both sides with different lengths, positions
    missing on one side compare as empty strings.

    Args:
        expected: Expected rows (cells converted with str())
        actual: Extracted rows

    Returns:
        TableDiff describing every difference
    """
    diff = TableDiff()

    for row_index, (expected_row, actual_row) in enumerate(zip(expected, actual)):
        expected_cells = [str(cell) for cell in expected_row]
        width = max(len(expected_cells), len(actual_row))
        for column in range(width):
            want = expected_cells[column] if column < len(expected_cells) else ""
            got = actual_row[column] if column < len(actual_row) else ""
            if want != got:
                diff.mismatches.append(CellMismatch(row_index, column, want, got))

    common = min(len(expected), len(actual))
    diff.missing_rows = [[str(cell) for cell in row] for row in expected[common:]]
    diff.surplus_rows = [list(row) for row in actual[common:]]
    return diff


def assert_table_equal(expected: Sequence[Sequence[Any]], actual: Sequence[Sequence[str]]) -> None:
    """
    Assert that an extracted grid matches the expected rows.

    Raises:
        TableMismatch: If the grids differ (also an AssertionError)
    """
    diff = diff_tables(expected, actual)
    if not diff.matches:
        raise TableMismatch(diff)
