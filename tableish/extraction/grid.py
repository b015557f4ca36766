"""Grid assembly with row and column spans.

Cells are placed row by row. Each cell goes to the first free column of its
row and reserves a ``colspan x rowspan`` rectangle; positions covered by a
span but not at its top-left corner hold an empty string. Positions that
were never written stay FREE until ``to_grid()`` turns them into empty
strings, so "reserved" and "not yet written" are never confused during
assembly.

    assembler = GridAssembler()
    assembler.add_cell(0, "Name", colspan=2)
    assembler.add_cell(1, "first")
    assembler.add_cell(1, "last")
    assembler.to_grid()  # [["Name", ""], ["first", "last"]]
"""

from typing import List


class _Free:
    """Marker for a grid position nothing has been written to."""

    def __repr__(self):
        return "FREE"


FREE = _Free()

PLACEHOLDER = ""


class GridAssembler:
    """
    Sparse-then-dense 2D grid builder.

    Rows are growable lists; a row's length is one past its highest
    written column. A per-row cursor remembers where the last free-column
    search stopped: positions only ever go from FREE to written, so the
    first free column of a row never moves left.
    """

    def __init__(self):
        self._rows: List[list] = []
        self._cursors: List[int] = []

    @property
    def rows(self) -> int:
        """Number of rows in the grid (including rows created by rowspans)."""
        return len(self._rows)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self._rows), default=0)

    def ensure_row(self, row_index: int) -> None:
        """Make sure rows up to ``row_index`` exist, even if they stay empty."""
        while len(self._rows) <= row_index:
            self._rows.append([])
            self._cursors.append(0)

    def next_free_column(self, row_index: int) -> int:
        """
        Find the lowest unoccupied column of a row.

        Args:
            row_index: 0-based row index

        Returns:
            Index of the first FREE position, or the row length if none
        """
        self.ensure_row(row_index)
        row = self._rows[row_index]
        column = self._cursors[row_index]
        while column < len(row) and row[column] is not FREE:
            column += 1
        self._cursors[row_index] = column
        return column

    def add_cell(self, row_index: int, value: str, colspan: int = 1, rowspan: int = 1) -> int:
        """
        Place a cell at the next free column of a row.

        Args:
            row_index: 0-based row index
            value: Cell text
            colspan: Number of columns covered (at least 1)
            rowspan: Number of rows covered (at least 1)

        Returns:
            Column index the cell was placed at
        """
        column = self.next_free_column(row_index)
        width = max(colspan, 1)
        for y in range(row_index, row_index + max(rowspan, 1)):
            self._fill(y, column, [PLACEHOLDER] * width)
        self._rows[row_index][column] = value
        return column

    def _fill(self, row_index: int, column: int, values: list) -> None:
        self.ensure_row(row_index)
        row = self._rows[row_index]
        end = column + len(values)
        if end > len(row):
            row.extend([FREE] * (end - len(row)))
        row[column:end] = values

    def to_grid(self) -> List[List[str]]:
        """
        Build the dense, rectangular grid.

        Every row is padded to ``width`` and FREE positions become empty
        strings. Assembler state is left untouched.
        """
        width = self.width
        grid = []
        for row in self._rows:
            padded = row + [FREE] * (width - len(row))
            grid.append([PLACEHOLDER if cell is FREE else cell for cell in padded])
        return grid
