"""Classes and functions for representing the wall being filled."""

from array import array
from enum import IntEnum
from typing import Iterable

from bitarray import bitarray


class CellState(IntEnum):
    """State of a single wall cell."""

    FILLED = -1
    EMPTY = 0
    NEEDS_BRICK = 1


CELL_CHARS = {CellState.FILLED: "#", CellState.EMPTY: ".", CellState.NEEDS_BRICK: "1"}
"""Characters used when rendering a board."""


class Board:
    """Store a 2D matrix of cell states as a 1D array.

    Contains support for both 1D and 2D indexing.
    """

    def __init__(self, data: Iterable[int], rows: int, cols: int) -> None:
        self.data = array("b", data)
        self.n_rows = rows
        self.n_cols = cols
        if len(self.data) != rows * cols:
            raise ValueError(f"Board has {len(self.data)} cells, expected {rows}x{cols}.")

    @classmethod
    def from_cells(cls, cells: bitarray, rows: int, cols: int) -> "Board":
        """Build a board from a shape mask (set bit = cell needs a brick)."""
        return cls(
            (CellState.NEEDS_BRICK if bit else CellState.EMPTY for bit in cells),
            rows,
            cols,
        )

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        """Returns a string representation of the board, one line per row."""
        return "\n".join(self.row_str(row) for row in range(self.n_rows))

    def row_str(self, row: int) -> str:
        """Render a single row."""
        return "".join(CELL_CHARS[self[idx]] for idx in self.row_range(row))

    def print(self, **kwargs) -> None:
        """Print the board row by row; keyword arguments are passed to `print`."""
        for row in range(self.n_rows):
            print(self.row_str(row), **kwargs)

    def __getitem__(self, idx: int | tuple[int, int]) -> CellState:
        """Get cell state by 1D (row-major order) or 2D index."""
        if isinstance(idx, int):
            return CellState(self.data[idx])
        if isinstance(idx, tuple) and len(idx) == 2:
            row, col = idx
            return CellState(self.data[row * self.n_cols + col])
        raise IndexError("Invalid index type for Board.")

    def __setitem__(self, idx: int | tuple[int, int], value: CellState) -> None:
        """Set cell state by 1D (row-major order) or 2D index."""
        if isinstance(idx, int):
            self.data[idx] = value
            return
        if isinstance(idx, tuple) and len(idx) == 2:
            row, col = idx
            self.data[row * self.n_cols + col] = value
            return
        raise IndexError("Invalid index type for Board.")

    def get_2d_idx(self, one_d_idx: int) -> tuple[int, int]:
        """Convert a 1D index to a (row, col) tuple."""
        return divmod(one_d_idx, self.n_cols)

    def get_1d_idx(self, row: int, col: int) -> int:
        """Convert a (row, col) tuple to a 1D index."""
        return row * self.n_cols + col

    def row_range(self, row: int) -> range:
        """Get the range of 1D indices for a whole row."""
        start = self.get_1d_idx(row, 0)
        return range(start, start + self.n_cols)

    def is_row_end(self, one_d_idx: int) -> bool:
        """Whether the 1D index is the last column of its row."""
        return one_d_idx % self.n_cols == self.n_cols - 1

    def count(self, state: CellState) -> int:
        """Count the cells in the given state."""
        return self.data.count(state)

    def fill(self, start_idx: int, end_idx: int) -> None:
        """Mark cells `start_idx..end_idx` (inclusive) as filled."""
        for idx in range(start_idx, end_idx + 1):
            self[idx] = CellState.FILLED
