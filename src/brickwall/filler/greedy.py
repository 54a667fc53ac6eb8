"""Greedy placement of bricks on a wall."""

from dataclasses import dataclass, field
from typing import NamedTuple

from brickwall.board import Board, CellState
from brickwall.inventory import BrickInventory
from brickwall.wall_config import WallConfig


class Placement(NamedTuple):
    """A brick placed on the wall."""

    length: int
    start_idx: int

    @property
    def end_idx(self) -> int:
        """Index of the last cell covered by the brick."""
        return self.start_idx + self.length - 1


@dataclass
class FillResult:
    """Outcome of a greedy fill."""

    placements: list[Placement] = field(default_factory=list)
    """Bricks placed, in placement order."""

    unused: dict[int, int] = field(default_factory=dict)
    """Bricks left over, keyed by length.  Lengths with no leftovers are omitted."""

    cells_remaining: int = 0
    """Number of cells that still need a brick after the fill."""

    @property
    def feasible(self) -> bool:
        """Whether every cell that needs a brick was filled."""
        return self.cells_remaining == 0


def fill_wall(board: Board, inventory: BrickInventory) -> FillResult:
    """Fill the board greedily, longest bricks first.

    For each brick length, cells are scanned once in row-major order while tracking a
    run of consecutive cells that need a brick.  As soon as the run reaches the brick
    length and bricks of that length remain, the run is filled.  A run is broken by a
    cell that doesn't need a brick, and always ends at the last column of a row.

    A run that reaches the brick length after the bricks are used up is left open.
    Leftover bricks of one length are never used for another.

    The board is modified in place.
    """
    result = FillResult()

    for length, count in inventory:
        run_start: int | None = None
        run_len = 0

        for idx in range(len(board)):
            if board[idx] == CellState.NEEDS_BRICK:
                if run_start is None:
                    run_start = idx
                run_len += 1
                if run_len == length and count > 0:
                    board.fill(run_start, idx)
                    result.placements.append(Placement(length, run_start))
                    run_start = None
                    run_len = 0
                    count -= 1
            else:
                run_start = None
                run_len = 0

            # Bricks never cross a row boundary
            if board.is_row_end(idx):
                run_start = None
                run_len = 0

        if count > 0:
            result.unused[length] = count

    result.cells_remaining = board.count(CellState.NEEDS_BRICK)
    return result


def fill_config(config: WallConfig) -> tuple[Board, FillResult]:
    """Fill a fresh board built from the configuration; the configuration is unchanged."""
    board = Board.from_cells(config.cells, config.height, config.width)
    return board, fill_wall(board, config.inventory)


def is_possible_construct_wall(config: WallConfig) -> bool:
    """Whether the wall can be built from the available bricks by greedy placement."""
    _, result = fill_config(config)
    return result.feasible
