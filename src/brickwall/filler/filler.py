"""Main filler module for brick walls."""

from datetime import datetime
from pathlib import Path
from time import time
from typing import TextIO

from brickwall.board import Board
from brickwall.filler.config import config as filler_config
from brickwall.filler.greedy import FillResult, fill_config
from brickwall.filler.utils import TIMESTAMP_FMT, time_str, verdict_str
from brickwall.wall_config import WallConfig


def get_logfile(config: WallConfig) -> Path:
    """Path of the fill log for the given configuration."""
    # Configurations read from a stream have a placeholder source like "<stream>"
    stem = "stream" if config.source.startswith("<") else Path(config.source).stem
    return Path(filler_config.log_dir) / f"{stem}-{config.height}x{config.width}.log"


def run(config: WallConfig) -> bool:
    """Run the filler on the given configuration.

    If `write_log` is enabled, a log of the fill is written under `log_dir`.

    Args:
        config (WallConfig): The wall and bricks to check.

    Returns:
        True if the wall can be built from the bricks.
    """
    if not filler_config.write_log:
        return solve_one(config, logf=None)

    logfile = get_logfile(config)
    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        return solve_one(config, logf=logf)


def solve_one(config: WallConfig, *, logf: TextIO | None) -> bool:
    """Fill the wall described by the configuration and report the verdict.

    Args:
        config (WallConfig): The wall and bricks to check.
        logf: File object to log the fill to, or None to skip logging.
    """
    start_time = time()
    if logf is not None:
        log_start(config, start_time, logf=logf)

    board, result = fill_config(config)

    if logf is not None:
        log_result(board, result, start_time, logf=logf)
    return result.feasible


def log_start(config: WallConfig, start_time: float, *, logf: TextIO) -> None:
    """Write the description of the wall being filled."""
    print(f"Input: {config.source}", file=logf, flush=True)
    print(f"Dimensions: {config.height}x{config.width}", file=logf, flush=True)
    if filler_config.show_wall:
        print("Initial wall:", file=logf, flush=True)
        print("", file=logf, flush=True)
        for row in config.shape_rows():
            print(row, file=logf, flush=True)
        print("", file=logf, flush=True)
    print(f"Cells to fill: {config.cells_needed}", file=logf, flush=True)
    print(f"Bricks: {config.inventory}", file=logf, flush=True)
    print(
        f"Total bricks: {config.inventory.total()} covering up to {config.inventory.total_cells()} cells",
        file=logf,
        flush=True,
    )

    # Start time as formatted string (in local timezone)
    start_time_str = datetime.fromtimestamp(start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)


def log_result(board: Board, result: FillResult, start_time: float, *, logf: TextIO) -> None:
    """Write the placements and verdict of a finished fill."""
    for placement in result.placements:
        row, col = board.get_2d_idx(placement.start_idx)
        print(
            f"Placed brick of length {placement.length} at row {row}, "
            f"columns {col}-{col + placement.length - 1}",
            file=logf,
            flush=True,
        )
    for length, count in result.unused.items():
        print(f"Unused bricks of length {length}: {count}", file=logf, flush=True)

    if filler_config.show_wall:
        print("Filled wall:", file=logf, flush=True)
        print("", file=logf, flush=True)
        board.print(file=logf, flush=True)
        print("", file=logf, flush=True)

    print(f"Cells left unfilled: {result.cells_remaining}", file=logf, flush=True)
    print(f"Verdict: {verdict_str(result.feasible)}", file=logf, flush=True)
    print(f"Time taken: {time_str(time() - start_time)}", file=logf, flush=True)
