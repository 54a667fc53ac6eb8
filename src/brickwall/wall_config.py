"""Loader for wall description files."""

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import TextIO

from bitarray import bitarray

from brickwall.errors import (
    InputFileNotFoundError,
    InputReadError,
    MalformedInputError,
    TooManyInventoryLinesError,
)
from brickwall.inventory import MAX_BRICK_LENGTH, MIN_BRICK_LENGTH, BrickInventory

UTF8_BOM = "\ufeff"
MIN_COUNT_OF_BRICKS_SORTS = 1

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
"""A decimal integer with an optional sign and no surrounding whitespace."""

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
"""Integers in the input are 32-bit signed values."""

VALID_ROW_PATTERN = re.compile(r"[01]*")
"""A row of the wall's shape matrix: only '0' and '1' characters."""


@dataclass
class WallConfig:
    """A wall to build and the bricks available for it."""

    dims: tuple[int, int]
    """The height and width of the wall's shape matrix."""

    cells: bitarray
    """The shape of the wall, in row-major order.

    A set bit is a cell that needs a brick, a cleared bit is a cell that stays empty.
    """

    inventory: BrickInventory
    """The bricks available for building the wall."""

    source: str = "<stream>"
    """Where the configuration was read from."""

    def __post_init__(self) -> None:
        """Validate the shape against the dimensions."""
        height, width = self.dims
        if height <= 0 or width <= 0:
            raise ValueError(f"Wall dimensions must be positive, got {self.dims}.")
        if len(self.cells) != height * width:
            raise ValueError(f"Wall shape length does not match dimensions {self.dims}.")

    @property
    def height(self) -> int:
        return self.dims[0]

    @property
    def width(self) -> int:
        return self.dims[1]

    @property
    def cells_needed(self) -> int:
        """Number of cells that need a brick."""
        return self.cells.count(1)

    def shape_rows(self) -> list[str]:
        """The shape matrix as it appeared in the input, one string per row."""
        return [
            self.cells[start : start + self.width].to01()
            for start in range(0, len(self.cells), self.width)
        ]

    def __str__(self) -> str:
        """Return a string representation of the WallConfig."""
        return f"{self.source} ({self.height}x{self.width}): {self.inventory}"


def remove_bom(line: str) -> str:
    """Remove a leading UTF-8 byte-order mark from a line read from a text file."""
    return line.removeprefix(UTF8_BOM)


def read_line(f: TextIO) -> str | None:
    """Read the next line without its line terminator, or None at end of input."""
    line = f.readline()
    if not line:
        return None
    return line.removesuffix("\n").removesuffix("\r")


def parse_int(token: str) -> int:
    """Parse a plain decimal integer.

    Unlike `int`, surrounding whitespace, underscores, non-ASCII digits and values
    outside the 32-bit signed range are rejected.
    """
    if not INTEGER_PATTERN.fullmatch(token):
        raise ValueError(f"Invalid integer: {token!r}")
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"Integer out of range: {token!r}")
    return value


def split_pair(line: str) -> tuple[str, str] | None:
    """Split a line into two tokens separated by a single space, or None if it isn't one."""
    tokens = line.split(" ")
    if len(tokens) != 2 or line.endswith(" "):
        return None
    return tokens[0], tokens[1]


def parse_dimensions(f: TextIO) -> tuple[int, int]:
    """Read the width and height of the wall's shape matrix from the first line.

    Returns:
        A `(width, height)` tuple.
    """
    line = remove_bom(read_line(f) or "")

    pair = split_pair(line)
    if pair is None:
        raise MalformedInputError(
            "Width and height of wall's shape matrix isn't two positive integers "
            "separated by space on their own line"
        )

    try:
        width, height = map(parse_int, pair)
    except ValueError:
        raise MalformedInputError(
            "Width or height of wall's shape matrix isn't a number"
        ) from None

    if width <= 0 or height <= 0:
        raise MalformedInputError("Width or height of wall's shape matrix is not a positive number")

    return width, height


def parse_shape(f: TextIO, width: int, height: int) -> bitarray:
    """Read `height` lines of `width` '0'/'1' characters into a row-major bit mask."""
    cells = bitarray()

    for _ in range(height):
        line = read_line(f)

        # End of input before the whole matrix was read
        if line is None or len(line) != width:
            raise MalformedInputError("Wall structure is defined incorrectly")

        if not VALID_ROW_PATTERN.fullmatch(line):
            invalid = "".join(sorted(set(line) - {"0", "1"}))
            raise MalformedInputError(
                f"Wall's shape matrix isn't formed just of '1' and '0' symbols: {invalid!r}"
            )
        cells.extend(line)

    return cells


def parse_sort_count(f: TextIO) -> int:
    """Read the count of brick sorts, a positive integer on its own line."""
    line = read_line(f)
    try:
        count = parse_int(line if line is not None else "")
    except ValueError:
        raise MalformedInputError("Line with the count of bricks' sorts is incorrect") from None

    if count < MIN_COUNT_OF_BRICKS_SORTS:
        raise MalformedInputError("The count of bricks' sorts isn't a correct value")
    return count


def parse_inventory(f: TextIO, count_of_sorts: int) -> BrickInventory:
    """Read `count_of_sorts` lines of "<length> <count>" and check nothing follows them.

    Raises:
        MalformedInputError: If a line is missing or has the wrong format.
        DuplicateBrickLengthError: If a brick length appears on two lines.
        TooManyInventoryLinesError: If a non-empty line follows the last inventory line.
    """
    inventory = BrickInventory()

    for _ in range(count_of_sorts):
        line = read_line(f)
        if line is None:
            raise MalformedInputError("Data format from file is incorrect")

        pair = split_pair(line)
        if pair is None:
            raise MalformedInputError(
                "List of bricks has incorrect format. "
                "Each line should contain two positive integers separated by space"
            )

        try:
            length, count = map(parse_int, pair)
        except ValueError:
            raise MalformedInputError(
                "Each line should contain two positive integers separated by space. "
                f"Brick's length can be from {MIN_BRICK_LENGTH} to {MAX_BRICK_LENGTH}"
            ) from None

        inventory.add(length, count)

    # Empty lines after the inventory are allowed, anything else is an extra line
    if any(line.rstrip("\r\n") for line in f):
        raise TooManyInventoryLinesError(
            f"List of bricks has incorrect format. Count of lines should be {count_of_sorts}"
        )

    return inventory


def read_config(f: TextIO, *, source: str = "<stream>") -> WallConfig:
    """Read a whole wall description from an open text stream."""
    width, height = parse_dimensions(f)
    cells = parse_shape(f, width, height)
    count_of_sorts = parse_sort_count(f)
    inventory = parse_inventory(f, count_of_sorts)
    return WallConfig(dims=(height, width), cells=cells, inventory=inventory, source=source)


def load_config(config_path: PathLike | str) -> WallConfig:
    """Load a wall description from the given path.

    Args:
        config_path (PathLike | str): Path to the wall description file.

    Raises:
        InputFileNotFoundError: If the file cannot be opened for reading.
        InputReadError: If the file cannot be read or decoded.
        MalformedInputError: If the file content is invalid (see `read_config`).
    """
    path = Path(config_path)
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as e:
        raise InputFileNotFoundError(f"Can't find the file with data: {path}") from e

    with f:
        try:
            return read_config(f, source=str(path))
        except UnicodeDecodeError as e:
            raise InputReadError(f"Can't decode the file with data as UTF-8: {path}") from e
        except OSError as e:
            raise InputReadError(f"Can't read the file with data: {e.strerror or e}") from e
