"""Module for the inventory of available bricks."""

from collections.abc import Iterable, Iterator

from sortedcontainers import SortedKeyList

from brickwall.errors import DuplicateBrickLengthError, MalformedInputError

MIN_BRICK_LENGTH = 1
MAX_BRICK_LENGTH = 8


def brick_sort_key(entry: tuple[int, int]) -> int:
    """Key function ordering inventory entries by descending brick length."""
    return -entry[0]


class BrickInventory:
    """A set of bricks, described as unique `(length, count)` pairs.

    Entries are kept sorted by descending length as they are added.  The filler
    consumes them in this order, longest bricks first.
    """

    def __init__(self, entries: Iterable[tuple[int, int]] | None = None) -> None:
        self._entries: SortedKeyList = SortedKeyList(key=brick_sort_key)
        for length, count in entries or ():
            self.add(length, count)

    def add(self, length: int, count: int) -> None:
        """Add `count` bricks of the given length.

        Raises:
            MalformedInputError: If the length is outside 1..8 or the count is not positive.
            DuplicateBrickLengthError: If bricks of this length were already added.
        """
        if not MIN_BRICK_LENGTH <= length <= MAX_BRICK_LENGTH or count <= 0:
            raise MalformedInputError(
                "Each line should contain two positive integers separated by space. "
                f"Brick's length can be from {MIN_BRICK_LENGTH} to {MAX_BRICK_LENGTH}"
            )
        if length in self:
            raise DuplicateBrickLengthError(
                "List of bricks has incorrect format (few lines with the same length of brick)"
            )
        self._entries.add((length, count))

    def __contains__(self, length: object) -> bool:
        return any(entry_length == length for entry_length, _ in self._entries)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Iterate over `(length, count)` pairs, longest bricks first."""
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def total(self) -> int:
        """Total number of bricks."""
        return sum(count for _, count in self._entries)

    def total_cells(self) -> int:
        """Total number of cells the bricks could cover."""
        return sum(length * count for length, count in self._entries)

    def __str__(self) -> str:
        return ", ".join(f"{length}x{count}" for length, count in self._entries)

    def __repr__(self) -> str:
        return f"BrickInventory({list(self._entries)!r})"
