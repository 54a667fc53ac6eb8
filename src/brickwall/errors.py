"""Errors raised while reading a wall description."""


class WallInputError(Exception):
    """Base class for all input errors reported by the command-line tool."""

    exit_code: int = 1
    """Process exit status used when this error ends the run."""


class MissingArgumentError(WallInputError):
    """No input file path was supplied."""

    exit_code = 2


class InputFileNotFoundError(WallInputError, FileNotFoundError):
    """The input path does not resolve to a readable file."""

    exit_code = 3


class InputReadError(WallInputError, OSError):
    """Generic failure while reading the input file."""

    exit_code = 4


class MalformedInputError(WallInputError, ValueError):
    """A structural or value violation in the input file."""

    exit_code = 5


class DuplicateBrickLengthError(MalformedInputError):
    """The same brick length was declared twice in the inventory."""

    exit_code = 6


class TooManyInventoryLinesError(MalformedInputError):
    """More inventory lines are present than the declared count of brick sorts."""

    exit_code = 7
