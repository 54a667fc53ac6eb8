"""Brick Wall Checker.

Reads a wall's shape and a set of linear bricks of length 1 to 8 from a text file and
checks whether the bricks cover every cell of the wall that needs one.  Bricks are placed
greedily, longest first, left to right and row by row; the first fit is always taken.
Prints "yes" or "no", or a line starting with "ERROR:" if the input is invalid.
"""

import sys

from .errors import MissingArgumentError, WallInputError
from .filler import filler
from .filler.config import config as filler_config
from .filler.utils import verdict_str
from .wall_config import load_config


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the brick wall checker."""
    args = sys.argv[1:] if argv is None else argv
    try:
        # Expect the path to the wall description file as the first argument
        if not args:
            raise MissingArgumentError("Please, specify the file name")
        config = load_config(args[0])
    except WallInputError as e:
        print(f"ERROR: {e}")
        sys.exit(e.exit_code if filler_config.distinct_exit_codes else 1)

    print(verdict_str(filler.run(config)))
