"""Allow running the checker with `python -m brickwall`."""

from brickwall import main

main()
