import io
from pathlib import Path

import pytest

from brickwall.wall_config import WallConfig, read_config


def _wall_text(rows: list[str], bricks: list[tuple[int, int]]) -> str:
    lines = [f"{len(rows[0])} {len(rows)}", *rows, str(len(bricks))]
    lines += [f"{length} {count}" for length, count in bricks]
    return "\n".join(lines) + "\n"


@pytest.fixture
def wall_text():
    """Factory building the text of a wall description file from rows and bricks."""
    return _wall_text


@pytest.fixture
def make_config():
    """Factory building a WallConfig from rows and `(length, count)` bricks."""

    def _make(rows: list[str], bricks: list[tuple[int, int]]) -> WallConfig:
        return read_config(io.StringIO(_wall_text(rows, bricks)))

    return _make


@pytest.fixture
def write_wall(tmp_path: Path):
    """Factory writing a wall description file and returning its path."""

    def _write(text: str, name: str = "wall.txt", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path

    return _write
