"""Loading and validating ``.ber`` map files."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .strutil import strtrim

MAX_WIDTH = 60
MIN_LAST_ROW = 3
MAX_LAST_ROW = 30
MAP_EXTENSION = ".ber"


class MapError(ValueError):
    """Raised when a map file cannot be read or describes an invalid map."""


@dataclass
class ElementCounts:
    """How many of each element a map holds, and where the player starts."""

    players: int = 0
    exits: int = 0
    collectables: int = 0
    invalid: int = 0
    player_pos: tuple[int, int] | None = None


def parse_map(text: str) -> list[str]:
    """Split map text into rows, one per newline plus one.

    A row of at most one character, newline included, becomes empty, so a
    trailing newline yields a trailing empty row.
    """
    pieces = text.split("\n")
    last = len(pieces) - 1
    rows = []
    for index, piece in enumerate(pieces):
        line = piece if index == last else piece + "\n"
        rows.append(strtrim(line, "\n") if len(line) > 1 else "")
    return rows


def read_map(path: str | PathLike[str]) -> list[str]:
    """Read the rows of a map file, which must carry the ``.ber`` extension."""
    file_path = Path(path)
    if file_path.is_dir():
        raise MapError("type the file name")
    try:
        text = file_path.read_text(encoding="latin-1")
    except OSError as exc:
        raise MapError("invalid file") from exc
    rows = parse_map(text)
    if not str(path).endswith(MAP_EXTENSION):
        raise MapError("invalid type of file")
    return rows


def check_shape(grid: list[str]) -> None:
    """Require a rectangular map no wider than the limit."""
    if not grid:
        raise MapError("MAP TOO SMALL")
    width = len(grid[0])
    if width > MAX_WIDTH:
        raise MapError("MAP TOO LARGE")
    if any(len(row) != width for row in grid[1:]):
        raise MapError("MAP MUST HAVE A REGULAR SHAPE")


def check_walls(grid: list[str]) -> None:
    """Require a map of sensible height enclosed by walls."""
    last = len(grid) - 1
    if last < MIN_LAST_ROW:
        raise MapError("MAP TOO SMALL")
    if last > MAX_LAST_ROW:
        raise MapError("MAP TOO LARGE")
    width = len(grid[0])
    enclosed = (
        width > 0
        and grid[0] == "1" * width
        and grid[last][:width] == "1" * width
        and all(row[:1] == "1" and row[width - 1:width] == "1" for row in grid[:last])
    )
    if not enclosed:
        raise MapError("MAP MUST BE SURROUNDED BY WALLS")


def count_elements(grid: list[str]) -> ElementCounts:
    """Count players, exits, collectables and unknown cells above the last row."""
    counts = ElementCounts()
    for y, row in enumerate(grid[:-1]):
        for x, cell in enumerate(row):
            if cell == "P":
                counts.players += 1
                counts.player_pos = (x, y)
            elif cell == "E":
                counts.exits += 1
            elif cell == "C":
                counts.collectables += 1
            elif cell not in ("0", "1", "G"):
                counts.invalid += 1
    return counts


def check_elements(grid: list[str]) -> ElementCounts:
    """Require one player, one exit, some collectables and no unknown cells."""
    counts = count_elements(grid)
    if counts.players != 1:
        raise MapError("THE PLAYER MUST ONLY BE ONE")
    if counts.exits != 1:
        raise MapError("MAP MUST HAVE 1 EXIT")
    if counts.collectables < 1:
        raise MapError("MAP MUST HAVE AT LEAST 1 COLLECTABLE")
    if counts.invalid:
        raise MapError("INVALID ELEMENT ON MAP")
    return counts


def check_reachable(grid: list[str], start: tuple[int, int]) -> None:
    """Require the exit and every collectable to be reachable from ``start``."""
    cells = [list(row) for row in grid]
    exit_found = False
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= y < len(cells) and 0 <= x < len(cells[y])):
            continue
        cell = cells[y][x]
        if cell in ("1", "E", "2"):
            exit_found = exit_found or cell == "E"
            continue
        cells[y][x] = "2"
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    if not exit_found:
        raise MapError("UNABLE TO REACH THE EXIT")
    if any("C" in row for row in cells):
        raise MapError("UNABLE TO REACH ALL COLLECTABLES")


def validate_map(grid: list[str]) -> ElementCounts:
    """Run every check in turn and return the element counts."""
    check_shape(grid)
    check_walls(grid)
    counts = check_elements(grid)
    assert counts.player_pos is not None
    check_reachable(grid, counts.player_pos)
    return counts


def load_map(path: str | PathLike[str]) -> list[str]:
    """Read a map file and validate it."""
    grid = read_map(path)
    validate_map(grid)
    return grid