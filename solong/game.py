"""Game state: player movement, collectables, exit and chasing enemies."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Protocol


class Key(Enum):
    """Keys the game reacts to; the letters w, a, s, d are accepted as well."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"


class Sprite(Enum):
    """Images the game draws, by file."""

    EXIT_CLOSED = "img/exit.xpm"
    EXIT_OPEN = "img/exit_2.xpm"
    WALL = "img/wall.xpm"
    COLLECTABLE = "img/collectable.xpm"
    FLOOR = "img/floor.xpm"
    PLAYER_RIGHT = "img/player_r.xpm"
    PLAYER_LEFT = "img/player_l.xpm"
    PLAYER_FRONT = "img/player_f.xpm"
    PLAYER_BACK = "img/player_b.xpm"
    ENEMY = "img/enemy.xpm"
    BANNER = "img/banner.xpm"


class Renderer(Protocol):
    """Anything that can draw tiles and the move counter."""

    def draw(self, sprite: Sprite, x: int, y: int) -> None: ...

    def show_moves(self, text: str) -> None: ...


class GameOver(Exception):
    """Raised when the game ends: ``won``, ``caught`` or ``quit``."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


_LETTERS = {"w": Key.UP, "s": Key.DOWN, "a": Key.LEFT, "d": Key.RIGHT}
_STEPS = {Key.UP: (0, -1), Key.DOWN: (0, 1), Key.LEFT: (-1, 0), Key.RIGHT: (1, 0)}
_PLAYER_SPRITES = {
    Key.UP: Sprite.PLAYER_BACK,
    Key.LEFT: Sprite.PLAYER_LEFT,
    Key.RIGHT: Sprite.PLAYER_RIGHT,
}
_CELL_SPRITES = {
    "0": Sprite.FLOOR,
    "1": Sprite.WALL,
    "C": Sprite.COLLECTABLE,
    "E": Sprite.EXIT_CLOSED,
    "P": Sprite.PLAYER_FRONT,
    "G": Sprite.ENEMY,
}


class Game:
    """A running game over a validated map grid."""

    def __init__(self, grid: Iterable[str], renderer: Renderer | None = None) -> None:
        self.grid = [list(row) for row in grid]
        self.renderer = renderer
        self.moves = 0
        self.result: str | None = None
        self.collectables = sum(row.count("C") for row in self.grid)
        players = [
            (x, y) for y, row in enumerate(self.grid) for x, cell in enumerate(row) if cell == "P"
        ]
        if not players:
            raise ValueError("map has no player")
        self.player_pos: tuple[int, int] = players[-1]
        self.enemy_positions = [
            (x, y) for y, row in enumerate(self.grid) for x, cell in enumerate(row) if cell == "G"
        ]

    def rows(self) -> list[str]:
        """The current grid as strings."""
        return ["".join(row) for row in self.grid]

    def _draw(self, sprite: Sprite, x: int, y: int) -> None:
        if self.renderer is not None:
            self.renderer.draw(sprite, x, y)

    def _show_moves(self) -> None:
        if self.renderer is not None:
            self.renderer.show_moves(str(self.moves))

    def _finish(self, reason: str) -> GameOver:
        self.result = reason
        return GameOver(reason)

    def draw_all(self) -> None:
        """Draw every cell, then the banner."""
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                sprite = _CELL_SPRITES.get(cell)
                if sprite is not None:
                    self._draw(sprite, x, y)
        self._draw(Sprite.BANNER, 0, 0)

    def _collect(self) -> None:
        self.collectables -= 1
        if self.collectables != 0:
            return
        for y, row in enumerate(self.grid):
            if "E" in row:
                self._draw(Sprite.EXIT_OPEN, row.index("E"), y)
                return

    def can_move(self, x: int, y: int, entity: str) -> bool:
        """Whether ``entity`` ('P' or 'G') may step onto (x, y); ends the game on contact."""
        cell = self.grid[y][x]
        if entity == "P":
            if cell == "1":
                return False
            if cell == "E" and self.collectables != 0:
                return False
            if cell == "E":
                raise self._finish("won")
            if cell == "G":
                raise self._finish("caught")
            if cell == "C":
                self._collect()
                self.grid[y][x] = "0"
        elif entity == "G":
            if cell in ("1", "E", "C", "G"):
                return False
            if cell == "P":
                raise self._finish("caught")
        return True

    def press(self, key: Key | str) -> None:
        """Handle one key press; every second press the enemies move."""
        direction = _LETTERS.get(key) if isinstance(key, str) else key
        x, y = self.player_pos
        self.grid[y][x] = "0"
        self._draw(Sprite.FLOOR, x, y)
        self.moves += 1
        step = _STEPS.get(direction) if direction is not None else None
        if step is not None and self.can_move(x + step[0], y + step[1], "P"):
            x, y = x + step[0], y + step[1]
        self._draw(Sprite.BANNER, 0, 0)
        self._show_moves()
        self._draw(_PLAYER_SPRITES.get(direction, Sprite.PLAYER_FRONT), x, y)
        self.grid[y][x] = "P"
        self.player_pos = (x, y)
        if self.moves % 2 == 0:
            self.move_enemies()
        if direction is Key.ESCAPE:
            self.quit()

    def _enemy_step(self, x: int, y: int) -> tuple[int, int]:
        px, py = self.player_pos
        ex, ey = x, y
        rx, ry = px - x, py - y
        if rx < 0 and self.can_move(x - 1, y, "G"):
            ex -= 1
        else:
            rx = 1
        if ry < 0 and self.can_move(x, y - 1, "G") and (ex, ey) == (x, y):
            ey -= 1
        else:
            ry = 1
        if rx > 0 and self.can_move(x + 1, y, "G") and (ex, ey) == (x, y) and x != px:
            ex += 1
        elif ry > 0 and self.can_move(x, y + 1, "G") and (ex, ey) == (x, y):
            ey += 1
        return ex, ey

    def move_enemies(self) -> None:
        """Move each enemy one step towards the player."""
        for index, (x, y) in enumerate(self.enemy_positions):
            self.grid[y][x] = "0"
            self._draw(Sprite.FLOOR, x, y)
            nx, ny = self._enemy_step(x, y)
            self.enemy_positions[index] = (nx, ny)
            self.grid[ny][nx] = "G"
            self._draw(Sprite.ENEMY, nx, ny)

    def quit(self) -> None:
        """End the game, recording ``quit`` as the result."""
        self.result = "quit"
        raise GameOver(self.result)