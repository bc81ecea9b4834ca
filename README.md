# solong

The rules of a small tile-based puzzle game. The player walks around a
walled map, picks up every collectable and then leaves through the exit,
while enemies step towards the player after every second move.

The package reads and validates `.ber` map files, runs the movement and
enemy rules, and tells a renderer object you supply what to draw.

## Map files

A map is a plain text file with the `.ber` extension. Each line is one row
of tiles:

| Tile | Meaning        |
|------|----------------|
| `1`  | wall           |
| `0`  | floor          |
| `P`  | player start   |
| `C`  | collectable    |
| `E`  | exit           |
| `G`  | enemy          |

```
1111111111
1P0C000001
1000011001
1C0000G0E1
1111111111
```

A map is accepted only if:

- every row has the same length, at most 60 tiles wide;
- it has at least 4 and at most 31 rows and is fully enclosed by walls;
- it holds exactly one player, exactly one exit and at least one
  collectable, and no tiles other than those listed above;
- the exit and every collectable can be reached from the player's start.

Every newline starts a new row, so a file that ends with a newline has an
empty last row and is rejected as irregular in shape.

A map that breaks a rule raises `MapError` (a `ValueError`) whose message
names the rule, for example `MAP MUST BE SURROUNDED BY WALLS` or
`UNABLE TO REACH THE EXIT`. A directory, an unreadable file or a name
without the `.ber` extension raises `MapError` as well.

## Usage

```python
from solong.mapfile import MapError, load_map
from solong.game import Game, GameOver, Key

try:
    grid = load_map("maps/level1.ber")
except MapError as exc:
    raise SystemExit(f"Bad map: {exc}")

game = Game(grid, renderer)   # renderer may be None
game.draw_all()

try:
    for key in ("d", "d", Key.DOWN, "s"):
        game.press(key)
except GameOver as over:
    print("Game over:", over.reason)   # "won", "caught" or "quit"
```

`load_map` reads and validates in one step. `read_map` and `parse_map`
give the rows without checking them; `validate_map` runs the checks
`check_shape`, `check_walls`, `check_elements` and `check_reachable` in
turn and returns an `ElementCounts` with the numbers of players, exits,
collectables and unknown tiles and the player's start position.
`count_elements` gives the same counts without raising.

### The game

`Game(grid, renderer=None)` takes the rows of a map; it raises
`ValueError` if the map has no player. Its state is open to read:
`player_pos`, `enemy_positions`, `collectables` (how many are left),
`moves`, `result`, and `rows()` for the current grid as strings.

`Game.press(key)` accepts a `Key` (`UP`, `DOWN`, `LEFT`, `RIGHT`,
`ESCAPE`) or one of the letters `w`, `a`, `s`, `d`. Every press counts as a
move, even one blocked by a wall or an unknown key. The player cannot walk
into walls, nor into the exit while collectables remain; stepping on a
collectable picks it up. After every second move `move_enemies` lets each
enemy take one step towards the player; enemies are blocked by walls, the
exit, collectables and other enemies.

The game ends by raising `GameOver`, with `reason` and `Game.result` set to:

- `"won"` when the player enters the exit with every collectable taken;
- `"caught"` when the player walks into an enemy or an enemy reaches the
  player;
- `"quit"` on `Key.ESCAPE` or a call to `Game.quit()`.

`Game.can_move(x, y, entity)` is the rule used for both the player (`"P"`)
and enemies (`"G"`).

### Renderers

A renderer is any object with two methods (the `Renderer` protocol in
`solong.game`):

- `draw(sprite, x, y)` — draw a `Sprite` at tile column `x`, row `y`;
- `show_moves(text)` — show the move counter.

`Sprite` members carry image file names such as `img/wall.xpm` as their
values; the banner is drawn at tile (0, 0) and the exit switches to
`Sprite.EXIT_OPEN` once the last collectable is taken.

## Helpers

- `solong.linereader` — `LineReader(stream, buffer_size=10)` reads a byte
  or text stream through a fixed-size buffer; `readline()` returns the next
  line with its newline, or `None` at the end, and the reader is iterable.
  `read_lines` returns all remaining lines as a list.
- `solong.printf` — `cformat(fmt, *args)` understands the conversions
  `%c %s %p %d %i %u %x %X %%` with 32-bit integer semantics; unknown
  conversions produce nothing. `print_formatted(fmt, *args, file=None)`
  writes the result (to standard output by default) and returns its
  length. `format_number`, `format_hex` and `format_pointer` render single
  values.
- `solong.strutil` — `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `strlcpy` and `strlcat` with the classic C library
  semantics; `strlcpy` and `strlcat` return the resulting text together
  with the length they report.

## What the package does not do

There is no command to start, no window, no keyboard handling and no
images: the `Sprite` values only name image files, which are not included.
To play, supply a renderer and feed key presses to `Game.press` from your
own input loop.

## Tests

The test suite uses pytest; install the `test` extra to get it.