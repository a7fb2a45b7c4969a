# solong

A small tile-based puzzle game. The player walks around a walled map,
picks up every collectible, then leaves through the exit. Every step
is counted.

The package also contains the pieces needed to draw such a game:
key codes for two keyboard layouts, the X11 colour names, and a reader
for XPM images.

## Installing

```
pip install .
```

## Maps

A map is stored in a text file with the `.ber` extension. It is a
rectangle of these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `C`  | collectible  |
| `E`  | exit         |
| `P`  | player start |

```
1111111
1P0C0E1
1111111
```

Each row must end with a newline. Any text after the last newline is
ignored. A map is rejected, with a `solong.mapfile.MapError`, if:

- the file name does not end in `.ber`;
- the path is a directory, cannot be read, or holds no complete line;
- a row is longer or shorter than the first row;
- the first or last row is not all walls, or a row does not start and
  end with a wall;
- a character outside the table appears;
- there is no collectible, no exit, or not exactly one player.

## Playing from the command line

```
solong path/to/level.ber
```

The command prints the map and a move counter, then reads keys from
standard input, one character at a time:

- `w` or `z`: up
- `a` or `q`: left
- `s`: down
- `d`: right
- the escape character: quit

Other characters, newlines included, are ignored. After each of the
movement keys the map and the counter (`You did N moves`) are printed
again. Walking into a wall does not count as a move. The exit stays
shut until every collectible has been picked up. Stepping onto it then
prints the final count and `You reached the exit`, and the game ends.

Add `--bonus` to use the other file-name rule (see `check_file_name`)
and the counter caption `Move : N` / `Moves : N`.

If the argument is missing or the map is rejected, the command writes
`Error` and the reason to standard error and exits with status 1.

## Using the library

```python
from solong.mapfile import load_map
from solong.game import Game, MoveResult
from solong.keys import Direction, LinuxKey

game = Game(load_map("level.ber"))
result = game.move(Direction.RIGHT)      # a MoveResult
game.press_key(LinuxKey.W, LinuxKey)     # same rules, by key code
print(game.map.render())
print(game.status())
```

The modules:

- `solong.mapfile`: `check_file_name`, `read_lines`, `validate_map`,
  `load_map`, the `GameMap` grid (`cell`, `set_cell`, `width`, `height`,
  `render`), `Player` and `MapError`.
- `solong.keys`: the `Direction` enum, the key code enums `MacKey` and
  `LinuxKey`, `direction_for_key` and `is_escape`. Both layouts bind
  W/Z/up, A/Q/left, S/down and D/right.
- `solong.game`: `Game` (`move`, `press_key`, `status`, `moves`),
  `MoveResult` (`BLOCKED`, `MOVED`, `COLLECTED`, `EXIT_LOCKED`, `WON`,
  `QUIT`), `move_message`, `counter_label`, `int_len`, `window_size` and
  the command's `main`.
- `solong.colors`: `COLOR_NAMES`, `color_by_name` (case-insensitive,
  `"none"` gives -1), `text_to_rgb` for XPM colour specifications, and
  `convert_color`, which fits a 0xRRGGBB value into a display of fewer
  than 24 bits.
- `solong.xpm`: `load_xpm`, `parse_xpm_text` and `parse_xpm` return an
  `XpmImage` (`width`, `height`, `pixels`, `pixel(x, y)`). The `None`
  colour becomes `TRANSPARENT` (0xFF000000). Helpers `strip_comments`,
  `quoted_strings` and `split_words` are also public. Bad data raises
  `XpmError`.

## What it does not do

There is no graphical window. The game is played only in the terminal,
as text. Arrow keys cannot be used on the command line, because it reads
plain characters. `window_size` works out how large a window of tiles
would be and whether it fits on a screen, and `solong.xpm` decodes tile
images, but nothing in the package opens a window or draws on one.

## Running the tests

```
pip install .[test]
pytest
```