"""Playing a loaded map: moving the player, counting moves and the command line."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Sequence, TextIO

from solong.keys import Direction, LinuxKey, direction_for_key, is_escape
from solong.mapfile import GameMap, MapError, check_file_name, load_map

_WALL = "1"
_EXIT = "E"
_COLLECTIBLE = "C"
_FLOOR = "0"
_PLAYER = "P"
_ESCAPE_CHAR = "\x1b"

_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class MoveResult(Enum):
    """What happened when a key was pressed."""

    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    EXIT_LOCKED = "exit_locked"
    WON = "won"
    QUIT = "quit"


def move_message(moves: int) -> str:
    """Return the move counter line printed after each move."""
    return f"You did {moves} move" if moves == 1 else f"You did {moves} moves"


def int_len(number: int) -> int:
    """Return the width measure used to place the on-screen move counter."""
    length = 2
    while number > 10:
        number //= 10
        length += 1
    return length


def counter_label(moves: int) -> tuple[str, str, int]:
    """Return the counter's caption, its number and the number's x position."""
    caption = "Move :" if moves < 2 else "Moves :"
    return caption, str(moves), int_len(moves) * 2 + 80


def window_size(
    game_map: GameMap,
    tile_width: int,
    tile_height: int,
    screen_width: int,
    screen_height: int,
    strict: bool = False,
) -> tuple[int, int]:
    """Return the window size in pixels for ``game_map`` drawn with the given tiles.

    Raises :class:`MapError` when the map does not fit on the screen. With
    ``strict`` a map that exactly fills the screen is also rejected.
    """
    max_width = screen_width // tile_width
    max_height = screen_height // tile_height
    width, height = game_map.width, game_map.height
    if strict:
        too_big = width >= max_width or height >= max_height
    else:
        too_big = width > max_width or height > max_height
    if too_big:
        raise MapError("Not enough space for window")
    return width * tile_width, height * tile_height


@dataclass
class Game:
    """A game in progress on one map."""

    map: GameMap
    bonus: bool = False
    won: bool = False

    @property
    def moves(self) -> int:
        return self.map.player.moves

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one tile in ``direction``."""
        dx, dy = _OFFSETS[direction]
        player = self.map.player
        target_x, target_y = player.x + dx, player.y + dy
        target = self.map.cell(target_x, target_y)
        if target == _WALL:
            return MoveResult.BLOCKED
        if target == _EXIT:
            if self.map.goal == self.map.collected:
                self.won = True
                return MoveResult.WON
            return MoveResult.EXIT_LOCKED
        player.moves += 1
        result = MoveResult.MOVED
        if target == _COLLECTIBLE:
            self.map.collected += 1
            result = MoveResult.COLLECTED
        self.map.set_cell(player.x, player.y, _FLOOR)
        player.x, player.y = target_x, target_y
        self.map.set_cell(target_x, target_y, _PLAYER)
        return result

    def press_key(self, key: int, keys: type[IntEnum]) -> MoveResult | None:
        """Handle a key of layout ``keys``; return None for unbound keys."""
        if is_escape(key, keys):
            return MoveResult.QUIT
        direction = direction_for_key(key, keys)
        if direction is None:
            return None
        return self.move(direction)

    def status(self) -> str:
        """Return the move counter as the current build shows it."""
        if self.bonus:
            caption, number, _ = counter_label(self.moves)
            return f"{caption} {number}"
        return move_message(self.moves)


def _show(game: Game, out: TextIO) -> None:
    out.write(game.map.render() + "\n")
    out.write(game.status() + "\n")


def _key_for(char: str) -> int:
    return int(LinuxKey.ESCAPE) if char == _ESCAPE_CHAR else ord(char)


def _play(game: Game, source: TextIO, out: TextIO) -> int:
    _show(game, out)
    for line in source:
        for char in line:
            result = game.press_key(_key_for(char), LinuxKey)
            if result is None:
                continue
            if result is MoveResult.QUIT:
                return 0
            if result is MoveResult.WON:
                out.write(f"{move_message(game.moves)}\nYou reached the exit\n")
                return 0
            _show(game, out)
    return 0


def _fail(message: str) -> int:
    sys.stderr.write(f"Error\n{message}\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and play it from standard input.

    Keys w/z, a/q, s, d move the player; the escape character quits.
    ``--bonus`` selects the bonus build's file-name rule and counter.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = "--bonus" in args
    args = [arg for arg in args if arg != "--bonus"]
    if len(args) != 1:
        return _fail("expected exactly one map file argument")
    try:
        check_file_name(args[0], bonus)
        game_map = load_map(args[0])
    except MapError as exc:
        return _fail(str(exc))
    return _play(Game(game_map, bonus=bonus), sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())