"""Reading and validating ``.ber`` map files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

_WALL = "1"
_COLLECTIBLE = "C"
_EXIT = "E"
_PLAYER = "P"
_ALLOWED = frozenset("10CEP")
_EXTENSION = ".ber"


class MapError(Exception):
    """Raised when a map file or its contents are rejected."""


@dataclass
class Player:
    """Where the player stands and how many moves have been made."""

    x: int = 0
    y: int = 0
    moves: int = 0


@dataclass
class GameMap:
    """A rectangular grid of tiles with the player's state."""

    rows: list[list[str]]
    player: Player = field(default_factory=Player)
    goal: int = 0
    collected: int = 0

    def cell(self, x: int, y: int) -> str:
        return self.rows[y][x]

    def set_cell(self, x: int, y: int, value: str) -> None:
        self.rows[y][x] = value

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def render(self) -> str:
        """Return the grid as text, one line per row."""
        return "\n".join("".join(row) for row in self.rows)


def check_file_name(name: str, bonus: bool = False) -> str:
    """Check that ``name`` ends in the ``.ber`` extension; return it unchanged.

    A leading dot is skipped, and a dot right after a slash (a hidden file)
    starts the search over; the bonus build only skips that dot.
    """
    start = 1 if name.startswith(".") else 0
    dot = name.find(".", start)
    if dot == -1:
        raise MapError("Bad extension file")
    suffix_start = dot
    if name[dot - 1] == "/":
        if bonus:
            suffix_start = dot + 1
        else:
            suffix_start = name.find(".", dot + 1)
            if suffix_start == -1:
                raise MapError("Bad extension file")
    if name[suffix_start:] != _EXTENSION:
        raise MapError("Bad extension file")
    return name


def read_lines(path: str | Path) -> list[str]:
    """Return the newline-terminated lines of a map file, without newlines.

    Text after the last newline is not part of the map.
    """
    path = Path(path)
    if path.is_dir():
        raise MapError("Directory")
    try:
        text = path.read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError("Open file") from exc
    lines = text.split("\n")[:-1]
    if not lines:
        raise MapError("Empty file")
    return lines


def _scan_row(row: str, y: int, counts: dict[str, int], player: Player) -> None:
    for x, char in enumerate(row):
        if char == _PLAYER:
            player.x, player.y = x, y
        if char in counts:
            counts[char] += 1
        if char not in _ALLOWED:
            raise MapError("Bad characther in map")


def validate_map(lines: Iterable[str]) -> GameMap:
    """Check the map rules and build a :class:`GameMap` from its rows."""
    rows = list(lines)
    if not rows:
        raise MapError("Empty file")
    width = len(rows[0])
    last = len(rows) - 1
    counts = {_PLAYER: 0, _EXIT: 0, _COLLECTIBLE: 0}
    player = Player()
    for y, row in enumerate(rows):
        _scan_row(row, y, counts, player)
        if len(row) != width:
            raise MapError("not a good size map")
        if row[:1] != _WALL or row[width - 1] != _WALL:
            raise MapError("map not close by '1'")
        if y in (0, last) and set(row) - {_WALL}:
            raise MapError("map not close by '1'")
    players, exits, collectibles = counts[_PLAYER], counts[_EXIT], counts[_COLLECTIBLE]
    if collectibles == 0 or exits == 0 or players != 1:
        raise MapError(
            "map needs exactly one player, at least one exit and one collectible "
            f"(found {players} player, {exits} exit, {collectibles} collectible)"
        )
    return GameMap(rows=[list(row) for row in rows], player=player, goal=collectibles)


def load_map(path: str | Path) -> GameMap:
    """Read and validate the map stored at ``path``."""
    return validate_map(read_lines(path))