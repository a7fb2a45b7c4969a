"""Keyboard codes for the two supported layouts and the game's key bindings."""

from __future__ import annotations

from enum import Enum, IntEnum


class Direction(Enum):
    """A direction the player can be moved in."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


class MacKey(IntEnum):
    """Virtual key codes reported by the macOS window system."""

    # Arrows
    UP = 126
    DOWN = 125
    LEFT = 123
    RIGHT = 124
    # First line
    ESCAPE = 53
    # Second line
    TILDE = 50
    ONE = 18
    TWO = 19
    THREE = 20
    FOUR = 21
    FIVE = 23
    SIX = 22
    SEVEN = 26
    EIGHT = 28
    NINE = 25
    ZERO = 29
    LESS = 27
    EQUAL = 24
    DELETE = 51
    # Third line
    TAB = 48
    Q = 12
    W = 13
    E = 14
    R = 15
    T = 17
    Y = 16
    U = 32
    I = 34  # noqa: E741
    O = 31  # noqa: E741
    P = 35
    BRACKET_LEFT = 33
    BRACKET_RIGHT = 30
    BACK_SLASH = 42
    # Fourth line
    A = 0
    S = 1
    D = 2
    F = 3
    G = 5
    H = 4
    J = 38
    K = 40
    L = 37
    # Fifth line
    SHIFT = 257
    Z = 6
    X = 7
    C = 8
    V = 9
    B = 11
    N = 45
    M = 46
    # Sixth line
    CONTROL_LEFT = 256
    OPTION_LEFT = 261
    COMMAND_LEFT = 259
    SPACE = 49
    COMMAND_RIGHT = 260
    OPTION_RIGHT = 262
    CONTROL_RIGHT = 269


class LinuxKey(IntEnum):
    """X11 keysyms for the same keys."""

    # Arrows
    UP = 65362
    DOWN = 65364
    LEFT = 65361
    RIGHT = 65363
    # First line
    ESCAPE = 65307
    # Second line
    TILDE = 96
    ONE = 49
    TWO = 50
    THREE = 51
    FOUR = 52
    FIVE = 53
    SIX = 54
    SEVEN = 55
    EIGHT = 56
    NINE = 57
    ZERO = 48
    LESS = 45
    EQUAL = 61
    DELETE = 65288
    # Third line
    TAB = 65289
    Q = 113
    W = 119
    E = 101
    R = 114
    T = 116
    Y = 121
    U = 117
    I = 105  # noqa: E741
    O = 111  # noqa: E741
    P = 112
    BRACKET_LEFT = 91
    BRACKET_RIGHT = 93
    BACK_SLASH = 92
    # Fourth line
    CAPS_LOCK = 65509
    A = 97
    S = 115
    D = 100
    F = 102
    G = 103
    H = 104
    J = 106
    K = 107
    L = 108
    ENTER = 65293
    # Fifth line
    SHIFT = 65505
    Z = 122
    X = 120
    C = 99
    V = 118
    B = 98
    N = 110
    M = 109
    # Sixth line
    CONTROL_LEFT = 65507
    OPTION_LEFT = 65513
    SPACE = 32
    COMMAND_RIGHT = 65516
    OPTION_RIGHT = 65514
    CONTROL_RIGHT = 65508


def _bindings(keys: type[IntEnum]) -> dict[int, Direction]:
    return {
        keys.D: Direction.RIGHT,
        keys.RIGHT: Direction.RIGHT,
        keys.A: Direction.LEFT,
        keys.Q: Direction.LEFT,
        keys.LEFT: Direction.LEFT,
        keys.S: Direction.DOWN,
        keys.DOWN: Direction.DOWN,
        keys.W: Direction.UP,
        keys.Z: Direction.UP,
        keys.UP: Direction.UP,
    }


def direction_for_key(key: int, keys: type[IntEnum]) -> Direction | None:
    """Return the direction bound to ``key`` in layout ``keys``, or None."""
    return _bindings(keys).get(int(key))


def is_escape(key: int, keys: type[IntEnum]) -> bool:
    """Tell whether ``key`` is the escape key of layout ``keys``."""
    return int(key) == keys.ESCAPE