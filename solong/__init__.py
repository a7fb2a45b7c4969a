"""Tile-based puzzle game: map validation, game rules, key codes, X11 colours and XPM images."""

__version__ = "0.1.0"
__all__ = ["colors", "game", "keys", "mapfile", "xpm"]