"""Tile-based collect-and-escape puzzle game: map loading, validation, game rules and text helpers."""

__version__ = "1.0.0"

__all__ = ["game", "linereader", "mapfile", "printf", "strutil"]