"""Top-level package for the Pairs memory card game."""

from . import board, cards, deck, layout, session

__all__ = [
    "board",
    "cards",
    "deck",
    "layout",
    "session",
]
