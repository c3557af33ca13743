"""Card abstractions and helpers for Pairs."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Final, Sequence

__all__ = [
    "CardConversionError",
    "InvalidSuitIndex",
    "InvalidRankIndex",
    "Rank",
    "Suit",
    "SuitColor",
    "Card",
    "random_card",
]


class CardConversionError(ValueError):
    """Raised when a suit or rank index cannot be decoded."""


class InvalidSuitIndex(CardConversionError):
    """Raised when a suit index falls outside ``[0, 4)``."""


class InvalidRankIndex(CardConversionError):
    """Raised when a rank index falls outside ``[0, 13)``."""


class Rank(IntEnum):
    """Card ranks, Ace low through King high."""

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    @classmethod
    def from_index(cls, index: int) -> "Rank":
        """Return the rank for ``index`` or raise :class:`InvalidRankIndex`."""

        if not 0 <= index < len(cls):
            raise InvalidRankIndex(f"rank index {index} out of range [0, {len(cls)})")
        return cls(index)

    @property
    def glyph(self) -> str:
        return _RANK_GLYPHS.get(self, str(self.value + 1))

    def __str__(self) -> str:
        return self.glyph


_RANK_GLYPHS: Final[dict[Rank, str]] = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


class SuitColor(IntEnum):
    """Suit colours; red sorts before black."""

    RED = 0
    BLACK = 1


class Suit(IntEnum):
    """The four suits in declaration (and sort) order."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @classmethod
    def from_index(cls, index: int) -> "Suit":
        """Return the suit for ``index`` or raise :class:`InvalidSuitIndex`."""

        if not 0 <= index < len(cls):
            raise InvalidSuitIndex(f"suit index {index} out of range [0, {len(cls)})")
        return cls(index)

    @property
    def color(self) -> SuitColor:
        if self in (Suit.CLUBS, Suit.SPADES):
            return SuitColor.BLACK
        return SuitColor.RED

    @property
    def glyph(self) -> str:
        return _SUIT_GLYPHS[self]

    def __str__(self) -> str:
        return self.glyph


_SUIT_GLYPHS: Final[dict[Suit, str]] = {
    Suit.CLUBS: "♧",
    Suit.DIAMONDS: "♢",
    Suit.HEARTS: "♡",
    Suit.SPADES: "♤",
}


@dataclass(frozen=True, slots=True, order=True)
class Card:
    """Value object describing a single playing card.

    Cards order by ``(suit, rank)`` and compare structurally.
    """

    suit: Suit
    rank: Rank

    @classmethod
    def from_indices(cls, suit_index: int, rank_index: int) -> "Card":
        """Decode a ``(suit, rank)`` index pair into a card."""

        return cls(Suit.from_index(suit_index), Rank.from_index(rank_index))

    @classmethod
    def from_bytes(cls, value: Sequence[int] | bytes) -> "Card":
        """Decode the 2-byte ``[suit_index, rank_index]`` encoding."""

        if len(value) != 2:
            raise CardConversionError(f"expected 2 indices, got {len(value)}")
        suit_index, rank_index = value
        return cls.from_indices(suit_index, rank_index)

    def encode(self) -> tuple[int, int]:
        """Return the ``(suit_index, rank_index)`` encoding of the card."""

        return int(self.suit), int(self.rank)

    @property
    def color(self) -> SuitColor:
        return self.suit.color

    def label(self) -> str:
        """Plain text label with the rank right-aligned to two columns."""

        return f"{self.rank.glyph:>2}{self.suit.glyph}"

    def __str__(self) -> str:
        return self.label()


def random_card(rng: random.Random | None = None) -> Card:
    """Sample a card with suit and rank drawn independently and uniformly."""

    source = rng if rng is not None else random
    suit = Suit(source.randrange(len(Suit)))
    rank = Rank(source.randrange(len(Rank)))
    return Card(suit, rank)
