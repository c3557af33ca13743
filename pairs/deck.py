"""Deck assembly and the pair-preserving shuffle."""

from __future__ import annotations

import logging
import random
from typing import Iterable, Iterator, Sequence, overload

from .cards import Card, Rank, Suit

__all__ = ["DECK_SIZE", "Deck", "full_deck"]

logger = logging.getLogger(__name__)

DECK_SIZE = len(Suit) * len(Rank)


def full_deck() -> list[Card]:
    """Return the canonical ordering: suits outer, ranks inner, by index."""

    return [Card.from_indices(suit_idx, rank_idx) for suit_idx in range(len(Suit)) for rank_idx in range(len(Rank))]


def _paired_cards() -> list[Card]:
    cards = full_deck()
    cards.sort(key=lambda card: card.color)
    cards.sort(key=lambda card: card.rank)
    return cards


def _chunks(cards: Sequence[Card], size: int) -> list[tuple[Card, ...]]:
    return [tuple(cards[idx : idx + size]) for idx in range(0, len(cards), size)]


class Deck(Sequence[Card]):
    """Immutable 52-card collection in one of four canonical arrangements."""

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card]) -> None:
        ordered = tuple(cards)
        if len(ordered) != DECK_SIZE or len(set(ordered)) != DECK_SIZE:
            raise ValueError("a deck must contain each of the 52 cards exactly once")
        self._cards = ordered

    @classmethod
    def natural(cls) -> "Deck":
        """Canonical order, unmodified."""

        return cls(full_deck())

    @classmethod
    def paired(cls) -> "Deck":
        """Cards grouped by rank then colour so equal ranks sit side by side."""

        return cls(_paired_cards())

    @classmethod
    def shuffled(cls, rng: random.Random | None = None) -> "Deck":
        """Uniformly shuffled canonical deck; pairing is not preserved."""

        cards = full_deck()
        (rng or random).shuffle(cards)
        return cls(cards)

    @classmethod
    def paired_shuffled(cls, rng: random.Random | None = None) -> "Deck":
        """Shuffle whole pairs of the paired deck, keeping each pair adjacent.

        Only the order of the pairs is randomised; the two cards inside a pair
        keep the order produced by :meth:`paired`.
        """

        chunks = _chunks(_paired_cards(), 2)
        (rng or random).shuffle(chunks)
        logger.debug("shuffled %d pairs", len(chunks))
        return cls(card for chunk in chunks for card in chunk)

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    def pairs(self) -> Iterator[tuple[Card, Card]]:
        """Yield consecutive, non-overlapping 2-card chunks."""

        for first, second in _chunks(self._cards, 2):
            yield first, second

    @overload
    def __getitem__(self, index: int) -> Card: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Card]: ...

    def __getitem__(self, index):
        return self._cards[index]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self) -> int:
        return hash(self._cards)

    def __repr__(self) -> str:
        return f"Deck({' '.join(card.label().strip() for card in self._cards)})"
