from __future__ import annotations

import random

import pytest

from pairs.cards import Card, Rank, Suit
from pairs.deck import DECK_SIZE, Deck, full_deck


def _assert_pair_adjacent(deck: Deck) -> None:
    pairs = list(deck.pairs())
    assert len(pairs) == 26
    for first, second in pairs:
        assert first.rank == second.rank
    ranks = [first.rank for first, _ in pairs]
    assert sorted(ranks) == sorted(list(Rank) * 2)


def test_natural_deck_is_canonical_order() -> None:
    deck = Deck.natural()
    assert len(deck) == DECK_SIZE
    assert deck[0] == Card(Suit.CLUBS, Rank.ACE)
    assert deck[12] == Card(Suit.CLUBS, Rank.KING)
    assert deck[13] == Card(Suit.DIAMONDS, Rank.ACE)
    assert deck[-1] == Card(Suit.SPADES, Rank.KING)
    assert list(deck) == sorted(deck)


def test_paired_deck_groups_by_rank_then_colour() -> None:
    deck = Deck.paired()
    _assert_pair_adjacent(deck)
    assert deck.cards[:4] == (
        Card(Suit.DIAMONDS, Rank.ACE),
        Card(Suit.HEARTS, Rank.ACE),
        Card(Suit.CLUBS, Rank.ACE),
        Card(Suit.SPADES, Rank.ACE),
    )
    for first, second in deck.pairs():
        assert first.color == second.color


def test_shuffled_deck_is_a_permutation() -> None:
    deck = Deck.shuffled(random.Random(3))
    assert set(deck) == set(full_deck())
    assert deck != Deck.natural()


def test_paired_shuffled_preserves_pairs_across_runs() -> None:
    rng = random.Random(11)
    orders = set()
    for _ in range(20):
        deck = Deck.paired_shuffled(rng)
        _assert_pair_adjacent(deck)
        assert set(deck) == set(full_deck())
        orders.add(tuple(deck.pairs()))
    assert len(orders) > 1


def test_paired_shuffled_keeps_intra_pair_order() -> None:
    paired = set(Deck.paired().pairs())
    shuffled = Deck.paired_shuffled(random.Random(5))
    assert set(shuffled.pairs()) == paired


def test_seeded_shuffles_are_reproducible() -> None:
    assert Deck.paired_shuffled(random.Random(99)) == Deck.paired_shuffled(random.Random(99))


def test_deck_rejects_incomplete_card_sets() -> None:
    cards = full_deck()
    with pytest.raises(ValueError):
        Deck(cards[:-1])
    with pytest.raises(ValueError):
        Deck(cards[:-1] + [cards[0]])
