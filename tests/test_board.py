from __future__ import annotations

import random
from collections import Counter

import pytest

from pairs.board import EMPTY_CELL, FACE_DOWN, Board, CardSlot, generate_board
from pairs.cards import Card, Rank, Suit
from pairs.deck import Deck
from pairs.layout import InvalidBoardSizeError


def test_board_of_eighteen_pairs_is_six_by_six() -> None:
    board = generate_board(18, random.Random(1))

    assert board.dimensions == (6, 6)
    assert len(board.occupied()) == 36
    assert all(len(row) == 6 for row in board.grid)


@pytest.mark.parametrize("size", [1, 3, 7, 13, 26])
def test_every_dealt_pair_appears_twice(size: int) -> None:
    board = generate_board(size, random.Random(size))
    slots = board.occupied()

    assert len(slots) == size * 2
    assert board.rows * board.cols == size * 2
    counts = Counter((slot.card.rank, slot.card.color) for slot in slots)
    assert all(count == 2 for count in counts.values())
    assert all(slot.flipped for slot in slots)


def test_build_draws_leading_pairs_from_deck() -> None:
    deck = Deck.paired_shuffled(random.Random(4))
    board = Board.build(deck, 5, random.Random(4))

    assert sorted(slot.card for slot in board.occupied()) == sorted(deck[:10])


def test_build_shuffles_slots_after_drawing() -> None:
    deck = Deck.paired_shuffled(random.Random(6))
    drawn = list(deck[:12])
    layouts = [
        [slot.card for slot in Board.build(deck, 6, random.Random(seed)).occupied()]
        for seed in range(5)
    ]

    assert any(layout != drawn for layout in layouts)


def test_build_shuffles_the_drawn_slots() -> None:
    class RecordingShuffle:
        def __init__(self) -> None:
            self.calls: list[list[object]] = []

        def shuffle(self, seq: list[object]) -> None:
            self.calls.append(list(seq))
            seq.reverse()

    deck = Deck.paired()
    rng = RecordingShuffle()
    board = Board.build(deck, 5, rng)  # type: ignore[arg-type]

    assert len(rng.calls) == 1
    assert all(isinstance(slot, CardSlot) for slot in rng.calls[0])
    assert [slot.card for slot in board.occupied()] == list(reversed(deck[:10]))


def test_iterating_board_yields_snapshot_rows() -> None:
    board = generate_board(2, random.Random(1))

    rows = list(board)
    assert all(isinstance(row, tuple) for row in rows)
    assert rows == list(board.grid)


@pytest.mark.parametrize("size", [0, 27, -3])
def test_invalid_sizes_are_refused(size: int) -> None:
    with pytest.raises(InvalidBoardSizeError):
        generate_board(size)
    with pytest.raises(InvalidBoardSizeError):
        Board.build(Deck.paired(), size)


def test_flip_twice_restores_state() -> None:
    board = generate_board(18, random.Random(2))

    board.flip(2, 2)
    assert board.slot(2, 2).face_up
    board.flip(2, 2)
    assert board.slot(2, 2).flipped


@pytest.mark.parametrize(("row", "col"), [(6, 0), (0, 6), (-1, 0), (0, -1)])
def test_flip_out_of_bounds_raises(row: int, col: int) -> None:
    board = generate_board(18, random.Random(2))

    with pytest.raises(IndexError):
        board.flip(row, col)


def test_render_text_shows_face_down_face_up_and_empty_cells() -> None:
    ace = CardSlot(Card(Suit.HEARTS, Rank.ACE))
    ten = CardSlot(Card(Suit.SPADES, Rank.TEN), flipped=False)
    board = Board([[ace, ten], [None, CardSlot(Card(Suit.CLUBS, Rank.TEN))]])

    assert board.render_text() == f"{FACE_DOWN} 10♤\n{EMPTY_CELL} {FACE_DOWN}"
    board.flip(0, 0)
    assert str(board).splitlines()[0] == " A♡ 10♤"

    with pytest.raises(IndexError):
        board.flip(1, 0)


def test_matches_compares_ranks() -> None:
    board = Board(
        [
            [CardSlot(Card(Suit.HEARTS, Rank.FIVE)), CardSlot(Card(Suit.DIAMONDS, Rank.FIVE))],
            [CardSlot(Card(Suit.CLUBS, Rank.KING)), CardSlot(Card(Suit.SPADES, Rank.KING))],
        ]
    )

    assert board.matches((0, 0), (0, 1))
    assert not board.matches((0, 0), (1, 0))
    assert not board.matches((0, 0), (0, 0))
