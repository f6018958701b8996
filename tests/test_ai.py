import random

import pytest

from ofc.ai import PLACEMENT_RULES, choose_row, perform_move
from ofc.board import ROW_SIZES, Board
from ofc.deck import Card, card_from_str, cards_from_str, make_deck, shuffle_deck


@pytest.mark.parametrize(
    "card, expected",
    [
        ("Ah", "back"),
        ("Qh", "back"),
        ("Jh", "back"),
        ("Th", "back"),
        ("9h", "mid"),
        ("6h", "mid"),
        ("5h", "front"),
        ("2h", "front"),
    ],
)
def test_choose_row_on_empty_board(card, expected):
    assert choose_row(card_from_str(card), Board()) == expected


def test_rank_match_builds_pairs_on_strongest_row_first(make_board):
    board = make_board(front="3c", mid="3d", back="3h")
    assert choose_row(Card(3, 's'), board) == "back"

    board = make_board(front="3c", mid="3d", back="Ah Kh Qh Jh 9h")
    assert choose_row(Card(3, 's'), board) == "mid"

    board = make_board(front="3c", mid="Ah Kh Qh Jh 9h", back="As Ks Qs Js 9s")
    assert choose_row(Card(3, 's'), board) == "front"


def test_rank_match_beats_strength_bands(make_board):
    # a 9 normally goes mid, but pairs up in front
    board = make_board(front="9c")
    assert choose_row(Card(9, 'd'), board) == "front"


def test_high_card_with_full_back_falls_through(make_board):
    board = make_board(back="2h 3h 4h 5h 7d")
    # queen: no back space, no rank match, 6 <= Q < 12 is false, not < 8 -> spill to mid
    assert choose_row(Card(12, 'c'), board) == "mid"
    # jack: medium band sends it to mid
    assert choose_row(Card(11, 'c'), board) == "mid"


def test_low_card_spills_when_front_full(make_board):
    board = make_board(front="Ah Kd Qc")
    assert choose_row(Card(2, 's'), board) == "back"


def test_seven_prefers_mid_over_front():
    assert choose_row(Card(7, 'c'), Board()) == "mid"


def test_rule_table_order():
    names = [name for name, _, _ in PLACEMENT_RULES]
    assert names[0] == "high card protects back"
    assert [row for _, _, row in PLACEMENT_RULES] == ["back", "back", "mid", "front", "back", "mid", "front"]


def test_perform_move_places_strongest_first():
    board = perform_move(Board(), cards_from_str("2c 9d Ah Kd 5s"))
    assert board.rows['back'][:2] == [Card(14, 'h'), Card(13, 'd')]
    assert board.row_cards('mid') == [Card(9, 'd')]
    assert board.row_cards('front') == [Card(5, 's'), Card(2, 'c')]
    assert board.total_cards() == 5


def test_perform_move_respects_capacity_for_random_hands():
    rng = random.Random(5)
    for _ in range(200):
        deck = shuffle_deck(make_deck(), rng)
        board = perform_move(Board(), deck[:5])
        assert board.total_cards() == 5
        for row, size in ROW_SIZES.items():
            assert len(board.row_cards(row)) <= size


def test_perform_move_fills_whole_board_without_overflow():
    rng = random.Random(9)
    deck = shuffle_deck(make_deck(), rng)
    board = perform_move(Board(), deck[:5])
    for card in deck[5:13]:
        perform_move(board, [card])
    assert board.is_full()
    assert sorted(board.all_cards()) == sorted(deck[:13])


def test_perform_move_on_full_board_is_noop(make_board):
    board = make_board("2h 3d 4c", "5h 6d 7c 8s 9h", "Th Jd Qc Ks 2s")
    perform_move(board, [Card(14, 'c')])
    assert Card(14, 'c') not in board.all_cards()
    assert board.total_cards() == 13


def test_queens_in_opening_hand_overflow_to_mid():
    cards = cards_from_str("Ah Ad Kc Kd Qs Qh")
    board = perform_move(Board(), cards)
    assert len(board.row_cards('back')) == 5
    assert board.row_cards('mid') == [Card(12, 'h')]
