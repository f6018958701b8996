"""
Opponent card placement for OFC.

The policy is an ordered table of (predicate, row) rules; the first rule
whose predicate holds picks the row. Rules only ever look at the card being
placed and the current board.
"""

import logging
from typing import Callable, Iterable, List, Optional, Tuple

from ofc.board import Board
from ofc.deck import Card, card_str

HIGH_CARD_RANK = 12   # queen and above claim the back row
STRONG_RANK = 10      # ten and above lean to the back row
MEDIUM_RANKS = (6, 12)  # [low, high) band that leans to the middle
LOW_RANK = 8          # below this may fill the front row

SPILL_ORDER = ('back', 'mid', 'front')

Rule = Tuple[str, Callable[[Card, Board], bool], str]


def _matches_rank(row: str) -> Callable[[Card, Board], bool]:
    def predicate(card: Card, board: Board) -> bool:
        return any(c.rank == card.rank for c in board.row_cards(row))
    return predicate


PLACEMENT_RULES: List[Rule] = [
    ('high card protects back', lambda card, board: card.rank >= HIGH_CARD_RANK, 'back'),
    ('pair up in back', _matches_rank('back'), 'back'),
    ('pair up in mid', _matches_rank('mid'), 'mid'),
    ('pair up in front', _matches_rank('front'), 'front'),
    ('strong card to back', lambda card, board: card.rank >= STRONG_RANK, 'back'),
    ('medium card to mid', lambda card, board: MEDIUM_RANKS[0] <= card.rank < MEDIUM_RANKS[1], 'mid'),
    ('low card to front', lambda card, board: card.rank < LOW_RANK, 'front'),
]


def _spill_over(board: Board) -> Optional[str]:
    return next((row for row in SPILL_ORDER if board.has_space(row)), None)


def choose_row(card: Card, board: Board) -> str:
    """Pick a row for one card.

    A rule only fires when its row still has space; otherwise the card
    spills back -> mid -> front.
    """
    for name, predicate, row in PLACEMENT_RULES:
        if board.has_space(row) and predicate(card, board):
            logging.debug(f"AI rule {name!r} sends {card_str(card)} to {row}")
            return row
    return _spill_over(board) or 'front'


def perform_move(board: Board, cards: Iterable[Card]) -> Board:
    """Place every card onto the board, strongest first.

    The board is updated in place and returned. A card that finds every row
    full is skipped.
    """
    for card in sorted(cards, key=lambda c: c.rank, reverse=True):
        target = choose_row(card, board)
        if not board.has_space(target):
            target = _spill_over(board)
        if target is None:
            logging.warning(f"AI board is full, cannot place {card_str(card)}")
            continue
        board.place(target, card)
    return board
