"""
Player board for OFC: three fixed-capacity rows of card slots.

Rows are filled in place. A slot that holds a card is never cleared during a
round, so a board only ever grows towards its 13-card complete state.
"""

import logging
from typing import Dict, List, Optional

from ofc.deck import Card, card_str
from ofc.hand_evaluation import HandEvaluation, compare_hands, evaluate

ROWS = ('front', 'mid', 'back')
ROW_SIZES = {
    'front': 3,
    'mid': 5,
    'back': 5,
}
BOARD_SIZE = sum(ROW_SIZES.values())


class Board:
    """A player's three rows. Empty slots are None."""

    def __init__(self):
        self.rows: Dict[str, List[Optional[Card]]] = {row: [None] * size for row, size in ROW_SIZES.items()}

    def row_cards(self, row: str) -> List[Card]:
        return [c for c in self.rows[row] if c is not None]

    def all_cards(self) -> List[Card]:
        return [c for row in ROWS for c in self.row_cards(row)]

    def empty_slots(self, row: str) -> int:
        return sum(1 for c in self.rows[row] if c is None)

    def has_space(self, row: str) -> bool:
        return self.empty_slots(row) > 0

    def first_empty_slot(self, row: str) -> Optional[int]:
        return next((i for i, c in enumerate(self.rows[row]) if c is None), None)

    def is_slot_open(self, row: str, index: int) -> bool:
        """True when `row` exists, `index` is inside it and the slot is empty."""
        if row not in self.rows:
            return False
        slots = self.rows[row]
        return 0 <= index < len(slots) and slots[index] is None

    def place(self, row: str, card: Card, index: Optional[int] = None) -> bool:
        """Put a card into a slot; lowest empty slot when index is None.

        Returns False and leaves the board unchanged if the slot is taken,
        out of range, or the row is full.
        """
        if index is None:
            index = self.first_empty_slot(row) if row in self.rows else None
            if index is None:
                return False
        if not self.is_slot_open(row, index):
            return False
        self.rows[row][index] = card
        return True

    def total_cards(self) -> int:
        return sum(len(self.row_cards(row)) for row in ROWS)

    def is_full(self) -> bool:
        """Check if every slot in all three rows is filled."""
        return all(c is not None for row in ROWS for c in self.rows[row])

    def to_dict(self) -> Dict[str, List[Optional[str]]]:
        return {row: [card_str(c) if c is not None else None for c in self.rows[row]] for row in ROWS}

    def __repr__(self) -> str:
        parts = []
        for row in ROWS:
            parts.append(f"{row}=[{' '.join(card_str(c) if c else '__' for c in self.rows[row])}]")
        return f"Board({', '.join(parts)})"


def evaluate_rows(board: Board) -> Dict[str, HandEvaluation]:
    """Evaluate each row; the front row is scored without straights or flushes."""
    return {row: evaluate(board.row_cards(row), is_front_row=(row == 'front')) for row in ROWS}


def is_foul(board: Board) -> bool:
    """A board fouls when back < mid or mid < front.

    Works on partial boards too (empty rows are the lowest hand), but the
    result is only authoritative once the board is full.
    """
    evals = evaluate_rows(board)
    if compare_hands(evals['back'], evals['mid']) < 0:
        return True
    if compare_hands(evals['mid'], evals['front']) < 0:
        return True
    return False


def preview_board(board: Board) -> Dict[str, object]:
    """Live, non-authoritative view of a board still being filled.

    Flags a row that is currently stronger than the row that must beat it,
    so a presentation layer can warn before the board fouls.
    """
    evals = evaluate_rows(board)
    front_too_strong = compare_hands(evals['front'], evals['mid']) > 0
    mid_too_strong = compare_hands(evals['mid'], evals['back']) > 0
    logging.debug(f"Preview {board!r}: front_too_strong={front_too_strong} mid_too_strong={mid_too_strong}")
    return {
        'evaluations': evals,
        'warnings': {
            'front': front_too_strong,
            'mid': mid_too_strong,
            'back': False,
        },
        'on_course_to_foul': front_too_strong or mid_too_strong,
        'complete': board.is_full(),
    }
