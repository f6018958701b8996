"""
Hand evaluation for OFC rows.

Scores any 0-5 card row into a category plus a numeric tie-break value so
two rows of the same category can be compared without looking at the cards
again. The front row is evaluated without straights or flushes.
"""

from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from ofc.deck import Card, RANK_NAMES


# Hand ranking constants
HAND_RANKS = {
    'highcard': 0,
    'pair': 1,
    'two_pair': 2,
    'trips': 3,
    'straight': 4,
    'flush': 5,
    'fullhouse': 6,
    'quads': 7,
    'straight_flush': 8,
    'royal_flush': 9,
}

HAND_NAMES = [
    "High Card", "Pair", "Two Pair", "Trips", "Straight",
    "Flush", "Full House", "Quads", "Straight Flush", "Royal Flush",
]


class HandEvaluation(NamedTuple):
    category: int
    value: int
    name: str

    @property
    def category_name(self) -> str:
        return HAND_NAMES[self.category]


EMPTY_EVALUATION = HandEvaluation(HAND_RANKS['highcard'], 0, 'Empty')


def rank_name_plural(r: int) -> str:
    names = {11: 'Jacks', 12: 'Queens', 13: 'Kings', 14: 'Aces'}
    return names.get(r, f"{r}s")


def _positional_value(ranks: Sequence[int], top_power: int) -> int:
    """Weight ranks in base 15, the first rank at 15**top_power."""
    return sum(r * 15 ** (top_power - i) for i, r in enumerate(ranks))


def _find_straight(unique_ranks: List[int]) -> Optional[int]:
    """Return the straight's high card, or None.

    unique_ranks must be distinct and sorted descending.
    """
    if len(unique_ranks) < 5:
        return None
    for i in range(len(unique_ranks) - 4):
        window = unique_ranks[i:i + 5]
        if window[0] - window[4] == 4:
            return window[0]
    # wheel (A-2-3-4-5): the ace plays low
    if {14, 2, 3, 4, 5}.issubset(unique_ranks):
        return 5
    return None


def evaluate(cards: Sequence[Card], is_front_row: bool = False) -> HandEvaluation:
    """Evaluate up to five cards.

    An empty row yields the lowest sentinel evaluation instead of an error.
    With is_front_row=True straights and flushes are never detected.
    """
    if not cards:
        return EMPTY_EVALUATION

    ranks = sorted((r for r, _ in cards), reverse=True)
    suits = [s for _, s in cards]

    counts: Dict[int, int] = {}
    for r in ranks:
        counts[r] = counts.get(r, 0) + 1
    unique_ranks = sorted(counts, reverse=True)
    # most frequent first, then highest rank
    groups: List[Tuple[int, int]] = sorted(
        ((cnt, r) for r, cnt in counts.items()), reverse=True
    )

    same_suit = len(set(suits)) == 1
    is_flush = not is_front_row and same_suit and len(cards) >= 5
    straight_high = None if is_front_row else _find_straight(unique_ranks)
    is_flush_draw = not is_front_row and same_suit and 3 <= len(cards) < 5

    if is_flush and straight_high is not None:
        if straight_high == 14 and ranks[0] == 14 and ranks[1] == 13:
            return HandEvaluation(HAND_RANKS['royal_flush'], 14, 'Royal Flush')
        return HandEvaluation(HAND_RANKS['straight_flush'], straight_high, 'Straight Flush')

    top_count, top_rank = groups[0]
    second_count, second_rank = groups[1] if len(groups) > 1 else (0, 0)

    if top_count == 4:
        return HandEvaluation(HAND_RANKS['quads'], top_rank * 100 + second_rank, 'Four of a Kind')

    if top_count == 3 and second_count >= 2:
        return HandEvaluation(HAND_RANKS['fullhouse'], top_rank * 100 + second_rank, 'Full House')

    if is_flush:
        return HandEvaluation(HAND_RANKS['flush'], _positional_value(ranks, 4), 'Flush')

    if straight_high is not None:
        return HandEvaluation(HAND_RANKS['straight'], straight_high, 'Straight')

    if top_count == 3:
        kickers = [r for r in ranks if r != top_rank] + [0, 0]
        value = top_rank * 100000 + kickers[0] * 100 + kickers[1]
        return HandEvaluation(HAND_RANKS['trips'], value, 'Three of a Kind')

    if top_count == 2 and second_count == 2:
        kicker = next((r for r in ranks if r not in (top_rank, second_rank)), 0)
        value = top_rank * 10000 + second_rank * 100 + kicker
        return HandEvaluation(HAND_RANKS['two_pair'], value, 'Two Pair')

    if top_count == 2:
        kickers = [r for r in ranks if r != top_rank]
        value = top_rank * 100000 + _positional_value(kickers, 3)
        return HandEvaluation(HAND_RANKS['pair'], value, f"Pair of {rank_name_plural(top_rank)}")

    if is_flush_draw:
        name = 'Flush Draw'
    else:
        name = f"{RANK_NAMES.get(ranks[0], ranks[0])} High"
    return HandEvaluation(HAND_RANKS['highcard'], _positional_value(ranks, 4), name)


def compare_hands(hand_a: HandEvaluation, hand_b: HandEvaluation) -> int:
    """Returns > 0 if hand_a wins, < 0 if hand_b wins, 0 on a tie."""
    if hand_a.category != hand_b.category:
        return hand_a.category - hand_b.category
    return hand_a.value - hand_b.value
