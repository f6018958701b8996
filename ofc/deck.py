"""
Deck and card operations for the OFC engine.

Cards are small immutable (rank, suit) tuples so they compare, hash and
sort like the plain tuples the rest of the engine passes around.
"""

import random
from typing import List, NamedTuple, Optional, Tuple

Rank = int
Suit = str

RANKS: List[Rank] = list(range(2, 15))  # 2-14 (where 11=J, 12=Q, 13=K, 14=A)
SUITS: List[Suit] = list('hdcs')  # hearts, diamonds, clubs, spades

RANK_NAMES = {11: 'J', 12: 'Q', 13: 'K', 14: 'A'}
_RANK_CHARS = {'T': 10, 'J': 11, 'Q': 12, 'K': 13, 'A': 14}


class DeckExhaustedError(ValueError):
    """Raised when a deal or draw asks for more cards than the deck holds."""


class Card(NamedTuple):
    rank: Rank
    suit: Suit

    @property
    def id(self) -> str:
        """Rank+suit composite, unique within a 52-card deck (e.g. '14h')."""
        return f"{self.rank}{self.suit}"

    def __str__(self) -> str:
        return card_str(self)


def make_deck() -> List[Card]:
    """Create a standard 52-card deck in a fixed order."""
    return [Card(r, s) for s in SUITS for r in RANKS]


def card_str(card: Card) -> str:
    """Convert a card to its short display form, e.g. 'Ah' or '10d'."""
    r, s = card
    return f"{RANK_NAMES.get(r, r)}{s}"


def card_from_str(text: str) -> Card:
    """Parse 'Ah', 'Td', '10d' or the id form '14h' into a Card."""
    text = text.strip()
    if len(text) < 2:
        raise ValueError(f"Invalid card string: {text!r}")
    rank_part, suit = text[:-1].upper(), text[-1].lower()
    if suit not in SUITS:
        raise ValueError(f"Invalid suit: {suit!r}")
    if rank_part in _RANK_CHARS:
        rank = _RANK_CHARS[rank_part]
    elif rank_part.isdigit() and int(rank_part) in RANKS:
        rank = int(rank_part)
    else:
        raise ValueError(f"Invalid rank: {rank_part!r}")
    return Card(rank, suit)


def cards_from_str(text: str) -> List[Card]:
    """Parse a whitespace separated list of cards."""
    return [card_from_str(part) for part in text.split()]


def shuffle_deck(deck: List[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """Return a shuffled copy of the deck; the input list is left untouched."""
    shuffled = list(deck)
    (rng or random).shuffle(shuffled)
    return shuffled


def deal_cards(deck: List[Card], num_cards: int) -> Tuple[List[Card], List[Card]]:
    """Split the top `num_cards` off the deck.

    Returns (dealt, remaining). Neither list aliases the input.
    """
    if num_cards < 0:
        raise ValueError(f"Cannot deal a negative number of cards: {num_cards}")
    if len(deck) < num_cards:
        raise DeckExhaustedError(f"Cannot deal {num_cards} cards from deck of {len(deck)}")
    return list(deck[:num_cards]), list(deck[num_cards:])


def create_shuffled_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Create and return a shuffled deck."""
    return shuffle_deck(make_deck(), rng)
