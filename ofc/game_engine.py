"""
Core round engine for OFC: owns the deck and both players for one round.
"""

import logging
import random
from typing import List, Optional

from ofc import ai
from ofc.deck import Card, DeckExhaustedError, card_str, create_shuffled_deck, deal_cards
from ofc.player import Player

OPENING_HAND_SIZE = 5


class GameEngine:
    """Deck handling and card flow between the deck, hands and boards."""

    def __init__(self, human: Player, opponent: Player, rng: Optional[random.Random] = None):
        self.human = human
        self.opponent = opponent
        self.rng = rng or random.Random()
        self.deck: List[Card] = []

    @property
    def players(self) -> List[Player]:
        return [self.human, self.opponent]

    def reset_round(self):
        """Fresh shuffled deck and empty hands/boards for both players."""
        self.deck = create_shuffled_deck(self.rng)
        for p in self.players:
            p.reset_round()

    def draw(self, n: int = 1) -> List[Card]:
        """Draw n cards from the top of the deck.

        Raises DeckExhaustedError without consuming anything when the deck
        is short.
        """
        dealt, self.deck = deal_cards(self.deck, n)
        return dealt

    def deal_opening_hands(self):
        """Deal five cards to each side; the opponent places its own at once."""
        self.human.hand = self.draw(OPENING_HAND_SIZE)
        self.opponent.hand = self.draw(OPENING_HAND_SIZE)
        self._place_opponent_hand()

    def deal_next_cards(self) -> bool:
        """Draw one card per side for the drawing phase.

        Returns False when the deck cannot cover the draw.
        """
        try:
            human_card, opponent_card = self.draw(2)
        except DeckExhaustedError as exc:
            logging.warning(f"Deck exhausted mid-round ({exc}), forcing scoring")
            return False
        self.human.hand = [human_card]
        if self.opponent.board.is_full():
            logging.debug(f"Opponent board already full, discarding {card_str(opponent_card)}")
        else:
            self.opponent.hand = [opponent_card]
            self._place_opponent_hand()
        return True

    def _place_opponent_hand(self):
        ai.perform_move(self.opponent.board, self.opponent.hand)
        logging.debug(f"Opponent placed {[card_str(c) for c in self.opponent.hand]} -> {self.opponent.board!r}")
        self.opponent.hand = []
