"""
Player model for the OFC engine.

A Player carries the per-round state (hand, board, foul flag, scores) and
a pluggable `actor` callable. The human seat's actor is supplied by the
presentation layer; it receives a state snapshot and returns a decision dict
such as {'action': 'place', 'card_id': '14h', 'row': 'back', 'slot': 0}.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from ofc.board import Board
from ofc.deck import Card


def empty_scores() -> Dict[str, int]:
    return {'front': 0, 'mid': 0, 'back': 0, 'scoop': 0, 'total': 0}


class Player:
    def __init__(self, name: str, is_ai: bool = False):
        self.name = name
        self.is_ai = is_ai
        self.hand: List[Card] = []
        self.board = Board()
        self.fouled = False
        self.scores = empty_scores()
        # actor(state) -> decision dict; may be sync or async.
        self.actor: Optional[Callable[[dict], Any]] = None

    def reset_round(self):
        """Start a round with an empty hand and board."""
        self.hand = []
        self.board = Board()
        self.fouled = False
        self.scores = empty_scores()

    def find_card(self, card_id: str) -> Optional[Card]:
        return next((c for c in self.hand if c.id == card_id), None)

    def remove_from_hand(self, card: Card):
        self.hand = [c for c in self.hand if c != card]

    async def take_action(self, game_state: dict) -> dict:
        if self.actor is None:
            raise NotImplementedError("No action actor set for player")
        result = self.actor(game_state)
        if asyncio.iscoroutine(result):
            return await result
        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'is_ai': self.is_ai,
            'hand': [c.id for c in self.hand],
            'board': self.board.to_dict(),
            'fouled': self.fouled,
            'scores': dict(self.scores),
        }
