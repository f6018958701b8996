"""
Open-Face Chinese Poker engine.

Heads-up OFC against an automated opponent with per-round wagering over a
fixed-length series.
"""

from .config import Settings, load_settings
from .deck import Card, DeckExhaustedError, make_deck, shuffle_deck
from .game import Game
from .hand_evaluation import HandEvaluation, compare_hands, evaluate
from .version import VERSION

__all__ = [
    'Card', 'DeckExhaustedError', 'make_deck', 'shuffle_deck',
    'HandEvaluation', 'evaluate', 'compare_hands',
    'Game', 'Settings', 'load_settings', 'VERSION',
]
