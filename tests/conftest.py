import random
from collections import deque
from typing import Callable, Dict, Iterable, Optional

import pytest

from ofc.board import Board
from ofc.config import Settings
from ofc.deck import cards_from_str
from ofc.game import Game


class SequentialActor:
    """Callable helper which returns predetermined decisions."""

    def __init__(self, actions: Iterable[Dict]):
        self._queue = deque(actions)
        self.states = []

    def next_action(self, state):
        self.states.append(state)
        if not self._queue:
            raise RuntimeError("No more scripted actions available")
        action = self._queue.popleft()
        if callable(action):
            return action(state)
        return action


def board_from_rows(front: str = "", mid: str = "", back: str = "") -> Board:
    """Build a board from space separated card strings per row."""
    board = Board()
    for row, text in (('front', front), ('mid', mid), ('back', back)):
        for card in cards_from_str(text):
            assert board.place(row, card)
    return board


@pytest.fixture
def make_board() -> Callable[..., Board]:
    return board_from_rows


@pytest.fixture
def settings() -> Settings:
    return Settings(draw_delay=0)


@pytest.fixture
def make_game(settings) -> Callable[..., Game]:
    """Factory for seeded games with no pacing delay."""

    def _factory(seed: int = 7, actions: Optional[Iterable[Dict]] = None, **overrides) -> Game:
        game = Game(settings=settings._replace(**overrides), rng=random.Random(seed))
        if actions is not None:
            actor = SequentialActor(actions)

            async def _actor_async(state):
                return actor.next_action(state)

            game.human.actor = _actor_async
        return game

    return _factory


@pytest.fixture(autouse=True)
def clean_ofc_environment(monkeypatch):
    """Keep OFC_* variables from the host out of the tests."""
    for name in ('OFC_TOTAL_ROUNDS', 'OFC_STARTING_BANKROLL', 'OFC_CHIP_VALUES', 'OFC_DRAW_DELAY', 'OFC_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
