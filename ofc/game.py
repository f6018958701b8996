"""
OFC round coordinator.

Game runs the phase state machine
START -> BETTING -> PLACEMENT -> DRAWING -> SCORING -> GAME_OVER -> BETTING
and is the only object a presentation layer talks to. Every public action
checks the current phase and its inputs; anything invalid is a no-op.
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Dict, List, Optional

from ofc import ai
from ofc.betting_engine import BettingEngine
from ofc.board import ROWS, preview_board
from ofc.config import Settings, load_settings
from ofc.game_engine import GameEngine
from ofc.match import Match
from ofc.player import Player
from ofc.showdown_engine import ShowdownEngine

PHASES = ('START', 'BETTING', 'PLACEMENT', 'DRAWING', 'SCORING', 'GAME_OVER')
PLACING_PHASES = ('PLACEMENT', 'DRAWING')

# errors a misbehaving actor may raise; the driver falls back instead
ACTOR_ERRORS = (NotImplementedError, AttributeError, ValueError, TypeError, KeyError)


class Game:
    """Heads-up OFC against the automated opponent, over a fixed series."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        human_name: str = "Player",
        opponent_name: str = "CPU",
    ):
        self.settings = settings or load_settings()
        self.rng = rng or random.Random()
        self.human = Player(human_name)
        self.opponent = Player(opponent_name, is_ai=True)
        self.match = Match(self.settings)

        self.engine = GameEngine(self.human, self.opponent, self.rng)
        self.betting = BettingEngine(self.match, self.rng)
        self.showdown = ShowdownEngine(self.engine)

        self.phase = 'START'
        self.bets_locked = False
        self.last_result: Optional[Dict[str, Any]] = None

    def _set_phase(self, phase: str):
        logging.debug(f"Phase {self.phase} -> {phase}")
        self.phase = phase

    def _reject(self, action: str, reason: str):
        logging.debug(f"Ignored {action} in phase {self.phase}: {reason}")

    # -- betting -----------------------------------------------------------

    def begin(self) -> bool:
        """Leave START and open betting for the first round."""
        if self.phase != 'START':
            self._reject('begin', 'game already started')
            return False
        self._enter_betting()
        return True

    def _enter_betting(self):
        if self.match.series_complete:
            logging.info("Series complete, starting a new tournament")
            self.match.reset()
        self.match.reset_round()
        self.bets_locked = False
        self.last_result = None
        self.betting.update_strategy()
        self._set_phase('BETTING')

    def commit_bet(self, amount: int) -> bool:
        """Add one chip to the human's wager."""
        if self.phase != 'BETTING' or self.bets_locked:
            self._reject('commit_bet', 'betting is closed')
            return False
        return self.betting.add_chip(amount)

    def clear_bet(self) -> bool:
        if self.phase != 'BETTING' or self.bets_locked:
            self._reject('clear_bet', 'betting is closed')
            return False
        self.betting.clear_bet()
        return True

    def lock_bets_and_deal(self) -> bool:
        """Fix both wagers and deal the opening hands."""
        if self.phase != 'BETTING' or self.bets_locked:
            self._reject('lock_bets_and_deal', 'betting is closed')
            return False
        if self.match.human_bet <= 0:
            self._reject('lock_bets_and_deal', 'no wager committed')
            return False
        self.betting.place_opponent_bet()
        self.bets_locked = True
        return self.start_round()

    # -- dealing and placement ----------------------------------------------

    def start_round(self) -> bool:
        """Shuffle, reset both players and deal five cards to each side.

        The opponent's cards are placed straight away; the human's wait in
        hand. Only valid once the wagers are locked.
        """
        if self.phase != 'BETTING' or not self.bets_locked:
            self._reject('start_round', 'wagers are not locked')
            return False
        self.engine.reset_round()
        self.engine.deal_opening_hands()
        self._set_phase('PLACEMENT')
        logging.info(f"Round {self.match.round_count} dealt: pot {self.match.pot}")
        return True

    def place_human_card(self, card_id: str, row: str, slot_index: int) -> Optional[Player]:
        """Put a card from the human's hand into an empty slot.

        Returns the human player, or None when the request was ignored.
        """
        if self.phase not in PLACING_PHASES:
            self._reject('place_human_card', 'not placing cards')
            return None
        card = self.human.find_card(card_id)
        if card is None:
            self._reject('place_human_card', f'{card_id!r} is not in hand')
            return None
        if row not in ROWS or not isinstance(slot_index, int) or not self.human.board.place(row, card, slot_index):
            self._reject('place_human_card', f'slot {row}[{slot_index}] is not open')
            return None
        self.human.remove_from_hand(card)
        if not self.human.hand:
            self._advance()
        return self.human

    def _advance(self):
        if self.phase == 'PLACEMENT':
            self._set_phase('DRAWING')
            self._draw_round()
        elif self.phase == 'DRAWING':
            if self.human.board.is_full():
                self._score_round()
            else:
                self._draw_round()

    def _draw_round(self):
        if self.human.board.is_full():
            self._score_round()
            return
        if not self.engine.deal_next_cards():
            self._score_round()

    def _auto_place_human(self) -> Optional[Player]:
        """Place the human's first held card with the opponent's policy."""
        card = self.human.hand[0]
        row = ai.choose_row(card, self.human.board)
        return self.place_human_card(card.id, row, self.human.board.first_empty_slot(row))

    # -- scoring -------------------------------------------------------------

    def _score_round(self):
        self._set_phase('SCORING')
        result = self.showdown.evaluate_boards()
        result['settlement'] = self.betting.settle(
            result['human_scores']['total'], result['ai_scores']['total']
        )
        result['round'] = self.match.round_count
        self.last_result = result
        self.match.round_count += 1
        self.bets_locked = False
        self._set_phase('GAME_OVER')

    def advance_after_game_over(self) -> bool:
        """Move on to the next round's betting, resetting a finished series."""
        if self.phase != 'GAME_OVER':
            self._reject('advance_after_game_over', 'round not finished')
            return False
        self._enter_betting()
        return True

    # -- state ---------------------------------------------------------------

    def preview(self, side: str = 'human') -> Dict[str, Any]:
        """Live row strengths for a board still being filled (display only)."""
        player = self.opponent if side == 'opponent' else self.human
        return preview_board(player.board)

    def snapshot(self) -> Dict[str, Any]:
        """Everything a presentation layer needs to draw the table."""
        state = {
            'phase': self.phase,
            'deck_remaining': len(self.engine.deck),
            'human': self.human.to_dict(),
            'opponent': self.opponent.to_dict(),
            'evaluations': None,
            'row_results': None,
            'settlement': None,
        }
        state.update(self.match.to_dict())
        if self.last_result is not None:
            state['evaluations'] = {
                'human': {row: ev._asdict() for row, ev in self.last_result['human_evaluations'].items()},
                'opponent': {row: ev._asdict() for row, ev in self.last_result['ai_evaluations'].items()},
            }
            state['row_results'] = dict(self.last_result['rows'])
            state['settlement'] = dict(self.last_result['settlement'])
        return state

    # -- actor driven play ---------------------------------------------------

    async def _ask_human(self) -> Dict[str, Any]:
        try:
            decision = await self.human.take_action(self.snapshot())
        except ACTOR_ERRORS as exc:
            logging.warning(f"Human actor failed in {self.phase}: {exc}")
            return {}
        return decision if isinstance(decision, dict) else {}

    async def _collect_bet(self) -> bool:
        decision = await self._ask_human()
        amount = decision.get('amount', 0) if decision.get('action') == 'bet' else 0
        try:
            remaining = int(amount)
        except (TypeError, ValueError):
            remaining = 0
        for chip in sorted(self.settings.chip_values, reverse=True):
            while remaining >= chip and self.commit_bet(chip):
                remaining -= chip
        if self.match.human_bet <= 0 and not self.commit_bet(self.settings.min_chip):
            logging.warning(f"{self.human.name} cannot cover the minimum stake")
            return False
        return self.lock_bets_and_deal()

    async def _collect_placement(self):
        finishing_hand = len(self.human.hand) == 1
        decision = await self._ask_human()
        placed = None
        if decision.get('action') == 'place':
            placed = self.place_human_card(decision.get('card_id'), decision.get('row'), decision.get('slot'))
            if placed is None:
                logging.warning(f"Invalid placement {decision}, placing automatically")
        if placed is None:
            self._auto_place_human()
        if finishing_hand and self.phase in PLACING_PHASES and self.settings.draw_delay > 0:
            await asyncio.sleep(self.settings.draw_delay)

    async def play_round(self) -> Optional[Dict[str, Any]]:
        """Play one full round through the human player's actor.

        The actor is asked for {'action': 'bet', 'amount': n} while betting
        and for {'action': 'place', 'card_id', 'row', 'slot'} (or
        {'action': 'auto'}) for each card. Returns the scoring result, or
        None when the human cannot afford a stake.
        """
        if self.phase == 'START':
            self.begin()
        elif self.phase == 'GAME_OVER':
            self.advance_after_game_over()

        if self.phase == 'BETTING' and not self.bets_locked:
            if not await self._collect_bet():
                return None

        while self.phase in PLACING_PHASES:
            if not self.human.hand:
                self._advance()
                continue
            await self._collect_placement()
        return self.last_result

    async def play_match(self) -> List[Dict[str, Any]]:
        """Play rounds until the series is over."""
        results = []
        while True:
            result = await self.play_round()
            if result is None:
                break
            results.append(result)
            if self.match.series_complete:
                break
        return results
