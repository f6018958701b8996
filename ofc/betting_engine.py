"""
Betting logic for the OFC series.

Covers the human's chip betting, the opponent's staking policy and the
settlement of each round's pot.
"""

import logging
import math
import random
from typing import Dict, Optional

from ofc.match import Match

MIN_BET = 5
EARLY_ROUNDS = 3


def _round_to_chip(amount: float, chip: int = MIN_BET) -> int:
    return int(math.floor(amount / chip + 0.5)) * chip


def compute_opponent_bet(
    round_index: int,
    total_rounds: int,
    remaining_obligation: int,
    ai_bankroll: int,
    human_bankroll: int,
    rng: Optional[random.Random] = None,
) -> int:
    """Opponent wager for the round.

    The opponent spreads its remaining obligation over the rounds left,
    scaled by how the series is going, and commits whatever is left on the
    final round. round_index is 1-based.
    """
    rng = rng or random
    if round_index >= total_rounds:
        return remaining_obligation

    remaining_rounds = total_rounds - round_index + 1
    average_needed = remaining_obligation / remaining_rounds

    multiplier = 1.0
    if round_index <= EARLY_ROUNDS:
        multiplier = 0.8 + rng.random() * 0.4
    elif ai_bankroll > human_bankroll:
        multiplier = 1.2 + rng.random() * 0.5
    elif ai_bankroll < human_bankroll:
        multiplier = 0.6 + rng.random() * 0.3

    bet = math.floor(average_needed * multiplier)
    # keep MIN_BET in reserve for every later round
    bet = min(bet, remaining_obligation - (remaining_rounds - 1) * MIN_BET)
    bet = max(MIN_BET, bet)
    return _round_to_chip(bet)


def strategy_label(round_index: int, total_rounds: int, ai_bankroll: int, human_bankroll: int) -> str:
    """Flavor text describing the opponent's staking mood."""
    if round_index <= EARLY_ROUNDS:
        return "Playing Tight-Aggressive"
    if round_index == total_rounds:
        return "Going All-In (Final Round)"
    if ai_bankroll > human_bankroll:
        return "Pressing the Advantage"
    if ai_bankroll < human_bankroll:
        return "Playing Defensively"
    return "Evaluating Table Dynamics"


class BettingEngine:
    """Moves chips between bankrolls, bets and the pot of a Match."""

    def __init__(self, match: Match, rng: Optional[random.Random] = None):
        self.match = match
        self.rng = rng or random.Random()

    @property
    def chip_values(self):
        return self.match.settings.chip_values

    def add_chip(self, amount: int) -> bool:
        """Commit one chip from the human bankroll.

        Unknown denominations and chips the bankroll cannot cover are
        rejected without changing anything.
        """
        m = self.match
        if amount not in self.chip_values:
            logging.debug(f"Rejected bet of {amount}: not a chip denomination")
            return False
        if m.human_bankroll < amount:
            logging.debug(f"Rejected bet of {amount}: bankroll is {m.human_bankroll}")
            return False
        m.human_bankroll -= amount
        m.human_bet += amount
        return True

    def clear_bet(self):
        """Return the human's committed chips to the bankroll."""
        m = self.match
        m.human_bankroll += m.human_bet
        m.human_bet = 0

    def update_strategy(self) -> str:
        m = self.match
        m.ai_strategy = strategy_label(m.round_count, m.settings.total_rounds, m.ai_bankroll, m.human_bankroll)
        return m.ai_strategy

    def place_opponent_bet(self) -> int:
        """Compute the opponent wager and move it out of its bankroll."""
        m = self.match
        bet = compute_opponent_bet(
            m.round_count,
            m.settings.total_rounds,
            m.ai_remaining_to_bet,
            m.ai_bankroll,
            m.human_bankroll,
            self.rng,
        )
        bet = max(min(bet, m.ai_bankroll), 0)
        m.ai_bet = bet
        m.ai_bankroll -= bet
        m.ai_remaining_to_bet -= bet
        logging.info(f"Round {m.round_count}: opponent stakes {bet} ({m.ai_strategy})")
        return bet

    def settle(self, human_points: int, ai_points: int) -> Dict[str, int]:
        """Pay out the pot.

        More points takes the whole pot; a tie hands each side back only
        its own wager.
        """
        m = self.match
        pot = m.pot
        human_payout = 0
        ai_payout = 0
        if human_points > ai_points:
            human_payout = pot
            m.human_wins += 1
        elif ai_points > human_points:
            ai_payout = pot
            m.ai_wins += 1
        else:
            human_payout = m.human_bet
            ai_payout = m.ai_bet

        m.human_bankroll += human_payout
        m.ai_bankroll += ai_payout
        m.last_win_amount = human_payout - m.human_bet
        logging.info(
            f"Round {m.round_count} settled: points {human_points}-{ai_points}, "
            f"pot {pot}, payouts human={human_payout} ai={ai_payout}"
        )
        return {'pot': pot, 'human_payout': human_payout, 'ai_payout': ai_payout}
