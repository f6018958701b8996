"""
Tournament-level state for a heads-up OFC series.

One Match is owned by the Game. Bankrolls and bets move only during
betting and settlement; the round counter moves once per scored round.
"""

from typing import Any, Dict, Optional

from ofc.config import Settings


class Match:
    """Round counter, bankrolls, bets and win tallies for one series."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.reset()

    def reset(self):
        """Put the series back to its opening state."""
        self.round_count = 1
        self.human_bankroll = self.settings.starting_bankroll
        self.ai_bankroll = self.settings.starting_bankroll
        self.ai_remaining_to_bet = self.settings.starting_bankroll
        self.human_wins = 0
        self.ai_wins = 0
        self.reset_round()

    def reset_round(self):
        """Clear the per-round betting fields."""
        self.human_bet = 0
        self.ai_bet = 0
        self.last_win_amount: Optional[int] = None
        self.ai_strategy = "Calculating..."

    @property
    def pot(self) -> int:
        return self.human_bet + self.ai_bet

    @property
    def rounds_remaining(self) -> int:
        """Rounds still to play, counting the current one."""
        return max(self.settings.total_rounds - self.round_count + 1, 0)

    @property
    def series_complete(self) -> bool:
        return self.round_count > self.settings.total_rounds

    def to_dict(self) -> Dict[str, Any]:
        return {
            'round': self.round_count,
            'total_rounds': self.settings.total_rounds,
            'rounds_remaining': self.rounds_remaining,
            'human_bankroll': self.human_bankroll,
            'ai_bankroll': self.ai_bankroll,
            'human_bet': self.human_bet,
            'ai_bet': self.ai_bet,
            'pot': self.pot,
            'ai_remaining_to_bet': self.ai_remaining_to_bet,
            'ai_strategy': self.ai_strategy,
            'last_win_amount': self.last_win_amount,
            'stats': {'human_wins': self.human_wins, 'ai_wins': self.ai_wins},
            'series_complete': self.series_complete,
        }
