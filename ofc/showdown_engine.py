"""
Showdown scoring for OFC.

Boards are compared row by row: one point per row won, a scoop bonus for
taking all three, and a flat award to the clean side when exactly one
board fouls.
"""

import logging
from typing import Any, Dict

from ofc.board import ROWS, Board, evaluate_rows, is_foul
from ofc.hand_evaluation import compare_hands

FOUL_AWARD = 6
SCOOP_BONUS = 3


def score_boards(human_board: Board, ai_board: Board) -> Dict[str, Any]:
    """Score two boards against each other.

    Returns a dict with both sides' row evaluations, foul flags, per-row
    results (+1 human, -1 opponent, 0 tie) and score breakdowns.
    """
    human_evals = evaluate_rows(human_board)
    ai_evals = evaluate_rows(ai_board)
    human_fouled = is_foul(human_board)
    ai_fouled = is_foul(ai_board)

    human_scores = {'front': 0, 'mid': 0, 'back': 0, 'scoop': 0, 'total': 0}
    ai_scores = dict(human_scores)
    rows = {row: 0 for row in ROWS}

    if human_fouled and not ai_fouled:
        ai_scores['total'] = FOUL_AWARD
    elif ai_fouled and not human_fouled:
        human_scores['total'] = FOUL_AWARD
    elif not human_fouled and not ai_fouled:
        for row in ROWS:
            diff = compare_hands(human_evals[row], ai_evals[row])
            if diff > 0:
                rows[row] = 1
                human_scores[row] = 1
            elif diff < 0:
                rows[row] = -1
                ai_scores[row] = 1
        for scores in (human_scores, ai_scores):
            won = sum(scores[row] for row in ROWS)
            if won == len(ROWS):
                scores['scoop'] = SCOOP_BONUS
            scores['total'] = won + scores['scoop']

    logging.debug(f"Showdown: human={human_scores} ai={ai_scores} rows={rows}")
    return {
        'human_evaluations': human_evals,
        'ai_evaluations': ai_evals,
        'human_fouled': human_fouled,
        'ai_fouled': ai_fouled,
        'rows': rows,
        'human_scores': human_scores,
        'ai_scores': ai_scores,
    }


class ShowdownEngine:
    """Scores a finished round and records the result on both players."""

    def __init__(self, game_engine):
        self.game_engine = game_engine

    def evaluate_boards(self) -> Dict[str, Any]:
        human = self.game_engine.human
        opponent = self.game_engine.opponent
        result = score_boards(human.board, opponent.board)
        human.fouled = result['human_fouled']
        opponent.fouled = result['ai_fouled']
        human.scores = dict(result['human_scores'])
        opponent.scores = dict(result['ai_scores'])
        return result


def format_score_summary(result: Dict[str, Any]) -> str:
    """Format a scoring result for display."""
    lines = []
    if result['human_fouled'] and result['ai_fouled']:
        lines.append("Both boards fouled - no points.")
    elif result['human_fouled']:
        lines.append(f"Player fouled! CPU takes {FOUL_AWARD}.")
    elif result['ai_fouled']:
        lines.append(f"CPU fouled! Player takes {FOUL_AWARD}.")
    else:
        for row in ROWS:
            human_eval = result['human_evaluations'][row]
            ai_eval = result['ai_evaluations'][row]
            outcome = {1: "Player", -1: "CPU", 0: "Tie"}[result['rows'][row]]
            lines.append(f"{row.title()}: {human_eval.name} vs {ai_eval.name} -> {outcome}")
        if result['human_scores']['scoop']:
            lines.append(f"Player scoops! (+{SCOOP_BONUS})")
        elif result['ai_scores']['scoop']:
            lines.append(f"CPU scoops! (+{SCOOP_BONUS})")
    lines.append(f"Points: Player {result['human_scores']['total']} - CPU {result['ai_scores']['total']}")
    return '\n'.join(lines)
