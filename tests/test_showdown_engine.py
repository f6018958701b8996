import random

from ofc.game_engine import GameEngine
from ofc.player import Player
from ofc.showdown_engine import FOUL_AWARD, SCOOP_BONUS, ShowdownEngine, format_score_summary, score_boards

CLEAN_WEAK = ("2h 3d 5c", "7h 7d 4c 8s 9h", "Th Td 6c 6s Jh")
CLEAN_STRONG = ("Ah Ad Kc", "Kh Kd Qs Qd 2c", "5h 5d 5s 9c 9d")
FOULED = ("Kh Kd Kc", "Ah Ad 2c 3s 4h", "5h 5d 5s 9c 9d")
FOULED_OTHER = ("Qh Qd Qc", "Ah 2d 3c 4s 6h", "7h 7d 8s 9c Td")


def test_scoop_scores_six(make_board):
    result = score_boards(make_board(*CLEAN_STRONG), make_board(*CLEAN_WEAK))
    assert result["rows"] == {"front": 1, "mid": 1, "back": 1}
    assert result["human_scores"] == {"front": 1, "mid": 1, "back": 1, "scoop": SCOOP_BONUS, "total": 6}
    assert result["ai_scores"]["total"] == 0
    assert not result["human_fouled"] and not result["ai_fouled"]


def test_opponent_scoop_mirrors(make_board):
    result = score_boards(make_board(*CLEAN_WEAK), make_board(*CLEAN_STRONG))
    assert result["rows"] == {"front": -1, "mid": -1, "back": -1}
    assert result["ai_scores"]["total"] == 6
    assert result["human_scores"]["total"] == 0


def test_single_foul_awards_six_regardless_of_rows(make_board):
    result = score_boards(make_board(*FOULED), make_board(*CLEAN_WEAK))
    assert result["human_fouled"] is True
    assert result["ai_fouled"] is False
    assert result["human_scores"]["total"] == 0
    assert result["ai_scores"]["total"] == FOUL_AWARD
    assert result["rows"] == {"front": 0, "mid": 0, "back": 0}

    result = score_boards(make_board(*CLEAN_WEAK), make_board(*FOULED))
    assert result["human_scores"]["total"] == FOUL_AWARD
    assert result["ai_scores"]["total"] == 0


def test_both_fouled_is_zero_zero(make_board):
    result = score_boards(make_board(*FOULED), make_board(*FOULED_OTHER))
    assert result["human_fouled"] and result["ai_fouled"]
    assert result["human_scores"]["total"] == 0
    assert result["ai_scores"]["total"] == 0


def test_split_rows_and_ties_award_nobody(make_board):
    human = make_board("Ah Kd 5c", "7h 7d 4c 8s 9h", "Th Td 6c 6s Jh")
    ai_board = make_board("As Kc 5d", "9s 9d 2c 3s 4d", "2h 2d 2s 3c 3d")
    result = score_boards(human, ai_board)
    assert result["rows"] == {"front": 0, "mid": -1, "back": -1}
    assert result["human_scores"]["total"] == 0
    assert result["ai_scores"] == {"front": 0, "mid": 1, "back": 1, "scoop": 0, "total": 2}


def test_showdown_engine_records_on_players(make_board):
    engine = GameEngine(Player("alice"), Player("cpu", is_ai=True), random.Random(1))
    engine.human.board = make_board(*FOULED)
    engine.opponent.board = make_board(*CLEAN_WEAK)

    result = ShowdownEngine(engine).evaluate_boards()

    assert engine.human.fouled is True
    assert engine.opponent.fouled is False
    assert engine.opponent.scores["total"] == 6
    assert engine.human.scores["total"] == 0
    assert result["ai_scores"] == engine.opponent.scores


def test_format_score_summary(make_board):
    text = format_score_summary(score_boards(make_board(*CLEAN_STRONG), make_board(*CLEAN_WEAK)))
    assert "Player scoops!" in text
    assert "Points: Player 6 - CPU 0" in text
    assert "Front: Pair of Aces vs 5 High -> Player" in text

    assert "Player fouled!" in format_score_summary(score_boards(make_board(*FOULED), make_board(*CLEAN_WEAK)))
    assert "Both boards fouled" in format_score_summary(score_boards(make_board(*FOULED), make_board(*FOULED_OTHER)))
