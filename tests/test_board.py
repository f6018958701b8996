from ofc.board import BOARD_SIZE, ROW_SIZES, Board, evaluate_rows, is_foul, preview_board
from ofc.deck import Card, make_deck
from ofc.hand_evaluation import HAND_RANKS


def test_new_board_is_empty():
    board = Board()
    assert BOARD_SIZE == 13
    assert {row: len(slots) for row, slots in board.rows.items()} == ROW_SIZES
    assert board.total_cards() == 0
    assert not board.is_full()
    assert board.first_empty_slot('front') == 0


def test_place_fills_lowest_slot_and_rejects_taken_slots():
    board = Board()
    assert board.place('mid', Card(9, 'h'), 2)
    assert board.place('mid', Card(8, 'h'))
    assert board.rows['mid'][:3] == [Card(8, 'h'), None, Card(9, 'h')]

    assert not board.place('mid', Card(7, 'h'), 2)
    assert not board.place('front', Card(7, 'h'), 3)
    assert not board.place('front', Card(7, 'h'), -1)
    assert not board.place('side', Card(7, 'h'))
    assert board.total_cards() == 2


def test_place_into_full_row_fails():
    board = Board()
    for card in make_deck()[:3]:
        assert board.place('front', card)
    assert not board.has_space('front')
    assert board.first_empty_slot('front') is None
    assert not board.place('front', Card(14, 's'))


def test_full_board(make_board):
    board = make_board("2h 3d 4c", "5h 6d 7c 8s 9h", "Th Jd Qc Ks 2s")
    assert board.is_full()
    assert board.total_cards() == 13
    assert board.to_dict()['front'] == ['2h', '3d', '4c']


def test_foul_when_mid_beats_back(make_board):
    board = make_board("9h 7d 4c", "3h 3d 4h 4s Kc", "2h 2d 8c Js Qh")
    evals = evaluate_rows(board)
    assert evals['back'].category == HAND_RANKS['pair']
    assert evals['mid'].category == HAND_RANKS['two_pair']
    assert is_foul(board) is True


def test_foul_when_front_beats_mid(make_board):
    board = make_board("Kh Kd Kc", "Ah Ad 2c 3s 4h", "5h 5d 5s 9c 9d")
    assert is_foul(board) is True


def test_valid_board_is_not_foul(make_board):
    board = make_board("Qh Qd 3c", "Ah Ad 2c 3s 4h", "5h 5d 5s 9c 9d")
    assert is_foul(board) is False


def test_equal_rows_are_not_foul(make_board):
    board = make_board("", "Ah Kd Qc Js 9h", "As Kc Qd Jh 9c")
    assert is_foul(board) is False


def test_partial_board_is_permissive(make_board):
    assert is_foul(Board()) is False
    assert is_foul(make_board(back="2h 2d")) is False
    assert is_foul(make_board(front="2h 2d")) is True


def test_preview_flags_rows_on_course_to_foul(make_board):
    preview = preview_board(make_board(front="Ah Ad", mid="Kh"))
    assert preview['warnings']['front'] is True
    assert preview['warnings']['mid'] is True
    assert preview['on_course_to_foul'] is True
    assert preview['complete'] is False

    calm = preview_board(make_board(front="2h", mid="9h 9d", back="Ah Ad Ac"))
    assert calm['on_course_to_foul'] is False
    assert calm['evaluations']['back'].category == HAND_RANKS['trips']
