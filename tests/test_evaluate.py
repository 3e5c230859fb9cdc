from layouts import BOARD1, BOARD2, BOARD3, BOARD6
from loa.board import Board
from loa.constants import (
    BLOCKED_BONUS,
    DRAW_SCORE,
    REGION_BONUS,
    SCATTER_BONUS,
    WIN_SCORE,
)
from loa.evaluate import evaluate
from loa.move import mv
from loa.piece import Piece


def test_start_position():
    # Symmetric start: equal blocked counts and region counts, only the
    # scatter feature fires.
    assert evaluate(Board()) == SCATTER_BONUS


def test_black_connected():
    assert evaluate(Board(BOARD2, Piece.BLACK)) == -WIN_SCORE


def test_white_connected_checked_first():
    assert evaluate(Board(BOARD3, Piece.BLACK)) == WIN_SCORE


def test_after_winning_capture():
    board = Board(BOARD6, Piece.BLACK)
    board.make_move(mv("d1-d3"))
    # Both sides are single regions; White's lone piece is checked first.
    assert evaluate(board) == WIN_SCORE


def test_draw_scores_zero():
    board = Board()
    board.set_move_limit(1)
    board.make_move(mv("c1-c3"))
    board.make_move(mv("a2-c2"))
    assert board.winner() is Piece.EMPTY
    assert evaluate(board) == DRAW_SCORE


def test_general_position_features():
    board = Board(BOARD1, Piece.BLACK)
    assert board.region_sizes(Piece.BLACK) == [3, 2, 2, 2, 1, 1, 1]
    assert board.region_sizes(Piece.WHITE) == [5, 2, 2, 2, 1]
    expected = REGION_BONUS + SCATTER_BONUS
    if board.count_blocked(Piece.BLACK) > board.count_blocked(Piece.WHITE):
        expected += BLOCKED_BONUS
    assert evaluate(board) == expected


def test_independent_of_side_to_move():
    assert evaluate(Board(BOARD1, Piece.BLACK)) == evaluate(Board(BOARD1, Piece.WHITE))


def test_does_not_mutate():
    board = Board(BOARD1, Piece.BLACK)
    evaluate(board)
    assert board == Board(BOARD1, Piece.BLACK)
    assert board.moves_made == 0
