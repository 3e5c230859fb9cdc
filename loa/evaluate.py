"""
Static evaluation: a coarse, feature-based score for a board position.

The search only calls evaluate() at its depth horizon or at a finished
game, so it has to answer one question quickly: who is closer to joining
all their pieces into a single region?

Decided games score a fixed magnitude (WIN_SCORE, or DRAW_SCORE for a
draw). Undecided positions score a sum of fixed bonuses, each awarded at
most once when its predicate holds:

    BLOCKED_BONUS  Black has more blocked moves than White.
    SCATTER_BONUS  Black's stragglers (pieces outside its largest region)
                   outnumber the (non-positive) margin by which White's
                   largest region covers White's pieces.
    REGION_BONUS   Black is split into more regions than White.

The score is always White-positive regardless of the side to move: White
is the maximizing side of the search, Black the minimizing one.
"""

from loa.board import Board
from loa.constants import (
    BLOCKED_BONUS,
    DRAW_SCORE,
    REGION_BONUS,
    SCATTER_BONUS,
    WIN_SCORE,
)
from loa.piece import Piece


def _largest(sizes: list[int]) -> int:
    return sizes[0] if sizes else 0


def evaluate(board: Board) -> int:
    """
    White-positive static score of BOARD.

    Args:
        board: The position to score. Not modified (only its caches fill).

    Returns:
        DRAW_SCORE for a draw, +WIN_SCORE if White is connected,
        -WIN_SCORE if Black is, otherwise a sum of feature bonuses in
        [0, BLOCKED_BONUS + SCATTER_BONUS + REGION_BONUS].

    Example:
        >>> from loa.board import Board
        >>> evaluate(Board())
        100
    """
    if board.winner() is Piece.EMPTY:
        return DRAW_SCORE

    white_regions = board.region_sizes(Piece.WHITE)
    black_regions = board.region_sizes(Piece.BLACK)
    if len(white_regions) == 1:
        return WIN_SCORE
    if len(black_regions) == 1:
        return -WIN_SCORE

    score = 0
    if board.count_blocked(Piece.BLACK) > board.count_blocked(Piece.WHITE):
        score += BLOCKED_BONUS

    black_stragglers = board.count_pieces(Piece.BLACK) - _largest(black_regions)
    white_margin = _largest(white_regions) - board.count_pieces(Piece.WHITE)
    if black_stragglers > white_margin:
        score += SCATTER_BONUS

    if len(black_regions) > len(white_regions):
        score += REGION_BONUS
    return score
