"""
Search entry point: fixed-depth minimax with alpha-beta pruning.

White maximizes and Black minimizes the White-positive score returned by
loa.evaluate. The search explores every legal move in the board's
canonical order (see Board.legal_moves) down to a fixed depth. There is no
iterative deepening, no transposition table and no time budget, so the
result depends only on the position and the depth: repeated searches of
the same board always return the same move.

Each child node is searched on its own Board.copy(); nothing is undone and
no board is shared between recursive calls. At depth 2 the copying cost is
small next to the evaluation cost.

Tie-break policy:
    At the root, a move is recorded whenever its value is >= the running
    maximum (<= the running minimum for Black). Among equally valued moves
    the LAST one evaluated therefore wins. Root children are searched with
    the window widened by one point on the improving side, so a child whose
    true value equals the best so far is never cut off into a bound that
    merely matches it. The root value and the chosen move are therefore
    those of an unpruned minimax of the same depth with the same tie-break.
"""

import logging
from dataclasses import dataclass

from loa.board import Board
from loa.constants import INFINITY, SEARCH_DEPTH
from loa.evaluate import evaluate
from loa.move import Move
from loa.piece import Piece

_log = logging.getLogger(__name__)


@dataclass
class SearchState:
    """
    Output of one search.

    Attributes:
        best_move:  Move chosen at the root, or None until one is found
                    (stays None if the root position is already decided).
        node_count: Number of positions visited, root included.
    """

    best_move: Move | None = None
    node_count: int = 0


def find_move(
    board: Board,
    depth: int,
    save_move: bool,
    sense: int,
    alpha: int,
    beta: int,
    state: SearchState,
) -> int:
    """
    Minimax value of BOARD searched DEPTH plies deep.

    Args:
        board:     Position to search. Never modified; children are copies.
        depth:     Remaining plies. At 0 the static evaluation is returned.
        save_move: Record the best move in state.best_move (root only).
        sense:     1 if the side to move maximizes (White), -1 if it
                   minimizes (Black).
        alpha:     Value the maximizer is already guaranteed.
        beta:      Value the minimizer is already guaranteed.
        state:     Search output and node counter.

    Returns:
        The position's value, White-positive. After a cutoff this is a
        bound, not the exact value.
    """
    state.node_count += 1
    if depth == 0 or board.game_over():
        return evaluate(board)

    if sense == 1:
        best = -INFINITY
        for move in board.legal_moves():
            # At the root the window is one point wider, so a child that
            # equals the best so far returns its exact value, not a bound.
            child_alpha = alpha - 1 if save_move else alpha
            child = board.copy()
            child.make_move(move)
            value = find_move(child, depth - 1, False, -1, child_alpha, beta, state)
            if value >= best:
                best = value
                if save_move:
                    state.best_move = move
            alpha = max(alpha, best)
            if beta <= alpha:
                break
    else:
        best = INFINITY
        for move in board.legal_moves():
            child_beta = beta + 1 if save_move else beta
            child = board.copy()
            child.make_move(move)
            value = find_move(child, depth - 1, False, 1, alpha, child_beta, state)
            if value <= best:
                best = value
                if save_move:
                    state.best_move = move
            beta = min(beta, best)
            if beta <= alpha:
                break
    return best


def get_best_move(
    board: Board,
    depth: int = SEARCH_DEPTH,
) -> tuple[Move | None, int, int]:
    """
    Search BOARD for the side to move.

    Args:
        board: The current position. Not modified.
        depth: Search depth in plies (>= 1).

    Returns:
        Tuple of (move, value, nodes):
            - move:  The chosen move, or None if the game is already over.
            - value: White-positive minimax value of the position.
            - nodes: Number of positions visited.
    """
    if depth < 1:
        raise ValueError(f"search depth must be at least 1, got {depth}")
    if board.game_over():
        return (None, evaluate(board), 0)

    state = SearchState()
    sense = 1 if board.turn is Piece.WHITE else -1
    value = find_move(board.copy(), depth, True, sense, -INFINITY, INFINITY, state)
    _log.debug(
        "%s to move: chose %s value %d (%d nodes, depth %d)",
        board.turn, state.best_move, value, state.node_count, depth,
    )
    return (state.best_move, value, state.node_count)


def search_for_move(board: Board, depth: int = SEARCH_DEPTH) -> Move | None:
    """Return the automated player's move for BOARD, or None if the game
    is over."""
    move, _, _ = get_best_move(board, depth)
    return move
