"""
Lines of Action engine package.

This package implements the rules of Lines of Action on the standard 8x8
board and an automated player using fixed-depth minimax search with
alpha-beta pruning and a feature-based static evaluation.

Modules:
    constants - Board geometry, move limit, search depth, evaluation weights
    errors    - Exception taxonomy of the board state machine
    geometry  - Square queries: directions, distances, lines, neighbours
    piece     - Piece enum (BLACK, WHITE, EMPTY)
    move      - Move value type and its "c1-c3" text form
    board     - Board state machine: legality, make/undo/retract, regions, winner
    evaluate  - Static position evaluation
    search    - Minimax with alpha-beta pruning
    bench     - Benchmark entry point
"""

from loa.board import Board
from loa.errors import (
    EmptyHistoryError,
    IllegalMoveError,
    InvalidConfigurationError,
    LoaError,
)
from loa.move import Move, mv
from loa.piece import Piece
from loa.search import get_best_move, search_for_move

__all__ = [
    "Board",
    "EmptyHistoryError",
    "IllegalMoveError",
    "InvalidConfigurationError",
    "LoaError",
    "Move",
    "Piece",
    "get_best_move",
    "mv",
    "search_for_move",
]
