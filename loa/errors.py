"""
Exception taxonomy for the board state machine.

Every error here is a local invariant violation surfaced straight to the
caller. The search never triggers them because it only plays moves taken
from Board.legal_moves().
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loa.move import Move


class LoaError(Exception):
    """Base class for all engine errors."""


class IllegalMoveError(LoaError, ValueError):
    """
    Raised by Board.make_move() for a move that fails Board.is_legal().

    The board is left exactly as it was before the call.

    Attributes:
        move: The rejected move (may be None).
    """

    def __init__(self, move: "Move | None") -> None:
        super().__init__(f"illegal move: {move}")
        self.move = move


class EmptyHistoryError(LoaError, IndexError):
    """Raised by undo() or retract() when no move has been made."""


class InvalidConfigurationError(LoaError, ValueError):
    """Raised when a move limit does not exceed the moves already made."""
