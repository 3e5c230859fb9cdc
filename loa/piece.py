"""Piece values: the contents of a single board square."""

import enum


class Piece(enum.Enum):
    """
    Contents of a square. BLACK and WHITE double as the two sides; EMPTY
    doubles as the "draw" result of Board.winner().
    """

    BLACK = "b"
    WHITE = "w"
    EMPTY = "-"

    @property
    def abbrev(self) -> str:
        """One-letter form used in board dumps."""
        return self.value

    @property
    def full_name(self) -> str:
        return self.name.lower()

    def opposite(self) -> "Piece":
        """
        Return the other side.

        Raises:
            ValueError: for EMPTY, which has no opposite.
        """
        if self is Piece.BLACK:
            return Piece.WHITE
        if self is Piece.WHITE:
            return Piece.BLACK
        raise ValueError("empty square has no opposite")

    def __str__(self) -> str:
        return self.full_name
