"""
Move value type and its boundary text form.

A move is identified by its (from, to) pair. The capture flag is filled in
by Board.make_move() when the destination held an opposing piece; it is a
presentation detail and takes no part in equality or hashing, so a move
and its captured variant compare equal.
"""

import re
from dataclasses import dataclass, field, replace

import chess

from loa import geometry

# <col><row>-<col><row>, columns a-h, rows 1-8. "x" marks a capture.
_MOVE_PATTERN = re.compile(r"^([a-h][1-8])([-x])([a-h][1-8])$")


@dataclass(frozen=True)
class Move:
    """
    A single piece relocation.

    Attributes:
        from_square: Origin square (python-chess index).
        to_square:   Destination square.
        capture:     True when the move took an opposing piece. Ignored by
                     ==, hash() and legality checks.
    """

    from_square: chess.Square
    to_square: chess.Square
    capture: bool = field(default=False, compare=False)

    @classmethod
    def from_text(cls, text: str) -> "Move":
        """
        Parse "c1-c3" (or "c1xc3") into a Move.

        Raises:
            ValueError: TEXT is not a well-formed move designator.
        """
        match = _MOVE_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"malformed move: {text!r}")
        return cls(
            geometry.parse(match.group(1)),
            geometry.parse(match.group(3)),
            capture=match.group(2) == "x",
        )

    def captured(self) -> "Move":
        """Return this move flagged as a capture."""
        return replace(self, capture=True)

    def __str__(self) -> str:
        sep = "x" if self.capture else "-"
        return f"{geometry.name(self.from_square)}{sep}{geometry.name(self.to_square)}"


def mv(text: str) -> Move:
    """Shorthand for Move.from_text()."""
    return Move.from_text(text)
