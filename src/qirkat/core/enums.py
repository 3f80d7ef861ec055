"""Core enumerations for the Qirkat domain."""

from __future__ import annotations

from enum import IntEnum

from qirkat.core.errors import ContractViolationError

_CHARS = ("-", "w", "b")


class PieceColor(IntEnum):
    """Contents of a square, doubling as the side identifier.

    WHITE starts at the bottom and moves up the board, BLACK starts at the
    top and moves down.
    """

    EMPTY = 0
    WHITE = 1
    BLACK = 2

    @property
    def opposite(self) -> PieceColor:
        if self is PieceColor.EMPTY:
            raise ContractViolationError("EMPTY has no opposite color")
        return PieceColor.BLACK if self is PieceColor.WHITE else PieceColor.WHITE

    @property
    def is_piece(self) -> bool:
        return self is not PieceColor.EMPTY

    @property
    def char(self) -> str:
        """Board-description character: 'w', 'b' or '-'."""
        return _CHARS[self.value]

    @classmethod
    def from_char(cls, char: str) -> PieceColor:
        """Inverse of :attr:`char`, e.g. 'b' → BLACK."""
        try:
            return cls(_CHARS.index(char))
        except ValueError:
            raise ValueError(f"Invalid piece character: {char!r}") from None

    @property
    def display_name(self) -> str:
        """Capitalized name, e.g. 'White'."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
