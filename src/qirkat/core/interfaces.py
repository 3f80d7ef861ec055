"""Capability interfaces for boards.

Read-only consumers (views, renderers, the search's callers) depend on
:class:`IBoardReader`; only the owner of the game state gets :class:`IBoard`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

from qirkat.core.enums import PieceColor

if TYPE_CHECKING:
    from qirkat.core.board import Board
    from qirkat.core.move import Move
    from qirkat.core.types import Square

BoardListener = Callable[["IBoardReader"], None]


class IBoardReader(ABC):
    """Non-mutating board operations."""

    @property
    @abstractmethod
    def whose_move(self) -> PieceColor: ...

    @property
    @abstractmethod
    def game_over(self) -> bool: ...

    @property
    @abstractmethod
    def undo_depth(self) -> int:
        """Number of moves that can currently be undone."""

    @abstractmethod
    def get(self, sq: Square) -> PieceColor:
        """Contents of the square at linearized index *sq*."""

    @abstractmethod
    def get_at(self, col: str, row: str) -> PieceColor:
        """Contents of the square named by characters, e.g. ('c', '3')."""

    @abstractmethod
    def cells(self) -> tuple[PieceColor, ...]:
        """All 25 squares in row-major order from a1."""

    @abstractmethod
    def left_locked(self, sq: Square) -> bool:
        """Whether the piece on *sq* may not make a plain leftward step."""

    @abstractmethod
    def right_locked(self, sq: Square) -> bool:
        """Whether the piece on *sq* may not make a plain rightward step."""

    @abstractmethod
    def legal_move(self, move: Move) -> bool:
        """Whether *move* is legal in the current position."""

    @abstractmethod
    def get_moves(self) -> list[Move]:
        """All legal moves for the side to move."""

    @abstractmethod
    def jump_possible(self) -> bool:
        """Whether the side to move has a capture anywhere."""

    @abstractmethod
    def jump_possible_at(self, sq: Square) -> bool:
        """Whether the side to move can capture with the piece on *sq*."""

    @abstractmethod
    def copy(self) -> Board:
        """Independent mutable copy of the current position."""

    @abstractmethod
    def add_listener(self, listener: BoardListener) -> None:
        """Call *listener* after every change of the board."""

    @abstractmethod
    def remove_listener(self, listener: BoardListener) -> None:
        """Stop notifying *listener*."""

    def pieces(self, color: PieceColor) -> list[Square]:
        """Squares occupied by *color*."""
        return [sq for sq, piece in enumerate(self.cells()) if piece == color]

    def count(self, color: PieceColor) -> int:
        """Number of squares occupied by *color*."""
        return self.cells().count(color)


class IBoard(IBoardReader):
    """Board operations that change the game state."""

    @abstractmethod
    def clear(self) -> None:
        """Reset to the starting position with WHITE to move."""

    @abstractmethod
    def set_contents(self, text: str, next_move: PieceColor) -> None:
        """Load a 25-character board description with *next_move* to play."""

    @abstractmethod
    def copy_from(self, board: IBoardReader) -> None:
        """Make this board a copy of *board* (history is not copied)."""

    @abstractmethod
    def apply_move(self, move: Move) -> bool:
        """Play *move*; returns False and changes nothing if it is illegal."""

    @abstractmethod
    def undo(self) -> None:
        """Take back the last applied move."""

