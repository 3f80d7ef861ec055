"""Abstract interfaces for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from qirkat.core.enums import PieceColor

if TYPE_CHECKING:
    from qirkat.core.interfaces import IBoardReader
    from qirkat.core.move import Move


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def color(self) -> PieceColor: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def my_move(self, board: IBoardReader) -> Move | None:
        """Choose a move on *board*, or None if there is nothing to play."""
