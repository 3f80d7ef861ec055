"""Concrete player implementations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from qirkat.core.enums import PieceColor
from qirkat.engine.minimax import MinimaxSearchEngine
from qirkat.engine.search import IEngine, SearchLimits
from qirkat.game.interfaces import IPlayer

if TYPE_CHECKING:
    from qirkat.core.interfaces import IBoardReader
    from qirkat.core.move import Move

_LOGGER = logging.getLogger(__name__)


class AIPlayer(IPlayer):
    """A player that computes its own moves with an engine search.

    Args:
        color: Side the AI plays.
        name: Display name.
        engine: Search engine; a :class:`MinimaxSearchEngine` by default.
        limits: Search limits passed to every search.
    """

    __slots__ = ("_color", "_name", "_engine", "_limits")

    def __init__(
        self,
        color: PieceColor,
        name: str = "",
        engine: IEngine | None = None,
        limits: SearchLimits | None = None,
    ) -> None:
        if color == PieceColor.EMPTY:
            raise ValueError("A player needs a side")
        self._color = color
        self._name = name or f"AI ({color})"
        self._engine: IEngine = engine if engine is not None else MinimaxSearchEngine()
        self._limits = limits or SearchLimits()

    @property
    def color(self) -> PieceColor:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    def my_move(self, board: IBoardReader) -> Move | None:
        result = self._engine.search(board, self._color, self._limits)
        if result.best_move is not None:
            _LOGGER.info("%s moves %s.", self._color.display_name, result.best_move)
        return result.best_move
