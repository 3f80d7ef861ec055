"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from qirkat.core.enums import PieceColor
    from qirkat.core.interfaces import IBoardReader
    from qirkat.core.move import Move

DEFAULT_DEPTH = 3


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = DEFAULT_DEPTH


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by players and the Qt worker."""

    def search(
        self,
        board: IBoardReader,
        side: PieceColor,
        limits: SearchLimits,
    ) -> SearchResult: ...
