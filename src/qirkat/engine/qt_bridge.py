"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from qirkat.core.enums import PieceColor
from qirkat.core.interfaces import IBoardReader
from qirkat.engine.minimax import MinimaxSearchEngine
from qirkat.engine.search import SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    The worker searches a snapshot of the board it receives.  The move it
    emits must be checked with ``legal_move`` against the authoritative
    board before being applied.
    """

    best_move_ready = pyqtSignal(int, object, int, int)
    search_no_move = pyqtSignal(int, int, int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_limits")

    def __init__(self, *, max_depth: int = SearchLimits().max_depth) -> None:
        super().__init__()
        self._engine = MinimaxSearchEngine()
        self._limits = SearchLimits(max_depth=max_depth)

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @pyqtSlot(object, int, int)
    def request_move(self, board_obj: object, side: int, request_id: int) -> None:
        """Search for the best move for *side* on *board_obj* and emit result."""
        if not isinstance(board_obj, IBoardReader):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        try:
            result = self._engine.search(board_obj, PieceColor(side), self._limits)
        except Exception as exc:
            _LOGGER.warning("Search %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id, result.score, result.nodes)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.nodes,
        )

    @pyqtSlot(int)
    def set_limits(self, max_depth: int) -> None:
        """Update search depth (takes effect on the next search)."""
        self._limits = SearchLimits(max_depth=max_depth)
