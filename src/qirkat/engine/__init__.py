"""Search engine package: minimax search and the move-choice entry point.

The Qt worker bridge lives in :mod:`qirkat.engine.qt_bridge` and is imported
explicitly so the search itself does not load Qt.
"""

from qirkat.engine.minimax import MinimaxSearchEngine, choose_move, static_eval
from qirkat.engine.search import IEngine, SearchLimits, SearchResult

__all__ = [
    "IEngine",
    "MinimaxSearchEngine",
    "SearchLimits",
    "SearchResult",
    "choose_move",
    "static_eval",
]
