"""Fixed-depth minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging

from qirkat.core.board import Board
from qirkat.core.enums import PieceColor
from qirkat.core.errors import ContractViolationError
from qirkat.core.interfaces import IBoardReader
from qirkat.core.move import Move
from qirkat.engine.search import IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000
# WHITE maximises the evaluation, BLACK minimises it.
_MAXIMIZING_SIDE = PieceColor.WHITE


def static_eval(board: IBoardReader) -> int:
    """Heuristic value of *board*: the number of maximising-side pieces."""
    return board.count(_MAXIMIZING_SIDE)


def sense_for(side: PieceColor) -> int:
    """+1 if *side* maximises the evaluation, -1 if it minimises it."""
    if side == PieceColor.EMPTY:
        raise ContractViolationError("Cannot search for EMPTY")
    return 1 if side == _MAXIMIZING_SIDE else -1


class MinimaxSearchEngine(IEngine):
    """Depth-limited minimax with alpha-beta cut-offs.

    The search runs on a private copy of the board and explores it with
    apply/undo; when two moves score the same the one generated first is
    kept.
    """

    __slots__ = ("_nodes", "_best_move")

    def __init__(self) -> None:
        self._nodes = 0
        self._best_move: Move | None = None

    def search(
        self,
        board: IBoardReader,
        side: PieceColor,
        limits: SearchLimits,
    ) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        sense = sense_for(side)
        if side != board.whose_move:
            raise ContractViolationError(
                f"Cannot search for {side}: {board.whose_move} is to move"
            )
        scratch = board.copy()
        self._nodes = 0
        self._best_move = None

        score = self._minimax(
            scratch,
            limits.max_depth,
            sense,
            -_INF_SCORE,
            _INF_SCORE,
            save_move=True,
        )
        _LOGGER.debug(
            "%s search depth %d: best %s score %d nodes %d",
            side.display_name,
            limits.max_depth,
            self._best_move,
            score,
            self._nodes,
        )
        return SearchResult(self._best_move, score, limits.max_depth, self._nodes)

    def _minimax(
        self,
        board: Board,
        depth: int,
        sense: int,
        alpha: int,
        beta: int,
        save_move: bool = False,
    ) -> int:
        """Value of *board* searched *depth* plies deep.

        With *save_move*, the move achieving the value is stored in
        ``_best_move``.  *board* is restored before returning.
        """
        self._nodes += 1
        if depth == 0:
            return static_eval(board)
        moves = board.get_moves()
        if not moves:
            return static_eval(board)

        best_score = -_INF_SCORE if sense > 0 else _INF_SCORE
        best_move: Move | None = None

        for move in moves:
            if not board.apply_move(move):
                raise ContractViolationError(f"Generated move {move} was rejected")
            try:
                score = self._minimax(board, depth - 1, -sense, alpha, beta)
            finally:
                board.undo()

            if sense > 0:
                if score > best_score:
                    best_score = score
                    best_move = move
                    alpha = max(alpha, score)
            elif score < best_score:
                best_score = score
                best_move = move
                beta = min(beta, score)
            if beta <= alpha:
                break

        if save_move:
            self._best_move = best_move
        return best_score


def choose_move(
    board: IBoardReader,
    side: PieceColor,
    limits: SearchLimits | None = None,
) -> Move | None:
    """Best move for *side*, which must be on move, or None if it has no legal move."""
    result = MinimaxSearchEngine().search(board, side, limits or SearchLimits())
    return result.best_move
