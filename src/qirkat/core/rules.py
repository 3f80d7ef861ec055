"""High-level game rules: end-of-game detection and winner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from qirkat.core.enums import GameResult, PieceColor

if TYPE_CHECKING:
    from qirkat.core.interfaces import IBoardReader


class Rules:
    """Static rule-checker that operates on a board."""

    # A side that cannot move when it is its turn loses; there are no draws.

    @staticmethod
    def winner(board: IBoardReader) -> PieceColor | None:
        """The side that has won, or None while the game continues."""
        if not board.game_over:
            return None
        return board.whose_move.opposite

    @staticmethod
    def game_result(board: IBoardReader) -> GameResult:
        """Determine the current game result."""
        winner = Rules.winner(board)
        if winner is None:
            return GameResult.IN_PROGRESS
        if winner == PieceColor.WHITE:
            return GameResult.WHITE_WINS
        return GameResult.BLACK_WINS
