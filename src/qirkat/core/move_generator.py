"""Legal move generation, capture detection and move validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from qirkat.core.enums import PieceColor
from qirkat.core.move import Move
from qirkat.core.types import (
    JUMP_LINES,
    JUMP_TARGETS,
    MAX_INDEX,
    NUM_SQUARES,
    STEP_TARGETS,
    Square,
    is_adjacent,
    row_of,
)

if TYPE_CHECKING:
    from qirkat.core.board import Board

_EMPTY = PieceColor.EMPTY
_WHITE = PieceColor.WHITE
_TOP_ROW = row_of(MAX_INDEX)


class MoveGenerator:
    """Generates and validates moves for the side to move on a :class:`Board`.

    Capture chains are discovered by applying each capture to the board,
    exploring onwards from the landing square and undoing it again, so the
    board is always restored before any public method returns.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_moves(self) -> list[Move]:
        """All legal moves: capture chains if any capture exists, else steps."""
        if self.jump_possible():
            return self.generate_jumps()
        return self.generate_steps()

    def generate_steps(self) -> list[Move]:
        """Plain one-square moves, ignoring whether a capture is available."""
        moves: list[Move] = []
        cells = self._board._cells
        side = self._board._whose_move
        for sq in range(NUM_SQUARES):
            if cells[sq] != side:
                continue
            for to_sq in STEP_TARGETS[sq]:
                if cells[to_sq] != _EMPTY:
                    continue
                move = Move(sq, to_sq)
                if self._step_allowed(move):
                    moves.append(move)
        return moves

    def generate_jumps(self) -> list[Move]:
        """Capture moves, each continued as far as the position allows."""
        moves: list[Move] = []
        cells = self._board._cells
        side = self._board._whose_move
        for sq in range(NUM_SQUARES):
            if cells[sq] == side:
                moves.extend(self._jumps_from(sq))
        return moves

    def jump_possible(self) -> bool:
        return any(self.jump_possible_at(sq) for sq in range(NUM_SQUARES))

    def jump_possible_at(self, sq: Square) -> bool:
        cells = self._board._cells
        side = self._board._whose_move
        if cells[sq] != side:
            return False
        opponent = side.opposite
        return any(
            cells[over] == opponent and cells[to_sq] == _EMPTY
            for over, to_sq in JUMP_LINES[sq]
        )

    def has_moves(self) -> bool:
        """Whether the side to move has any legal move."""
        return self.jump_possible() or bool(self.generate_steps())

    def is_legal(self, move: Move) -> bool:
        """Legality of *move* ignoring the game-over flag."""
        if move.is_jump:
            return self._chain_valid(move)
        if move.tail is not None:
            return False
        if self._board._cells[move.from_sq] != self._board._whose_move:
            return False
        if self._board._cells[move.to_sq] != _EMPTY:
            return False
        if not is_adjacent(move.from_sq, move.to_sq):
            return False
        if not self._step_allowed(move):
            return False
        return not self.jump_possible()

    # -- Internals ----------------------------------------------------------

    def _step_allowed(self, move: Move) -> bool:
        """Direction rules for a plain step of the side to move."""
        board = self._board
        from_row = row_of(move.from_sq)
        to_row = row_of(move.to_sq)
        if board._whose_move == _WHITE:
            if from_row == _TOP_ROW or to_row < from_row:
                return False
        elif from_row == 0 or to_row > from_row:
            return False
        if move.is_right_move and board._no_right[move.from_sq]:
            return False
        if move.is_left_move and board._no_left[move.from_sq]:
            return False
        return True

    def _chain_valid(self, move: Move) -> bool:
        """Replay every leg of a capture chain on a scratch copy of the cells."""
        cells = self._board._cells.copy()
        side = self._board._whose_move
        opponent = side.opposite
        if cells[move.from_sq] != side:
            return False
        at = move.from_sq
        for leg in move.legs():
            if leg.from_sq != at or not leg.is_jump:
                return False
            over = JUMP_TARGETS[leg.from_sq].get(leg.to_sq)
            if over is None or cells[over] != opponent or cells[leg.to_sq] != _EMPTY:
                return False
            cells[over] = _EMPTY
            cells[leg.from_sq] = _EMPTY
            cells[leg.to_sq] = side
            at = leg.to_sq
        return True

    def _jumps_from(self, sq: Square) -> list[Move]:
        """Every maximal capture chain starting with the piece on *sq*."""
        board = self._board
        cells = board._cells
        opponent = board._whose_move.opposite
        chains: list[Move] = []
        for over, to_sq in JUMP_LINES[sq]:
            if cells[over] != opponent or cells[to_sq] != _EMPTY:
                continue
            leg = Move(sq, to_sq)
            board._push_state()
            try:
                board._jump(leg)
                continuations = self._jumps_from(to_sq)
            finally:
                board._pop_state()
            if not continuations:
                chains.append(leg)
            else:
                chains.extend(Move(sq, to_sq, tail) for tail in continuations)
        return chains
