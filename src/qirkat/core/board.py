"""Board - the 5x5 Qirkat position with make/undo and a read-only view."""

from __future__ import annotations

from dataclasses import dataclass

from qirkat.core.enums import PieceColor
from qirkat.core.errors import ContractViolationError, InvalidConfigurationError
from qirkat.core.interfaces import BoardListener, IBoard, IBoardReader
from qirkat.core.move import Move
from qirkat.core.move_generator import MoveGenerator
from qirkat.core.notation import STARTING_BOARD, board_to_text, parse_board_text
from qirkat.core.types import NUM_SQUARES, Square, index, is_valid_square


@dataclass(slots=True)
class _BoardState:
    """Snapshot saved before each move so we can undo it."""

    cells: list[PieceColor]
    no_left: list[bool]
    no_right: list[bool]


class Board(IBoard):
    """Mutable Qirkat board: squares, directional locks, side to move.

    Supports :meth:`apply_move` / :meth:`undo` via an internal history
    stack holding one snapshot per applied move.
    """

    __slots__ = (
        "_cells",
        "_no_left",
        "_no_right",
        "_whose_move",
        "_game_over",
        "_history",
        "_listeners",
    )

    def __init__(self) -> None:
        self._cells: list[PieceColor] = [PieceColor.EMPTY] * NUM_SQUARES
        # [sq] -> the piece on sq just stepped right and may not step left.
        self._no_left: list[bool] = [False] * NUM_SQUARES
        # [sq] -> the piece on sq just stepped left and may not step right.
        self._no_right: list[bool] = [False] * NUM_SQUARES
        self._whose_move = PieceColor.WHITE
        self._game_over = False
        self._history: list[_BoardState] = []
        self._listeners: list[BoardListener] = []
        self._load(parse_board_text(STARTING_BOARD), PieceColor.WHITE)

    # -- Element access -----------------------------------------------------

    @property
    def whose_move(self) -> PieceColor:
        return self._whose_move

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def undo_depth(self) -> int:
        return len(self._history)

    def get(self, sq: Square) -> PieceColor:
        self._check_square(sq)
        return self._cells[sq]

    def get_at(self, col: str, row: str) -> PieceColor:
        try:
            sq = index(col, row)
        except ValueError as exc:
            raise ContractViolationError(str(exc)) from None
        return self._cells[sq]

    def cells(self) -> tuple[PieceColor, ...]:
        return tuple(self._cells)

    def left_locked(self, sq: Square) -> bool:
        self._check_square(sq)
        return self._no_left[sq]

    def right_locked(self, sq: Square) -> bool:
        self._check_square(sq)
        return self._no_right[sq]

    # -- Rules --------------------------------------------------------------

    def legal_move(self, move: Move) -> bool:
        if self._game_over:
            return False
        return MoveGenerator(self).is_legal(move)

    def get_moves(self) -> list[Move]:
        if self._game_over:
            return []
        return MoveGenerator(self).generate_moves()

    def jump_possible(self) -> bool:
        return MoveGenerator(self).jump_possible()

    def jump_possible_at(self, sq: Square) -> bool:
        self._check_square(sq)
        return MoveGenerator(self).jump_possible_at(sq)

    # -- Mutation -----------------------------------------------------------

    def clear(self) -> None:
        self._load(parse_board_text(STARTING_BOARD), PieceColor.WHITE)
        self._notify()

    def set_contents(self, text: str, next_move: PieceColor) -> None:
        if next_move not in (PieceColor.WHITE, PieceColor.BLACK):
            raise InvalidConfigurationError(f"Invalid side to move: {next_move!r}")
        cells = parse_board_text(text)
        self._load(cells, PieceColor(next_move))
        self._notify()

    def copy_from(self, board: IBoardReader) -> None:
        self._cells[:] = board.cells()
        self._no_left[:] = [board.left_locked(sq) for sq in range(NUM_SQUARES)]
        self._no_right[:] = [board.right_locked(sq) for sq in range(NUM_SQUARES)]
        self._whose_move = board.whose_move
        self._game_over = board.game_over
        self._history = []
        self._notify()

    def apply_move(self, move: Move) -> bool:
        if not self.legal_move(move):
            return False

        self._push_state()
        if move.is_jump:
            for leg in move.legs():
                self._jump(leg)
        else:
            self._step(move)

        self._whose_move = self._whose_move.opposite
        self._refresh_game_over()
        self._notify()
        return True

    def undo(self) -> None:
        if not self._history:
            raise ContractViolationError("No move to undo")
        self._pop_state()
        self._whose_move = self._whose_move.opposite
        self._refresh_game_over()
        self._notify()

    # -- Listeners ----------------------------------------------------------

    def add_listener(self, listener: BoardListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: BoardListener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # -- Views / copying ----------------------------------------------------

    def constant_view(self) -> ConstantBoard:
        """Read-only view tracking this board's live state."""
        return ConstantBoard(self)

    def copy(self) -> Board:
        b = Board()
        b.copy_from(self)
        return b

    # -- Internals used by MoveGenerator ------------------------------------

    def _push_state(self) -> None:
        self._history.append(
            _BoardState(
                cells=self._cells.copy(),
                no_left=self._no_left.copy(),
                no_right=self._no_right.copy(),
            )
        )

    def _pop_state(self) -> None:
        # Restore in place: move generation holds references to these lists.
        state = self._history.pop()
        self._cells[:] = state.cells
        self._no_left[:] = state.no_left
        self._no_right[:] = state.no_right

    def _step(self, move: Move) -> None:
        from_sq, to_sq = move.from_sq, move.to_sq
        self._cells[to_sq] = self._cells[from_sq]
        self._cells[from_sq] = PieceColor.EMPTY
        self._no_left[from_sq] = self._no_right[from_sq] = False
        self._no_left[to_sq] = move.is_right_move
        self._no_right[to_sq] = move.is_left_move

    def _jump(self, leg: Move) -> None:
        from_sq, to_sq, over = leg.from_sq, leg.to_sq, leg.jumped_square
        self._cells[to_sq] = self._cells[from_sq]
        self._cells[from_sq] = PieceColor.EMPTY
        self._cells[over] = PieceColor.EMPTY
        for sq in (from_sq, over, to_sq):
            self._no_left[sq] = self._no_right[sq] = False

    def _load(self, cells: list[PieceColor], next_move: PieceColor) -> None:
        self._cells[:] = cells
        self._no_left[:] = [False] * NUM_SQUARES
        self._no_right[:] = [False] * NUM_SQUARES
        self._whose_move = next_move
        self._history = []
        self._refresh_game_over()

    def _refresh_game_over(self) -> None:
        self._game_over = not MoveGenerator(self).has_moves()

    @staticmethod
    def _check_square(sq: Square) -> None:
        if not is_valid_square(sq):
            raise ContractViolationError(f"Square index out of range: {sq}")

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IBoardReader):
            return NotImplemented
        return (
            self.cells() == other.cells()
            and self._whose_move == other.whose_move
            and self._game_over == other.game_over
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return board_to_text(self)

    def __repr__(self) -> str:
        return (
            f"Board(whose_move={self._whose_move!s}, game_over={self._game_over}, "
            f"undo_depth={len(self._history)})"
        )


class ConstantBoard(IBoardReader):
    """Read-only view of a :class:`Board`.

    Reads go straight to the wrapped board, so the view always reflects the
    live position.  Mutating operations raise :class:`ContractViolationError`.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def whose_move(self) -> PieceColor:
        return self._board.whose_move

    @property
    def game_over(self) -> bool:
        return self._board.game_over

    @property
    def undo_depth(self) -> int:
        return self._board.undo_depth

    def get(self, sq: Square) -> PieceColor:
        return self._board.get(sq)

    def get_at(self, col: str, row: str) -> PieceColor:
        return self._board.get_at(col, row)

    def cells(self) -> tuple[PieceColor, ...]:
        return self._board.cells()

    def left_locked(self, sq: Square) -> bool:
        return self._board.left_locked(sq)

    def right_locked(self, sq: Square) -> bool:
        return self._board.right_locked(sq)

    def legal_move(self, move: Move) -> bool:
        return self._board.legal_move(move)

    def get_moves(self) -> list[Move]:
        return self._board.get_moves()

    def jump_possible(self) -> bool:
        return self._board.jump_possible()

    def jump_possible_at(self, sq: Square) -> bool:
        return self._board.jump_possible_at(sq)

    def copy(self) -> Board:
        return self._board.copy()

    def add_listener(self, listener: BoardListener) -> None:
        self._board.add_listener(listener)

    def remove_listener(self, listener: BoardListener) -> None:
        self._board.remove_listener(listener)

    # -- Mutators are not part of this capability ---------------------------

    def _read_only(self, operation: str) -> ContractViolationError:
        return ContractViolationError(f"{operation}() called on a read-only board view")

    def clear(self) -> None:
        raise self._read_only("clear")

    def set_contents(self, text: str, next_move: PieceColor) -> None:
        raise self._read_only("set_contents")

    def copy_from(self, board: IBoardReader) -> None:
        raise self._read_only("copy_from")

    def apply_move(self, move: Move) -> bool:
        raise self._read_only("apply_move")

    def undo(self) -> None:
        raise self._read_only("undo")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IBoardReader):
            return NotImplemented
        return self._board == other

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return board_to_text(self)
