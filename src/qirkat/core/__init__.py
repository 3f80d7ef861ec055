"""Core domain layer: pure Qirkat rules with zero external dependencies.

Quick start::

    from qirkat.core import Board, parse_move

    board = Board()
    for move in board.get_moves():
        print(move)
    board.apply_move(parse_move("d3-c3"))
"""

from qirkat.core.board import Board, ConstantBoard
from qirkat.core.enums import GameResult, PieceColor
from qirkat.core.errors import (
    ContractViolationError,
    InvalidConfigurationError,
    QirkatError,
)
from qirkat.core.interfaces import BoardListener, IBoard, IBoardReader
from qirkat.core.move import Move, parse_move
from qirkat.core.move_generator import MoveGenerator
from qirkat.core.notation import STARTING_BOARD, board_to_text, parse_board_text
from qirkat.core.rules import Rules
from qirkat.core.types import (
    Square,
    col_of,
    index,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "GameResult",
    "PieceColor",
    # Errors
    "ContractViolationError",
    "InvalidConfigurationError",
    "QirkatError",
    # Types / helpers
    "Square",
    "col_of",
    "index",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "BoardListener",
    "ConstantBoard",
    "IBoard",
    "IBoardReader",
    "Move",
    "MoveGenerator",
    "Rules",
    # Notation
    "STARTING_BOARD",
    "board_to_text",
    "parse_board_text",
    "parse_move",
]
