"""Game participants.

Quick start::

    from qirkat.core import Board, PieceColor
    from qirkat.game import AIPlayer

    board = Board()
    move = AIPlayer(PieceColor.WHITE).my_move(board.constant_view())
    board.apply_move(move)
"""

from qirkat.game.interfaces import IPlayer
from qirkat.game.player import AIPlayer

__all__ = [
    "AIPlayer",
    "IPlayer",
]
