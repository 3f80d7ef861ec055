"""Board description parsing and text rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from qirkat.core.enums import PieceColor
from qirkat.core.errors import InvalidConfigurationError
from qirkat.core.types import COLUMNS, NUM_SQUARES, ROWS, SIZE, make_square

if TYPE_CHECKING:
    from qirkat.core.interfaces import IBoardReader

# Row-major from a1; rows separated by spaces for readability only.
STARTING_BOARD = "wwwww wwwww bb-ww bbbbb bbbbb"

_VALID_CHARS = frozenset("wb-")


def parse_board_text(text: str) -> list[PieceColor]:
    """Parse a 25-character board description into cell contents.

    Characters are ``w``, ``b`` or ``-`` in row-major order starting at a1;
    whitespace anywhere is ignored.
    """
    compact = "".join(text.split())
    if len(compact) != NUM_SQUARES:
        raise InvalidConfigurationError(
            f"Invalid board description (need {NUM_SQUARES} squares): {text!r}"
        )
    bad = sorted(set(compact) - _VALID_CHARS)
    if bad:
        raise InvalidConfigurationError(
            f"Invalid board description character {bad[0]!r}: {text!r}"
        )
    return [PieceColor.from_char(ch) for ch in compact]


def board_to_text(board: IBoardReader, legend: bool = False) -> str:
    """Render *board* one row per line, top row first.

    With *legend*, each row is prefixed with its number and a final line
    names the columns.
    """
    lines: list[str] = []
    for row in range(SIZE - 1, -1, -1):
        cells = "".join(
            f" {board.get(make_square(col, row)).char}" for col in range(SIZE)
        )
        prefix = ROWS[row] if legend else " "
        lines.append(f"{prefix}{cells}")
    if legend:
        lines.append("  " + " ".join(COLUMNS))
    return "\n".join(lines)
