"""Square type alias, coordinate helpers and board geometry tables.

Board layout (row-major, row 1 at the bottom):
    a1=0,  b1=1,  ..., e1=4
    a2=5,  b2=6,  ..., e2=9
    ...
    a5=20, b5=21, ..., e5=24

Every square is connected orthogonally to its neighbours.  Only squares with
an even linearized index are also connected diagonally, which gives the
familiar Qirkat pattern of diagonals through a1, c1, e1, b2, d2, ...
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–24

SIZE = 5
NUM_SQUARES = SIZE * SIZE
MAX_INDEX = NUM_SQUARES - 1
COLUMNS = "abcde"
ROWS = "12345"


def col_of(sq: Square) -> int:
    """Column index 0–4 (a–e)."""
    return sq % SIZE


def row_of(sq: Square) -> int:
    """Row index 0–4 (1–5)."""
    return sq // SIZE


def make_square(col: int, row: int) -> Square:
    """Create square from column (0–4) and row (0–4)."""
    return row * SIZE + col


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < NUM_SQUARES


def is_valid_coord(col: str, row: str) -> bool:
    """Check whether *col* and *row* name a square, e.g. ('c', '3')."""
    return len(col) == 1 and len(row) == 1 and col in COLUMNS and row in ROWS


def index(col: str, row: str) -> Square:
    """Linearized index of the square named by characters, e.g. ('b', '2') → 6."""
    if not is_valid_coord(col, row):
        raise ValueError(f"Invalid square: {col!r}{row!r}")
    return make_square(COLUMNS.index(col), ROWS.index(row))


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 24 → 'e5'."""
    return COLUMNS[col_of(sq)] + ROWS[row_of(sq)]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'c3' → 12."""
    if len(name) != 2:
        raise ValueError(f"Invalid square name: {name!r}")
    return index(name[0], name[1])


def has_diagonals(sq: Square) -> bool:
    """Whether *sq* lies on the diagonal lines of the board."""
    return sq % 2 == 0


# ── Directions ──────────────────────────────────────────────────────────────

LEFT = (-1, 0)
RIGHT = (1, 0)
UP = (0, 1)
DOWN = (0, -1)
UP_RIGHT = (1, 1)
UP_LEFT = (-1, 1)
DOWN_RIGHT = (1, -1)
DOWN_LEFT = (-1, -1)

# Order in which plain steps are generated from a square.
STEP_DIRECTIONS: tuple[tuple[int, int], ...] = (
    LEFT,
    UP,
    RIGHT,
    DOWN,
    UP_RIGHT,
    UP_LEFT,
    DOWN_RIGHT,
    DOWN_LEFT,
)

# Order in which captures are generated from a square.
JUMP_DIRECTIONS: tuple[tuple[int, int], ...] = (
    LEFT,
    RIGHT,
    UP,
    DOWN,
    UP_RIGHT,
    DOWN_RIGHT,
    UP_LEFT,
    DOWN_LEFT,
)


def _offset(sq: Square, dc: int, dr: int, distance: int) -> Square | None:
    col = col_of(sq) + dc * distance
    row = row_of(sq) + dr * distance
    if 0 <= col < SIZE and 0 <= row < SIZE:
        return make_square(col, row)
    return None


def _usable(sq: Square, direction: tuple[int, int]) -> bool:
    dc, dr = direction
    return (dc == 0 or dr == 0) or has_diagonals(sq)


# -- Precomputed lookup tables ---------------------------------------------


def _build_step_targets() -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(NUM_SQUARES):
        squares: list[Square] = []
        for direction in STEP_DIRECTIONS:
            if not _usable(sq, direction):
                continue
            to_sq = _offset(sq, *direction, 1)
            if to_sq is not None:
                squares.append(to_sq)
        targets.append(tuple(squares))
    return tuple(targets)


def _build_jump_lines() -> tuple[tuple[tuple[Square, Square], ...], ...]:
    lines: list[tuple[tuple[Square, Square], ...]] = []
    for sq in range(NUM_SQUARES):
        square_lines: list[tuple[Square, Square]] = []
        for direction in JUMP_DIRECTIONS:
            if not _usable(sq, direction):
                continue
            over = _offset(sq, *direction, 1)
            to_sq = _offset(sq, *direction, 2)
            if over is not None and to_sq is not None:
                square_lines.append((over, to_sq))
        lines.append(tuple(square_lines))
    return tuple(lines)


# [sq] -> adjacent squares in step-generation order.
STEP_TARGETS = _build_step_targets()
# [sq] -> (jumped square, landing square) pairs in capture-generation order.
JUMP_LINES = _build_jump_lines()
# [sq] -> set of adjacent squares.
ADJACENT: tuple[frozenset[Square], ...] = tuple(frozenset(t) for t in STEP_TARGETS)
# [sq] -> {landing square: jumped square}.
JUMP_TARGETS: tuple[dict[Square, Square], ...] = tuple(
    {to_sq: over for over, to_sq in lines} for lines in JUMP_LINES
)


def is_adjacent(from_sq: Square, to_sq: Square) -> bool:
    """Whether a plain step may connect *from_sq* and *to_sq*."""
    return to_sq in ADJACENT[from_sq]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1 = range(0, 5)
A2, B2, C2, D2, E2 = range(5, 10)
A3, B3, C3, D3, E3 = range(10, 15)
A4, B4, C4, D4, E4 = range(15, 20)
A5, B5, C5, D5, E5 = range(20, 25)
