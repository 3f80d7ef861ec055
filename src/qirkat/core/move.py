"""Move value object: a single step or a chain of capture legs."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from qirkat.core.errors import ContractViolationError
from qirkat.core.types import (
    Square,
    col_of,
    index,
    is_valid_square,
    parse_square,
    row_of,
    square_name,
)

_MOVE_RE = re.compile(r"[a-e][1-5](?:-[a-e][1-5])+")


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing one move.

    A move with no *tail* is elementary: a one-square step or a single
    capture.  A capture chain is a capture whose *tail* holds the next leg,
    starting where this one lands.
    """

    from_sq: Square
    to_sq: Square
    tail: Move | None = None

    def __post_init__(self) -> None:
        if not (is_valid_square(self.from_sq) and is_valid_square(self.to_sq)):
            raise ValueError(f"Move squares out of range: {self.from_sq}, {self.to_sq}")
        dc, dr = self._delta()
        if (dc, dr) == (0, 0):
            raise ValueError(f"Null move: {square_name(self.from_sq)}")
        step = abs(dc) <= 1 and abs(dr) <= 1
        jump = dc in (-2, 0, 2) and dr in (-2, 0, 2)
        if not (step or jump):
            raise ValueError(
                f"Not a step or jump: {square_name(self.from_sq)}-{square_name(self.to_sq)}"
            )

    # ── Construction helpers ─────────────────────────────────────────────

    @classmethod
    def make(
        cls,
        col0: str,
        row0: str,
        col1: str,
        row1: str,
        tail: Move | None = None,
    ) -> Move:
        """Move from character coordinates, e.g. ``Move.make('a', '3', 'b', '2')``."""
        return cls(index(col0, row0), index(col1, row1), tail)

    @classmethod
    def chain(cls, head: Move, tail: Move | None) -> Move:
        """Append *tail* after the last leg of *head*."""
        if tail is None:
            return head
        if head.tail is None:
            return cls(head.from_sq, head.to_sq, tail)
        return cls(head.from_sq, head.to_sq, cls.chain(head.tail, tail))

    @classmethod
    def from_squares(cls, squares: Sequence[Square]) -> Move:
        """Build a (possibly chained) move visiting *squares* in order."""
        if len(squares) < 2:
            raise ValueError("A move needs at least two squares")
        move: Move | None = None
        for i in range(len(squares) - 1, 0, -1):
            move = cls(squares[i - 1], squares[i], move)
        assert move is not None
        return move

    # ── Geometry ─────────────────────────────────────────────────────────

    def _delta(self) -> tuple[int, int]:
        return (
            col_of(self.to_sq) - col_of(self.from_sq),
            row_of(self.to_sq) - row_of(self.from_sq),
        )

    @property
    def is_jump(self) -> bool:
        """True iff this leg spans two squares (a capture)."""
        dc, dr = self._delta()
        return abs(dc) == 2 or abs(dr) == 2

    @property
    def jumped_square(self) -> Square:
        """The square captured by this leg."""
        if not self.is_jump:
            raise ContractViolationError(f"{self} is not a jump")
        return (self.from_sq + self.to_sq) // 2

    @property
    def is_left_move(self) -> bool:
        """Plain one-column step towards column a."""
        return self._delta() == (-1, 0)

    @property
    def is_right_move(self) -> bool:
        """Plain one-column step towards column e."""
        return self._delta() == (1, 0)

    @property
    def is_vertical(self) -> bool:
        return col_of(self.from_sq) == col_of(self.to_sq)

    @property
    def is_diagonal(self) -> bool:
        dc, dr = self._delta()
        return dc != 0 and dr != 0

    @property
    def final_square(self) -> Square:
        """Square where the moving piece ends up after all legs."""
        move = self
        while move.tail is not None:
            move = move.tail
        return move.to_sq

    def legs(self) -> Iterator[Move]:
        """Elementary moves making up this move, head first."""
        move: Move | None = self
        while move is not None:
            yield Move(move.from_sq, move.to_sq)
            move = move.tail

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        parts = [square_name(self.from_sq)]
        move: Move | None = self
        while move is not None:
            parts.append(square_name(move.to_sq))
            move = move.tail
        return "-".join(parts)


def parse_move(text: str) -> Move:
    """Parse ``"a3-b2"`` or a chain such as ``"a1-a3-c3"`` into a :class:`Move`."""
    if not _MOVE_RE.fullmatch(text):
        raise ValueError(f"Invalid move: {text!r}")
    return Move.from_squares([parse_square(token) for token in text.split("-")])
