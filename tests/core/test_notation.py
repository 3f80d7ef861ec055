"""Tests for board descriptions and text rendering."""

from __future__ import annotations

import pytest

from qirkat.core.board import Board
from qirkat.core.enums import PieceColor
from qirkat.core.errors import InvalidConfigurationError
from qirkat.core.notation import STARTING_BOARD, board_to_text, parse_board_text
from qirkat.core.types import A1, C3, E5

INITIAL_TEXT = "\n".join(
    [
        "  b b b b b",
        "  b b b b b",
        "  b b - w w",
        "  w w w w w",
        "  w w w w w",
    ]
)


class TestParseBoardText:
    def test_starting_board(self) -> None:
        cells = parse_board_text(STARTING_BOARD)
        assert len(cells) == 25
        assert cells[A1] == PieceColor.WHITE
        assert cells[C3] == PieceColor.EMPTY
        assert cells[E5] == PieceColor.BLACK
        assert cells.count(PieceColor.WHITE) == 12
        assert cells.count(PieceColor.BLACK) == 12

    def test_whitespace_is_ignored(self) -> None:
        spaced = "wwwww\nwwwww\tbb-ww   bbbbb bbbbb\n"
        assert parse_board_text(spaced) == parse_board_text("wwwwwwwwwwbb-wwbbbbbbbbbb")

    def test_too_short(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="25 squares"):
            parse_board_text("w" * 24)

    def test_too_long(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            parse_board_text("-" * 26)

    def test_bad_character(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="'x'"):
            parse_board_text("x" + "-" * 24)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_board_text("W" * 25)


class TestBoardToText:
    def test_initial_board(self) -> None:
        assert board_to_text(Board()) == INITIAL_TEXT

    def test_no_trailing_newline(self) -> None:
        assert not board_to_text(Board()).endswith("\n")

    def test_top_row_first(self, make_board) -> None:
        board = make_board("w---- ----- ----- ----- ----b")
        lines = board_to_text(board).split("\n")
        assert lines[0] == "  - - - - b"
        assert lines[-1] == "  w - - - -"

    def test_legend(self) -> None:
        lines = board_to_text(Board(), legend=True).split("\n")
        assert lines[0] == "5 b b b b b"
        assert lines[2] == "3 b b - w w"
        assert lines[4] == "1 w w w w w"
        assert lines[5] == "  a b c d e"

    def test_str_is_plain_rendering(self) -> None:
        board = Board()
        assert str(board) == INITIAL_TEXT
