"""Tests for the Move value object and move-string parsing."""

from __future__ import annotations

import pytest

from qirkat.core.errors import ContractViolationError
from qirkat.core.move import Move, parse_move
from qirkat.core.types import A1, A2, A3, A4, A5, B2, B3, C3, D3


class TestMoveBasics:
    def test_step(self) -> None:
        m = Move.make("a", "3", "b", "2")
        assert not m.is_jump
        assert m.is_diagonal
        assert m.tail is None

    def test_jump(self) -> None:
        m = Move.make("a", "3", "a", "5")
        assert m.is_jump
        assert m.is_vertical

    def test_string(self) -> None:
        assert str(Move.make("a", "3", "b", "2")) == "a3-b2"
        assert str(Move.make("a", "3", "a", "5")) == "a3-a5"
        assert str(Move.make("a", "3", "a", "5", Move.make("a", "5", "c", "3"))) == "a3-a5-c3"

    def test_left_and_right(self) -> None:
        assert Move.make("a", "3", "b", "3").is_right_move
        assert not Move.make("a", "3", "b", "3").is_left_move
        assert Move.make("c", "3", "b", "3").is_left_move
        assert not Move.make("c", "3", "b", "3").is_right_move
        assert not Move.make("c", "3", "c", "4").is_left_move
        assert not Move.make("c", "3", "c", "4").is_right_move
        # Captures are never lateral steps.
        assert not Move.make("a", "3", "c", "3").is_right_move

    def test_jumped_square(self) -> None:
        assert Move.make("a", "3", "a", "5").jumped_square == A4
        assert Move.make("a", "3", "c", "3").jumped_square == B3
        assert Move.make("a", "1", "c", "3").jumped_square == B2
        assert Move.make("c", "3", "a", "1").jumped_square == B2

    def test_jumped_square_of_step_is_a_contract_violation(self) -> None:
        with pytest.raises(ContractViolationError):
            _ = Move(A1, A2).jumped_square

    def test_value_semantics(self) -> None:
        assert Move(A1, A3) == Move.make("a", "1", "a", "3")
        assert len({Move(A1, A3), Move(A1, A3), Move(A1, A2)}) == 2
        with pytest.raises(AttributeError):
            Move(A1, A2).to_sq = A3  # type: ignore[misc]


class TestMoveValidation:
    def test_null_move(self) -> None:
        with pytest.raises(ValueError):
            Move(A1, A1)

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Move(A1, 25)
        with pytest.raises(ValueError):
            Move(-1, A1)

    def test_knight_shape_rejected(self) -> None:
        with pytest.raises(ValueError):
            Move.make("a", "1", "b", "3")
        with pytest.raises(ValueError):
            Move.make("a", "1", "c", "2")

    def test_long_slide_rejected(self) -> None:
        with pytest.raises(ValueError):
            Move.make("a", "1", "a", "4")

    def test_bad_coordinate_characters(self) -> None:
        with pytest.raises(ValueError):
            Move.make("f", "1", "e", "1")


class TestChains:
    def test_chain_appends_after_last_leg(self) -> None:
        head = Move(A1, A3, Move(A3, C3))
        assert Move.chain(head, Move(C3, A5)) == parse_move("a1-a3-c3-a5")

    def test_chain_with_none_is_identity(self) -> None:
        m = Move(A1, A3)
        assert Move.chain(m, None) is m

    def test_from_squares(self) -> None:
        assert Move.from_squares([A1, A3, A5]) == Move(A1, A3, Move(A3, A5))
        with pytest.raises(ValueError):
            Move.from_squares([A1])

    def test_legs_and_final_square(self) -> None:
        m = parse_move("a1-a3-c3-e3")
        assert [str(leg) for leg in m.legs()] == ["a1-a3", "a3-c3", "c3-e3"]
        assert m.final_square == 14
        assert Move(A1, A2).final_square == A2


class TestParseMove:
    def test_parse_round_trip(self) -> None:
        for text in ["a3-b2", "a3-a5", "a3-a5-c3", "a3-a5-c3-e1", "e5-c3-a1"]:
            assert str(parse_move(text)) == text

    def test_parse_chain_structure(self) -> None:
        m = parse_move("a1-a3-a5")
        assert m.from_sq == A1
        assert m.to_sq == A3
        assert m.tail == Move(A3, A5)

    def test_parse_lateral_capture(self) -> None:
        assert parse_move("b3-d3").jumped_square == C3
        assert parse_move("e3-c3").jumped_square == D3

    @pytest.mark.parametrize(
        "text",
        ["", "a3", "a3-", "a3-f1", "a3-b", "A3-B2", "a3 -b2", "a3-b2-", "a3b2", "a3-c4"],
    )
    def test_parse_rejects(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_move(text)

    def test_parse_single_leg_has_no_tail(self) -> None:
        assert parse_move("a5-a4").tail is None
        assert parse_move("a5-a4") == Move(A5, A4)
