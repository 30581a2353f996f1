"""Unit tests for src/tictactoe/moves.py"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.shared_types import Piece
from src.tictactoe.moves import (
    WINNING_LINES,
    Move,
    is_occupied,
    piece_to_move,
    winning_line,
)
from src.tictactoe.position import Position


def test_eight_winning_lines() -> None:
    """3 rows, 3 columns, 2 diagonals. No duplicates."""
    assert len(WINNING_LINES) == 8
    assert len(set(WINNING_LINES)) == 8


def test_diagonals_are_included() -> None:
    main = (Position(0, 0), Position(1, 1), Position(2, 2))
    anti = (Position(0, 2), Position(1, 1), Position(2, 0))
    assert main in WINNING_LINES
    assert anti in WINNING_LINES
    assert all(p.row == p.col for p in main)
    assert all(p.row + p.col == 2 for p in anti)


def test_recorded_move_is_frozen() -> None:
    move = Move.at(0, 0, Piece.X)
    with pytest.raises(FrozenInstanceError):
        move.piece = Piece.O  # type: ignore[misc]


def test_move_triple_conversion() -> None:
    move = Move.at(2, 1, Piece.O)
    assert move.to_triple() == (2, 1, "O")
    assert Move.from_triple((2, 1, "O")) == move


def test_piece_to_move_alternates_starting_with_x() -> None:
    assert [piece_to_move(count) for count in range(4)] == [
        Piece.X,
        Piece.O,
        Piece.X,
        Piece.O,
    ]


def test_is_occupied_ignores_piece() -> None:
    moves = [Move.at(1, 1, Piece.X)]
    assert is_occupied(moves, Position(1, 1))
    assert not is_occupied(moves, Position(0, 1))


@pytest.mark.parametrize(
    "line",
    [
        [(0, 0), (0, 1), (0, 2)],
        [(2, 0), (2, 1), (2, 2)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ],
)
def test_winning_line_found(line: list[tuple[int, int]]) -> None:
    moves = [Move.at(row, col, Piece.O) for row, col in line]
    # some noise from the other piece
    moves.append(Move.at(*_first_free(line), Piece.X))
    assert winning_line(moves, Piece.O) is not None
    assert winning_line(moves, Piece.X) is None


def test_mixed_line_is_not_a_win() -> None:
    moves = [
        Move.at(0, 0, Piece.X),
        Move.at(0, 1, Piece.O),
        Move.at(0, 2, Piece.X),
    ]
    assert winning_line(moves, Piece.X) is None
    assert winning_line(moves, Piece.O) is None


def _first_free(line: list[tuple[int, int]]) -> tuple[int, int]:
    return next(
        (row, col)
        for row in range(3)
        for col in range(3)
        if (row, col) not in line
    )
