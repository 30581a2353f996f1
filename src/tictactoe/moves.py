"""Moves and the winning lines of the board"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from src.core.shared_types import Piece
from src.tictactoe.position import BOARD_SIZE, Position

Line = tuple[Position, Position, Position]


@dataclass(frozen=True)
class Move:
    """A piece placed on a position. Recorded moves never change."""

    position: Position
    piece: Piece

    @classmethod
    def at(cls, row: int, col: int, piece: Piece) -> Move:
        return cls(Position(row, col), piece)

    @classmethod
    def from_triple(cls, triple: tuple[int, int, str]) -> Move:
        """(row, col, piece) as stored in a MatchModel"""
        row, col, piece = triple
        return cls(Position(row, col), Piece(piece))

    def to_triple(self) -> tuple[int, int, str]:
        return (self.position.row, self.position.col, str(self.piece))


def _rows() -> list[Line]:
    return [
        (Position(row, 0), Position(row, 1), Position(row, 2))
        for row in range(BOARD_SIZE)
    ]


def _columns() -> list[Line]:
    return [
        (Position(0, col), Position(1, col), Position(2, col))
        for col in range(BOARD_SIZE)
    ]


def _diagonals() -> list[Line]:
    main = (Position(0, 0), Position(1, 1), Position(2, 2))  # row == col
    anti = (Position(0, 2), Position(1, 1), Position(2, 0))  # row + col == 2
    return [main, anti]


# 3 rows, 3 columns, 2 diagonals
WINNING_LINES: tuple[Line, ...] = tuple(_rows() + _columns() + _diagonals())


def positions_of(moves: Iterable[Move], piece: Piece) -> set[Position]:
    return {move.position for move in moves if move.piece == piece}


def is_occupied(moves: Iterable[Move], position: Position) -> bool:
    return any(move.position == position for move in moves)


def winning_line(moves: Iterable[Move], piece: Piece) -> Optional[Line]:
    """First line whose three positions are all held by `piece`, if any."""
    owned = positions_of(moves, piece)
    for line in WINNING_LINES:
        if all(position in owned for position in line):
            return line
    return None


def piece_to_move(move_count: int) -> Piece:
    """X moves on even counts, O on odd ones."""
    return Piece.X if move_count % 2 == 0 else Piece.O
