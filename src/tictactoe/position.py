"""
A position on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Tic-tac-toe board is always 3x3.
BOARD_SIZE = 3


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def __post_init__(self) -> None:
        if not self.is_within_bounds():
            raise ValueError(
                f"Position ({self.row}, {self.col}) is off the board. Rows and columns go from 0 to {BOARD_SIZE - 1}."
            )

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
