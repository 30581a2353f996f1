"""
Type definitions used across layers
"""

from enum import StrEnum


class Phase(StrEnum):
    WAITING_TO_START = "WAITING_TO_START"
    IN_PROGRESS = "IN_PROGRESS"
    OVER = "OVER"


class Piece(StrEnum):
    X = "X"
    O = "O"


class ErrorKind(StrEnum):
    """The stable messages surfaced to callers. Clients match on these strings."""

    UNSUPPORTED_COMMAND = "UnsupportedCommand"
    GAME_NOT_IN_PROGRESS = "GameNotInProgress"
    PLAYER_ALREADY_IN_GAME = "PlayerAlreadyInGame"
    GAME_FULL = "GameFull"
    PLAYER_NOT_IN_GAME = "PlayerNotInGame"
    MOVE_NOT_YOUR_TURN = "MoveNotYourTurn"
    BOARD_POSITION_NOT_EMPTY = "BoardPositionNotEmpty"
    INVALID_REQUEST = "InvalidRequest"
    REPOSITORY = "RepositoryError"
