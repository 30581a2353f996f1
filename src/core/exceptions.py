"""
Exception hierarchy shared by all layers.

The domain layer raises the specific errors, the service layer re-raises them as InvalidParametersError
(same kind, same message) so the hosting layer can show the raw message to the user.
"""

from typing import Optional

from src.core.shared_types import ErrorKind


class GameError(Exception):
    """Top-level error. Every error carries an ErrorKind; the message defaults to the kind's stable string."""

    default_kind: ErrorKind = ErrorKind.INVALID_REQUEST

    def __init__(self, kind: Optional[ErrorKind] = None, message: Optional[str] = None) -> None:
        self.kind = kind if kind is not None else self.default_kind
        self.message = message if message is not None else str(self.kind)
        super().__init__(self.message)


# --- DOMAIN ERRORS ---
class GameStateError(GameError):
    """The match is in the wrong phase (or full) for the requested operation."""

    default_kind = ErrorKind.GAME_NOT_IN_PROGRESS


class MembershipError(GameError):
    """Joining twice, or acting/leaving without being an occupant."""

    default_kind = ErrorKind.PLAYER_NOT_IN_GAME


class NotYourTurnError(GameError):
    default_kind = ErrorKind.MOVE_NOT_YOUR_TURN


class IllegalMoveError(GameError):
    default_kind = ErrorKind.BOARD_POSITION_NOT_EMPTY


# --- BOUNDARY ERRORS ---
class InvalidParametersError(GameError):
    """Caller-visible error raised by the game area."""

    default_kind = ErrorKind.UNSUPPORTED_COMMAND

    @classmethod
    def from_error(cls, error: GameError) -> "InvalidParametersError":
        """Keep kind and message of the original error."""
        return cls(error.kind, error.message)


class InvalidRequestError(GameError):
    """Payload could not be interpreted as a command."""

    default_kind = ErrorKind.INVALID_REQUEST


class RepositoryError(GameError):
    default_kind = ErrorKind.REPOSITORY
