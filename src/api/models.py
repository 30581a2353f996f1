"""Commands and Response models"""

from typing import Annotated, Any, Literal, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from src.core.exceptions import InvalidParametersError, InvalidRequestError
from src.core.shared_types import ErrorKind
from src.tictactoe.position import BOARD_SIZE

UserName = str


# --- COMMAND MODELS ---
class BoardTarget(BaseModel):
    """The (row, col) a player wants to place their piece on."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, lt=BOARD_SIZE)
    col: int = Field(ge=0, lt=BOARD_SIZE)


class JoinGameCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["JoinGame"] = "JoinGame"


class GameMoveCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["GameMove"] = "GameMove"
    game_id: UUID
    move: BoardTarget


class LeaveGameCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["LeaveGame"] = "LeaveGame"
    game_id: UUID


GameAreaCommand = Annotated[
    Union[JoinGameCommand, GameMoveCommand, LeaveGameCommand],
    Field(discriminator="type"),
]
SUPPORTED_COMMANDS: tuple[str, ...] = ("JoinGame", "GameMove", "LeaveGame")

_command_adapter: TypeAdapter[GameAreaCommand] = TypeAdapter(GameAreaCommand)


def parse_command(payload: dict[str, Any]) -> GameAreaCommand:
    """
    Turn a raw transport payload into one of the supported commands.
    ----

    Unknown command types are a protocol violation (UnsupportedCommand), bad field values are an invalid request.
    """
    if payload.get("type") not in SUPPORTED_COMMANDS:
        raise InvalidParametersError(ErrorKind.UNSUPPORTED_COMMAND)
    try:
        return _command_adapter.validate_python(payload)
    except ValidationError as error:
        raise InvalidRequestError(
            ErrorKind.INVALID_REQUEST,
            f"Cannot interpret {payload.get('type')} command: {error.error_count()} invalid field(s).",
        ) from error


# --- RESPONSE MODELS ---
class JoinGameResponse(BaseModel):
    game_id: UUID


class EmptyResponse(BaseModel):
    pass


class HistoryRecordResponse(BaseModel):
    game_id: UUID
    scores: dict[UserName, float]


CommandResponse = Union[JoinGameResponse, EmptyResponse]
