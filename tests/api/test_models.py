"""Unit tests for src/api/models.py"""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.api.models import (
    BoardTarget,
    GameMoveCommand,
    JoinGameCommand,
    LeaveGameCommand,
    parse_command,
)
from src.core.exceptions import InvalidParametersError, InvalidRequestError
from src.core.shared_types import ErrorKind


def test_parse_join() -> None:
    assert isinstance(parse_command({"type": "JoinGame"}), JoinGameCommand)


def test_parse_move() -> None:
    game_id = uuid4()
    command = parse_command(
        {"type": "GameMove", "game_id": str(game_id), "move": {"row": 0, "col": 2}}
    )
    assert isinstance(command, GameMoveCommand)
    assert command.game_id == game_id
    assert command.move == BoardTarget(row=0, col=2)


def test_parse_leave() -> None:
    game_id = uuid4()
    command = parse_command({"type": "LeaveGame", "game_id": str(game_id)})
    assert isinstance(command, LeaveGameCommand)
    assert command.game_id == game_id


@pytest.mark.parametrize("payload", [{}, {"type": "StartGame"}, {"type": None}])
def test_unknown_command_type(payload: dict) -> None:
    with pytest.raises(InvalidParametersError) as exc_info:
        parse_command(payload)
    assert exc_info.value.kind == ErrorKind.UNSUPPORTED_COMMAND


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "GameMove", "game_id": "not-a-uuid", "move": {"row": 0, "col": 0}},
        {"type": "GameMove", "game_id": str(uuid4()), "move": {"row": 3, "col": 0}},
        {"type": "GameMove", "game_id": str(uuid4()), "move": {"row": 0, "col": -1}},
        {"type": "GameMove", "game_id": str(uuid4())},
        {"type": "LeaveGame"},
    ],
)
def test_malformed_command(payload: dict) -> None:
    with pytest.raises(InvalidRequestError) as exc_info:
        parse_command(payload)
    assert exc_info.value.kind == ErrorKind.INVALID_REQUEST


def test_board_target_bounds() -> None:
    with pytest.raises(ValidationError):
        BoardTarget(row=1, col=3)


def test_commands_are_frozen() -> None:
    command = LeaveGameCommand(game_id=uuid4())
    with pytest.raises(ValidationError):
        command.game_id = uuid4()  # type: ignore[misc]
