"""
Orchestration of commands from the hosting layer to the game rules (and the match history).

The area owns at most one active TicTacToeGame. Nothing else holds a reference to it:
it is created on JoinGame (when missing or over), and cleared as soon as a move or a leave ends the match.

Commands for one area must arrive serialized (the hosting layer guarantees this); the area does no locking.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional
from uuid import UUID, uuid4

from src.api.models import (
    CommandResponse,
    EmptyResponse,
    GameAreaCommand,
    GameMoveCommand,
    HistoryRecordResponse,
    JoinGameCommand,
    JoinGameResponse,
    LeaveGameCommand,
    parse_command,
)
from src.core.exceptions import GameError, InvalidParametersError, RepositoryError
from src.core.logging_config import get_logger
from src.core.models import AreaModel, MatchHistoryRecord
from src.core.shared_types import ErrorKind, Phase, Piece
from src.db.repository import HistoryRepository
from src.tictactoe.game import TicTacToeGame
from src.tictactoe.moves import Move
from src.tictactoe.player import Player

logger = get_logger("area")

AreaListener = Callable[["TicTacToeGameArea"], None]
ScoringPolicy = Callable[[TicTacToeGame, Player], dict[str, float]]


def placeholder_scores(game: TicTacToeGame, player: Player) -> dict[str, float]:
    """The player whose command ended the match is recorded with 0, whatever the outcome."""
    return {player.user_name: 0}


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command as a value: either a response, or the error kind + message."""

    response: Optional[CommandResponse] = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


class TicTacToeGameArea:
    """Routes JoinGame / GameMove / LeaveGame commands to the active game and records finished matches."""

    def __init__(
        self,
        area_id: Optional[str] = None,
        history_repository: Optional[HistoryRepository] = None,
        scoring_policy: ScoringPolicy = placeholder_scores,
    ) -> None:
        self.id = area_id or str(uuid4())
        self._game: Optional[TicTacToeGame] = None
        self._history: list[MatchHistoryRecord] = []
        self._listeners: list[AreaListener] = []
        self._repository = history_repository
        self._scoring_policy = scoring_policy

    # -- read-only views for the hosting layer --
    @property
    def game(self) -> Optional[TicTacToeGame]:
        return self._game

    @property
    def history(self) -> tuple[MatchHistoryRecord, ...]:
        return tuple(self._history)

    def history_view(self) -> list[HistoryRecordResponse]:
        return [
            HistoryRecordResponse(game_id=record.game_id, scores=dict(record.scores))
            for record in self._history
        ]

    def to_model(self) -> AreaModel:
        return AreaModel(
            area_id=self.id,
            game=self._game.to_model() if self._game else None,
            history=list(self._history),
        )

    # -- change notification --
    def add_listener(self, listener: AreaListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: AreaListener) -> None:
        self._listeners.remove(listener)

    # -- command handling --
    def handle_command(
        self, command: GameAreaCommand, player: Player
    ) -> CommandResponse:
        """
        Handle a command from a player in this area.
        ----

        Successful commands that change state notify the listeners. Failed commands leave the area untouched,
        and raise InvalidParametersError carrying the kind and message of the underlying error.
        """
        logger.debug("area %s: %s from %s", self.id, type(command).__name__, player.id)
        match command:
            case JoinGameCommand():
                return self._join_game(player)
            case GameMoveCommand():
                return self._make_move(command, player)
            case LeaveGameCommand():
                return self._leave_game(command, player)
            case _:
                raise InvalidParametersError(ErrorKind.UNSUPPORTED_COMMAND)

    def handle_raw_command(self, payload: dict[str, Any], player: Player) -> CommandResponse:
        """Parse a transport payload first, then handle it."""
        return self.handle_command(parse_command(payload), player)

    def try_handle_command(self, command: GameAreaCommand, player: Player) -> CommandResult:
        """Same as handle_command, but the failure comes back as a value instead of an exception."""
        try:
            return CommandResult(response=self.handle_command(command, player))
        except GameError as error:
            logger.info(
                "area %s: rejected %s from %s (%s)",
                self.id,
                type(command).__name__,
                player.id,
                error.kind,
            )
            return CommandResult(error_kind=error.kind, message=error.message)

    # -- Internal helpers --
    def _join_game(self, player: Player) -> JoinGameResponse:
        game = self._game
        if game is None or game.phase == Phase.OVER:
            game = TicTacToeGame()

        try:
            game.join(player)
        except GameError as error:
            raise InvalidParametersError.from_error(error) from error

        self._game = game
        if game.phase == Phase.IN_PROGRESS:
            self._emit_area_changed()
        return JoinGameResponse(game_id=game.id)

    def _make_move(self, command: GameMoveCommand, player: Player) -> EmptyResponse:
        game = self._game_in_progress(command.game_id)
        # the piece is decided by the game from the player's seat
        move = Move.at(command.move.row, command.move.col, Piece.X)

        try:
            game.apply_move(move, player)
        except GameError as error:
            raise InvalidParametersError.from_error(error) from error

        record = self._finish_if_over(game, player)
        self._emit_area_changed()
        self._persist(record)
        return EmptyResponse()

    def _leave_game(self, command: LeaveGameCommand, player: Player) -> EmptyResponse:
        game = self._game_in_progress(command.game_id)

        try:
            game.leave(player)
        except GameError as error:
            raise InvalidParametersError.from_error(error) from error

        record = self._finish_if_over(game, player)
        self._emit_area_changed()
        self._persist(record)
        return EmptyResponse()

    def _game_in_progress(self, game_id: UUID) -> TicTacToeGame:
        """The active game, if it is in progress and is the one the command refers to."""
        game = self._game
        if game is None or game.phase != Phase.IN_PROGRESS or game.id != game_id:
            raise InvalidParametersError(ErrorKind.GAME_NOT_IN_PROGRESS)
        return game

    def _finish_if_over(
        self, game: TicTacToeGame, player: Player
    ) -> Optional[MatchHistoryRecord]:
        """Record the outcome and clear the active game, so the next JoinGame starts fresh."""
        if game.phase != Phase.OVER:
            return None

        record = MatchHistoryRecord(
            game_id=game.id, scores=self._scoring_policy(game, player)
        )
        self._history.append(record)
        self._game = None
        logger.info(
            "area %s: game %s over, winner=%s", self.id, game.id, game.winner or "tie"
        )
        return record

    def _persist(self, record: Optional[MatchHistoryRecord]) -> None:
        """The in-memory history stays the source of truth; the repository only gets a copy."""
        if record is None or self._repository is None:
            return
        try:
            self._repository.add_record(record)
        except RepositoryError:
            # the command already took effect, so it is not reported as failed
            logger.exception(
                "area %s: could not store history record for game %s",
                self.id,
                record.game_id,
            )

    def _emit_area_changed(self) -> None:
        for listener in list(self._listeners):
            listener(self)
