"""
The TicTacToeGame class will be the entrypoint into the domain layer for the game area.
It is responsible for all the rules of a single match: who sits where, whose turn it is, which moves are legal,
and when the match is over. It knows nothing about commands, listeners, or history.
"""

from dataclasses import dataclass, field
from typing import Optional, Self
from uuid import UUID, uuid4

from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    MembershipError,
    NotYourTurnError,
)
from src.core.logging_config import get_logger
from src.core.models import MatchModel
from src.core.shared_types import ErrorKind, Phase, Piece
from src.tictactoe.moves import Move, is_occupied, piece_to_move, winning_line
from src.tictactoe.player import Player
from src.tictactoe.position import ALL_POSITIONS, BOARD_SIZE

logger = get_logger("game")

MAX_PLAYERS = 2
MAX_MOVES = len(ALL_POSITIONS)


@dataclass
class MatchState:
    phase: Phase = Phase.WAITING_TO_START
    moves: list[Move] = field(default_factory=list)
    x: Optional[str] = None
    o: Optional[str] = None
    winner: Optional[str] = None


@dataclass
class TicTacToeGame:
    # --- DOMAIN LAYER API CALLED BY THE GAME AREA ---

    state: MatchState = field(default_factory=MatchState)
    players: list[Player] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def from_model(cls, model: MatchModel) -> Self:
        """Rebuild a game from its transport-safe snapshot."""
        if model.phase not in Phase.__members__:
            raise GameStateError(
                ErrorKind.GAME_NOT_IN_PROGRESS,
                f"Invalid phase: {model.phase!r}. \nPick one from {','.join(Phase)}",
            )
        state = MatchState(
            phase=Phase(model.phase),
            moves=[Move.from_triple(triple) for triple in model.moves],
            x=model.x,
            o=model.o,
            winner=model.winner,
        )
        players = [
            Player(player_id, user_name)
            for player_id, user_name in model.occupants.items()
        ]
        return cls(state=state, players=players, id=model.game_id)

    def to_model(self) -> MatchModel:
        return MatchModel(
            game_id=self.id,
            phase=str(self.state.phase),
            moves=[move.to_triple() for move in self.state.moves],
            x=self.state.x,
            o=self.state.o,
            winner=self.state.winner,
            occupants={player.id: player.user_name for player in self.players},
        )

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def winner(self) -> Optional[str]:
        """Only meaningful once the match is over. None under OVER means a tie."""
        if self.state.phase != Phase.OVER:
            return None
        return self.state.winner

    def board(self) -> list[list[Optional[Piece]]]:
        """3x3 grid view of the move log, indexed [row][col]."""
        grid: list[list[Optional[Piece]]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        for move in self.state.moves:
            grid[move.position.row][move.position.col] = move.piece
        return grid

    def join(self, player: Player) -> None:
        """
        Seat a player.
        ----

        First joiner plays X, the second plays O and starts the match.
        """
        if self._is_occupant(player):
            raise MembershipError(ErrorKind.PLAYER_ALREADY_IN_GAME)
        if len(self.players) >= MAX_PLAYERS:
            raise GameStateError(ErrorKind.GAME_FULL)
        # an instance that reached OVER is never reused
        if self.state.phase == Phase.OVER:
            raise GameStateError(ErrorKind.GAME_NOT_IN_PROGRESS)

        if self.state.x is None:
            self.state.x = player.id
        else:
            self.state.o = player.id
        self.players.append(player)

        if len(self.players) == MAX_PLAYERS:
            self._change_phase(Phase.IN_PROGRESS)
        logger.debug("player %s joined game %s", player.id, self.id)

    def leave(self, player: Player) -> None:
        """
        Remove a player.
        ----

        With one player left the match is forfeited to them, independent of the board.
        With nobody left the match goes back to waiting and the seats are released.
        """
        if not self._is_occupant(player):
            raise MembershipError(ErrorKind.PLAYER_NOT_IN_GAME)
        if self.state.phase == Phase.OVER:
            raise GameStateError(ErrorKind.GAME_NOT_IN_PROGRESS)

        self.players = [p for p in self.players if p.id != player.id]

        if len(self.players) == 1:
            self.state.winner = self.players[0].id
            self._change_phase(Phase.OVER)
        elif len(self.players) == 0:
            self.state.winner = None
            self.state.x = None
            self.state.o = None
            self._change_phase(Phase.WAITING_TO_START)
        logger.debug("player %s left game %s", player.id, self.id)

    def apply_move(self, move: Move, player: Player) -> None:
        """
        Attempt to make a move
        -----

        1. the match must be in progress
        2. the piece is derived from who the player is (the piece on `move` is ignored)
        3. it must be that piece's turn (move count parity)
        4. the position must be empty
        5. record the move, then check for a win or a full board
        """
        if self.state.phase != Phase.IN_PROGRESS:
            raise GameStateError(ErrorKind.GAME_NOT_IN_PROGRESS)

        player_piece = self._get_player_piece(player)
        if piece_to_move(len(self.state.moves)) != player_piece:
            raise NotYourTurnError(ErrorKind.MOVE_NOT_YOUR_TURN)

        if is_occupied(self.state.moves, move.position):
            raise IllegalMoveError(ErrorKind.BOARD_POSITION_NOT_EMPTY)

        self.state.moves.append(Move(move.position, player_piece))
        self._update_phase(player)

    # -- PRIVATE HELPERS ---
    def _is_occupant(self, player: Player) -> bool:
        return any(p.id == player.id for p in self.players)

    def _get_player_piece(self, player: Player) -> Piece:
        if player.id == self.state.x:
            return Piece.X
        if player.id == self.state.o:
            return Piece.O
        raise MembershipError(ErrorKind.PLAYER_NOT_IN_GAME)

    def _update_phase(self, player: Player) -> None:
        """Performs checks to see if the last move ended the match and changes phase accordingly."""
        piece = self._get_player_piece(player)
        if winning_line(self.state.moves, piece) is not None:
            self.state.winner = player.id
            self._change_phase(Phase.OVER)
        elif len(self.state.moves) == MAX_MOVES:
            self.state.winner = None
            self._change_phase(Phase.OVER)

    def _change_phase(self, new_phase: Phase) -> None:
        self.state.phase = new_phase
