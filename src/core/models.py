"""
Boundary layer data model(s).

These objects can be used to communicate with the game area.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the area
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional
from uuid import UUID

# Type aliases to make the models easier to read
PlayerID = str
UserName = str
MoveTriple = tuple[int, int, str]  # (row, col, piece)


@dataclass
class MatchModel:
    """Transport-safe representation of a tic-tac-toe match used between API, area, DB, and Game layers."""

    game_id: UUID
    phase: str
    moves: list[MoveTriple] = field(default_factory=list)
    x: Optional[PlayerID] = None
    o: Optional[PlayerID] = None
    winner: Optional[PlayerID] = None
    occupants: dict[PlayerID, UserName] = field(default_factory=dict)  # in joining order


@dataclass(frozen=True)
class MatchHistoryRecord:
    """Summary of one concluded match. Created once, never mutated."""

    game_id: UUID
    scores: Mapping[UserName, float]

    def __post_init__(self) -> None:
        # own copy, read-only
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))


@dataclass
class AreaModel:
    """What the hosting layer re-broadcasts after a change notification."""

    area_id: str
    game: Optional[MatchModel]
    history: list[MatchHistoryRecord]
