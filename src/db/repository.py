"""Protocol repository for concluded matches (the game area works with any implementation, or none)."""

from typing import Protocol
from uuid import UUID

from src.core.models import MatchHistoryRecord


class HistoryRepository(Protocol):
    """Persistence layer orchestration"""

    def add_record(self, record: MatchHistoryRecord) -> UUID:
        """Store a concluded match and return its game ID."""
        ...

    def get_record(self, game_id: UUID) -> MatchHistoryRecord | None:
        """Get record by game ID, if it exists."""
        ...

    def list_records(self) -> list[MatchHistoryRecord]:
        """All records, oldest first."""
        ...
