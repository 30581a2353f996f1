"""Implementation of (History)Repository using SQLAlchemy"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.logging_config import get_logger
from src.core.models import MatchHistoryRecord
from src.db.schema import DBMatchHistory

logger = get_logger("db")


class SQLHistoryRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def add_record(self, record: MatchHistoryRecord) -> UUID:
        """History is append-only: storing the same game twice is an error."""
        record_db = DBMatchHistory(game_id=record.game_id, scores=dict(record.scores))
        self.db.add(record_db)
        try:
            self.db.commit()
        except IntegrityError as error:
            self.db.rollback()
            raise RepositoryError(
                message=f"History record for game {record.game_id} already exists."
            ) from error
        logger.debug("stored history record for game %s", record.game_id)
        return record.game_id

    def get_record(self, game_id: UUID) -> MatchHistoryRecord | None:
        query = select(DBMatchHistory).where(DBMatchHistory.game_id == game_id)
        record_db = self.db.scalar(query)
        if record_db:
            return self._to_record(record_db)
        return None

    def list_records(self) -> list[MatchHistoryRecord]:
        query = select(DBMatchHistory).order_by(DBMatchHistory.id)
        return [self._to_record(record_db) for record_db in self.db.scalars(query)]

    def _to_record(self, record_db: DBMatchHistory) -> MatchHistoryRecord:
        """Convert SQLAlchemy model to data transfer model."""
        return MatchHistoryRecord(game_id=record_db.game_id, scores=dict(record_db.scores))
