"""Unit tests for src/db/database.py"""

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from src.core.config import Settings
from src.db.database import build_engine, get_db


def test_build_engine_creates_tables() -> None:
    engine = build_engine(Settings(database_url="sqlite:///:memory:"))
    assert "match_history" in inspect(engine).get_table_names()


def test_get_db_closes_session() -> None:
    engine = build_engine(Settings(database_url="sqlite:///:memory:"))
    sessions = get_db(engine)
    db = next(sessions)
    assert isinstance(db, Session)
    sessions.close()
