"""Generate database session"""

from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings, load_settings
from src.db.schema import Base


def build_engine(settings: Settings | None = None) -> Engine:
    """Create the engine from settings and make sure all tables exist."""
    settings = settings or load_settings()
    engine = create_engine(settings.database_url, echo=settings.db_echo)
    Base.metadata.create_all(bind=engine)
    return engine


def get_db(engine: Engine) -> Generator[Session, None, None]:
    session_local = sessionmaker(bind=engine)
    db = session_local()
    try:
        yield db
    finally:
        db.close()
