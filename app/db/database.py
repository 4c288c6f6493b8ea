# File: app/db/database.py
import logging
from contextlib import contextmanager
from typing import Generator, Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Storage handle: one engine and session factory per process.

    Opened by the application lifespan and closed at shutdown; components
    receive sessions from it instead of reaching for a global pool.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine_kwargs = engine_kwargs
        self.engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        kwargs = {"pool_pre_ping": True}
        if not settings.is_sqlite:
            kwargs.update(
                pool_size=settings.DB_POOL_SIZE,
                pool_timeout=settings.DB_POOL_TIMEOUT,
            )
        return cls(settings.DATABASE_URL, **kwargs)

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self) -> None:
        if self.is_open:
            return
        self.engine = create_engine(self.url, **self.engine_kwargs)
        self._session_factory = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )
        logger.info(f"Database opened: {self.engine.url.render_as_string(hide_password=True)}")

    def close(self) -> None:
        if not self.is_open:
            return
        self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("Database closed")

    def session(self) -> Session:
        if not self.is_open:
            raise RuntimeError("Database is not open")
        return self._session_factory()


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Commit when the block exits normally, roll back on any exception."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
