"""PostgreSQL connection and transaction handling."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from src.config import DATABASE_URL, POSTGRES_CONFIG
from src.db.postgres_bootstrap import Base
from src.models import *  # Needed for Base metadata

logger = logging.getLogger(__name__)


class PostgresConnection:
    def __init__(self, url: str | None = None, **engine_options: Any):
        self.config = POSTGRES_CONFIG
        self.url = url or DATABASE_URL
        self.engine_options = engine_options
        self._engine = None
        self._session_factory = None

    @property
    def engine(self):
        if not self._engine:
            db_url = self.url or (
                f"postgresql+psycopg2://{self.config['user']}:{self.config['password']}@"
                f"{self.config['host']}:{self.config['port']}/{self.config['database']}"
            )
            self._engine = create_engine(db_url, **self.engine_options)
        return self._engine

    @property
    def session_factory(self):
        if not self._session_factory:
            # Objects handed out by services stay readable after the transaction closes
            self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        return self._session_factory

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Open a session wrapped in a single database transaction.

        Commits when the block exits normally and rolls back every write made
        through the session when the block raises.
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ping(self) -> bool:
        """Check that the database answers a trivial query."""
        with self.engine.connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1

    def create_tables(self):
        """Create all tables defined by the SQLAlchemy models."""
        logger.info("Creating tables...")

        try:
            Base.metadata.create_all(self.engine)
            logger.info("Tables created successfully.")
        except Exception as e:
            logger.error(f"Error creating tables: {e}")
            raise

    def drop_tables(self):
        Base.metadata.drop_all(self.engine)

    def dispose(self):
        if self._engine:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None


# Singleton instance
db = PostgresConnection()
