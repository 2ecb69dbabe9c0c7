"""Session binding and visibility scopes shared by all repositories."""

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Query, Session

from src.db.postgres_client import PostgresConnection

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """
    Base repository bound to one SQLAlchemy session.

    A repository never opens or commits transactions itself: the caller opens
    one with ``PostgresConnection.transaction()`` and binds repositories to it
    through ``with_tx``. Every write reports the number of affected rows so the
    caller can tell a missing row apart from a database failure.

    Visibility scopes:
        published        not soft-deleted and publication flag set
        with_unpublished not soft-deleted
        with_deleted     every row
        deleted          soft-deleted rows only
    """

    model: type[ModelT]
    # Name of the boolean column that marks a row as visible in the catalog
    publication_flag = "in_stock"

    def __init__(self, database: PostgresConnection, session: Session | None = None):
        self.db = database
        self._session = session

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError(f"{type(self).__name__} is not bound to a transaction")
        return self._session

    def with_tx(self, session: Session):
        """Return a copy of this repository bound to the given session."""
        return type(self)(self.db, session)

    @property
    def _flag(self):
        return getattr(self.model, self.publication_flag)

    def _query(self, scope: str = "with_unpublished") -> Query:
        query = self.session.query(self.model)
        if scope == "published":
            return query.filter(self.model.deleted_at.is_(None), self._flag.is_(True))
        if scope == "with_unpublished":
            return query.filter(self.model.deleted_at.is_(None))
        if scope == "unpublished":
            return query.filter(self.model.deleted_at.is_(None), self._flag.is_(False))
        if scope == "deleted":
            return query.filter(self.model.deleted_at.isnot(None))
        if scope == "with_deleted":
            return query
        raise ValueError(f"unknown scope: {scope}")

    def _get(self, id: str, scope: str, for_update: bool = False) -> ModelT | None:
        query = self._query(scope).filter(self.model.id == id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def _list(self, scope: str, limit: int, offset: int) -> list[ModelT]:
        return self._query(scope).order_by(self.model.created_at.desc()).limit(limit).offset(offset).all()

    def _count(self, scope: str) -> int:
        return self._query(scope).count()

    def create(self, row: ModelT) -> None:
        self.session.add(row)
        self.session.flush()

    def save(self, *rows: ModelT) -> None:
        """Flush pending attribute changes made on already loaded rows."""
        self.session.add_all(rows)
        self.session.flush()

    def update(self, row: Any, updates: dict[str, Any]) -> int:
        return self._query("with_deleted").filter(self.model.id == row.id).update(updates)

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)
