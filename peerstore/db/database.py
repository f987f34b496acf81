"""Core database handle: a bounded SQLAlchemy connection pool with transaction helpers."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Optional

from pydantic import ValidationError
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine, URL, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.pool import QueuePool, StaticPool

from peerstore.config import Settings, get_settings
from peerstore.db.schema import schema_statements
from peerstore.exceptions import (
    PoolExhaustedError,
    QueryError,
    StoreConnectionError,
    TransactionError,
)

logger = logging.getLogger(__name__)

Params = Optional[dict[str, Any]]


def _is_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite"


def _is_memory_sqlite(url: URL) -> bool:
    return _is_sqlite(url) and url.database in (None, "", ":memory:")


def ensure_storage(url: URL) -> None:
    """Create a file-backed SQLite target (and its directory) when missing."""
    if not _is_sqlite(url) or _is_memory_sqlite(url) or url.database.startswith("file:"):
        return
    path = Path(url.database)
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        logger.info(f"Created new database file at {path}")


def _engine_options(url: URL, settings: Settings) -> dict[str, Any]:
    options: dict[str, Any] = {
        "pool_pre_ping": True,  # Check connections before handing them out
        "echo": settings.DATABASE_ECHO,
    }
    if _is_sqlite(url):
        options["connect_args"] = {"check_same_thread": False}
    if _is_memory_sqlite(url):
        # One shared connection, otherwise every checkout sees an empty database
        options["poolclass"] = StaticPool
        return options
    if _is_sqlite(url):
        options["poolclass"] = QueuePool
    options.update(
        pool_size=settings.MAX_DATABASE_CONNECTIONS,
        max_overflow=0,
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
    )
    return options


class Database:
    """
    Pooled database handle shared by every repository.

    Safe to share between threads: each operation borrows its own connection
    from the pool and returns it when the ``with`` block exits.
    """

    def __init__(self, engine: Engine, settings: Optional[Settings] = None):
        self.engine = engine
        self.settings = settings or get_settings()

    # -- connection lifecycle --------------------------------------------------

    @classmethod
    def open(cls, url: Optional[str] = None, settings: Optional[Settings] = None) -> "Database":
        """Build the pool, probe it once, then run ``create_tables``."""
        try:
            settings = settings or get_settings()
        except ValidationError as exc:
            raise StoreConnectionError(f"Invalid database settings: {exc}") from exc
        raw_url = url or settings.DATABASE_URL
        logger.debug(f"MAX_DATABASE_CONNECTIONS={settings.MAX_DATABASE_CONNECTIONS}")
        try:
            parsed = make_url(raw_url)
            ensure_storage(parsed)
            engine = create_engine(parsed, **_engine_options(parsed, settings))
        except (SQLAlchemyError, OSError, ImportError) as exc:
            raise StoreConnectionError(f"Cannot set up connection pool: {exc}") from exc

        db = cls(engine, settings)
        try:
            db.ping()
            db.create_tables()
        except Exception:
            engine.dispose()
            raise
        logger.info(f"Connected to {parsed.render_as_string(hide_password=True)}")
        return db

    def ping(self) -> None:
        """Borrow one connection and run ``SELECT 1`` on it."""
        with self.connect() as conn:
            try:
                conn.execute(text("SELECT 1"))
            except SQLAlchemyError as exc:
                raise StoreConnectionError(f"Liveness probe failed: {exc}") from exc

    def close(self) -> None:
        self.engine.dispose()

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    # -- schema ----------------------------------------------------------------

    def create_tables(self) -> None:
        """No-op unless DATABASE_CREATE_SCHEMA is set; the schema normally pre-exists."""
        if self.settings.DATABASE_CREATE_SCHEMA:
            self.init_schema()

    def init_schema(self) -> None:
        """Create all tables (idempotent)."""
        statements = schema_statements(self.dialect)
        with self.transaction() as conn:
            for statement in statements:
                conn.execute(text(statement))
        logger.info(f"Schema ready ({self.dialect})")

    # -- connection / transaction helpers --------------------------------------

    @contextmanager
    def connect(self) -> Generator[Connection, None, None]:
        """Borrow a pooled connection; it goes back to the pool on exit."""
        try:
            conn = self.engine.connect()
        except PoolTimeoutError as exc:
            raise PoolExhaustedError(f"No pooled connection available: {exc}") from exc
        except SQLAlchemyError as exc:
            raise StoreConnectionError(f"Cannot acquire connection: {exc}") from exc
        try:
            yield conn
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Generator[Connection, None, None]:
        """Commits on success, rolls back on exception."""
        with self.connect() as conn:
            try:
                trans = conn.begin()
            except SQLAlchemyError as exc:
                raise TransactionError(f"Cannot begin transaction: {exc}") from exc
            try:
                yield conn
            except SQLAlchemyError as exc:
                trans.rollback()
                raise QueryError(f"Query failed: {exc}") from exc
            except Exception:
                trans.rollback()
                raise
            try:
                trans.commit()
            except SQLAlchemyError as exc:
                raise TransactionError(f"Cannot commit transaction: {exc}") from exc

    # -- low-level query helpers -----------------------------------------------

    def execute(self, sql: str, params: Params = None) -> int:
        """Run one write statement in its own transaction; return the affected row count."""
        with self.transaction() as conn:
            return conn.execute(text(sql), params or {}).rowcount

    def fetchone(self, sql: str, params: Params = None) -> Optional[dict[str, Any]]:
        with self.connect() as conn:
            try:
                row = conn.execute(text(sql), params or {}).mappings().first()
            except SQLAlchemyError as exc:
                raise QueryError(f"Query failed: {exc}") from exc
        return dict(row) if row else None

    def fetchall(self, sql: str, params: Params = None) -> list[dict[str, Any]]:
        with self.connect() as conn:
            try:
                rows = conn.execute(text(sql), params or {}).mappings().all()
            except SQLAlchemyError as exc:
                raise QueryError(f"Query failed: {exc}") from exc
        return [dict(r) for r in rows]

    def scalar(self, sql: str, params: Params = None) -> Any:
        with self.connect() as conn:
            try:
                return conn.execute(text(sql), params or {}).scalar_one()
            except SQLAlchemyError as exc:
                raise QueryError(f"Query failed: {exc}") from exc
