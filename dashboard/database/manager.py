"""
Database Manager
Append-only Speicher für SummaryRecords mit SQLAlchemy
"""

import threading
from contextlib import nullcontext
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import create_engine, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from dashboard.common.logging_utils import get_logger
from dashboard.database.schema import Base, DataSummary
from dashboard.domain.models import SummaryRecord


class StoreError(RuntimeError):
    """Insert or read failure against the storage backend."""


class InitError(RuntimeError):
    """Store cannot be opened or its schema created."""


def _engine_kwargs(database_url: str) -> dict[str, Any]:
    if not database_url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    # In-memory SQLite lives inside one connection; share it across threads
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


class DatabaseManager:
    """Datenbankverwaltung für SummaryRecords

    One instance is shared by the collector (writer) and the API (reader) for
    the whole process lifetime. Inserts are serialized by an internal lock, so
    callers need no locking of their own. Reads take that lock only when the
    engine hands every session the same connection (in-memory SQLite), where a
    reader's rollback would otherwise end a writer's transaction.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None
        self._insert_lock = threading.Lock()
        self._shared_connection = False
        self.logger = get_logger(__name__)

    def initialize(self):
        """Initialisiert Engine, SessionFactory und Schema"""
        try:
            self.engine = create_engine(self.database_url, future=True, **_engine_kwargs(self.database_url))
            # Leichter Verbindungscheck
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            Base.metadata.create_all(bind=self.engine)
            self._shared_connection = isinstance(self.engine.pool, StaticPool)
            self.SessionLocal = sessionmaker(
                bind=self.engine, autocommit=False, autoflush=False, expire_on_commit=False
            )
            self.logger.info(f"Database initialized ({self.engine.url.render_as_string(hide_password=True)})")
        except (SQLAlchemyError, ImportError) as e:
            # ImportError: DBAPI driver for the configured URL is not installed
            self.logger.error(f"Failed to initialize database: {e}")
            if self.engine is not None:
                self.engine.dispose()
            self.engine = None
            self.SessionLocal = None
            raise InitError(f"Failed to initialize database: {e}") from e

    def _read_guard(self):
        return self._insert_lock if self._shared_connection else nullcontext()

    def get_session(self) -> Session:
        """Gibt eine neue SQLAlchemy Session zurück"""
        if not self.SessionLocal:
            raise StoreError("Database not initialized. Call initialize() first.")
        return self.SessionLocal()

    def insert_summary(self, payload: str) -> SummaryRecord:
        """Speichert eine Zusammenfassung und gibt den gespeicherten Datensatz zurück"""
        with self._insert_lock:
            with self.get_session() as session:
                row = DataSummary(source=payload, created_at=datetime.now(timezone.utc))
                try:
                    session.add(row)
                    session.commit()
                except Exception as e:
                    # driver errors surface unwrapped too (e.g. UnicodeEncodeError on bind)
                    session.rollback()
                    raise StoreError(f"Error inserting data: {e}") from e
                return SummaryRecord.model_validate(row)

    def list_summaries(self) -> list[SummaryRecord]:
        """Liest alle Datensätze in Einfügereihenfolge"""
        with self._read_guard(), self.get_session() as session:
            try:
                rows = session.scalars(select(DataSummary).order_by(DataSummary.id)).all()
            except SQLAlchemyError as e:
                raise StoreError(f"Error reading data: {e}") from e
            return [SummaryRecord.model_validate(row) for row in rows]

    def health_check(self) -> dict[str, Any]:
        """Führt einen Gesundheitscheck der Datenbank durch"""
        try:
            with self._read_guard(), self.get_session() as session:
                session.execute(text("SELECT 1"))
            return {"status": "healthy"}
        except (SQLAlchemyError, StoreError) as e:
            self.logger.error(f"Database health check failed: {e}")
            return {"status": "unhealthy", "error": str(e)}

    def close(self):
        """Schließt alle Datenbankverbindungen"""
        if self.engine:
            self.engine.dispose()
            self.logger.info("Database engine disposed")
        self.engine = None
        self.SessionLocal = None
        self._shared_connection = False
