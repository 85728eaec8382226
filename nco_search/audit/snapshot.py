"""
nco_search/audit/snapshot.py

Persistence adapters for the capped audit window.

``AuditLogStore`` owns the full history; an adapter only ever sees (and
stores) the most recent window it is handed.  Each ``write`` replaces the
previously persisted window.
"""

from __future__ import annotations

import json
from datetime import timezone
from typing import Callable, Optional, Protocol, Sequence

from sqlalchemy.orm import Session

from nco_search.audit.models import AuditEntry
from nco_search.catalog.models import SearchFilters
from nco_search.database.connection import Base, SessionLocal
from nco_search.database.models import AuditSnapshotRow


class AuditSnapshot(Protocol):
    """Stores the most recent audit window."""

    def write(self, entries: Sequence[AuditEntry]) -> None: ...

    def read(self) -> list[AuditEntry]: ...


class SqlAuditSnapshot:
    """
    ``AuditSnapshot`` backed by the ``search_audit_snapshot`` table.

    Parameters
    ----------
    session_factory : callable | None
        Zero-argument callable that returns a SQLAlchemy ``Session``.
        Defaults to ``SessionLocal`` (``DATABASE_URL``).  Inject a test
        factory bound to in-memory SQLite in unit tests.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None) -> None:
        self._sf = session_factory or SessionLocal
        self._ensure_schema()

    def write(self, entries: Sequence[AuditEntry]) -> None:
        """Replace the persisted window with *entries* in one transaction."""
        db = self._sf()
        try:
            db.query(AuditSnapshotRow).delete(synchronize_session=False)
            db.add_all(
                self._to_row(entry, position) for position, entry in enumerate(entries)
            )
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def read(self) -> list[AuditEntry]:
        """Persisted window, oldest first."""
        db = self._sf()
        try:
            rows = db.query(AuditSnapshotRow).order_by(AuditSnapshotRow.position).all()
            return [self._to_entry(r) for r in rows]
        finally:
            db.close()

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _ensure_schema(self) -> None:
        db = self._sf()
        try:
            Base.metadata.create_all(bind=db.get_bind())
        finally:
            db.close()

    @staticmethod
    def _to_row(entry: AuditEntry, position: int) -> AuditSnapshotRow:
        return AuditSnapshotRow(
            id=entry.id,
            position=position,
            timestamp=entry.timestamp.astimezone(timezone.utc),
            query=entry.query,
            filters_json=entry.filters.model_dump_json(),
            results_count=entry.results_count,
            user_id=entry.user_id,
            session_id=entry.session_id,
            search_time_ms=entry.search_time_ms,
            language=entry.language,
            input_method=entry.input_method,
        )

    @staticmethod
    def _to_entry(row: AuditSnapshotRow) -> AuditEntry:
        ts = row.timestamp
        if ts.tzinfo is None:
            # SQLite drops the offset; values are written in UTC
            ts = ts.replace(tzinfo=timezone.utc)
        return AuditEntry(
            id=row.id,
            timestamp=ts,
            query=row.query,
            filters=SearchFilters(**json.loads(row.filters_json)),
            results_count=row.results_count,
            user_id=row.user_id or "anonymous",
            session_id=row.session_id,
            search_time_ms=row.search_time_ms,
            language=row.language,
            input_method=row.input_method,
        )
