"""
nco_search/audit/audit_log.py

Append-only audit trail of completed searches.

Responsibilities
----------------
1. History   — every search recorded during this store's lifetime is kept
               in memory, in append order, and is never edited or evicted.
2. Snapshot  — after each append the most recent ``snapshot_limit`` entries
               (default 100) are handed to an ``AuditSnapshot`` adapter for
               persistence.  Older entries drop out of the persisted window
               but stay in the in-memory history.
3. Review    — ``entries()`` returns a copy of the full history, ``export()``
               serialises it to JSON and ``stats()`` aggregates it for the
               admin dashboard.

A session id is generated once per store and stamped on every entry.
Appends are serialised by a lock so concurrent searches cannot lose or
reorder entries.

Usage
-----
from nco_search.audit import AuditLogStore, SqlAuditSnapshot

store = AuditLogStore(snapshot=SqlAuditSnapshot())
store.log_search("software developer", SearchFilters(), results_count=3,
                 search_time_ms=1.8, language="en", input_method="text")
print(store.export())
"""

from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime, timezone
from typing import Optional

from dotenv import load_dotenv

from nco_search.audit.models import (
    AuditEntry,
    AuditStats,
    InputMethod,
    generate_session_id,
)
from nco_search.audit.snapshot import AuditSnapshot
from nco_search.catalog.models import SearchFilters

load_dotenv()

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

AUDIT_SNAPSHOT_LIMIT = int(os.getenv("NCO_AUDIT_SNAPSHOT_LIMIT", "100"))


# ---------------------------------------------------------------------------
# AuditLogStore
# ---------------------------------------------------------------------------

class AuditLogStore:
    """
    In-memory search history with a capped persisted snapshot.

    Parameters
    ----------
    snapshot : AuditSnapshot | None
        Persistence adapter for the capped window.  ``None`` keeps the log
        purely in memory.
    snapshot_limit : int
        Number of most recent entries written to *snapshot* (default 100,
        ``NCO_AUDIT_SNAPSHOT_LIMIT``).
    session_id : str | None
        Override the generated session id (useful in tests).
    """

    def __init__(
        self,
        snapshot: Optional[AuditSnapshot] = None,
        snapshot_limit: int = AUDIT_SNAPSHOT_LIMIT,
        session_id: Optional[str] = None,
    ) -> None:
        if snapshot_limit <= 0:
            raise ValueError(f"snapshot_limit must be positive, got {snapshot_limit!r}")
        self._snapshot       = snapshot
        self._snapshot_limit = snapshot_limit
        self._entries: list[AuditEntry] = []
        self._lock           = threading.Lock()
        self.session_id      = session_id or generate_session_id()

    # ------------------------------------------------------------------
    # Public API: logging
    # ------------------------------------------------------------------

    def log_search(
        self,
        query:          str,
        filters:        Optional[SearchFilters],
        results_count:  int,
        search_time_ms: float,
        language:       str = "en",
        input_method:   InputMethod = "text",
    ) -> AuditEntry:
        """Build an entry stamped with this store's session id and record it."""
        entry = AuditEntry(
            query=query,
            filters=filters or SearchFilters(),
            results_count=results_count,
            session_id=self.session_id,
            search_time_ms=search_time_ms,
            language=language,
            input_method=input_method,
        )
        self.record(entry)
        return entry

    def record(self, entry: AuditEntry) -> None:
        """
        Append *entry* and persist the most recent window.

        The entry stays in the in-memory history even if the snapshot write
        raises; the error is propagated to the caller.
        """
        with self._lock:
            self._entries.append(entry)
            if self._snapshot is not None:
                window = self._entries[-self._snapshot_limit:]
                self._snapshot.write(window)
                logger.debug("Audit snapshot written: %d of %d entries", len(window), len(self._entries))

    # ------------------------------------------------------------------
    # Public API: review
    # ------------------------------------------------------------------

    def entries(self) -> list[AuditEntry]:
        """Full in-memory history, oldest first (a copy)."""
        with self._lock:
            return list(self._entries)

    def snapshot_window(self) -> list[AuditEntry]:
        """The entries that the persisted snapshot currently holds."""
        with self._lock:
            return self._entries[-self._snapshot_limit:]

    def export(self) -> str:
        """Serialise the full history as an indented JSON array."""
        data = [e.model_dump(mode="json") for e in self.entries()]
        return json.dumps(data, indent=2, ensure_ascii=False)

    def stats(self, now: Optional[datetime] = None) -> AuditStats:
        """Aggregate the history; "today" is the UTC date of *now*."""
        entries = self.entries()
        today   = (now or datetime.now(timezone.utc)).astimezone(timezone.utc).date()

        language_counts: dict[str, int] = {}
        method_counts:   dict[str, int] = {}
        for e in entries:
            language_counts[e.language] = language_counts.get(e.language, 0) + 1
            method_counts[e.input_method] = method_counts.get(e.input_method, 0) + 1

        return AuditStats(
            total_searches=len(entries),
            searches_today=sum(
                1 for e in entries if e.timestamp.astimezone(timezone.utc).date() == today
            ),
            zero_result_searches=sum(1 for e in entries if e.results_count == 0),
            average_search_time_ms=(
                sum(e.search_time_ms for e in entries) / len(entries) if entries else 0.0
            ),
            language_counts=language_counts,
            input_method_counts=method_counts,
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
