"""
nco_search/engine/search_engine.py

Search facade: the one object callers construct and talk to.

Pipeline
--------
query + filters → Tokenizer → SimilarityScorer (per record) → Ranker
(filter, calibrate, sort, truncate) → audit entry → SearchOutcome.

``search`` returns the ranked list directly.  ``search_safe`` never raises:
blank queries, empty result sets and unexpected failures all come back as a
``SearchError`` value with remediation hints.  It is the only place where
exceptions from the lower layers are turned into values.

Usage
-----
from nco_search import SearchEngine, SearchFilters, default_catalog

engine  = SearchEngine(default_catalog())
outcome = engine.search_safe("software developer", SearchFilters(sector="Information Technology"))
if outcome.error:
    print(outcome.error.message, outcome.error.suggestions)
else:
    for r in outcome.results:
        print(r.occupation.code, r.occupation.title, f"{r.confidence:.0%}")

engine.suggest("tea")          # ["School Teacher (Primary)", "teacher"]
print(engine.export_audit_log())
"""

from __future__ import annotations

import logging
import os
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from nco_search.audit.audit_log import AuditLogStore
from nco_search.audit.models import AuditEntry, AuditStats, InputMethod
from nco_search.audit.snapshot import SqlAuditSnapshot
from nco_search.catalog.models import Occupation, SearchFilters, SearchResult
from nco_search.engine.analytics import ResultSummary, summarize_results
from nco_search.engine.collaborators import SpeechRecognizer, Translator
from nco_search.engine.ranker import Ranker
from nco_search.engine.scorer import SimilarityScorer
from nco_search.engine.suggestions import SuggestionGenerator

load_dotenv()

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_TOP_N = int(os.getenv("NCO_DEFAULT_TOP_N", "10"))


class ErrorKind(str, Enum):
    """Why ``search_safe`` / ``search_by_voice`` returned no results."""
    VALIDATION = "validation"   # blank query
    NO_MATCH   = "no_match"     # well-formed query, nothing qualified
    RUNTIME    = "runtime"      # unexpected failure while ranking or logging
    VOICE      = "voice"        # speech capture failed or heard nothing


# Message keys passed to the Translator, with their English text.
_MESSAGES: dict[str, str] = {
    "error.emptyQuery":  "Please enter a search query",
    "error.noMatch":     "No matching occupations found",
    "error.runtime":     "An error occurred while searching. Please try again.",
    "error.voiceFailed": "Voice search failed. Please try again or type your query.",
    "error.noSpeech":    "No speech was detected",
}

_EMPTY_QUERY_HINTS = (
    'Try searching for job titles like "teacher", "doctor", or "engineer"',
)
_RUNTIME_HINTS = (
    "Try a simpler search query",
    "Remove filters and search again",
    "Try again in a moment",
)
_VOICE_HINTS = (
    "Check that microphone access is allowed",
    "Speak clearly and close to the microphone",
    "Type your search instead",
)


# ---------------------------------------------------------------------------
# Output models
# ---------------------------------------------------------------------------

class SearchError(BaseModel):
    """Classified failure with at least one remediation hint."""

    kind:        ErrorKind
    message:     str
    suggestions: list[str] = Field(min_length=1)
    timestamp:   datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SearchOutcome(BaseModel):
    """Result/error union returned by ``search_safe``."""

    results:        list[SearchResult] = Field(default_factory=list)
    error:          Optional[SearchError] = None
    search_time_ms: Optional[float] = None      # None when ranking never ran

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# SearchEngine
# ---------------------------------------------------------------------------

class SearchEngine:
    """
    Rank occupation queries against one catalog and audit every search.

    Parameters
    ----------
    catalog : Sequence[Occupation]
        Immutable catalog, loaded once by the caller.
    audit_store : AuditLogStore | None
        Defaults to a store persisting its capped window through
        ``SqlAuditSnapshot`` (``DATABASE_URL``).  Its session id is the
        engine's session id.
    translator : Translator | None
        Localises error messages by key; English when omitted.
    confidence_scale : float | None
        Calibration constant K for ``confidence = min(score / K, 1)``.
    """

    def __init__(
        self,
        catalog: Sequence[Occupation],
        audit_store: Optional[AuditLogStore] = None,
        translator: Optional[Translator] = None,
        confidence_scale: Optional[float] = None,
    ) -> None:
        self._catalog     = tuple(catalog)
        self._scorer      = SimilarityScorer(self._catalog)
        self._ranker      = Ranker(self._catalog, self._scorer, confidence_scale)
        self._suggestions = SuggestionGenerator(self._catalog)
        self._audit       = audit_store if audit_store is not None else AuditLogStore(
            snapshot=SqlAuditSnapshot()
        )
        self._translator  = translator

    @property
    def catalog(self) -> tuple[Occupation, ...]:
        return self._catalog

    @property
    def session_id(self) -> str:
        return self._audit.session_id

    @property
    def audit_store(self) -> AuditLogStore:
        return self._audit

    # ------------------------------------------------------------------
    # Public API: search
    # ------------------------------------------------------------------

    def search(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        top_n: Optional[int] = None,
    ) -> list[SearchResult]:
        """
        Ranked results for *query*; no audit entry, no error channel.

        Raises
        ------
        ValueError
            If *top_n* is not positive.
        """
        top_n = DEFAULT_TOP_N if top_n is None else top_n
        if top_n <= 0:
            raise ValueError(f"top_n must be a positive integer, got {top_n!r}")
        if not query.strip():
            return []
        return self._ranker.rank(query, filters, top_n)

    def search_safe(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        top_n: Optional[int] = None,
        language: str = "en",
        input_method: InputMethod = "text",
    ) -> SearchOutcome:
        """
        Search, record an audit entry, and classify the outcome.

        Returns
        -------
        SearchOutcome
            ``error`` is None when results were found.  Otherwise it carries
            ``ErrorKind.VALIDATION`` (blank query, nothing logged),
            ``ErrorKind.NO_MATCH`` (fallback suggestions) or
            ``ErrorKind.RUNTIME`` (unexpected failure, logged here).
        """
        if not query or not query.strip():
            return SearchOutcome(
                error=self._error(ErrorKind.VALIDATION, "error.emptyQuery", language, _EMPTY_QUERY_HINTS)
            )

        start = time.perf_counter()
        try:
            results    = self.search(query, filters, top_n)
            elapsed_ms = (time.perf_counter() - start) * 1000
            self._audit.log_search(
                query, filters, len(results), elapsed_ms,
                language=language, input_method=input_method,
            )
        except Exception:
            logger.exception("Search failed for query %r", query)
            return SearchOutcome(
                error=self._error(ErrorKind.RUNTIME, "error.runtime", language, _RUNTIME_HINTS)
            )

        logger.debug("Search %r returned %d results in %.2f ms", query, len(results), elapsed_ms)

        if not results:
            logger.info("No match for query %r", query)
            return SearchOutcome(
                error=self._error(
                    ErrorKind.NO_MATCH, "error.noMatch", language,
                    self._suggestions.fallback(query),
                ),
                search_time_ms=elapsed_ms,
            )

        return SearchOutcome(results=results, search_time_ms=elapsed_ms)

    def search_by_voice(
        self,
        recognizer: SpeechRecognizer,
        filters: Optional[SearchFilters] = None,
        top_n: Optional[int] = None,
        language: str = "en",
    ) -> SearchOutcome:
        """Capture a spoken query with *recognizer* and run ``search_safe`` on it."""
        try:
            transcript = recognizer.recognize_speech(language)
        except Exception:
            logger.exception("Speech recognition failed (language=%s)", language)
            return SearchOutcome(
                error=self._error(ErrorKind.VOICE, "error.voiceFailed", language, _VOICE_HINTS)
            )

        if not transcript or not transcript.strip():
            return SearchOutcome(
                error=self._error(ErrorKind.VOICE, "error.noSpeech", language, _VOICE_HINTS)
            )

        return self.search_safe(transcript, filters, top_n, language=language, input_method="voice")

    # ------------------------------------------------------------------
    # Public API: suggestions & analytics
    # ------------------------------------------------------------------

    def suggest(self, partial_query: str) -> list[str]:
        """Up to five titles/keywords containing *partial_query*."""
        return self._suggestions.suggest(partial_query)

    def fallback_suggestions(self, query: str) -> list[str]:
        return self._suggestions.fallback(query)

    @staticmethod
    def summarize(results: Sequence[SearchResult]) -> ResultSummary:
        return summarize_results(results)

    # ------------------------------------------------------------------
    # Public API: audit
    # ------------------------------------------------------------------

    def list_audit_log(self) -> list[AuditEntry]:
        """Every search recorded by this engine, oldest first (a copy)."""
        return self._audit.entries()

    def export_audit_log(self) -> str:
        """Full audit history as indented JSON."""
        return self._audit.export()

    def audit_stats(self) -> AuditStats:
        return self._audit.stats()

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _error(
        self,
        kind: ErrorKind,
        message_key: str,
        language: str,
        suggestions: Sequence[str],
    ) -> SearchError:
        return SearchError(
            kind=kind,
            message=self._message(message_key, language),
            suggestions=list(suggestions),
        )

    def _message(self, key: str, language: str) -> str:
        """Translated message, or the English text when no translation exists."""
        if self._translator is not None:
            text = self._translator.translate(key, language)
            if text and text != key:
                return text
        return _MESSAGES[key]
