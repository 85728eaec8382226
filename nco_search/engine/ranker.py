"""
nco_search/engine/ranker.py

Filter, score, calibrate, sort and truncate the catalog for one query.

Pipeline
--------
1. Hard filters (division, skill level, sector) narrow the candidates
   before any scoring.
2. Every candidate is scored by ``SimilarityScorer``.
3. ``confidence = min(score / K, 1.0)``.  K (default 15) is the scorer's
   practical upper bound, a heuristic rather than a proven maximum, so the
   confidence is a display aid and not a calibrated probability.
4. Candidates with score ≤ 0 are dropped.
5. Stable sort by score, descending (catalog order breaks ties).
6. ``min_confidence`` is applied after sorting.
7. The first ``top_n`` results are returned.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Sequence

from dotenv import load_dotenv

from nco_search.catalog.models import Occupation, SearchFilters, SearchResult
from nco_search.engine.scorer import SimilarityScorer
from nco_search.engine.tokenizer import tokenize

load_dotenv()

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Calibration
# ---------------------------------------------------------------------------

DEFAULT_CONFIDENCE_SCALE = float(os.getenv("NCO_CONFIDENCE_SCALE", "15"))


def to_confidence(score: float, scale: float = DEFAULT_CONFIDENCE_SCALE) -> float:
    """Map a raw relevance score into [0, 1]."""
    return max(0.0, min(score / scale, 1.0))


def apply_filters(
    catalog: Sequence[Occupation],
    filters: SearchFilters,
) -> list[Occupation]:
    """Keep occupations that satisfy every equality filter that is set."""
    candidates = list(catalog)
    if filters.division:
        candidates = [o for o in candidates if o.division == filters.division]
    if filters.skill_level is not None:
        candidates = [o for o in candidates if o.skill_level == filters.skill_level]
    if filters.sector:
        candidates = [o for o in candidates if o.sector == filters.sector]
    return candidates


# ---------------------------------------------------------------------------
# Ranker
# ---------------------------------------------------------------------------

class Ranker:
    """
    Turn per-record scores into an ordered, confidence-scored shortlist.

    Parameters
    ----------
    catalog : Sequence[Occupation]
        The fixed catalog.  Iteration order is the tie-break order.
    scorer : SimilarityScorer | None
        Built from *catalog* when omitted.
    confidence_scale : float | None
        Calibration constant K.  Defaults to ``NCO_CONFIDENCE_SCALE`` (15).
    """

    def __init__(
        self,
        catalog: Sequence[Occupation],
        scorer: Optional[SimilarityScorer] = None,
        confidence_scale: Optional[float] = None,
    ) -> None:
        scale = DEFAULT_CONFIDENCE_SCALE if confidence_scale is None else confidence_scale
        if scale <= 0:
            raise ValueError(f"confidence_scale must be positive, got {scale!r}")
        self._catalog = tuple(catalog)
        self._scorer  = scorer or SimilarityScorer(self._catalog)
        self.confidence_scale = scale

    def rank(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        top_n: int = 10,
    ) -> list[SearchResult]:
        """
        Rank the catalog for *query*.

        Raises
        ------
        ValueError
            If *top_n* is not positive.
        """
        if top_n <= 0:
            raise ValueError(f"top_n must be a positive integer, got {top_n!r}")
        filters = filters or SearchFilters()

        candidates   = apply_filters(self._catalog, filters)
        query_tokens = tokenize(query)

        scored = []
        for occ in candidates:
            breakdown = self._scorer.score_tokens(query, query_tokens, occ)
            if breakdown.score > 0:
                scored.append((occ, breakdown))

        # sorted() is stable, also with reverse=True
        scored.sort(key=lambda pair: pair[1].score, reverse=True)

        results = [
            SearchResult(
                occupation=occ,
                confidence=to_confidence(b.score, self.confidence_scale),
                relevance_score=b.score,
                matched_fields=b.matched_fields,
                matched_keywords=b.matched_keywords,
            )
            for occ, b in scored
        ]

        if filters.min_confidence is not None:
            results = [r for r in results if r.confidence >= filters.min_confidence]

        logger.debug(
            "Ranked %r: %d candidates, %d scored > 0, returning %d",
            query, len(candidates), len(scored), min(len(results), top_n),
        )
        return results[:top_n]
