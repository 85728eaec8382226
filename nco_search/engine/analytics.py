"""
nco_search/engine/analytics.py

Summary figures for a ranked result list, for presentation layers that show
"average confidence / high-confidence hits / top division" next to results.
"""

from __future__ import annotations

from typing import Optional, Sequence

from pydantic import BaseModel, Field

from nco_search.catalog.models import SearchResult

HIGH_CONFIDENCE_THRESHOLD = 0.7


class ResultSummary(BaseModel):
    """Aggregates over one result list."""

    result_count:          int
    average_confidence:    float = Field(ge=0.0, le=1.0)
    high_confidence_count: int
    top_division:          Optional[str] = None   # most frequent division title
    division_counts:       dict[str, int] = Field(default_factory=dict)


def summarize_results(results: Sequence[SearchResult]) -> ResultSummary:
    if not results:
        return ResultSummary(result_count=0, average_confidence=0.0, high_confidence_count=0)

    division_counts: dict[str, int] = {}
    for r in results:
        title = r.occupation.division_title
        division_counts[title] = division_counts.get(title, 0) + 1

    # max() keeps the first division seen on ties, i.e. the higher-ranked one
    top_division = max(division_counts, key=division_counts.__getitem__)

    return ResultSummary(
        result_count=len(results),
        average_confidence=sum(r.confidence for r in results) / len(results),
        high_confidence_count=sum(
            1 for r in results if r.confidence >= HIGH_CONFIDENCE_THRESHOLD
        ),
        top_division=top_division,
        division_counts=division_counts,
    )
