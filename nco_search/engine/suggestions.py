"""
nco_search/engine/suggestions.py

Autocomplete while typing, and remediation hints when a search finds nothing.
"""

from __future__ import annotations

from typing import Sequence

from nco_search.catalog.models import Occupation

MAX_LIVE_SUGGESTIONS     = 5
MAX_FALLBACK_SUGGESTIONS = 5
MIN_FALLBACK_SUGGESTIONS = 3
_FALLBACK_PREFIX_LEN     = 3

GENERIC_FALLBACK_HINTS: tuple[str, ...] = (
    'Use broader terms (e.g., "teacher" instead of "mathematics teacher")',
    "Try synonyms or alternative job titles",
    "Remove filters to see more results",
)


class SuggestionGenerator:
    """Catalog-backed suggestion lists.  Neither operation scores anything."""

    def __init__(self, catalog: Sequence[Occupation]) -> None:
        self._catalog = tuple(catalog)

    def suggest(self, partial_query: str) -> list[str]:
        """
        Titles and keywords containing *partial_query*, at most five.

        Order follows the catalog: each record's title, then its keywords.
        """
        needle = partial_query.strip().lower()
        if not needle:
            return []

        found: dict[str, None] = {}
        for occ in self._catalog:
            if needle in occ.title.lower():
                found.setdefault(occ.title, None)
            for kw in occ.keywords:
                if needle in kw.lower():
                    found.setdefault(kw, None)
            if len(found) >= MAX_LIVE_SUGGESTIONS:
                break
        return list(found)[:MAX_LIVE_SUGGESTIONS]

    def fallback(self, query: str) -> list[str]:
        """
        Three to five hints for a query that matched nothing.

        Up to three "Try <title>" hints come from records whose title or
        keywords share the query's first three letters; generic guidance
        fills the list when fewer than three were found.
        """
        prefix = query.strip().lower()[:_FALLBACK_PREFIX_LEN]

        hints: list[str] = []
        if prefix:
            for occ in self._catalog:
                if prefix in occ.title.lower() or any(prefix in k.lower() for k in occ.keywords):
                    hints.append(f'Try "{occ.title}"')
                    if len(hints) == MIN_FALLBACK_SUGGESTIONS:
                        break

        if len(hints) < MIN_FALLBACK_SUGGESTIONS:
            hints.extend(GENERIC_FALLBACK_HINTS)

        return hints[:MAX_FALLBACK_SUGGESTIONS]
