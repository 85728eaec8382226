"""
nco_search/engine/scorer.py

Multi-signal relevance scoring for one (query, occupation) pair.

Signals
-------
1. Field overlap — Jaccard similarity between the query token set and each
   occupation field, weighted by field salience:

       title × 3.0   keywords × 2.5   description × 1.5   tasks × 1.0

2. Term rarity — TF-IDF over the occupation's combined token bag, × 2.0.
   IDF is ``ln(N / (df + 1))`` over the whole catalog, so a term found in
   most records contributes a negative amount.  That penalty is intentional
   and is not clamped.

3. Exact-substring bonuses — +2.0 when the title contains the raw query,
   +1.5 when any keyword does.

The total is unbounded (typically 0–15 for realistic queries).  Document
frequencies and per-record field tokens are computed once per catalog by
``CorpusStatistics`` so ranking a query costs O(N·M).

Usage
-----
from nco_search.engine.scorer import SimilarityScorer

scorer = SimilarityScorer(catalog)
breakdown = scorer.score("software developer", catalog[1])
print(breakdown.score, breakdown.matched_fields)
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from nco_search.catalog.models import Occupation
from nco_search.engine.tokenizer import tokenize


# ---------------------------------------------------------------------------
# Weights
# ---------------------------------------------------------------------------

WEIGHT_TITLE       = 3.0
WEIGHT_KEYWORDS    = 2.5
WEIGHT_DESCRIPTION = 1.5
WEIGHT_TASKS       = 1.0
WEIGHT_TERM_RARITY = 2.0

EXACT_TITLE_BONUS   = 2.0
EXACT_KEYWORD_BONUS = 1.5


# ---------------------------------------------------------------------------
# Tokenised view of one record
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FieldTokens:
    """Token lists for the scored fields of one occupation."""

    title:       list[str]
    description: list[str]
    keywords:    list[str]     # lower-cased keywords, not re-tokenised
    tasks:       list[str]

    @property
    def bag(self) -> list[str]:
        return self.title + self.description + self.keywords + self.tasks


def field_tokens(occupation: Occupation) -> FieldTokens:
    return FieldTokens(
        title=tokenize(occupation.title),
        description=tokenize(occupation.description),
        keywords=[k.lower() for k in occupation.keywords],
        tasks=tokenize(" ".join(occupation.tasks)),
    )


def _document_terms(occupation: Occupation) -> set[str]:
    """Terms counted for document frequency: title, description, keywords."""
    text = f"{occupation.title} {occupation.description} {' '.join(occupation.keywords)}"
    return set(tokenize(text))


def jaccard(a: set[str], b: set[str]) -> float:
    """|a ∩ b| / |a ∪ b|, or 0.0 when both sets are empty."""
    union = len(a | b)
    if union == 0:
        return 0.0
    return len(a & b) / union


# ---------------------------------------------------------------------------
# Catalog-wide statistics
# ---------------------------------------------------------------------------

class CorpusStatistics:
    """Document frequencies and cached field tokens for a fixed catalog."""

    def __init__(self, catalog: Sequence[Occupation]) -> None:
        self.size = len(catalog)
        self._df: Counter[str] = Counter()
        self._fields: dict[str, tuple[Occupation, FieldTokens]] = {}
        for occ in catalog:
            self._df.update(_document_terms(occ))
            self._fields[occ.code] = (occ, field_tokens(occ))

    def document_frequency(self, term: str) -> int:
        return self._df.get(term, 0)

    def idf(self, term: str) -> float:
        if self.size == 0:
            return 0.0
        return math.log(self.size / (self.document_frequency(term) + 1))

    def fields_for(self, occupation: Occupation) -> FieldTokens:
        cached = self._fields.get(occupation.code)
        if cached is not None and cached[0] == occupation:
            return cached[1]
        return field_tokens(occupation)


# ---------------------------------------------------------------------------
# Output model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScoreBreakdown:
    """Relevance score for one pair plus the weighted signals behind it."""

    score:            float
    matched_fields:   list[str] = field(default_factory=list)
    matched_keywords: list[str] = field(default_factory=list)
    title_sim:        float = 0.0
    keyword_sim:      float = 0.0
    description_sim:  float = 0.0
    task_sim:         float = 0.0
    term_rarity:      float = 0.0
    title_bonus:      float = 0.0
    keyword_bonus:    float = 0.0


# ---------------------------------------------------------------------------
# Scorer
# ---------------------------------------------------------------------------

class SimilarityScorer:
    """
    Score queries against occupations of one catalog.

    The scorer is stateless apart from the precomputed ``CorpusStatistics``
    and can be shared between threads.
    """

    def __init__(self, catalog: Sequence[Occupation]) -> None:
        self.stats = CorpusStatistics(catalog)

    def score(self, query: str, occupation: Occupation) -> ScoreBreakdown:
        """Tokenise *query* and score it against *occupation*."""
        return self.score_tokens(query, tokenize(query), occupation)

    def score_tokens(
        self,
        query: str,
        query_tokens: list[str],
        occupation: Occupation,
    ) -> ScoreBreakdown:
        """
        Score an already-tokenised query.

        *query* is still needed for the exact-substring bonuses, which test
        the raw text rather than its tokens.
        """
        query_set = set(query_tokens)
        tokens    = self.stats.fields_for(occupation)

        title_sim       = jaccard(query_set, set(tokens.title))       * WEIGHT_TITLE
        keyword_sim     = jaccard(query_set, set(tokens.keywords))    * WEIGHT_KEYWORDS
        description_sim = jaccard(query_set, set(tokens.description)) * WEIGHT_DESCRIPTION
        task_sim        = jaccard(query_set, set(tokens.tasks))       * WEIGHT_TASKS

        term_rarity = self._term_rarity(query_tokens, tokens.bag) * WEIGHT_TERM_RARITY

        query_lower   = query.lower()
        title_bonus   = EXACT_TITLE_BONUS if query_lower in occupation.title.lower() else 0.0
        keyword_bonus = (
            EXACT_KEYWORD_BONUS
            if any(query_lower in k for k in tokens.keywords)
            else 0.0
        )

        total = (
            title_sim + keyword_sim + description_sim + task_sim
            + term_rarity + title_bonus + keyword_bonus
        )

        matched_fields: list[str] = []
        if title_sim > 0 or title_bonus > 0:
            matched_fields.append("title")
        if keyword_sim > 0 or keyword_bonus > 0:
            matched_fields.append("keywords")
        if description_sim > 0:
            matched_fields.append("description")
        if task_sim > 0:
            matched_fields.append("tasks")

        return ScoreBreakdown(
            score=total,
            matched_fields=matched_fields,
            matched_keywords=_matched_keywords(query_tokens, tokens.keywords),
            title_sim=title_sim,
            keyword_sim=keyword_sim,
            description_sim=description_sim,
            task_sim=task_sim,
            term_rarity=term_rarity,
            title_bonus=title_bonus,
            keyword_bonus=keyword_bonus,
        )

    def _term_rarity(self, query_tokens: list[str], bag: list[str]) -> float:
        """Sum of tf × idf over the distinct query terms."""
        if not bag:
            return 0.0
        counts = Counter(bag)
        total  = 0.0
        # dict.fromkeys keeps first-seen order so the float sum is reproducible
        for term in dict.fromkeys(query_tokens):
            tf = counts.get(term, 0) / len(bag)
            total += tf * self.stats.idf(term)
        return total


def _matched_keywords(query_tokens: Iterable[str], keywords: list[str]) -> list[str]:
    """Keywords containing any query token, deduplicated in discovery order."""
    found: dict[str, None] = {}
    for token in query_tokens:
        for kw in keywords:
            if token in kw:
                found.setdefault(kw, None)
    return list(found)
