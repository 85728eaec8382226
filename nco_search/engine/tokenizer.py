"""
nco_search/engine/tokenizer.py

Text normalisation shared by the scorer and the corpus statistics.
"""

from __future__ import annotations

import re

# Articles, conjunctions, common prepositions and auxiliary verbs.
STOPWORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "is", "are", "was", "were", "been", "being",
    "have", "has", "had",
})

# Tokens of this length or shorter are discarded.
_MIN_TOKEN_LEN = 2

_NON_WORD_RE = re.compile(r"[^\w\s]")


def tokenize(text: str) -> list[str]:
    """
    Split *text* into lower-cased, stopword-filtered tokens.

    Punctuation becomes whitespace, so "full-time" yields ["full", "time"].
    Order is preserved (term frequency depends on it).
    """
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [
        tok for tok in cleaned.split()
        if len(tok) > _MIN_TOKEN_LEN and tok not in STOPWORDS
    ]
