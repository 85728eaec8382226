"""
nco_search/catalog/models.py

Pydantic models shared by the catalog, the ranking engine and the audit log.

Occupation records are immutable: the catalog is loaded once and handed to
the engine, which never edits it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Names used in SearchResult.matched_fields, in reporting order.
MATCHED_FIELD_NAMES: tuple[str, ...] = ("title", "keywords", "description", "tasks")


class Occupation(BaseModel):
    """One NCO occupation record with its four-level classification."""

    model_config = ConfigDict(frozen=True)

    code:            str                 # e.g. "25210201"
    title:           str
    description:     str
    division:        str                 # "2"
    division_title:  str                 # "Professionals"
    group:           str                 # "25"
    group_title:     str
    sub_group:       str                 # "252"
    sub_group_title: str
    sector:          str
    keywords:        tuple[str, ...] = ()
    skill_level:     int = Field(ge=1, le=4)
    tasks:           tuple[str, ...] = ()


class SearchFilters(BaseModel):
    """
    Hard constraints applied before scoring.

    Every field is optional.  ``None`` (or an empty string for the string
    filters) means "no constraint".
    """

    model_config = ConfigDict(frozen=True)

    division:       Optional[str]   = None
    skill_level:    Optional[int]   = Field(default=None, ge=1, le=4)
    sector:         Optional[str]   = None
    min_confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class SearchResult(BaseModel):
    """A ranked catalog record for one query."""

    occupation:       Occupation
    confidence:       float = Field(ge=0.0, le=1.0)
    relevance_score:  float                          # raw, unbounded
    matched_fields:   list[str] = Field(default_factory=list)
    matched_keywords: list[str] = Field(default_factory=list)
