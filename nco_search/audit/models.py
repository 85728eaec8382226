"""
nco_search/audit/models.py

Serialisable audit records shared by the log store and snapshot adapters.
"""

from __future__ import annotations

import time
import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from nco_search.catalog.models import SearchFilters

InputMethod = Literal["text", "voice"]


def _random_suffix() -> str:
    return uuid.uuid4().hex[:9]


def generate_session_id() -> str:
    """``session_<epoch-ms>_<9 hex chars>``."""
    return f"session_{int(time.time() * 1000)}_{_random_suffix()}"


def generate_entry_id() -> str:
    """``log_<epoch-ms>_<9 hex chars>``."""
    return f"log_{int(time.time() * 1000)}_{_random_suffix()}"


class AuditEntry(BaseModel):
    """One completed search.  Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id:             str = Field(default_factory=generate_entry_id)
    timestamp:      datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    query:          str
    filters:        SearchFilters = Field(default_factory=SearchFilters)
    results_count:  int = Field(ge=0)
    user_id:        str = "anonymous"
    session_id:     str
    search_time_ms: float = Field(ge=0.0)
    language:       str = "en"
    input_method:   InputMethod = "text"


class AuditStats(BaseModel):
    """Aggregates over the in-memory history."""

    total_searches:         int
    searches_today:         int
    zero_result_searches:   int
    average_search_time_ms: float
    language_counts:        dict[str, int] = Field(default_factory=dict)
    input_method_counts:    dict[str, int] = Field(default_factory=dict)
