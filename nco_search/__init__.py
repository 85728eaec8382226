from .audit import AuditEntry, AuditLogStore, SqlAuditSnapshot
from .catalog import (
    Occupation,
    SearchFilters,
    SearchResult,
    default_catalog,
    load_catalog,
    load_catalog_file,
)
from .engine import ErrorKind, SearchEngine, SearchError, SearchOutcome

__all__ = [
    "AuditEntry",
    "AuditLogStore",
    "ErrorKind",
    "Occupation",
    "SearchEngine",
    "SearchError",
    "SearchFilters",
    "SearchOutcome",
    "SearchResult",
    "SqlAuditSnapshot",
    "default_catalog",
    "load_catalog",
    "load_catalog_file",
]
