from .loader import catalog_sectors, default_catalog, load_catalog, load_catalog_file
from .models import MATCHED_FIELD_NAMES, Occupation, SearchFilters, SearchResult
from .nco_data import DIVISIONS, NCO_DATA

__all__ = [
    "DIVISIONS",
    "MATCHED_FIELD_NAMES",
    "NCO_DATA",
    "Occupation",
    "SearchFilters",
    "SearchResult",
    "catalog_sectors",
    "default_catalog",
    "load_catalog",
    "load_catalog_file",
]
