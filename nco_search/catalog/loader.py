"""
nco_search/catalog/loader.py

Build the immutable catalog handed to ``SearchEngine``.

Usage
-----
from nco_search.catalog import default_catalog, load_catalog_file

catalog = default_catalog()                      # bundled NCO sample
catalog = load_catalog_file("nco_export.json")   # admin export, camelCase ok
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Union

from nco_search.catalog.models import Occupation
from nco_search.catalog.nco_data import NCO_DATA

# Field names used by the admin dashboard's JSON export.
_CAMEL_TO_SNAKE = {
    "divisionTitle": "division_title",
    "groupTitle":    "group_title",
    "subGroup":      "sub_group",
    "subGroupTitle": "sub_group_title",
    "skillLevel":    "skill_level",
}


def load_catalog(records: Iterable[dict]) -> tuple[Occupation, ...]:
    """
    Validate raw records and return them as an immutable catalog.

    Raises
    ------
    ValueError
        If two records share the same occupation code.
    pydantic.ValidationError
        If a record is missing a field or has an out-of-range skill level.
    """
    catalog: list[Occupation] = []
    seen: set[str] = set()
    for raw in records:
        data = {_CAMEL_TO_SNAKE.get(k, k): v for k, v in raw.items()}
        occupation = Occupation(**data)
        if occupation.code in seen:
            raise ValueError(f"Duplicate occupation code {occupation.code!r} in catalog.")
        seen.add(occupation.code)
        catalog.append(occupation)
    return tuple(catalog)


def load_catalog_file(path: Union[str, Path]) -> tuple[Occupation, ...]:
    """Load a catalog from a JSON file holding a list of occupation objects."""
    with open(path, encoding="utf-8") as fh:
        records = json.load(fh)
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a JSON list of occupations.")
    return load_catalog(records)


def default_catalog() -> tuple[Occupation, ...]:
    """Return the bundled NCO sample catalog."""
    return load_catalog(NCO_DATA)


def catalog_sectors(catalog: Iterable[Occupation]) -> list[str]:
    """Distinct sector labels, sorted, for filter pick-lists."""
    return sorted({occ.sector for occ in catalog})
