"""
nco_search/tests/test_catalog.py

Catalog loading and validation.
"""

import json

import pytest
from pydantic import ValidationError

from nco_search.catalog import (
    DIVISIONS,
    NCO_DATA,
    Occupation,
    catalog_sectors,
    default_catalog,
    load_catalog,
    load_catalog_file,
)
from nco_search.tests.conftest import make_record


class TestDefaultCatalog:
    def test_has_all_bundled_records(self):
        catalog = default_catalog()
        assert len(catalog) == len(NCO_DATA) == 10
        assert catalog[0].code == "75320101"

    def test_codes_unique(self):
        codes = [o.code for o in default_catalog()]
        assert len(codes) == len(set(codes))

    def test_every_division_is_known(self):
        for occ in default_catalog():
            assert DIVISIONS[occ.division] == occ.division_title

    def test_sectors_sorted_and_distinct(self):
        sectors = catalog_sectors(default_catalog())
        assert sectors == sorted(set(sectors))
        assert "Manufacturing" in sectors


class TestLoadCatalog:
    def test_returns_immutable_records(self):
        catalog = load_catalog([make_record()])
        assert isinstance(catalog, tuple)
        with pytest.raises(ValidationError):
            catalog[0].title = "Changed"

    def test_accepts_camel_case_export(self):
        raw = make_record(code="2000")
        for snake, camel in [("division_title", "divisionTitle"), ("sub_group", "subGroup"),
                             ("sub_group_title", "subGroupTitle"), ("group_title", "groupTitle"),
                             ("skill_level", "skillLevel")]:
            raw[camel] = raw.pop(snake)
        occ = load_catalog([raw])[0]
        assert occ.sub_group == "911"
        assert occ.skill_level == 1

    def test_duplicate_code_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            load_catalog([make_record(code="1"), make_record(code="1")])

    @pytest.mark.parametrize("level", [0, 5])
    def test_skill_level_out_of_range(self, level):
        with pytest.raises(ValidationError):
            load_catalog([make_record(skill_level=level)])

    def test_missing_field_rejected(self):
        raw = make_record()
        del raw["title"]
        with pytest.raises(ValidationError):
            load_catalog([raw])

    def test_keywords_and_tasks_default_empty(self):
        raw = make_record()
        del raw["keywords"], raw["tasks"]
        occ = load_catalog([raw])[0]
        assert occ.keywords == ()
        assert occ.tasks == ()

    def test_empty_catalog(self):
        assert load_catalog([]) == ()


class TestLoadCatalogFile:
    def test_round_trip_from_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(NCO_DATA[:2]), encoding="utf-8")
        catalog = load_catalog_file(path)
        assert [o.code for o in catalog] == ["75320101", "25210201"]
        assert all(isinstance(o, Occupation) for o in catalog)

    def test_non_list_rejected(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"code": "1"}), encoding="utf-8")
        with pytest.raises(ValueError, match="expected a JSON list"):
            load_catalog_file(path)
