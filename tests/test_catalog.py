"""Tests for the chipload table."""

from pathlib import Path

import pytest

from chipload.config.defaults import BUNDLED_TABLE
from chipload.core.catalog import CatalogEntry, MaterialCatalog
from chipload.core.errors import CatalogLoadError, IssueCode


def _write_table(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "ChiploadTable.csv"
    path.write_text("material,diameter,chipload,rpm_factor\n" + body)
    return path


class TestLoad:
    def test_basic_rows(self, tmp_path):
        path = _write_table(tmp_path, "Wood,6,0.15,1.0\nMDF,3,0.06,0.9\n")
        catalog = MaterialCatalog.load(path)
        assert len(catalog) == 2
        entry = catalog.lookup("Wood", 6)
        assert entry.chipload == pytest.approx(0.15)
        assert entry.rpm_factor == pytest.approx(1.0)

    def test_rpm_factor_defaults_to_one(self, tmp_path):
        path = _write_table(tmp_path, "Cork,8,0.18\n")
        entry = MaterialCatalog.load(path).lookup("cork", 8)
        assert entry.rpm_factor == 1.0

    def test_duplicate_keeps_first(self, tmp_path):
        path = _write_table(tmp_path, "Wood,6,0.15,1.0\nWOOD,6,0.30,2.0\n")
        with pytest.warns(UserWarning, match="duplicate"):
            catalog = MaterialCatalog.load(path)
        assert len(catalog) == 1
        assert catalog.lookup("wood", 6).chipload == pytest.approx(0.15)

    def test_malformed_rows_skipped(self, tmp_path):
        path = _write_table(
            tmp_path,
            "Wood,6,0.15\n"
            "Wood,six,0.15\n"
            "Brass\n"
            ",6,0.1\n"
            "\n"
            "MDF,3,0.06\n",
        )
        with pytest.warns(UserWarning, match="malformed"):
            catalog = MaterialCatalog.load(path)
        assert len(catalog) == 2

    @pytest.mark.parametrize("row", [
        "Wood,6,nan,1.0",
        "Wood,inf,0.15",
        "Wood,6,0.15,-inf",
        "Wood,-6,0.15",
        "Wood,0,0.15",
        "Wood,6,-0.1",
    ])
    def test_non_finite_or_negative_rows_skipped(self, tmp_path, row):
        path = _write_table(tmp_path, row + "\nMDF,3,0.06\n")
        with pytest.warns(UserWarning, match="malformed"):
            catalog = MaterialCatalog.load(path)
        assert len(catalog) == 1
        assert catalog.lookup("Wood", 6) is None

    def test_header_only(self, tmp_path):
        path = _write_table(tmp_path, "")
        assert len(MaterialCatalog.load(path)) == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError) as info:
            MaterialCatalog.load(tmp_path / "nope.csv")
        assert info.value.exit_code == IssueCode.CATALOG_LOAD == 1

    def test_bundled_table_loads(self):
        catalog = MaterialCatalog.load(BUNDLED_TABLE)
        assert catalog.lookup("Wood", 6) is not None
        assert "Aluminum" in catalog.distinct_material_names()


class TestLookup:
    @pytest.fixture
    def catalog(self) -> MaterialCatalog:
        return MaterialCatalog([
            CatalogEntry("Wood", 6.0, 0.15),
            CatalogEntry("wood", 3.0, 0.05),
            CatalogEntry("MDF", 6.0, 0.16, 0.9),
            CatalogEntry("Wood", 6.0, 0.99),
        ])

    def test_case_insensitive_material(self, catalog):
        assert catalog.lookup("WOOD", 3).chipload == pytest.approx(0.05)

    def test_integer_diameter_matches_float_key(self, catalog):
        assert catalog.lookup("MDF", 6).rpm_factor == pytest.approx(0.9)

    def test_missing_diameter(self, catalog):
        assert catalog.lookup("Wood", 8) is None

    def test_missing_material(self, catalog):
        assert catalog.lookup("Unobtanium", 6) is None

    def test_constructor_drops_duplicates(self, catalog):
        assert len(catalog) == 3
        assert catalog.lookup("Wood", 6).chipload == pytest.approx(0.15)

    def test_distinct_names_first_seen_casing_and_order(self, catalog):
        assert catalog.distinct_material_names() == ["Wood", "MDF"]

    def test_distinct_names_is_a_copy(self, catalog):
        catalog.distinct_material_names().append("Steel")
        assert catalog.distinct_material_names() == ["Wood", "MDF"]

    def test_diameters_for(self, catalog):
        assert catalog.diameters_for("WOOD") == [3.0, 6.0]
