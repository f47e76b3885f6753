"""Tests for the section catalog."""

import math

import pytest

from steelbeam.catalog import SectionCatalog, SectionRecord, load_default_catalog, load_section_file
from steelbeam.errors import CatalogLookupError
from steelbeam.models import SectionStandard
from steelbeam.utils.constants import I_SHAPE_FAMILIES


def _record(name, weight, **overrides):
    props = dict(
        name=name, standard="AISC", family="Test", unit_weight=weight,
        d=300.0, bf=150.0, tf=10.0, tw=6.0, k=20.0, A=5000.0, Ix=8e7, Iy=5e6,
        Zx=6e5, Sx=5e5, rts=40.0, ho=290.0, J=1e5, Cw=1e11,
    )
    props.update(overrides)
    return SectionRecord(**props)


class TestLookup:

    def test_sorted_by_weight_then_name(self, catalog):
        sections = catalog.lookup("AISC", "W-Shapes")
        keys = [(s.unit_weight, s.name) for s in sections]
        assert keys == sorted(keys)

    def test_equal_weight_tie_broken_by_name(self, catalog):
        names = [s.name for s in catalog.lookup(SectionStandard.AISC, "W-Shapes")]
        assert names.index("W14X26") < names.index("W16X26")
        assert names.index("W18X50") < names.index("W21X50")

    def test_standard_accepts_value_or_name(self, catalog):
        assert catalog.lookup("American (AISC)", "W-Shapes") == catalog.lookup("AISC", "W-Shapes")

    def test_returns_immutable_tuple(self, catalog):
        sections = catalog.lookup("AISC", "W-Shapes")
        assert isinstance(sections, tuple)
        with pytest.raises(AttributeError):
            sections[0].d = 1.0

    def test_offered_family_without_data(self, catalog):
        with pytest.raises(CatalogLookupError):
            catalog.lookup("AISC", "C-Shapes")

    def test_unknown_section(self, catalog):
        with pytest.raises(CatalogLookupError):
            catalog.get("AISC", "W-Shapes", "W99X999")

    def test_lookup_error_is_lookup_error(self, catalog):
        with pytest.raises(LookupError):
            catalog.lookup("BS", "UB (Universal Beams)")

    def test_families(self, catalog):
        assert ("AISC", "W-Shapes") in catalog.families()
        assert ("EN", "IPE") in catalog.families()

    def test_default_catalog_is_cached(self):
        assert load_default_catalog() is load_default_catalog()

    def test_in_memory_catalog(self):
        catalog = SectionCatalog([_record("B", 20.0), _record("A", 20.0), _record("C", 10.0)])
        assert [s.name for s in catalog.lookup("AISC", "Test")] == ["C", "A", "B"]


class TestUnitConversion:

    def test_aisc_w14x26(self, w14x26):
        """Imperial table values are converted to mm-based SI."""
        assert w14x26.unit_weight == pytest.approx(38.69, rel=1e-3)
        assert w14x26.d == pytest.approx(13.9 * 25.4)
        assert w14x26.Zx == pytest.approx(40.2 * 25.4 ** 3)
        assert w14x26.Ix == pytest.approx(245 * 25.4 ** 4)
        assert w14x26.Cw == pytest.approx(405 * 25.4 ** 6)

    def test_derived_properties(self, w14x26):
        assert w14x26.h == pytest.approx(w14x26.d - 2 * w14x26.k)
        assert w14x26.ry == pytest.approx(math.sqrt(w14x26.Iy / w14x26.A))
        assert w14x26.flange_slenderness == pytest.approx(5.03 / (2 * 0.420))
        assert w14x26.web_slenderness == pytest.approx(w14x26.h / w14x26.tw)

    def test_en_ipe_derived_values(self, catalog):
        """IPE 300: ho = h − tf, k = tf + r, rts² = √(Iz·Iw)/Wel,y."""
        ipe = catalog.get("EN", "IPE", "IPE 300")
        assert ipe.unit_weight == pytest.approx(42.2)
        assert ipe.ho == pytest.approx(300 - 10.7)
        assert ipe.k == pytest.approx(10.7 + 15)
        assert ipe.Ix == pytest.approx(8356e4)
        assert ipe.rts == pytest.approx(39.6, rel=1e-2)

    def test_self_weight(self, w14x26):
        assert w14x26.self_weight() == pytest.approx(0.3796, rel=1e-3)


class TestSectionFile:

    def test_rejects_unknown_units(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("standard: AISC\nfamily: X\nunits: furlongs\nsections: []\n", encoding="utf-8")
        with pytest.raises(ValueError, match="unknown units"):
            load_section_file(path)

    def test_rejects_non_positive_property(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(
            "standard: EN\nfamily: IPE\nunits: metric\nsections:\n"
            "  - {name: BAD, G: 10, h: 100, b: 50, tw: 0, tf: 5, r: 5, A: 10, "
            "Iy: 100, Wpl_y: 20, Wel_y: 18, Iz: 10, It: 1, Iw: 100}\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="non-positive tw"):
            load_section_file(path)

    def test_rejects_channel_family(self, tmp_path):
        """Channel tables are refused; the strength checks assume I-shapes."""
        path = tmp_path / "channels.yaml"
        path.write_text(
            "standard: AISC\nfamily: C-Shapes\nunits: imperial\nsections: []\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="I-shape"):
            load_section_file(path)

    def test_bundled_families_are_i_shapes(self, catalog):
        for standard, family in catalog.families():
            assert family in I_SHAPE_FAMILIES[standard]

    def test_directory_loading(self, tmp_path):
        (tmp_path / "ipe.yaml").write_text(
            "standard: European (EN)\nfamily: IPE\nunits: metric\nsections:\n"
            "  - {name: IPE 200, G: 22.4, h: 200, b: 100, tw: 5.6, tf: 8.5, r: 12, A: 28.5, "
            "Iy: 1943, Wpl_y: 221, Wel_y: 194, Iz: 142, It: 6.98, Iw: 12990}\n",
            encoding="utf-8",
        )
        catalog = SectionCatalog.from_directory(tmp_path)
        assert [s.name for s in catalog.lookup("EN", "IPE")] == ["IPE 200"]
