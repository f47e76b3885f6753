"""End-to-end tests of the beam design engine."""

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from steelbeam.core import BeamDesignEngine, run_analysis
from steelbeam.errors import (
    CatalogLookupError, NoAdequateSectionError, ValidationError
)
from steelbeam.models import (
    AnalysisReport, BeamType, DesignParameters, DesignStatus, Loads,
    MemberUsage, SectionStandard
)


def _inputs(example_inputs, **changes):
    return example_inputs.model_copy(update=changes)


class TestReferenceDesign:
    """6 m simply supported beam, D=10, L=15, S=5 kN/m, Fy=345 MPa."""

    @pytest.fixture
    def report(self, engine, example_inputs):
        return engine.design(example_inputs)

    def test_governing_combination(self, report):
        assert report.governing_combination.name == "LC2"
        assert report.governing_combination.formula == "1.2D + 1.6L + 0.5S"
        assert report.governing_combination.factored_load == pytest.approx(38.5)

    def test_internal_forces(self, report):
        assert report.internal_forces.moment == pytest.approx(173.25)
        assert report.internal_forces.shear == pytest.approx(115.5)

    def test_selected_section(self, report):
        section = report.selected_section
        assert section.name == "W14X26"
        assert section.standard == "American (AISC)"
        assert section.family == "W-Shapes"
        assert section.properties.unit_weight == pytest.approx(38.69, abs=0.01)
        assert section.properties.plastic_modulus_zx == pytest.approx(658.8, abs=0.1)

    def test_all_checks_pass(self, report):
        assert report.is_safe
        assert [c.status for c in report.design_checks] == [DesignStatus.PASS] * 4
        assert all(c.acceptable for c in report.serviceability_checks)
        assert report.summary.is_adequate
        assert "W14X26 is adequate" in report.summary.message

    def test_governing_is_max_of_combinations(self, report):
        assert report.governing_combination.factored_load == pytest.approx(
            max(c.factored_load for c in report.load_combinations), abs=1e-9
        )

    def test_camber_not_required(self, report):
        assert not report.cambering_info.is_required

    def test_notes_record_assumptions(self, report):
        assert any("Self weight" in n for n in report.notes)
        assert any("100 mm" in n for n in report.notes)
        assert report.notional_load is None

    def test_accepts_mapping(self, engine, example_request, report):
        assert engine.design(example_request) == report


class TestHeavierSection:

    def test_rerun_heavier(self, engine, example_inputs):
        report = engine.design(example_inputs, heavier_than="W14X26")
        assert report.selected_section.name == "W16X31"
        assert any("heavier than W14X26" in n for n in report.notes)

    def test_unknown_name(self, engine, example_inputs):
        with pytest.raises(CatalogLookupError):
            engine.design(example_inputs, heavier_than="W99X999")


class TestErrors:

    def test_zero_span(self, engine, example_request):
        example_request["parameters"]["span"] = 0
        with pytest.raises(ValidationError) as excinfo:
            engine.design(example_request)
        assert "span" in str(excinfo.value)

    def test_extreme_load(self, engine, example_inputs):
        inputs = _inputs(example_inputs, loads=Loads(dead_load=1000))
        with pytest.raises(NoAdequateSectionError) as excinfo:
            engine.design(inputs)
        assert excinfo.value.heaviest_section == "W40X199"

    def test_family_without_data(self, engine, example_inputs):
        inputs = _inputs(example_inputs, section_family="C-Shapes")
        with pytest.raises(CatalogLookupError):
            engine.design(inputs)

    def test_family_not_offered(self, example_request):
        example_request["sectionFamily"] = "IPE"
        with pytest.raises(ValidationError):
            run_analysis(example_request)


class TestProperties:

    def test_idempotent(self, engine, example_inputs):
        first = engine.design(example_inputs)
        second = BeamDesignEngine().design(example_inputs)
        assert first == second
        assert first.to_json() == second.to_json()

    @pytest.mark.parametrize("component", ["dead_load", "live_load", "snow_load", "wind_load", "other_load"])
    def test_weight_monotonic_in_each_load(self, engine, example_inputs, component):
        weights = []
        for extra in (0.0, 5.0, 15.0, 30.0):
            base = example_inputs.loads.model_dump()
            base[component] += extra
            report = engine.design(_inputs(example_inputs, loads=Loads(**base)))
            weights.append(report.selected_section.properties.unit_weight)
        assert weights == sorted(weights)

    def test_ratio_definition(self, engine, example_inputs):
        for check in engine.design(example_inputs).design_checks:
            assert check.ratio == pytest.approx(check.demand / check.capacity)


class TestConfigurations:

    def test_cantilever_limits(self, engine, example_inputs):
        params = DesignParameters(span=3.0, beam_type=BeamType.CANTILEVER)
        report = engine.design(_inputs(example_inputs, parameters=params))
        live = report.serviceability_checks[0]
        assert live.limit == pytest.approx(2 * 3000 / 360)
        assert "(2L)/360" in live.details
        assert report.internal_forces.moment == pytest.approx(38.5 * 9 / 2)

    def test_roof_member(self, engine, example_inputs):
        params = DesignParameters(span=6.0, member_usage=MemberUsage.ROOF)
        report = engine.design(_inputs(example_inputs, parameters=params))
        vibration = report.serviceability_checks[2]
        assert vibration.status == DesignStatus.NOT_APPLICABLE
        assert report.summary.is_adequate

    def test_notional_load(self, engine, example_inputs):
        report = engine.design(_inputs(example_inputs, include_notional_loads=True))
        assert report.notional_load.lateral_load == pytest.approx(0.462)
        assert report.selected_section.name == "W14X26"

    def test_european_ipe(self, engine, example_inputs):
        inputs = _inputs(example_inputs, section_standard=SectionStandard.EN, section_family="IPE")
        report = engine.design(inputs)
        assert report.selected_section.name == "IPE 300"
        assert report.selected_section.standard == "European (EN)"

    def test_serviceability_failure_reported(self, engine, example_inputs):
        inputs = _inputs(
            example_inputs,
            parameters=DesignParameters(span=9.0),
            loads=Loads(dead_load=5, live_load=10),
        )
        report = engine.design(inputs)
        assert report.selected_section.name == "W16X26"
        assert report.is_safe
        assert not report.summary.is_adequate
        assert "Live Load Deflection" in report.summary.message
        assert report.warnings

    def test_select_for_serviceability(self, engine, example_inputs):
        inputs = _inputs(
            example_inputs,
            parameters=DesignParameters(span=9.0),
            loads=Loads(dead_load=5, live_load=10),
            select_for_serviceability=True,
        )
        report = engine.design(inputs)
        assert report.selected_section.name == "W18X35"
        assert report.summary.is_adequate


class TestSerialization:

    def test_camel_case_keys(self, engine, example_inputs):
        data = engine.design(example_inputs).to_dict()
        assert set(data) >= {
            "selectedSection", "loadCombinations", "governingCombination", "internalForces",
            "designChecks", "serviceabilityChecks", "camberingInfo", "summary", "designCode",
        }
        assert data["selectedSection"]["properties"]["plasticModulusZx"] > 0
        assert data["designChecks"][0]["status"] == "Pass"
        assert data["summary"]["isAdequate"] is True

    def test_section_properties_carry_units(self, engine, example_inputs):
        """Scaled section properties name their units alongside the values."""
        properties = engine.design(example_inputs).to_dict()["selectedSection"]["properties"]
        units = properties["units"]
        assert units["plasticModulusZx"] == "10^3 mm^3"
        assert units["momentOfInertiaIx"] == "10^6 mm^4"
        assert set(units) == set(properties) - {"units"}

    def test_json_round_trip(self, engine, example_inputs):
        report = engine.design(example_inputs)
        parsed = json.loads(report.to_json())
        assert AnalysisReport.model_validate(parsed) == report

    def test_report_is_frozen(self, engine, example_inputs):
        report = engine.design(example_inputs)
        with pytest.raises(PydanticValidationError):
            report.design_code = "other"
