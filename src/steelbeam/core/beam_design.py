"""
Main steel beam design orchestrator per AISC 360-16 / ASCE 7-16 (LRFD).

Coordinates the complete design workflow:
1. Load combinations (ASCE 7-16 2.3.1) and governing factored load
2. Internal forces for the support condition
3. Lightest adequate section from the catalog family
4. Strength checks (flexure, shear, flange local buckling, web local yielding)
5. Serviceability checks (deflection, floor vibration)
6. Cambering advice
7. Report assembly
"""

import logging
from typing import Any, Mapping, Optional, Union

from steelbeam.catalog import SectionCatalog, SectionRecord, load_default_catalog
from steelbeam.codes import AISC360, DesignCode
from steelbeam.input_parser import load_design_inputs
from steelbeam.models.inputs import DesignInputs
from steelbeam.models.outputs import AnalysisReport, DesignStatus
from .cambering import CamberingAdvisor
from .internal_forces import solve_internal_forces
from .load_combinations import generate_load_combinations, governing_combination
from .report import assemble_report
from .section_selector import select_section
from .serviceability import ServiceabilityChecker
from .strength import StrengthChecker

logger = logging.getLogger(__name__)


class BeamDesignEngine:
    """
    Calculation engine for LRFD design of a single steel beam.

    Key features:
    - Simply supported and cantilever beams under uniform load
    - Lightest-section search with a "try heavier" re-run
    - Calculation steps for every strength check
    - Stateless: the same request always returns an equal report
    """

    def __init__(self, code: DesignCode = None, catalog: SectionCatalog = None):
        self.code = code or AISC360()
        self.catalog = catalog or load_default_catalog()
        self.strength_checker = StrengthChecker(self.code)
        self.serviceability_checker = ServiceabilityChecker(self.code)
        self.cambering_advisor = CamberingAdvisor(self.code)

    def design(
        self,
        inputs: Union[DesignInputs, Mapping[str, Any]],
        heavier_than: Optional[str] = None,
    ) -> AnalysisReport:
        """
        Execute the complete beam design workflow.

        Args:
            inputs: DesignInputs, or a mapping with camelCase or snake_case keys
            heavier_than: Restrict the search to sections heavier than this one

        Returns:
            AnalysisReport for the selected section

        Raises:
            ValidationError: Invalid inputs
            CatalogLookupError: Family without section data, or unknown heavier_than
            NoAdequateSectionError: No section in the family is adequate
        """
        if not isinstance(inputs, DesignInputs):
            inputs = load_design_inputs(inputs)

        params = inputs.parameters
        loads = inputs.loads
        material = inputs.material
        warnings = []
        notes = []

        # Load combinations
        combinations, notional = generate_load_combinations(
            loads, inputs.include_notional_loads, params.span, self.code
        )
        governing = governing_combination(combinations)
        logger.debug("Governing combination %s: %.3f kN/m", governing.name, governing.factored_load)

        # Design forces
        forces = solve_internal_forces(governing.factored_load, params.span, params.beam_type)

        # Section search
        candidates = self.catalog.lookup(inputs.section_standard, inputs.section_family)
        selection = select_section(
            candidates,
            forces,
            material,
            params,
            heavier_than=heavier_than,
            loads=loads,
            select_for_serviceability=inputs.select_for_serviceability,
            strength_checker=self.strength_checker,
            serviceability_checker=self.serviceability_checker,
        )
        section = selection.section

        # Full checks of the selected section
        design_checks = selection.design_checks
        serviceability_checks = (
            selection.serviceability_checks
            or self.serviceability_checker.check(section, loads, material, params)
        )
        cambering = self.cambering_advisor.advise(section, loads, params)

        # Warnings
        for check in serviceability_checks:
            if check.status == DesignStatus.FAIL:
                warnings.append(
                    f"{check.check_name} not satisfied by {section.name}; select for "
                    "serviceability or try a heavier section"
                )
        if governing.factored_load == 0:
            warnings.append("All service loads are zero; the lightest section was selected")

        # Notes
        notes.extend(self._notes(inputs, section, heavier_than))

        return assemble_report(
            section=section,
            load_combinations=combinations,
            governing_combination=governing,
            internal_forces=forces,
            design_checks=design_checks,
            serviceability_checks=serviceability_checks,
            cambering_info=cambering,
            design_code=self.code.code_name,
            notional_load=notional,
            warnings=warnings,
            notes=notes,
        )

    def _notes(self, inputs: DesignInputs, section: SectionRecord, heavier_than: Optional[str]) -> list:
        """Assumptions worth recording alongside the results."""
        params = inputs.parameters
        notes = [
            f"Self weight of {section.name} ({section.self_weight(self.code.gravity):.2f} kN/m) "
            "is not included in the factored combinations; it is included in the vibration check.",
            "Other load (O) is combined with dead load (D) in every combination.",
            f"Unbraced lengths: Lb (LTB) = {params.lb_ltb:g} m, minor axis = {params.lb_minor:g} m, "
            f"major axis = {params.lb_major:g} m.",
        ]
        if params.lb_ltb == 0:
            notes.append("Compression flange taken as continuously braced (Lb = 0).")
        elif params.cb == 1.0:
            notes.append("Cb = 1.0 used for lateral-torsional buckling (conservative).")
        if params.bearing_length is None:
            default = self.code.get_web_local_yielding_parameters()["default_bearing_length"]
            notes.append(f"Bearing length not given; lb = {default:.0f} mm assumed for web local yielding.")
        if heavier_than:
            notes.append(f"Selection restricted to sections heavier than {heavier_than}.")
        if not inputs.select_for_serviceability:
            notes.append("Section selected for strength; serviceability checked afterwards.")
        return notes


def run_analysis(
    inputs: Union[DesignInputs, Mapping[str, Any]],
    heavier_than: Optional[str] = None,
    code: DesignCode = None,
    catalog: SectionCatalog = None,
) -> AnalysisReport:
    """Design a beam with a fresh engine; convenience wrapper for callers and the CLI."""
    return BeamDesignEngine(code, catalog).design(inputs, heavier_than)
