"""
Serviceability checks for steel beams.

Implements:
- Live load deflection (IBC Table 1604.3, L/360)
- Total load deflection (IBC Table 1604.3, L/240)
- Floor vibration, simplified (AISC Design Guide 11)

Cantilever limits use twice the cantilever length (IBC Table 1604.3
footnote i).  All loads are unfactored service loads.
"""

import logging
import math
from typing import List

from steelbeam.catalog import SectionRecord
from steelbeam.codes import AISC360, DesignCode
from steelbeam.models.inputs import (
    BeamType, DesignParameters, Loads, MaterialProperties, MemberUsage
)
from steelbeam.models.outputs import DesignStatus, ServiceabilityCheck

logger = logging.getLogger(__name__)


LIVE_DEFLECTION_CHECK = "Live Load Deflection"
TOTAL_DEFLECTION_CHECK = "Total Load Deflection"
VIBRATION_CHECK = "Floor Vibration"


def uniform_load_deflection(
    w: float,
    span_mm: float,
    elastic_modulus: float,
    moment_of_inertia: float,
    beam_type: BeamType,
) -> float:
    """
    Maximum deflection of a beam under a uniform line load.

    Simply supported (midspan): δ = 5wL⁴ / (384EI)
    Cantilever (free end):      δ = wL⁴ / (8EI)

    Args:
        w: Line load in kN/m (numerically N/mm)
        span_mm: Span in mm
        elastic_modulus: E in MPa
        moment_of_inertia: I in mm⁴
        beam_type: Support condition

    Returns:
        Deflection in mm
    """
    EI = elastic_modulus * moment_of_inertia
    if BeamType(beam_type) == BeamType.CANTILEVER:
        return w * span_mm ** 4 / (8 * EI)
    return 5 * w * span_mm ** 4 / (384 * EI)


class ServiceabilityChecker:
    """
    Deflection and vibration checks of a rolled beam.

    Deflection limits and the vibration criterion come from the design
    code tables.
    """

    def __init__(self, code: DesignCode = None):
        self.code = code or AISC360()

    def check(
        self,
        section: SectionRecord,
        loads: Loads,
        material: MaterialProperties,
        parameters: DesignParameters,
    ) -> List[ServiceabilityCheck]:
        """
        Run all serviceability checks.

        Args:
            section: Section properties
            loads: Unfactored service loads
            material: Steel strengths (deflection uses the code modulus E)
            parameters: Span, support and usage data

        Returns:
            Live deflection, total deflection and vibration checks, in order
        """
        return [
            self.check_live_deflection(section, loads, parameters),
            self.check_total_deflection(section, loads, parameters),
            self.check_vibration(section, loads, parameters),
        ]

    def _deflection(self, w: float, section: SectionRecord, parameters: DesignParameters) -> float:
        return uniform_load_deflection(
            w, parameters.span_mm, self.code.elastic_modulus, section.Ix, parameters.beam_type
        )

    def _deflection_check(
        self,
        check_name: str,
        load_kind: str,
        w: float,
        load_text: str,
        section: SectionRecord,
        parameters: DesignParameters,
    ) -> ServiceabilityCheck:
        limit_rule = self.code.get_deflection_limit(load_kind, parameters.is_cantilever)
        limit = parameters.span_mm * limit_rule.span_multiplier / limit_rule.divisor
        if limit <= 0 or section.Ix <= 0:
            return ServiceabilityCheck(
                check_name=check_name,
                unit="mm",
                status=DesignStatus.NOT_APPLICABLE,
                details=f"Deflection limit {limit_rule.label} is not defined for this geometry",
            )

        delta = self._deflection(w, section, parameters)
        status = DesignStatus.PASS if delta <= limit else DesignStatus.FAIL
        details = (
            f"δ = {delta:.2f} mm under {load_text} = {w:.2f} kN/m; "
            f"limit {limit_rule.label} = {limit:.2f} mm"
        )
        if parameters.is_cantilever:
            details += (
                f" (cantilever: limit based on twice the span, "
                f"{limit_rule.span_multiplier:g} × {parameters.span_mm:.0f} mm, IBC Table 1604.3 note i)"
            )
        return ServiceabilityCheck(
            check_name=check_name,
            calculated=delta,
            limit=limit,
            unit="mm",
            status=status,
            details=details,
        )

    def check_live_deflection(
        self,
        section: SectionRecord,
        loads: Loads,
        parameters: DesignParameters,
    ) -> ServiceabilityCheck:
        """Unfactored live load deflection against L/360 ((2L)/360 for cantilevers)."""
        return self._deflection_check(
            LIVE_DEFLECTION_CHECK, "live", loads.live_load, "L", section, parameters
        )

    def check_total_deflection(
        self,
        section: SectionRecord,
        loads: Loads,
        parameters: DesignParameters,
    ) -> ServiceabilityCheck:
        """Unfactored D + O + L deflection against L/240 ((2L)/240 for cantilevers)."""
        return self._deflection_check(
            TOTAL_DEFLECTION_CHECK, "total", loads.dead_group + loads.live_load,
            "D + O + L", section, parameters
        )

    def check_vibration(
        self,
        section: SectionRecord,
        loads: Loads,
        parameters: DesignParameters,
    ) -> ServiceabilityCheck:
        """
        Simplified walking-vibration check per AISC Design Guide 11.

        fn = 0.18·√(g/δ), δ = deflection under self weight plus the
        unfactored dead load group.  Roof members are not checked.
        """
        params = self.code.get_vibration_parameters()
        min_fn = params["min_frequency_hz"]

        if parameters.member_usage == MemberUsage.ROOF:
            return ServiceabilityCheck(
                check_name=VIBRATION_CHECK,
                limit=min_fn,
                unit="Hz",
                status=DesignStatus.NOT_APPLICABLE,
                details="Roof member not subject to walking excitation",
            )

        self_weight = section.self_weight(self.code.gravity)
        w = self_weight + loads.dead_group
        delta = self._deflection(w, section, parameters)
        if delta <= 0 or min_fn <= 0:
            return ServiceabilityCheck(
                check_name=VIBRATION_CHECK,
                limit=min_fn,
                unit="Hz",
                status=DesignStatus.NOT_APPLICABLE,
                details="No sustained load deflection; natural frequency not defined",
            )

        fn = params["frequency_coefficient"] * math.sqrt(params["gravity_mm_s2"] / delta)
        status = DesignStatus.PASS if fn >= min_fn else DesignStatus.FAIL
        if status == DesignStatus.FAIL:
            logger.debug("%s: fn = %.2f Hz below %.1f Hz", section.name, fn, min_fn)
        return ServiceabilityCheck(
            check_name=VIBRATION_CHECK,
            calculated=fn,
            limit=min_fn,
            unit="Hz",
            status=status,
            details=(
                f"fn = 0.18√(g/δ) = 0.18√({params['gravity_mm_s2']:.0f}/{delta:.2f}) = {fn:.2f} Hz "
                f"with δ under self weight {self_weight:.2f} + D + O {loads.dead_group:.2f} kN/m; "
                f"minimum {min_fn:g} Hz (AISC Design Guide 11)"
            ),
        )
