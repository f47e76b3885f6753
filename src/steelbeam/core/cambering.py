"""Camber recommendation from the unfactored dead-load deflection."""

import math

from steelbeam.catalog import SectionRecord
from steelbeam.codes import AISC360, DesignCode
from steelbeam.models.inputs import DesignParameters, Loads
from steelbeam.models.outputs import CamberingInfo
from .serviceability import uniform_load_deflection


class CamberingAdvisor:
    """Recommends shop camber when dead-load deflection exceeds the policy threshold."""

    def __init__(self, code: DesignCode = None):
        self.code = code or AISC360()

    def advise(
        self,
        section: SectionRecord,
        loads: Loads,
        parameters: DesignParameters,
    ) -> CamberingInfo:
        """
        Camber advice for the selected section.

        Camber is required when δ_D (dead + other load) exceeds the
        threshold; the recommendation is δ_D rounded up to the next
        increment.
        """
        policy = self.code.get_cambering_policy()
        threshold = policy["min_deflection_mm"]
        increment = policy["increment_mm"]

        delta = uniform_load_deflection(
            loads.dead_group, parameters.span_mm, self.code.elastic_modulus,
            section.Ix, parameters.beam_type
        )

        if delta > threshold:
            camber = math.ceil(delta / increment) * increment
            return CamberingInfo(
                is_required=True,
                recommendation=(
                    f"Camber {section.name} by {camber:.0f} mm: dead load deflection "
                    f"{delta:.1f} mm exceeds {threshold:.0f} mm"
                ),
                dead_load_deflection=delta,
                threshold=threshold,
                recommended_camber=camber,
            )

        return CamberingInfo(
            is_required=False,
            recommendation=(
                f"Camber not required: dead load deflection {delta:.1f} mm "
                f"does not exceed {threshold:.0f} mm"
            ),
            dead_load_deflection=delta,
            threshold=threshold,
        )
