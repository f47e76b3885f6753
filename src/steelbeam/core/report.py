"""Assembly of the immutable analysis report."""

from typing import Iterable, List, Optional

from steelbeam.catalog import SectionRecord
from steelbeam.models.inputs import SectionStandard
from steelbeam.models.outputs import (
    AnalysisReport, CamberingInfo, DesignCheck, DesignStatus, DesignSummary,
    GoverningCombination, InternalForces, LoadCombination, NotionalLoad,
    SectionProperties, SelectedSection, ServiceabilityCheck
)


def _selected_section(section: SectionRecord) -> SelectedSection:
    return SelectedSection(
        name=section.name,
        standard=SectionStandard[section.standard].value,
        family=section.family,
        properties=SectionProperties(
            depth=round(section.d, 1),
            flange_width=round(section.bf, 1),
            plastic_modulus_zx=round(section.Zx / 1e3, 1),
            moment_of_inertia_ix=round(section.Ix / 1e6, 2),
            unit_weight=round(section.unit_weight, 2),
        ),
    )


def summarize(
    section_name: str,
    design_checks: List[DesignCheck],
    serviceability_checks: List[ServiceabilityCheck],
) -> DesignSummary:
    """
    Overall adequacy of a checked section.

    Adequate when every strength check passes and no serviceability check
    fails.  The message names the governing failure, or the highest
    strength ratio when adequate.
    """
    failed_strength = [c for c in design_checks if c.status == DesignStatus.FAIL]
    failed_service = [c for c in serviceability_checks if c.status == DesignStatus.FAIL]

    if failed_strength:
        governing = max(failed_strength, key=lambda c: c.ratio)
        return DesignSummary(
            is_adequate=False,
            message=(
                f"{section_name} is NOT adequate: {governing.check_name} ratio "
                f"{governing.ratio:.3f} exceeds 1.0"
            ),
        )
    if failed_service:
        governing = failed_service[0]
        return DesignSummary(
            is_adequate=False,
            message=f"{section_name} is NOT adequate: {governing.check_name} fails. {governing.details}",
        )

    governing = max(design_checks, key=lambda c: c.ratio)
    return DesignSummary(
        is_adequate=True,
        message=(
            f"{section_name} is adequate. Maximum strength ratio {governing.ratio:.3f} "
            f"({governing.check_name})"
        ),
    )


def assemble_report(
    section: SectionRecord,
    load_combinations: List[LoadCombination],
    governing_combination: GoverningCombination,
    internal_forces: InternalForces,
    design_checks: List[DesignCheck],
    serviceability_checks: List[ServiceabilityCheck],
    cambering_info: CamberingInfo,
    design_code: str,
    notional_load: Optional[NotionalLoad] = None,
    warnings: Iterable[str] = (),
    notes: Iterable[str] = (),
) -> AnalysisReport:
    """
    Collect all results into an AnalysisReport.

    Pure aggregation: no value is recomputed here apart from the summary.
    """
    return AnalysisReport(
        selected_section=_selected_section(section),
        load_combinations=list(load_combinations),
        governing_combination=governing_combination,
        notional_load=notional_load,
        internal_forces=internal_forces,
        design_checks=list(design_checks),
        serviceability_checks=list(serviceability_checks),
        cambering_info=cambering_info,
        summary=summarize(section.name, design_checks, serviceability_checks),
        design_code=design_code,
        warnings=list(warnings),
        notes=list(notes),
    )
