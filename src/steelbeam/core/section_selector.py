"""Lightest-adequate section search over a catalog family.

Candidates are tried in ascending order of unit weight (ties by name) and
the first one passing every required check is returned.  The search is a
pure function of its arguments: a "heavier section" request is simply a
re-run restricted to candidates heavier than the named section.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from steelbeam.catalog import SectionRecord
from steelbeam.errors import CatalogLookupError, NoAdequateSectionError, ValidationError
from steelbeam.models.inputs import DesignParameters, Loads, MaterialProperties
from steelbeam.models.outputs import (
    DesignCheck, DesignStatus, InternalForces, ServiceabilityCheck
)
from .serviceability import VIBRATION_CHECK, ServiceabilityChecker
from .strength import StrengthChecker

logger = logging.getLogger(__name__)


@dataclass
class SelectionResult:
    """Outcome of a successful section search.

    Attributes
    ----------
    section : SectionRecord
        Lightest adequate section.
    design_checks : list[DesignCheck]
        Strength checks of the selected section.
    serviceability_checks : list[ServiceabilityCheck]
        Serviceability checks of the selected section, empty when the
        search was strength-only.
    tried : list[str]
        Names of every candidate evaluated, in order.
    """

    section: SectionRecord
    design_checks: List[DesignCheck]
    serviceability_checks: List[ServiceabilityCheck] = field(default_factory=list)
    tried: List[str] = field(default_factory=list)


def _serviceability_ratio(check: ServiceabilityCheck) -> Optional[float]:
    """Utilization of a serviceability check, ``None`` when not applicable."""
    if check.status == DesignStatus.NOT_APPLICABLE or not check.calculated or not check.limit:
        return None
    if check.check_name == VIBRATION_CHECK:
        return check.limit / check.calculated
    return check.calculated / check.limit


def _worst(
    design_checks: Sequence[DesignCheck],
    serviceability_checks: Sequence[ServiceabilityCheck],
) -> tuple[float, str]:
    """Return (worst ratio, check name), preferring failed strength checks."""
    worst_ratio, worst_name = max((c.ratio, c.check_name) for c in design_checks)
    if worst_ratio > 1.0:
        return worst_ratio, worst_name
    for check in serviceability_checks:
        if check.status == DesignStatus.FAIL:
            ratio = _serviceability_ratio(check)
            return (ratio if ratio is not None else worst_ratio), check.check_name
    return worst_ratio, worst_name


def sort_candidates(candidates: Iterable[SectionRecord]) -> List[SectionRecord]:
    """Order candidates by (unit weight, name)."""
    return sorted(candidates, key=lambda s: (s.unit_weight, s.name))


def select_section(
    candidates: Iterable[SectionRecord],
    forces: InternalForces,
    material: MaterialProperties,
    parameters: DesignParameters,
    heavier_than: Optional[str] = None,
    loads: Optional[Loads] = None,
    select_for_serviceability: bool = False,
    strength_checker: StrengthChecker = None,
    serviceability_checker: ServiceabilityChecker = None,
) -> SelectionResult:
    """Find the lightest candidate satisfying every required check.

    Parameters
    ----------
    candidates : iterable of SectionRecord
        Sections of one family, in any order.
    forces : InternalForces
        Factored design forces.
    material : MaterialProperties
        Steel strengths.
    parameters : DesignParameters
        Span, bracing and support data.
    heavier_than : str, optional
        Only consider sections strictly heavier than this one.
    loads : Loads, optional
        Service loads, required when ``select_for_serviceability`` is set.
    select_for_serviceability : bool
        Also require every applicable serviceability check to pass.
    strength_checker, serviceability_checker : optional
        Checkers to use; defaults use the AISC 360 tables.

    Returns
    -------
    SelectionResult

    Raises
    ------
    CatalogLookupError
        If ``heavier_than`` is not among the candidates.
    NoAdequateSectionError
        If no candidate passes.
    """
    if select_for_serviceability and loads is None:
        raise ValidationError(["loads: service loads are required for serviceability-driven selection"])

    strength_checker = strength_checker or StrengthChecker()
    if select_for_serviceability:
        serviceability_checker = serviceability_checker or ServiceabilityChecker(strength_checker.code)

    ordered = sort_candidates(candidates)

    if heavier_than is not None:
        reference = next((s for s in ordered if s.name == heavier_than), None)
        if reference is None:
            raise CatalogLookupError(
                f"Section '{heavier_than}' is not in the candidate family"
            )
        ordered = [
            s for s in ordered
            if s.unit_weight > reference.unit_weight and s.name != heavier_than
        ]
        if not ordered:
            raise NoAdequateSectionError(
                f"No section in the family is heavier than {heavier_than}",
                heaviest_section=heavier_than,
            )
    elif not ordered:
        raise NoAdequateSectionError("No candidate sections to evaluate")

    tried: List[str] = []
    last_failure = None
    for section in ordered:
        tried.append(section.name)
        design_checks = strength_checker.check(section, forces, material, parameters)
        serviceability_checks: List[ServiceabilityCheck] = []
        adequate = all(c.status == DesignStatus.PASS for c in design_checks)

        if adequate and select_for_serviceability:
            serviceability_checks = serviceability_checker.check(section, loads, material, parameters)
            adequate = all(c.status != DesignStatus.FAIL for c in serviceability_checks)

        if adequate:
            logger.info("Selected %s (%.1f kg/m) after %d candidate(s)",
                        section.name, section.unit_weight, len(tried))
            return SelectionResult(
                section=section,
                design_checks=design_checks,
                serviceability_checks=serviceability_checks,
                tried=tried,
            )

        worst_ratio, failing = _worst(design_checks, serviceability_checks)
        logger.debug("%s rejected: %s ratio %.3f", section.name, failing, worst_ratio)
        last_failure = (section.name, worst_ratio, failing)

    name, worst_ratio, failing = last_failure
    raise NoAdequateSectionError(
        f"No adequate section found after {len(tried)} candidate(s); heaviest tried "
        f"{name} fails {failing} with ratio {worst_ratio:.3f}",
        heaviest_section=name,
        worst_ratio=worst_ratio,
        failing_check=failing,
    )
