"""Closed-form design forces for a single-span beam under uniform load."""

from steelbeam.errors import ValidationError
from steelbeam.models.inputs import BeamType
from steelbeam.models.outputs import InternalForces


def _check_arguments(w: float, span: float) -> None:
    errors = []
    if span <= 0:
        errors.append(f"span: must be greater than 0 m, got {span!r}")
    if w < 0:
        errors.append(f"factored load: must not be negative, got {w!r} kN/m")
    if errors:
        raise ValidationError(errors)


def support_reaction(w: float, span: float, beam_type: BeamType) -> float:
    """
    Largest support reaction (kN).

    Simply supported: R = wL/2 at each end.
    Cantilever: R = wL at the fixed end.
    """
    _check_arguments(w, span)
    if BeamType(beam_type) == BeamType.CANTILEVER:
        return w * span
    return w * span / 2


def solve_internal_forces(w: float, span: float, beam_type: BeamType) -> InternalForces:
    """
    Maximum moment, shear and reaction for a uniformly loaded beam.

    Args:
        w: Factored line load in kN/m
        span: Span in meters
        beam_type: Support condition

    Returns:
        InternalForces with Mu (kNm), Vu (kN) and reaction (kN)

    Raises:
        ValidationError: If the span is not positive or the load is negative
    """
    _check_arguments(w, span)
    if BeamType(beam_type) == BeamType.CANTILEVER:
        moment = w * span ** 2 / 2
        shear = w * span
    else:
        moment = w * span ** 2 / 8
        shear = w * span / 2
    return InternalForces(
        moment=moment,
        shear=shear,
        reaction=support_reaction(w, span, beam_type),
    )
