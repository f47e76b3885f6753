"""LRFD strength load combinations per ASCE 7-16 Section 2.3.1.

Builds the five basic (non-seismic) factored line loads from the service
loads of a single beam:

* **LC1** ``1.4D``
* **LC2** ``1.2D + 1.6L + 0.5S``
* **LC3** ``1.2D + 1.6S + max(L, 0.5W)``
* **LC4** ``1.2D + 1.0W + L + 0.5S``
* **LC5** ``0.9D + 1.0W``

``D`` is the dead-load group (dead plus other superimposed permanent load)
and snow is the only roof load.  Factors and formula labels come from
``aisc_tables.yaml`` so the output order is fixed by the table, never by
the load values.

Key references
--------------
* ASCE 7-16, Section 2.3.1 -- Basic combinations
* AISC 360-16, Section C2.2b -- Notional loads
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from steelbeam.codes import AISC360, DesignCode
from steelbeam.errors import ValidationError
from steelbeam.models.inputs import Loads
from steelbeam.models.outputs import GoverningCombination, LoadCombination, NotionalLoad


# ---------------------------------------------------------------------------
# Factor helpers
# ---------------------------------------------------------------------------

def _term(factor: float, text: str) -> str:
    """Render ``factor×text``, dropping a unit factor."""
    if factor == 1.0:
        return text
    return f"{factor:g}×{text}"


def _apply_factors(factors: dict, loads: Loads) -> Tuple[float, str]:
    """Return the factored line load and its substitution string.

    Terms are summed in table order so results are reproducible bit for bit.
    """
    D = loads.dead_group
    L = loads.live_load
    S = loads.snow_load
    W = loads.wind_load

    total = 0.0
    terms: List[str] = []
    for key, raw_factor in factors.items():
        factor = float(raw_factor)
        if key == "D":
            value, text = D, f"{D:.2f}"
        elif key == "L":
            value, text = L, f"{L:.2f}"
        elif key == "S":
            value, text = S, f"{S:.2f}"
        elif key == "W":
            value, text = W, f"{W:.2f}"
        elif key == "L_or_half_W":
            value = max(L, 0.5 * W)
            text = f"max({L:.2f}, 0.5×{W:.2f})"
        else:
            raise ValueError(f"Unknown load combination factor key: {key}")
        total += factor * value
        terms.append(_term(factor, text))

    return total, " + ".join(terms) + f" = {total:.2f} kN/m"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_load_combinations(
    loads: Loads,
    include_notional_loads: bool = False,
    span: Optional[float] = None,
    code: DesignCode = None,
) -> Tuple[List[LoadCombination], Optional[NotionalLoad]]:
    """Factor the service loads into the ASCE 7-16 basic combinations.

    Args:
        loads: Unfactored service line loads (kN/m)
        include_notional_loads: Also report the C2.2b notional lateral load
        span: Beam span in meters (required for the notional load)
        code: Design code providing the combination table

    Returns:
        Tuple of (combinations in fixed order, notional load or None)
    """
    code = code or AISC360()

    combinations = []
    for row in code.get_load_combination_table():
        factored, substitution = _apply_factors(row["factors"], loads)
        combinations.append(LoadCombination(
            name=row["name"],
            formula=row["formula"],
            substitution=substitution,
            factored_load=factored,
            code_reference=row.get("reference"),
        ))

    notional = None
    if include_notional_loads:
        if span is None or span <= 0:
            raise ValidationError([f"span: notional load needs a positive span, got {span!r}"])
        notional = notional_load(governing_combination(combinations), span, code)

    return combinations, notional


def governing_combination(combinations: Iterable[LoadCombination]) -> GoverningCombination:
    """Pick the combination with the largest factored load.

    Ties keep the earlier combination in table order.

    Raises:
        ValueError: If no combinations are given
    """
    governing = None
    for combo in combinations:
        if governing is None or combo.factored_load > governing.factored_load:
            governing = combo
    if governing is None:
        raise ValueError("No load combinations to choose from")
    return GoverningCombination(
        name=governing.name,
        formula=governing.formula,
        factored_load=governing.factored_load,
    )


def notional_load(
    governing: GoverningCombination,
    span: float,
    code: DesignCode = None,
) -> NotionalLoad:
    """Notional lateral load Ni = 0.002·Yi per AISC 360-16 C2.2b.

    Yi is the total factored gravity load on the beam from the governing
    combination.  The value is reported only; it never alters the design.
    """
    code = code or AISC360()
    ratio = code.get_notional_load_ratio()
    total_gravity = governing.factored_load * span
    return NotionalLoad(
        ratio=ratio,
        total_factored_gravity=total_gravity,
        lateral_load=ratio * total_gravity,
        note=(
            f"Ni = {ratio:g} × Yi = {ratio:g} × {total_gravity:.2f} kN "
            f"({governing.name}); apply laterally at the beam level in the "
            "frame analysis (AISC 360-16 C2.2b). Not used in member selection."
        ),
    )
