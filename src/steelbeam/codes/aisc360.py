"""
AISC 360-16 / ASCE 7-16 (LRFD) code provisions for steel beam design.

Key clauses implemented:
- ASCE 7-16 Section 2.3.1: Basic strength load combinations
- AISC 360-16 C2.2b: Notional loads (Direct Analysis Method)
- AISC 360-16 Chapter F: Flexure (F2 yielding/LTB, F3 flange local buckling)
- AISC 360-16 Chapter G: Shear (G2.1)
- AISC 360-16 Section J10.2: Web local yielding
- IBC Table 1604.3: Deflection limits
- AISC Design Guide 11: Floor vibrations (simplified)
"""

from typing import Any, Dict, List

from steelbeam.utils.tables import load_design_tables
from .base_code import DeflectionLimit, DesignCode


class AISC360(DesignCode):
    """
    AISC 360-16 Specification for Structural Steel Buildings with
    ASCE 7-16 LRFD load combinations.

    Values come from ``aisc_tables.yaml``; nothing is inferred per request.
    """

    def __init__(self, tables: Dict[str, Any] = None):
        self.tables = tables if tables is not None else load_design_tables()

    @property
    def code_name(self) -> str:
        return self.tables.get("code_name", "AISC 360-16 / ASCE 7-16 (LRFD)")

    @property
    def elastic_modulus(self) -> float:
        return float(self.tables["material"]["E"])

    @property
    def gravity(self) -> float:
        """Gravitational acceleration in m/s²."""
        return float(self.tables["material"]["gravity"])

    def get_load_combination_table(self) -> List[Dict[str, Any]]:
        return list(self.tables["load_combinations"])

    def get_notional_load_ratio(self) -> float:
        return float(self.tables["notional_load"]["ratio"])

    def get_resistance_factors(self) -> Dict[str, float]:
        """
        Resistance factors per AISC 360-16.

        - Flexure (F1): φb = 0.90
        - Shear, rolled I-shapes with compact webs (G2.1a): φv = 1.00
        - Shear, otherwise (G1): φv = 0.90
        - Web local yielding (J10.2): φ = 1.00
        """
        return {k: float(v) for k, v in self.tables["resistance_factors"].items()}

    def get_flexure_parameters(self) -> Dict[str, float]:
        return {k: float(v) for k, v in self.tables["flexure"].items()}

    def get_shear_parameters(self) -> Dict[str, float]:
        return {k: float(v) for k, v in self.tables["shear"].items()}

    def get_web_local_yielding_parameters(self) -> Dict[str, float]:
        return {k: float(v) for k, v in self.tables["web_local_yielding"].items()}

    def get_deflection_limit(self, load_kind: str, is_cantilever: bool) -> DeflectionLimit:
        """
        Deflection limit per IBC Table 1604.3.

        Live load: L/360, total load: L/240. For cantilevers the span used in
        the limit is doubled (footnote i), e.g. (2L)/360.
        """
        limits = self.tables["deflection_limits"]
        if load_kind not in ("live", "total"):
            raise ValueError(f"Unknown deflection load kind: {load_kind}")
        divisor = float(limits[load_kind])
        multiplier = float(limits["cantilever_span_multiplier"]) if is_cantilever else 1.0
        span_label = f"({multiplier:g}L)" if is_cantilever else "L"
        return DeflectionLimit(
            divisor=divisor,
            span_multiplier=multiplier,
            label=f"{span_label}/{divisor:g}",
        )

    def get_vibration_parameters(self) -> Dict[str, float]:
        return {k: float(v) for k, v in self.tables["vibration"].items()}

    def get_cambering_policy(self) -> Dict[str, float]:
        return {k: float(v) for k, v in self.tables["cambering"].items()}
