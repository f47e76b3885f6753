"""
Output data models for steel beam design results.

Reports serialize with camelCase keys through ``to_dict()`` / ``to_json()``.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Dict, Optional, List
from enum import Enum


class DesignStatus(str, Enum):
    """Status of a design or serviceability check."""
    PASS = "Pass"
    FAIL = "Fail"
    NOT_APPLICABLE = "N/A"


class _ReportModel(BaseModel):
    """Immutable report element with camelCase serialization."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class CalculationStep(_ReportModel):
    """Single calculation step for transparency."""
    step_number: int
    description: str
    formula: str
    substitution: str
    result: float
    unit: str
    code_reference: Optional[str] = None


class LoadCombination(_ReportModel):
    """One factored strength load combination."""
    name: str
    formula: str
    substitution: str
    factored_load: float  # kN/m
    code_reference: Optional[str] = None


class GoverningCombination(_ReportModel):
    """Combination producing the largest factored load."""
    name: str
    formula: str
    factored_load: float  # kN/m


class NotionalLoad(_ReportModel):
    """Notional lateral load per the Direct Analysis Method."""
    ratio: float                    # 0.002
    total_factored_gravity: float   # kN
    lateral_load: float             # kN
    note: str


class InternalForces(_ReportModel):
    """Factored design forces from the governing combination."""
    moment: float    # Mu (kNm)
    shear: float     # Vu (kN)
    reaction: float  # maximum support reaction (kN)


class DesignCheck(_ReportModel):
    """Strength limit state check; ratio = demand / capacity."""
    check_name: str
    demand: float
    capacity: float
    ratio: float
    status: DesignStatus
    formula: str
    unit: str
    code_reference: Optional[str] = None
    limit_state: Optional[str] = None  # governing limit state / regime
    calculation_steps: List[CalculationStep] = []

    @property
    def passed(self) -> bool:
        return self.status == DesignStatus.PASS


class ServiceabilityCheck(_ReportModel):
    """Serviceability check (deflection or vibration)."""
    check_name: str
    calculated: Optional[float] = None
    limit: Optional[float] = None
    unit: str
    status: DesignStatus
    details: str

    @property
    def acceptable(self) -> bool:
        return self.status != DesignStatus.FAIL


class CamberingInfo(_ReportModel):
    """Camber recommendation from unfactored dead-load deflection."""
    is_required: bool
    recommendation: str
    dead_load_deflection: float        # mm
    threshold: float                   # mm
    recommended_camber: float = 0.0    # mm


# Display scale of each SectionProperties field, keyed by its JSON name.
SECTION_PROPERTY_UNITS = {
    "depth": "mm",
    "flangeWidth": "mm",
    "plasticModulusZx": "10^3 mm^3",
    "momentOfInertiaIx": "10^6 mm^4",
    "unitWeight": "kg/m",
}


class SectionProperties(_ReportModel):
    """Display properties of the selected section.

    Values are rounded and scaled for display; ``units`` names the scale of
    each field so JSON consumers do not read Zx or Ix as mm³ or mm⁴.
    """
    depth: float = Field(..., description="Overall depth d (mm)")
    flange_width: float = Field(..., description="Flange width bf (mm)")
    plastic_modulus_zx: float = Field(..., description="Plastic modulus Zx (10³ mm³)")
    moment_of_inertia_ix: float = Field(..., description="Second moment of area Ix (10⁶ mm⁴)")
    unit_weight: float = Field(..., description="Mass per length (kg/m)")
    units: Dict[str, str] = Field(default_factory=lambda: dict(SECTION_PROPERTY_UNITS))


class SelectedSection(_ReportModel):
    """Section chosen by the search."""
    name: str
    standard: str
    family: str
    properties: SectionProperties


class DesignSummary(_ReportModel):
    """Overall adequacy."""
    is_adequate: bool
    message: str


class AnalysisReport(_ReportModel):
    """Complete steel beam design report."""

    selected_section: SelectedSection
    load_combinations: List[LoadCombination]
    governing_combination: GoverningCombination
    notional_load: Optional[NotionalLoad] = None
    internal_forces: InternalForces

    # Design results
    design_checks: List[DesignCheck]
    serviceability_checks: List[ServiceabilityCheck]
    cambering_info: CamberingInfo
    summary: DesignSummary

    # Metadata
    design_code: str = "AISC 360-16 / ASCE 7-16 (LRFD)"

    # Warnings and notes
    warnings: List[str] = []
    notes: List[str] = []

    @property
    def is_safe(self) -> bool:
        """Check if all strength checks pass."""
        return all(check.passed for check in self.design_checks)

    def to_dict(self) -> dict:
        """JSON-compatible dictionary with camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self, indent: int = 2) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)
