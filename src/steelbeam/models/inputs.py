"""
Input data models for steel beam design using Pydantic for validation.
Field names are snake_case; camelCase aliases accept the JSON request form.
"""

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from enum import Enum

from steelbeam.utils.constants import SECTION_FAMILY_MAP


def _normalize(text: str) -> str:
    return "".join(ch for ch in text.lower() if ch.isalnum())


class _LenientEnum(str, Enum):
    """String enum that also accepts member names, ignoring case and spacing."""

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        key = _normalize(value)
        for member in cls:
            if key in (_normalize(member.name), _normalize(member.value)):
                return member
        return None


class BeamType(_LenientEnum):
    """Support condition of the beam."""
    SIMPLY_SUPPORTED = "Simply Supported"
    CANTILEVER = "Cantilever"


class SectionStandard(_LenientEnum):
    """Section property databases."""
    AISC = "American (AISC)"
    EN = "European (EN)"
    BS = "British (BS)"
    CSA = "Canadian (CSA)"


class MemberUsage(_LenientEnum):
    """What the beam supports; decides whether walking vibration applies."""
    FLOOR = "Floor"
    ROOF = "Roof"


class DesignParameters(BaseModel):
    """Geometry, support condition and bracing of the beam."""
    span: float = Field(
        ...,
        gt=0,
        description="Span length in meters"
    )
    beam_type: BeamType = BeamType.SIMPLY_SUPPORTED

    # Unbraced lengths
    lb_minor: float = Field(
        default=0.0,
        ge=0,
        description="Unbraced length for minor axis in meters"
    )
    lb_major: float = Field(
        default=0.0,
        ge=0,
        description="Unbraced length for major axis in meters"
    )
    lb_ltb: float = Field(
        default=0.0,
        ge=0,
        description="Unbraced length for lateral-torsional buckling in meters"
    )

    # Supplementary design data
    bearing_length: Optional[float] = Field(
        None,
        gt=0,
        description="Bearing length at supports in mm (code default when omitted)"
    )
    member_usage: MemberUsage = MemberUsage.FLOOR
    cb: float = Field(
        default=1.0,
        ge=1.0,
        le=3.0,
        description="Lateral-torsional buckling modification factor"
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
        allow_inf_nan = False

    @property
    def span_mm(self) -> float:
        return self.span * 1000

    @property
    def lb_ltb_mm(self) -> float:
        return self.lb_ltb * 1000

    @property
    def is_cantilever(self) -> bool:
        return self.beam_type == BeamType.CANTILEVER


class Loads(BaseModel):
    """Service (unfactored) uniformly distributed loads in kN/m."""
    dead_load: float = Field(default=0.0, ge=0, description="Dead load D (kN/m)")
    live_load: float = Field(default=0.0, ge=0, description="Live load L (kN/m)")
    snow_load: float = Field(default=0.0, ge=0, description="Snow load S (kN/m)")
    wind_load: float = Field(default=0.0, ge=0, description="Wind load W (kN/m)")
    other_load: float = Field(
        default=0.0,
        ge=0,
        description="Other permanent load O (kN/m), combined with dead load"
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
        allow_inf_nan = False

    @property
    def dead_group(self) -> float:
        """Dead load group D + O used in every combination (kN/m)."""
        return self.dead_load + self.other_load


class MaterialProperties(BaseModel):
    """Steel strengths in MPa."""
    fy: float = Field(..., gt=0, description="Yield strength Fy (MPa)")
    fu: float = Field(..., gt=0, description="Ultimate strength Fu (MPa)")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
        allow_inf_nan = False

    @model_validator(mode="after")
    def check_fu_not_below_fy(self):
        if self.fu < self.fy:
            raise ValueError(f"fu ({self.fu} MPa) must not be less than fy ({self.fy} MPa)")
        return self


class DesignInputs(BaseModel):
    """Complete input model for a steel beam design request."""
    parameters: DesignParameters
    loads: Loads
    material: MaterialProperties

    section_standard: SectionStandard = SectionStandard.AISC
    section_family: str = "W-Shapes"

    include_notional_loads: bool = False
    select_for_serviceability: bool = Field(
        default=False,
        description="Require serviceability checks to pass during section search"
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
        allow_inf_nan = False

    @model_validator(mode="after")
    def check_family_offered(self):
        families = SECTION_FAMILY_MAP.get(self.section_standard.name, [])
        if self.section_family not in families:
            raise ValueError(
                f"Unknown section family '{self.section_family}' for "
                f"{self.section_standard.value}. Available: {', '.join(families)}"
            )
        return self
