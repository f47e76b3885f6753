"""
Strength limit states for rolled I-shapes per AISC 360-16 (LRFD).

Implements:
- Flexure: yielding and lateral-torsional buckling (Section F2)
- Shear: webs of rolled I-shapes (Section G2.1)
- Flange local buckling, checked on its own (Section F3)
- Web local yielding at the supports (Section J10.2)

Key clauses:
- AISC 360-16 Eq. F2-1 to F2-8: Mn for compact I-shapes
- AISC 360-16 Eq. F3-1, F3-2: Mn for noncompact / slender flanges
- AISC 360-16 Eq. G2-1 to G2-4: Vn and Cv1
- AISC 360-16 Eq. J10-3: Rn at a member end
"""

import math
from typing import List
from dataclasses import dataclass, field

from steelbeam.catalog import SectionRecord
from steelbeam.codes import AISC360, DesignCode
from steelbeam.models.inputs import DesignParameters, MaterialProperties
from steelbeam.models.outputs import (
    CalculationStep, DesignCheck, DesignStatus, InternalForces
)


FLEXURE_CHECK = "Flexural Strength"
SHEAR_CHECK = "Shear Strength"
FLB_CHECK = "Flange Local Buckling"
WLY_CHECK = "Web Local Yielding"


def _status(ratio: float) -> DesignStatus:
    return DesignStatus.PASS if ratio <= 1.0 else DesignStatus.FAIL


@dataclass
class FlexureResult:
    """Internal result from the F2 flexure check."""
    status: DesignStatus
    demand: float        # Mu (kNm)
    capacity: float      # φbMn (kNm)
    ratio: float

    Mp: float            # kNm
    Mn: float            # kNm
    Lb: float            # mm
    Lp: float            # mm
    Lr: float            # mm
    cb: float
    limit_state: str

    steps: List[CalculationStep] = field(default_factory=list)


@dataclass
class ShearResult:
    """Internal result from the G2.1 shear check."""
    status: DesignStatus
    demand: float        # Vu (kN)
    capacity: float      # φvVn (kN)
    ratio: float

    web_slenderness: float  # h/tw
    compact_limit: float    # 2.24√(E/Fy)
    phi: float
    cv1: float
    Aw: float               # mm²
    Vn: float               # kN
    limit_state: str

    steps: List[CalculationStep] = field(default_factory=list)


@dataclass
class FlangeBucklingResult:
    """Internal result from the F3 flange local buckling check."""
    status: DesignStatus
    demand: float        # Mu (kNm)
    capacity: float      # φbMn (kNm)
    ratio: float

    slenderness: float   # bf/2tf
    lambda_p: float
    lambda_r: float
    kc: float
    Mn: float            # kNm
    classification: str  # Compact / Noncompact / Slender

    steps: List[CalculationStep] = field(default_factory=list)


@dataclass
class WebYieldingResult:
    """Internal result from the J10.2 web local yielding check."""
    status: DesignStatus
    demand: float        # Ru (kN)
    capacity: float      # φRn (kN)
    ratio: float

    k: float             # mm
    bearing_length: float  # mm
    Rn: float            # kN

    steps: List[CalculationStep] = field(default_factory=list)


class StrengthChecker:
    """
    Strength checks of a rolled I-shape beam per AISC 360-16.

    All section properties are taken in mm-based SI units and all
    demands in kN / kNm.
    """

    def __init__(self, code: DesignCode = None):
        self.code = code or AISC360()

    def check(
        self,
        section: SectionRecord,
        forces: InternalForces,
        material: MaterialProperties,
        parameters: DesignParameters,
    ) -> List[DesignCheck]:
        """
        Run every strength limit state on one section.

        Args:
            section: Candidate section
            forces: Factored design forces
            material: Steel strengths
            parameters: Span, bracing and bearing data

        Returns:
            DesignChecks in fixed order: flexure, shear, flange local
            buckling, web local yielding
        """
        fy = material.fy
        bearing = parameters.bearing_length
        if bearing is None:
            bearing = self.code.get_web_local_yielding_parameters()["default_bearing_length"]

        flexure = self.check_flexure(section, forces.moment, fy, parameters.lb_ltb_mm, parameters.cb)
        shear = self.check_shear(section, forces.shear, fy)
        flb = self.check_flange_local_buckling(section, forces.moment, fy)
        wly = self.check_web_local_yielding(section, forces.reaction, fy, bearing)

        return [
            DesignCheck(
                check_name=FLEXURE_CHECK,
                demand=flexure.demand,
                capacity=flexure.capacity,
                ratio=flexure.ratio,
                status=flexure.status,
                formula="Mu ≤ φb·Mn",
                unit="kNm",
                code_reference="AISC 360-16 F2",
                limit_state=flexure.limit_state,
                calculation_steps=flexure.steps,
            ),
            DesignCheck(
                check_name=SHEAR_CHECK,
                demand=shear.demand,
                capacity=shear.capacity,
                ratio=shear.ratio,
                status=shear.status,
                formula="Vu ≤ φv·0.6·Fy·Aw·Cv1",
                unit="kN",
                code_reference="AISC 360-16 G2.1",
                limit_state=shear.limit_state,
                calculation_steps=shear.steps,
            ),
            DesignCheck(
                check_name=FLB_CHECK,
                demand=flb.demand,
                capacity=flb.capacity,
                ratio=flb.ratio,
                status=flb.status,
                formula="Mu ≤ φb·Mn (flange local buckling)",
                unit="kNm",
                code_reference="AISC 360-16 F3",
                limit_state=f"{flb.classification} flange",
                calculation_steps=flb.steps,
            ),
            DesignCheck(
                check_name=WLY_CHECK,
                demand=wly.demand,
                capacity=wly.capacity,
                ratio=wly.ratio,
                status=wly.status,
                formula="Ru ≤ φ·Fy·tw·(2.5k + lb)",
                unit="kN",
                code_reference="AISC 360-16 J10.2",
                limit_state="Web local yielding at support",
                calculation_steps=wly.steps,
            ),
        ]

    def check_flexure(
        self,
        section: SectionRecord,
        moment: float,          # Mu (kNm)
        fy: float,              # MPa
        lb: float,              # Unbraced length for LTB (mm)
        cb: float = None,
    ) -> FlexureResult:
        """
        Flexural strength of a doubly symmetric compact I-shape (F2).

        Args:
            section: Section properties
            moment: Factored moment Mu in kNm
            fy: Yield strength in MPa
            lb: Laterally unbraced length in mm (0 = continuously braced)
            cb: Lateral-torsional buckling modification factor

        Returns:
            FlexureResult with the governing limit state and steps
        """
        params = self.code.get_flexure_parameters()
        phi = self.code.get_resistance_factors()["flexure"]
        E = self.code.elastic_modulus
        if cb is None:
            cb = params["cb_default"]
        c = params["c"]
        rs = params["residual_stress_factor"]

        steps = []
        step_num = 1

        # Step 1: Plastic moment
        Mp = fy * section.Zx / 1e6  # kNm
        steps.append(CalculationStep(
            step_number=step_num,
            description="Plastic moment",
            formula="Mp = Fy × Zx",
            substitution=f"= {fy:g} × {section.Zx:.0f} / 10⁶",
            result=round(Mp, 2),
            unit="kNm",
            code_reference="AISC 360-16 Eq. F2-1"
        ))
        step_num += 1

        # Step 2: Limiting unbraced length for yielding
        Lp = params["lp_coefficient"] * section.ry * math.sqrt(E / fy)
        steps.append(CalculationStep(
            step_number=step_num,
            description="Limiting laterally unbraced length for yielding",
            formula="Lp = 1.76 × ry × √(E/Fy)",
            substitution=f"= {params['lp_coefficient']:g} × {section.ry:.1f} × √({E:.0f}/{fy:g})",
            result=round(Lp, 0),
            unit="mm",
            code_reference="AISC 360-16 Eq. F2-5"
        ))
        step_num += 1

        # Step 3: Limiting unbraced length for inelastic LTB
        jc_ratio = section.J * c / (section.Sx * section.ho)
        stress_ratio = rs * fy / E
        Lr = (
            params["lr_coefficient"] * section.rts * E / (rs * fy)
            * math.sqrt(jc_ratio + math.sqrt(jc_ratio ** 2 + 6.76 * stress_ratio ** 2))
        )
        steps.append(CalculationStep(
            step_number=step_num,
            description="Limiting unbraced length for inelastic LTB",
            formula="Lr = 1.95·rts·E/(0.7Fy)·√(Jc/(Sx·ho) + √((Jc/(Sx·ho))² + 6.76(0.7Fy/E)²))",
            substitution=(
                f"= 1.95 × {section.rts:.1f} × {E:.0f}/(0.7×{fy:g}) × "
                f"√({jc_ratio:.3e} + √({jc_ratio:.3e}² + 6.76×{stress_ratio:.3e}²))"
            ),
            result=round(Lr, 0),
            unit="mm",
            code_reference="AISC 360-16 Eq. F2-6"
        ))
        step_num += 1

        # Step 4: Nominal moment by unbraced length regime
        Mr = rs * fy * section.Sx / 1e6  # kNm
        if lb <= Lp:
            Mn = Mp
            limit_state = "Yielding (Lb ≤ Lp)"
            formula = "Mn = Mp"
            substitution = f"Lb = {lb:.0f} mm ≤ Lp = {Lp:.0f} mm"
            reference = "AISC 360-16 Eq. F2-1"
        elif lb <= Lr:
            Mn = min(cb * (Mp - (Mp - Mr) * (lb - Lp) / (Lr - Lp)), Mp)
            limit_state = "Inelastic LTB (Lp < Lb ≤ Lr)"
            formula = "Mn = Cb[Mp − (Mp − 0.7FySx)(Lb − Lp)/(Lr − Lp)] ≤ Mp"
            substitution = (
                f"= {cb:g}[{Mp:.2f} − ({Mp:.2f} − {Mr:.2f})"
                f"({lb:.0f} − {Lp:.0f})/({Lr:.0f} − {Lp:.0f})]"
            )
            reference = "AISC 360-16 Eq. F2-2"
        else:
            slenderness = lb / section.rts
            Fcr = (
                cb * math.pi ** 2 * E / slenderness ** 2
                * math.sqrt(1 + 0.078 * jc_ratio * slenderness ** 2)
            )
            Mn = min(Fcr * section.Sx / 1e6, Mp)
            limit_state = "Elastic LTB (Lb > Lr)"
            formula = "Mn = Fcr·Sx ≤ Mp, Fcr = Cb·π²E/(Lb/rts)²·√(1 + 0.078·Jc/(Sx·ho)·(Lb/rts)²)"
            substitution = f"Fcr = {Fcr:.1f} MPa; Mn = {Fcr:.1f} × {section.Sx:.0f} / 10⁶"
            reference = "AISC 360-16 Eq. F2-3, F2-4"

        steps.append(CalculationStep(
            step_number=step_num,
            description=f"Nominal flexural strength: {limit_state}",
            formula=formula,
            substitution=substitution,
            result=round(Mn, 2),
            unit="kNm",
            code_reference=reference
        ))
        step_num += 1

        capacity = phi * Mn
        steps.append(CalculationStep(
            step_number=step_num,
            description="Design flexural strength",
            formula="φb·Mn",
            substitution=f"= {phi:g} × {Mn:.2f}",
            result=round(capacity, 2),
            unit="kNm",
            code_reference="AISC 360-16 F1"
        ))

        ratio = moment / capacity
        return FlexureResult(
            status=_status(ratio),
            demand=moment,
            capacity=capacity,
            ratio=ratio,
            Mp=Mp,
            Mn=Mn,
            Lb=lb,
            Lp=Lp,
            Lr=Lr,
            cb=cb,
            limit_state=limit_state,
            steps=steps,
        )

    def check_shear(
        self,
        section: SectionRecord,
        shear_force: float,    # Vu (kN)
        fy: float,             # MPa
    ) -> ShearResult:
        """
        Shear strength of the web of a rolled I-shape (G2.1).

        Args:
            section: Section properties
            shear_force: Factored shear Vu in kN
            fy: Yield strength in MPa

        Returns:
            ShearResult with φv, Cv1 and steps
        """
        params = self.code.get_shear_parameters()
        factors = self.code.get_resistance_factors()
        E = self.code.elastic_modulus

        steps = []
        step_num = 1

        h_tw = section.web_slenderness
        compact_limit = params["compact_web_limit"] * math.sqrt(E / fy)
        steps.append(CalculationStep(
            step_number=step_num,
            description="Web slenderness vs. compact web limit",
            formula="h/tw ≤ 2.24√(E/Fy)",
            substitution=f"{h_tw:.2f} vs 2.24 × √({E:.0f}/{fy:g}) = {compact_limit:.2f}",
            result=round(h_tw, 2),
            unit="-",
            code_reference="AISC 360-16 G2.1(a)"
        ))
        step_num += 1

        if h_tw <= compact_limit:
            phi = factors["shear_compact_web"]
            cv1 = 1.0
            limit_state = "Web shear yielding (compact web)"
            cv1_text = "h/tw ≤ 2.24√(E/Fy): φv = 1.00, Cv1 = 1.0"
        else:
            phi = factors["shear"]
            kv = params["kv"]
            cv1_limit = params["cv1_limit"] * math.sqrt(kv * E / fy)
            if h_tw <= cv1_limit:
                cv1 = 1.0
                limit_state = "Web shear yielding"
                cv1_text = f"h/tw ≤ 1.10√(kvE/Fy) = {cv1_limit:.2f}: Cv1 = 1.0"
            else:
                cv1 = cv1_limit / h_tw
                limit_state = "Web shear buckling"
                cv1_text = f"Cv1 = 1.10√(kvE/Fy)/(h/tw) = {cv1_limit:.2f}/{h_tw:.2f}"

        steps.append(CalculationStep(
            step_number=step_num,
            description="Web shear strength coefficient",
            formula="Cv1 (G2-2 to G2-4)",
            substitution=cv1_text,
            result=round(cv1, 3),
            unit="-",
            code_reference="AISC 360-16 G2.1(b)"
        ))
        step_num += 1

        Aw = section.web_area
        Vn = 0.6 * fy * Aw * cv1 / 1000  # kN
        steps.append(CalculationStep(
            step_number=step_num,
            description="Nominal shear strength",
            formula="Vn = 0.6 × Fy × Aw × Cv1, Aw = d × tw",
            substitution=f"= 0.6 × {fy:g} × {Aw:.0f} × {cv1:.3f} / 10³",
            result=round(Vn, 2),
            unit="kN",
            code_reference="AISC 360-16 Eq. G2-1"
        ))
        step_num += 1

        capacity = phi * Vn
        steps.append(CalculationStep(
            step_number=step_num,
            description="Design shear strength",
            formula="φv·Vn",
            substitution=f"= {phi:g} × {Vn:.2f}",
            result=round(capacity, 2),
            unit="kN",
            code_reference="AISC 360-16 G1"
        ))

        ratio = shear_force / capacity
        return ShearResult(
            status=_status(ratio),
            demand=shear_force,
            capacity=capacity,
            ratio=ratio,
            web_slenderness=h_tw,
            compact_limit=compact_limit,
            phi=phi,
            cv1=cv1,
            Aw=Aw,
            Vn=Vn,
            limit_state=limit_state,
            steps=steps,
        )

    def check_flange_local_buckling(
        self,
        section: SectionRecord,
        moment: float,   # Mu (kNm)
        fy: float,       # MPa
    ) -> FlangeBucklingResult:
        """
        Flange local buckling of the compression flange (F3), taken
        independently of lateral-torsional buckling.
        """
        params = self.code.get_flexure_parameters()
        phi = self.code.get_resistance_factors()["flexure"]
        E = self.code.elastic_modulus

        steps = []
        step_num = 1

        lam = section.flange_slenderness
        lam_p = params["flange_lambda_p"] * math.sqrt(E / fy)
        lam_r = params["flange_lambda_r"] * math.sqrt(E / fy)
        steps.append(CalculationStep(
            step_number=step_num,
            description="Flange slenderness and limits",
            formula="λ = bf/2tf; λpf = 0.38√(E/Fy); λrf = 1.0√(E/Fy)",
            substitution=f"λ = {section.bf:.1f}/(2×{section.tf:.1f}); λpf = {lam_p:.2f}; λrf = {lam_r:.2f}",
            result=round(lam, 2),
            unit="-",
            code_reference="AISC 360-16 Table B4.1b"
        ))
        step_num += 1

        Mp = fy * section.Zx / 1e6
        Mr = params["residual_stress_factor"] * fy * section.Sx / 1e6
        kc = min(max(4 / math.sqrt(section.web_slenderness), params["kc_min"]), params["kc_max"])

        if lam <= lam_p:
            classification = "Compact"
            Mn = Mp
            formula = "Mn = Mp"
            substitution = f"λ = {lam:.2f} ≤ λpf = {lam_p:.2f}"
            reference = "AISC 360-16 F3 (compact flange)"
        elif lam <= lam_r:
            classification = "Noncompact"
            Mn = Mp - (Mp - Mr) * (lam - lam_p) / (lam_r - lam_p)
            formula = "Mn = Mp − (Mp − 0.7FySx)(λ − λpf)/(λrf − λpf)"
            substitution = (
                f"= {Mp:.2f} − ({Mp:.2f} − {Mr:.2f})({lam:.2f} − {lam_p:.2f})"
                f"/({lam_r:.2f} − {lam_p:.2f})"
            )
            reference = "AISC 360-16 Eq. F3-1"
        else:
            classification = "Slender"
            Mn = 0.9 * E * kc * section.Sx / lam ** 2 / 1e6
            formula = "Mn = 0.9·E·kc·Sx/λ², kc = 4/√(h/tw)"
            substitution = f"= 0.9 × {E:.0f} × {kc:.3f} × {section.Sx:.0f} / {lam:.2f}² / 10⁶"
            reference = "AISC 360-16 Eq. F3-2"

        steps.append(CalculationStep(
            step_number=step_num,
            description=f"Nominal strength for {classification.lower()} flange",
            formula=formula,
            substitution=substitution,
            result=round(Mn, 2),
            unit="kNm",
            code_reference=reference
        ))
        step_num += 1

        capacity = phi * Mn
        steps.append(CalculationStep(
            step_number=step_num,
            description="Design strength for flange local buckling",
            formula="φb·Mn",
            substitution=f"= {phi:g} × {Mn:.2f}",
            result=round(capacity, 2),
            unit="kNm",
            code_reference="AISC 360-16 F1"
        ))

        ratio = moment / capacity
        return FlangeBucklingResult(
            status=_status(ratio),
            demand=moment,
            capacity=capacity,
            ratio=ratio,
            slenderness=lam,
            lambda_p=lam_p,
            lambda_r=lam_r,
            kc=kc,
            Mn=Mn,
            classification=classification,
            steps=steps,
        )

    def check_web_local_yielding(
        self,
        section: SectionRecord,
        reaction: float,         # Ru (kN)
        fy: float,               # MPa
        bearing_length: float,   # lb (mm)
    ) -> WebYieldingResult:
        """Web local yielding under a concentrated reaction at a member end (J10.2)."""
        params = self.code.get_web_local_yielding_parameters()
        phi = self.code.get_resistance_factors()["web_local_yielding"]
        k_mult = params["k_multiplier_at_support"]

        Rn = fy * section.tw * (k_mult * section.k + bearing_length) / 1000  # kN
        capacity = phi * Rn
        steps = [
            CalculationStep(
                step_number=1,
                description="Nominal web local yielding strength at support",
                formula="Rn = Fy × tw × (2.5k + lb)",
                substitution=(
                    f"= {fy:g} × {section.tw:.2f} × ({k_mult:g}×{section.k:.2f} + "
                    f"{bearing_length:.0f}) / 10³"
                ),
                result=round(Rn, 2),
                unit="kN",
                code_reference="AISC 360-16 Eq. J10-3"
            ),
            CalculationStep(
                step_number=2,
                description="Design web local yielding strength",
                formula="φ·Rn",
                substitution=f"= {phi:g} × {Rn:.2f}",
                result=round(capacity, 2),
                unit="kN",
                code_reference="AISC 360-16 J10.2"
            ),
        ]

        ratio = reaction / capacity
        return WebYieldingResult(
            status=_status(ratio),
            demand=reaction,
            capacity=capacity,
            ratio=ratio,
            k=section.k,
            bearing_length=bearing_length,
            Rn=Rn,
            steps=steps,
        )
