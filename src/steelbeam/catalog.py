"""Steel section catalog: loads rolled I-section properties from YAML data.

The catalog is a read-only collaborator of the design engine.  Section
tables are parsed once, normalized to mm-based SI units and exposed as
tuples of frozen :class:`SectionRecord` objects sorted ascending by unit
weight (ties broken by name).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable

import yaml

from steelbeam.errors import CatalogLookupError
from steelbeam.models.inputs import SectionStandard
from steelbeam.utils.constants import I_SHAPE_FAMILIES
from steelbeam.utils.tables import (
    CM2_TO_MM2,
    CM3_TO_MM3,
    CM4_TO_MM4,
    CM6_TO_MM6,
    IN2_TO_MM2,
    IN3_TO_MM3,
    IN4_TO_MM4,
    IN6_TO_MM6,
    IN_TO_MM,
    LB_FT_TO_KG_M,
)

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data" / "sections"


@dataclass(frozen=True)
class SectionRecord:
    """All geometric properties needed for AISC 360 beam checks.

    Units (SI, mm based):
    - Dimensions: mm
    - Areas: mm²
    - Second moments of area, torsion constant: mm⁴
    - Section moduli: mm³
    - Warping constant: mm⁶
    - Unit weight: kg/m
    """

    name: str
    standard: str      # SectionStandard member name, e.g. "AISC"
    family: str        # e.g. "W-Shapes"
    unit_weight: float  # Mass per length, used for ordering (kg/m)
    d: float    # Overall depth (mm)
    bf: float   # Flange width (mm)
    tf: float   # Flange thickness (mm)
    tw: float   # Web thickness (mm)
    k: float    # Distance from outer flange face to web toe of fillet (mm)
    A: float    # Cross-section area (mm²)
    Ix: float   # Major axis second moment of area (mm⁴)
    Iy: float   # Minor axis second moment of area (mm⁴)
    Zx: float   # Plastic section modulus, major axis (mm³)
    Sx: float   # Elastic section modulus, major axis (mm³)
    rts: float  # Effective radius of gyration for LTB (mm)
    ho: float   # Distance between flange centroids (mm)
    J: float    # St Venant torsion constant (mm⁴)
    Cw: float   # Warping constant (mm⁶)

    @property
    def ry(self) -> float:
        """Minor-axis radius of gyration (mm)."""
        return math.sqrt(self.Iy / self.A)

    @property
    def h(self) -> float:
        """Clear web depth between fillets, d − 2k (mm)."""
        return self.d - 2 * self.k

    @property
    def flange_slenderness(self) -> float:
        """λf = bf / 2tf."""
        return self.bf / (2 * self.tf)

    @property
    def web_slenderness(self) -> float:
        """λw = h / tw."""
        return self.h / self.tw

    @property
    def web_area(self) -> float:
        """Aw = d·tw (mm²)."""
        return self.d * self.tw

    def self_weight(self, gravity: float = 9.81) -> float:
        """Self weight as a line load (kN/m)."""
        return self.unit_weight * gravity / 1000


# ---------------------------------------------------------------------------
# Record parsing
# ---------------------------------------------------------------------------

def _record_from_imperial(row: dict[str, Any], standard: str, family: str) -> SectionRecord:
    """Build a record from an AISC Shapes Database row (US units)."""
    return SectionRecord(
        name=str(row["name"]).strip(),
        standard=standard,
        family=family,
        unit_weight=float(row["W"]) * LB_FT_TO_KG_M,
        d=float(row["d"]) * IN_TO_MM,
        bf=float(row["bf"]) * IN_TO_MM,
        tf=float(row["tf"]) * IN_TO_MM,
        tw=float(row["tw"]) * IN_TO_MM,
        k=float(row["kdes"]) * IN_TO_MM,
        A=float(row["A"]) * IN2_TO_MM2,
        Ix=float(row["Ix"]) * IN4_TO_MM4,
        Iy=float(row["Iy"]) * IN4_TO_MM4,
        Zx=float(row["Zx"]) * IN3_TO_MM3,
        Sx=float(row["Sx"]) * IN3_TO_MM3,
        rts=float(row["rts"]) * IN_TO_MM,
        ho=float(row["ho"]) * IN_TO_MM,
        J=float(row["J"]) * IN4_TO_MM4,
        Cw=float(row["Cw"]) * IN6_TO_MM6,
    )


def _record_from_metric(row: dict[str, Any], standard: str, family: str) -> SectionRecord:
    """Build a record from a European table row (mm, cm², cm⁴, cm³, cm⁶).

    European tables do not publish rts, ho or k; they are derived:
    ``rts² = √(Iz·Iw) / Wel,y``, ``ho = h − tf``, ``k = tf + r``.
    """
    h = float(row["h"])
    tf = float(row["tf"])
    Iz = float(row["Iz"]) * CM4_TO_MM4
    Iw = float(row["Iw"]) * CM6_TO_MM6
    Wel_y = float(row["Wel_y"]) * CM3_TO_MM3
    return SectionRecord(
        name=str(row["name"]).strip(),
        standard=standard,
        family=family,
        unit_weight=float(row["G"]),
        d=h,
        bf=float(row["b"]),
        tf=tf,
        tw=float(row["tw"]),
        k=tf + float(row["r"]),
        A=float(row["A"]) * CM2_TO_MM2,
        Ix=float(row["Iy"]) * CM4_TO_MM4,
        Iy=Iz,
        Zx=float(row["Wpl_y"]) * CM3_TO_MM3,
        Sx=Wel_y,
        rts=math.sqrt(math.sqrt(Iz * Iw) / Wel_y),
        ho=h - tf,
        J=float(row["It"]) * CM4_TO_MM4,
        Cw=Iw,
    )


_PARSERS = {
    "imperial": _record_from_imperial,
    "metric": _record_from_metric,
}


def _check_record(record: SectionRecord, source: Path) -> None:
    """Reject records with non-positive properties or an empty web."""
    for field_name in ("unit_weight", "d", "bf", "tf", "tw", "k", "A", "Ix",
                       "Iy", "Zx", "Sx", "rts", "ho", "J", "Cw"):
        if getattr(record, field_name) <= 0:
            raise ValueError(
                f"{source.name}: section '{record.name}' has non-positive {field_name}"
            )
    if record.h <= 0:
        raise ValueError(f"{source.name}: section '{record.name}' has no clear web depth")


def load_section_file(path: Path) -> list[SectionRecord]:
    """Parse a single section YAML file.

    Parameters
    ----------
    path : Path
        YAML file with ``standard``, ``family``, ``units`` and ``sections``.

    Returns
    -------
    list[SectionRecord]
        Records in file order.

    Raises
    ------
    ValueError
        If the file declares unknown units, a family that is not a doubly
        symmetric I-shape, or holds invalid properties.
    """
    with open(path, encoding="utf-8") as fh:
        doc = yaml.safe_load(fh)

    standard = SectionStandard(doc["standard"]).name
    family = str(doc["family"])
    units = str(doc.get("units", "metric"))
    try:
        parser = _PARSERS[units]
    except KeyError:
        raise ValueError(f"{path.name}: unknown units '{units}'") from None
    if family not in I_SHAPE_FAMILIES.get(standard, ()):
        raise ValueError(
            f"{path.name}: family '{family}' is not a doubly symmetric I-shape; "
            f"the F2/F3/G2.1 checks do not apply to it"
        )

    records = []
    for row in doc.get("sections") or []:
        record = parser(row, standard, family)
        _check_record(record, path)
        records.append(record)
    return records


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

def _standard_key(standard: SectionStandard | str) -> str:
    if isinstance(standard, SectionStandard):
        return standard.name
    try:
        return SectionStandard(standard).name
    except ValueError:
        return str(standard)


class SectionCatalog:
    """Read-only lookup of sections keyed by (standard, family)."""

    def __init__(self, records: Iterable[SectionRecord]):
        grouped: dict[tuple[str, str], list[SectionRecord]] = {}
        for record in records:
            grouped.setdefault((record.standard, record.family), []).append(record)
        self._families: dict[tuple[str, str], tuple[SectionRecord, ...]] = {
            key: tuple(sorted(group, key=lambda r: (r.unit_weight, r.name)))
            for key, group in grouped.items()
        }

    @classmethod
    def from_directory(cls, directory: Path) -> "SectionCatalog":
        """Load every ``*.yaml`` section table under *directory*."""
        records: list[SectionRecord] = []
        for path in sorted(Path(directory).glob("*.yaml")):
            loaded = load_section_file(path)
            logger.debug("Loaded %d sections from %s", len(loaded), path.name)
            records.extend(loaded)
        return cls(records)

    def families(self) -> list[tuple[str, str]]:
        """Return the (standard, family) keys that hold sections."""
        return sorted(self._families)

    def lookup(self, standard: SectionStandard | str, family: str) -> tuple[SectionRecord, ...]:
        """Return the family's sections sorted ascending by unit weight.

        Raises
        ------
        CatalogLookupError
            If the family is unknown or holds no sections.
        """
        key = (_standard_key(standard), family)
        sections = self._families.get(key)
        if not sections:
            available = ", ".join(f"{s}/{f}" for s, f in self.families())
            raise CatalogLookupError(
                f"No section data for family '{family}' in standard '{key[0]}'. "
                f"Available: {available}"
            )
        return sections

    def get(self, standard: SectionStandard | str, family: str, name: str) -> SectionRecord:
        """Look up a single section by name within a family."""
        for record in self.lookup(standard, family):
            if record.name == name:
                return record
        raise CatalogLookupError(
            f"Section '{name}' not found in family '{family}'."
        )


@lru_cache(maxsize=1)
def load_default_catalog() -> SectionCatalog:
    """Return the bundled catalog, parsed once per process."""
    return SectionCatalog.from_directory(_DATA_DIR)
