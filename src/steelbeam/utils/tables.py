"""Shared table loading for steel beam design.

Provides:
- AISC / ASCE table loading from YAML configuration
- Unit conversion constants for section property tables
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


# ---------------------------------------------------------------------------
# Unit conversions (US customary table units -> SI)
# ---------------------------------------------------------------------------

IN_TO_MM = 25.4
IN2_TO_MM2 = IN_TO_MM ** 2
IN3_TO_MM3 = IN_TO_MM ** 3
IN4_TO_MM4 = IN_TO_MM ** 4
IN6_TO_MM6 = IN_TO_MM ** 6
LB_FT_TO_KG_M = 1.48816394

# Metric table units -> mm based SI
CM2_TO_MM2 = 1e2
CM3_TO_MM3 = 1e3
CM4_TO_MM4 = 1e4
CM6_TO_MM6 = 1e6


# ---------------------------------------------------------------------------
# Design table loading
# ---------------------------------------------------------------------------

_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

_design_tables_cache: dict[str, Any] | None = None


def load_design_tables() -> dict[str, Any]:
    """Load the AISC / ASCE design tables from ``aisc_tables.yaml``.

    The result is cached so that repeated calls do not re-read from disk.

    Returns
    -------
    dict
        Parsed YAML content keyed by table name (e.g. ``material``,
        ``load_combinations``, ``deflection_limits``).

    Raises
    ------
    FileNotFoundError
        If the YAML file is missing from the installed package.
    """
    global _design_tables_cache
    if _design_tables_cache is not None:
        return _design_tables_cache

    path = _CONFIG_DIR / "aisc_tables.yaml"
    if not path.exists():
        raise FileNotFoundError(f"aisc_tables.yaml not found at {path}")
    with open(path, encoding="utf-8") as fh:
        _design_tables_cache = yaml.safe_load(fh)
    return _design_tables_cache


def _clear_design_tables_cache() -> None:
    """Reset the internal cache (useful in tests)."""
    global _design_tables_cache
    _design_tables_cache = None
