"""Parse and validate design requests for the steel beam engine.

Requests arrive as mappings (JSON bodies or YAML files) with camelCase or
snake_case keys.  Validation is delegated to the pydantic input models;
every problem found is collected into a single :class:`ValidationError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError as PydanticValidationError

from steelbeam.errors import ValidationError
from steelbeam.models.inputs import DesignInputs


def _format_errors(exc: PydanticValidationError) -> list[str]:
    """Turn pydantic error records into ``path: message`` lines."""
    messages = []
    for err in exc.errors():
        path = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        messages.append(f"{path}: {msg}" if path else msg)
    return messages


def load_design_inputs(data: Mapping[str, Any]) -> DesignInputs:
    """Validate a request mapping into :class:`DesignInputs`.

    Parameters
    ----------
    data:
        Mapping with ``parameters``, ``loads`` and ``material`` sections plus
        optional section selection flags.

    Returns
    -------
    DesignInputs

    Raises
    ------
    ValidationError
        If validation fails (the message lists every problem found).
    """
    if not isinstance(data, Mapping):
        raise ValidationError([f"Request must be a mapping, got {type(data).__name__}"])
    try:
        return DesignInputs.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise ValidationError(_format_errors(exc)) from exc


def parse_input(yaml_path: str | Path) -> DesignInputs:
    """Read and validate a design request YAML file.

    Raises
    ------
    FileNotFoundError
        If *yaml_path* does not exist.
    ValidationError
        If the file content is not a valid request.
    """
    path = Path(yaml_path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {yaml_path}")

    with open(path, "r", encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ValidationError([f"{path.name}: not valid YAML ({exc})"]) from exc

    if not isinstance(raw, dict):
        raise ValidationError(["YAML root must be a mapping (dict)"])
    return load_design_inputs(raw)


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------

_TEMPLATE_YAML = """\
# Steel beam design request - AISC 360-16 / ASCE 7-16 (LRFD)
# Lengths in m (bearing length in mm), loads in kN/m, stresses in MPa.

parameters:
  span: 6.0
  beamType: Simply Supported    # Simply Supported | Cantilever
  lbMinor: 0.0
  lbMajor: 0.0
  lbLtb: 0.0                    # 0 = compression flange continuously braced
  # bearingLength: 100          # mm, default 100
  memberUsage: Floor            # Floor | Roof
  cb: 1.0

loads:                          # unfactored service loads
  deadLoad: 10.0
  liveLoad: 15.0
  snowLoad: 5.0
  windLoad: 0.0
  otherLoad: 0.0                # superimposed permanent load, added to dead

material:
  fy: 345
  fu: 450

sectionStandard: American (AISC)
sectionFamily: W-Shapes
includeNotionalLoads: false
selectForServiceability: false
"""


def generate_template() -> str:
    """Return a sample YAML request as a string, ready to edit."""
    return _TEMPLATE_YAML
