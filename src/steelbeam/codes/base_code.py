"""
Abstract base class for design code provisions.
Enables extensibility for different steel design codes (AISC 360, CSA S16, ...)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class DeflectionLimit:
    """Span/deflection limit for a serviceability check."""
    divisor: float          # e.g. 360 for L/360
    span_multiplier: float  # 2.0 for cantilevers under IBC Table 1604.3
    label: str              # e.g. "(2L)/360"


class DesignCode(ABC):
    """
    Abstract base class for structural steel design codes.

    Purpose:
    - Define interface for code-specific provisions
    - Keep factors, limits and policies out of the checkers
    - Centralize code clause references
    """

    @property
    @abstractmethod
    def code_name(self) -> str:
        """Return the code name/version."""
        pass

    @property
    @abstractmethod
    def elastic_modulus(self) -> float:
        """Return steel modulus of elasticity E (MPa)."""
        pass

    @property
    @abstractmethod
    def gravity(self) -> float:
        """Return gravitational acceleration (m/s²) for self weight."""
        pass

    @abstractmethod
    def get_load_combination_table(self) -> List[Dict[str, Any]]:
        """Return the ordered strength load combination definitions."""
        pass

    @abstractmethod
    def get_notional_load_ratio(self) -> float:
        """Return notional lateral load as a fraction of factored gravity load."""
        pass

    @abstractmethod
    def get_resistance_factors(self) -> Dict[str, float]:
        """Return resistance factors (phi) keyed by limit state."""
        pass

    @abstractmethod
    def get_flexure_parameters(self) -> Dict[str, float]:
        """Return coefficients for flexural limit states."""
        pass

    @abstractmethod
    def get_shear_parameters(self) -> Dict[str, float]:
        """Return coefficients for web shear strength."""
        pass

    @abstractmethod
    def get_web_local_yielding_parameters(self) -> Dict[str, float]:
        """Return coefficients for web local yielding."""
        pass

    @abstractmethod
    def get_deflection_limit(self, load_kind: str, is_cantilever: bool) -> DeflectionLimit:
        """Return the deflection limit for 'live' or 'total' load."""
        pass

    @abstractmethod
    def get_vibration_parameters(self) -> Dict[str, float]:
        """Return parameters for the walking vibration check."""
        pass

    @abstractmethod
    def get_cambering_policy(self) -> Dict[str, float]:
        """Return the fixed cambering threshold and rounding increment."""
        pass
