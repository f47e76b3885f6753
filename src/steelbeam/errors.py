"""
Error taxonomy for the steel beam design engine.

Every error is local to a single request; none of them touch catalog state.
"""

from typing import List, Optional


class BeamDesignError(Exception):
    """Base class for all engine errors."""


class ValidationError(BeamDesignError, ValueError):
    """Raised when design inputs are invalid or incomplete.

    The message lists every problem found, one per line.
    """

    def __init__(self, errors: List[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("Invalid design inputs:\n  " + "\n  ".join(self.errors))


class CatalogLookupError(BeamDesignError, LookupError):
    """Raised for an unknown or empty section family, or an unknown section."""


class NoAdequateSectionError(BeamDesignError):
    """Raised when no catalog candidate satisfies every required check."""

    def __init__(
        self,
        message: str,
        heaviest_section: Optional[str] = None,
        worst_ratio: Optional[float] = None,
        failing_check: Optional[str] = None,
    ):
        self.heaviest_section = heaviest_section
        self.worst_ratio = worst_ratio
        self.failing_check = failing_check
        super().__init__(message)
