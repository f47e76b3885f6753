"""LRFD steel beam design per AISC 360-16 and ASCE 7-16."""

from .errors import (
    BeamDesignError, CatalogLookupError, NoAdequateSectionError, ValidationError
)
from .core import BeamDesignEngine, run_analysis

__version__ = "0.1.0"
