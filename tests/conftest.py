"""Shared fixtures for the steel beam design tests."""

import pytest

from steelbeam.catalog import load_default_catalog
from steelbeam.codes import AISC360
from steelbeam.core import BeamDesignEngine
from steelbeam.models import (
    DesignInputs, DesignParameters, Loads, MaterialProperties
)


@pytest.fixture(scope="session")
def code():
    return AISC360()


@pytest.fixture(scope="session")
def catalog():
    return load_default_catalog()


@pytest.fixture(scope="session")
def engine(code, catalog):
    return BeamDesignEngine(code, catalog)


@pytest.fixture
def w14x26(catalog):
    return catalog.get("AISC", "W-Shapes", "W14X26")


@pytest.fixture
def material():
    return MaterialProperties(fy=345, fu=450)


@pytest.fixture
def parameters():
    """6 m simply supported floor beam, continuously braced."""
    return DesignParameters(span=6.0)


@pytest.fixture
def loads():
    return Loads(dead_load=10, live_load=15, snow_load=5)


@pytest.fixture
def example_inputs(parameters, loads, material):
    """Reference request: 6 m span, D=10, L=15, S=5 kN/m, Fy=345 MPa."""
    return DesignInputs(parameters=parameters, loads=loads, material=material)


@pytest.fixture
def example_request():
    """Same reference request as a camelCase mapping."""
    return {
        "parameters": {"span": 6.0, "beamType": "Simply Supported", "lbLtb": 0.0},
        "loads": {"deadLoad": 10, "liveLoad": 15, "snowLoad": 5, "windLoad": 0, "otherLoad": 0},
        "material": {"fy": 345, "fu": 450},
        "sectionStandard": "American (AISC)",
        "sectionFamily": "W-Shapes",
        "includeNotionalLoads": False,
    }
