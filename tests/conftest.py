"""
Shared test fixtures.

Provides the three-shirt scenario catalog with its two-value domains, and
seeded random catalogs for property checks against the scan engine.
"""

import pytest

from facetsearch_core import (
    COLORS,
    SIZES,
    Color,
    FacetedQueryEngine,
    ScanQueryEngine,
    Shirt,
    Size,
    generate_shirts,
)

A1 = Shirt(Color.RED, Size.SMALL, name="A1", id="a1")
A2 = Shirt(Color.RED, Size.LARGE, name="A2", id="a2")
A3 = Shirt(Color.BLUE, Size.SMALL, name="A3", id="a3")

SCENARIO_COLORS = COLORS.subset([Color.RED, Color.BLUE])
SCENARIO_SIZES = SIZES.subset([Size.SMALL, Size.LARGE])


@pytest.fixture
def scenario_shirts() -> tuple:
    return A1, A2, A3


@pytest.fixture
def scenario_engine() -> FacetedQueryEngine:
    return FacetedQueryEngine([A1, A2, A3], colors=SCENARIO_COLORS, sizes=SCENARIO_SIZES)


@pytest.fixture(params=[0, 1, 7, 250])
def random_catalog(request) -> list:
    return generate_shirts(request.param, seed=request.param + 42)


@pytest.fixture
def engines(random_catalog):
    """Indexed and scan engines over the same random catalog."""
    return FacetedQueryEngine(random_catalog), ScanQueryEngine(random_catalog)
