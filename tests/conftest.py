"""
Shared pytest fixtures for all tests.

This module provides common fixtures including:
- Density calculator and income projector instances
- Sample plant count maps
- Sample orchard configurations and zones
- FastAPI test client
"""
import os

# Rate limiting is exercised separately; keep the shared client unthrottled
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient

from orchard_planner.main import app
from orchard_planner.domain.models import OrchardConfig, PalekarModel, Zone
from orchard_planner.services.domain.density_calculator import DensityCalculator, DensityConfig
from orchard_planner.services.domain.income_projector import IncomeProjector


# ============================================================
# Service Fixtures
# ============================================================

@pytest.fixture
def calculator() -> DensityCalculator:
    """Density calculator with the standard 9ft bed and 1.5ft grid."""
    return DensityCalculator(DensityConfig(
        bed_width_ft=9.0,
        grid_spacing_ft=1.5,
        bed4_row_spacing_ft=3.0,
        utilization=0.82,
    ))


@pytest.fixture
def projector(calculator) -> IncomeProjector:
    """Income projector backed by the standard calculator."""
    return IncomeProjector(density_calculator=calculator)


# ============================================================
# Sample Data Fixtures
# ============================================================

@pytest.fixture
def sample_counts() -> dict[str, int]:
    """A per-acre style count map spanning several categories."""
    return {
        "big": 61,
        "small": 122,
        "medium": 61,
        "marigold": 488,
        "groundnut": 488,
        "turmeric": 488,
        "ginger": 488,
    }


@pytest.fixture
def sample_zones() -> list[Zone]:
    """Two zones totalling six acres."""
    return [
        Zone(id="zone-a", name="Zone A", acres=4),
        Zone(id="zone-b", name="Zone B", acres=2),
    ]


@pytest.fixture
def three_bed_config() -> OrchardConfig:
    """A single 24x24 K-module: 3 beds, 2 trenches, 1.5ft boundary."""
    return OrchardConfig(
        width_ft=36.0,
        height_ft=27.0,
        boundary_width_ft=1.5,
        bed_width_ft=9.0,
        path_width_ft=3.0,
        bed_count=3,
        row_count=1,
        grid_spacing_ft=1.5,
        model=PalekarModel.MODEL_24X24,
    )


# ============================================================
# FastAPI Test Client Fixtures
# ============================================================

@pytest.fixture
def test_client() -> TestClient:
    """Create a synchronous test client for FastAPI."""
    return TestClient(app)
