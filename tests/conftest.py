"""
Shared test fixtures — test client, calculator field builders.
"""

import pytest
from fastapi.testclient import TestClient

from precast.main import app
from precast.routers import calculators


@pytest.fixture(autouse=True)
def reset_sessions():
    """Each test starts with no open calculator sessions."""
    calculators.sessions.clear()
    yield
    calculators.sessions.clear()


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


def dim(value, unit="feet"):
    return {"value": value, "unit": unit}


@pytest.fixture
def wall_fields():
    """10' × 6' box, 4' + 1' + 0' walls, 8" base with 6" overhang, 6" walls, 4" lid."""
    return {
        "length": dim(10),
        "width": dim(6),
        "wall_height_1": dim(4),
        "wall_height_2": dim(12, "inches"),
        "wall_height_3": dim(0),
        "base_thickness": dim(8, "inches"),
        "base_extension": dim(6, "inches"),
        "wall_thickness": dim(6, "inches"),
        "lid_thickness": dim(4, "inches"),
        "quantity": 1,
    }
