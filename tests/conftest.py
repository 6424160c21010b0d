"""Shared pytest fixtures for the GeoJSON import test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample GeoJSON file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mixed_collection_geojson(data_dir: Path) -> Path:
    """FeatureCollection with a point, a line, a simple area, an area with a hole, and a null geometry."""
    return data_dir / "01_feature_collection_mixed.geojson"


@pytest.fixture()
def nested_collection_geojson(data_dir: Path) -> Path:
    """Feature wrapping a GeometryCollection that nests another collection."""
    return data_dir / "02_nested_geometry_collection.geojson"


@pytest.fixture()
def not_json_geojson(edge_cases_dir: Path) -> Path:
    """A file that is not JSON at all."""
    return edge_cases_dir / "11_not_json.geojson"


@pytest.fixture()
def unknown_geometry_geojson(edge_cases_dir: Path) -> Path:
    """FeatureCollection whose first geometry has an unknown type."""
    return edge_cases_dir / "12_unknown_geometry.geojson"


@pytest.fixture()
def empty_geojson(edge_cases_dir: Path) -> Path:
    """A zero-byte file."""
    return edge_cases_dir / "13_empty.geojson"
