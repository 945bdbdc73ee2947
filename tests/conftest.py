"""
Shared pytest fixtures for all tests.

This module provides common fixtures including:
- Species factory and the Mango/Lemongrass guild
- Grid, engines and planning session
- Catalog-backed planning service
- FastAPI test client
"""
import os

# Tests share one client address; keep the per-minute limit out of the way.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from itertools import count
from typing import AsyncGenerator, Callable
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

import forest_planner.services.application.planning_service as planning_module
from forest_planner.main import app
from forest_planner.domain.grid import GridModel
from forest_planner.domain.models import Climate, Layer, SpeciesRecord
from forest_planner.infrastructure.species_catalog import SpeciesCatalog, get_species_catalog
from forest_planner.services.application.planning_service import PlanningService, PlanningSession
from forest_planner.services.domain.placement_engine import PlacementEngine


# ============================================================
# Sample Data Fixtures
# ============================================================

@pytest.fixture
def make_species() -> Callable[..., SpeciesRecord]:
    """Factory for species records with sensible defaults and unique ids."""
    ids = count(1000)

    def _make(name: str, layer: Layer = Layer.HERBACEOUS, **overrides) -> SpeciesRecord:
        fields = {
            "id": next(ids),
            "name": name,
            "symbol": name[:2],
            "climate": Climate.TROPICAL,
            "layer": layer,
            "companions": (),
            "yield_per_year": 10,
            "unit": "kg",
            "market_price": 1.0,
            "maturity_age": 1,
        }
        fields.update(overrides)
        return SpeciesRecord(**fields)

    return _make


@pytest.fixture
def mango(make_species) -> SpeciesRecord:
    return make_species(
        "Mango", Layer.CANOPY,
        yield_per_year=50, maturity_age=5, market_price=2, companions=["Lemongrass"],
    )


@pytest.fixture
def lemongrass(make_species) -> SpeciesRecord:
    return make_species(
        "Lemongrass", Layer.HERBACEOUS,
        yield_per_year=10, maturity_age=1, market_price=1, companions=["Mango"],
    )


@pytest.fixture
def one_per_layer(make_species) -> list[SpeciesRecord]:
    """One distinct species in each of the seven layers."""
    return [make_species(f"Plant {layer.value}", layer) for layer in Layer]


# ============================================================
# Engine Fixtures
# ============================================================

@pytest.fixture
def grid() -> GridModel:
    return GridModel(3)


@pytest.fixture
def engine() -> PlacementEngine:
    return PlacementEngine()


@pytest.fixture
def catalog() -> SpeciesCatalog:
    return get_species_catalog()


@pytest.fixture
def session() -> PlanningSession:
    return PlanningSession()


@pytest.fixture
def planning_service(catalog) -> PlanningService:
    return PlanningService(catalog=catalog)


# ============================================================
# FastAPI Test Client Fixtures
# ============================================================

@pytest.fixture
def test_client() -> TestClient:
    """Create a synchronous test client with a fresh planning session."""
    planning_module._session = None
    return TestClient(app)


@pytest.fixture
async def async_test_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client for FastAPI."""
    planning_module._session = None
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
