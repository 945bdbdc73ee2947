"""
Unit tests for the planning service and session.
"""
import pytest
from unittest.mock import patch

from forest_planner.domain.grid import GridModel
from forest_planner.domain.models import CellCoordinate, LandSizeSpec
from forest_planner.infrastructure.species_catalog import SpeciesCatalog, SpeciesNotFoundError
from forest_planner.services.application.planning_service import (
    PlanningService,
    PlanningSession,
)


ORIGIN = CellCoordinate(0, 0)


@pytest.fixture
def guild_service(mango, lemongrass, make_species) -> PlanningService:
    """Service over a small catalog holding the Mango/Lemongrass guild."""
    avocado = make_species("Avocado", "Canopy", id=3)
    return PlanningService(catalog=SpeciesCatalog([
        mango.model_copy(update={"id": 1}),
        lemongrass.model_copy(update={"id": 2}),
        avocado,
    ]))


# ============================================================
# Session Tests
# ============================================================

class TestPlanningSession:
    """Tests for the default session."""

    def test_defaults(self, session):
        assert session.land.mode == "acre"
        assert session.grid.size == 23
        assert session.forest_age == 1
        assert session.setup_costs["landCost"] == 10000
        assert session.annual_costs["maintenance"] == 1000

    def test_cost_tables_not_shared(self):
        first = PlanningSession()
        second = PlanningSession()

        first.setup_costs["tools"] = 0

        assert second.setup_costs["tools"] == 500


# ============================================================
# Command Tests
# ============================================================

class TestCommands:
    """Tests for mutating operations."""

    def test_place_resolves_catalog_id(self, guild_service, session):
        assert guild_service.place(session, ORIGIN, 1)
        assert guild_service.inspect(session, ORIGIN).name == "Mango"

    def test_place_unknown_species_raises(self, guild_service, session):
        with pytest.raises(SpeciesNotFoundError):
            guild_service.place(session, ORIGIN, 999)
        assert session.grid.occupied_count == 0

    def test_second_canopy_rejected(self, guild_service, session):
        guild_service.place(session, ORIGIN, 1)
        guild_service.place(session, ORIGIN, 2)

        assert not guild_service.place(session, ORIGIN, 3)
        assert [s.name for s in session.grid.get(ORIGIN)] == ["Mango", "Lemongrass"]

    def test_remove(self, guild_service, session):
        guild_service.place(session, ORIGIN, 1)
        guild_service.remove(session, ORIGIN)
        assert guild_service.inspect(session, ORIGIN) is None

    def test_set_land_size_resets_grid(self, guild_service, session):
        guild_service.place(session, ORIGIN, 1)

        new_size = guild_service.set_land_size(
            session, LandSizeSpec(mode="custom", length_ft=27, width_ft=40)
        )

        assert new_size == 3
        assert session.grid.size == 3
        assert session.grid.occupied_count == 0
        assert session.land.mode == "custom"

    def test_set_forest_age(self, guild_service, session):
        guild_service.set_forest_age(session, 12)
        assert session.forest_age == 12

    def test_negative_forest_age_clamps_to_zero(self, guild_service, session):
        guild_service.set_forest_age(session, -4)
        assert session.forest_age == 0

    def test_cost_updates_merge(self, guild_service, session):
        guild_service.update_setup_costs(session, {"tools": 750, "fencing": 1200})
        guild_service.update_annual_costs(session, {"water": 0})

        assert session.setup_costs["tools"] == 750
        assert session.setup_costs["fencing"] == 1200
        assert session.setup_costs["landCost"] == 10000
        assert session.annual_costs["water"] == 0


# ============================================================
# Recompute Tests
# ============================================================

class TestRecompute:
    """Tests for deriving the view of a session."""

    def test_empty_session(self, guild_service, session):
        view = guild_service.recompute(session)

        assert view.scores.total_score == 0
        assert view.compatibility.compatible == []
        assert view.companion_suggestions == []
        assert view.economics.income_by_species == {}
        assert view.economics.net_profit == pytest.approx(-16500 - 1700)

    def test_mango_lemongrass_scenario(self, guild_service, session):
        guild_service.set_land_size(session, LandSizeSpec(mode="custom", length_ft=27, width_ft=27))
        guild_service.place(session, ORIGIN, 1)
        guild_service.place(session, ORIGIN, 2)
        guild_service.set_forest_age(session, 5)

        view = guild_service.recompute(session)

        assert view.scores.yield_score == 60
        assert view.scores.biodiversity_score == 20
        assert len(view.compatibility.compatible) == 1
        assert view.compatibility.compatible[0].species_a == "Mango"
        assert view.compatibility.compatible[0].species_b == "Lemongrass"
        assert view.compatibility.indeterminate == []

    def test_two_profit_figures_are_independent(self, guild_service, session):
        """Score panel profit uses fixed costs; economics uses the cost tables."""
        guild_service.place(session, ORIGIN, 1)
        guild_service.set_forest_age(session, 5)

        view = guild_service.recompute(session)

        assert view.scores.profit == pytest.approx(100 * 5 - (1000 + 500 * 5))
        assert view.economics.net_profit == pytest.approx((100 - 1700) * 5 - 16500)

    def test_recompute_does_not_mutate(self, guild_service, session):
        guild_service.place(session, ORIGIN, 1)
        before = session.grid.snapshot()

        guild_service.recompute(session)
        guild_service.recompute(session)

        assert session.grid == before

    def test_suggestions_sorted(self, catalog, session):
        service = PlanningService(catalog=catalog)
        service.place(session, ORIGIN, 1)  # Mango

        view = service.recompute(session)

        assert set(view.companion_suggestions) == {"Lemongrass", "Comfrey", "Sweet Potato"}
        assert view.companion_suggestions == sorted(view.companion_suggestions)

    def test_recompute_reads_grid_snapshot(self, guild_service, session):
        guild_service.place(session, ORIGIN, 1)

        with patch.object(GridModel, "snapshot", autospec=True,
                          side_effect=GridModel.snapshot) as snapshot:
            view = guild_service.recompute(session)

        snapshot.assert_called_once_with(session.grid)
        assert view.scores.biodiversity_score == 10

        guild_service.place(session, ORIGIN, 2)
        assert view.scores.biodiversity_score == 10
