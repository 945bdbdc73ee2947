"""
Unit tests for plan scoring.

Tests cover:
- Maturity factor
- Biodiversity, yield and vertical scores
- Fixed-cost profit
- The Mango/Lemongrass scenario
"""
import pytest

from forest_planner.domain.models import Layer
from forest_planner.services.domain.scoring_engine import (
    ScoringConfig,
    ScoringEngine,
    maturity_factor,
)


@pytest.fixture
def scoring() -> ScoringEngine:
    return ScoringEngine(ScoringConfig(setup_cost=1000, annual_cost=500))


# ============================================================
# Maturity Factor Tests
# ============================================================

class TestMaturityFactor:
    """Tests for maturity scaling."""

    def test_linear_before_maturity(self):
        assert maturity_factor(2, 5) == pytest.approx(0.4)

    @pytest.mark.parametrize("age", [5, 6, 10, 50])
    def test_capped_at_one(self, age):
        """At or past maturity the factor is exactly 1."""
        assert maturity_factor(age, 5) == 1.0

    def test_age_zero(self):
        assert maturity_factor(0, 5) == 0.0

    def test_no_maturity_period(self):
        assert maturity_factor(0, 0) == 1.0


# ============================================================
# Biodiversity Tests
# ============================================================

class TestBiodiversityScore:
    """Tests for the biodiversity score."""

    def test_empty_plan(self, scoring):
        assert scoring.biodiversity_score([]) == 0

    def test_counts_distinct_names(self, scoring, mango, lemongrass):
        assert scoring.biodiversity_score([mango, lemongrass, mango]) == 20

    def test_all_layers_bonus(self, scoring, one_per_layer):
        assert scoring.biodiversity_score(one_per_layer) == 7 * 10 + 50

    def test_six_layers_no_bonus(self, scoring, one_per_layer):
        assert scoring.biodiversity_score(one_per_layer[:6]) == 60

    def test_new_species_never_decreases_score(self, scoring, one_per_layer, make_species):
        placed = []
        previous = scoring.biodiversity_score(placed)
        for species in one_per_layer + [make_species("Extra", Layer.ROOT)]:
            placed.append(species)
            current = scoring.biodiversity_score(placed)
            assert current >= previous
            previous = current


# ============================================================
# Yield Tests
# ============================================================

class TestYieldScore:
    """Tests for the yield score."""

    def test_scales_with_maturity(self, scoring, mango):
        """Mango yields 50/yr at maturity 5; at age 2 that is 20."""
        assert scoring.yield_score([mango], 2) == 20

    def test_floors_total(self, scoring, make_species):
        a = make_species("A", yield_per_year=10, maturity_age=3)
        b = make_species("B", yield_per_year=10, maturity_age=3)
        # 2 * 10 * (1/3) = 6.67
        assert scoring.yield_score([a, b], 1) == 6

    def test_does_not_grow_past_maturity(self, scoring, mango):
        assert scoring.yield_score([mango], 5) == scoring.yield_score([mango], 40) == 50


# ============================================================
# Vertical Score Tests
# ============================================================

class TestVerticalScore:
    """Tests for the vertical structure score."""

    def test_one_per_layer(self, scoring, one_per_layer):
        assert scoring.vertical_score(one_per_layer) == 70

    def test_layer_saturates_at_five(self, scoring, make_species):
        herbs = [make_species(f"Herb {i}", Layer.HERBACEOUS) for i in range(8)]
        assert scoring.vertical_score(herbs) == 50

    def test_sums_across_layers(self, scoring, make_species):
        placed = [make_species(f"Herb {i}", Layer.HERBACEOUS) for i in range(6)]
        placed += [make_species(f"Root {i}", Layer.ROOT) for i in range(2)]
        assert scoring.vertical_score(placed) == 50 + 20


# ============================================================
# Profit Tests
# ============================================================

class TestProfit:
    """Tests for the fixed-cost profit."""

    def test_empty_plan_is_cost_only(self, scoring):
        assert scoring.profit([], 3) == -(1000 + 500 * 3)

    def test_mango_lemongrass_at_five(self, scoring, mango, lemongrass):
        # income = 50*1*2 + 10*1*1 = 110/yr; 110*5 - (1000 + 2500)
        assert scoring.profit([mango, lemongrass], 5) == pytest.approx(550 - 3500)

    def test_uses_configured_costs(self, mango):
        engine = ScoringEngine(ScoringConfig(setup_cost=0, annual_cost=0))
        assert engine.profit([mango], 5) == pytest.approx(100 * 5)


# ============================================================
# Scenario Tests
# ============================================================

class TestScoreSnapshot:
    """Tests for the combined snapshot."""

    def test_mango_lemongrass_scenario(self, scoring, mango, lemongrass):
        snapshot = scoring.score([mango, lemongrass], 5)

        assert snapshot.yield_score == 60
        assert snapshot.biodiversity_score == 20
        assert snapshot.vertical_score == 20
        assert snapshot.total_score == 100

    def test_default_config_from_settings(self):
        engine = ScoringEngine()
        assert engine.config.setup_cost == 1000
        assert engine.config.annual_cost == 500
