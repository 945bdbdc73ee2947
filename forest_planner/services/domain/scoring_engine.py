"""
Domain service: plan scoring.

Scores are recomputed from scratch from the placed plants and the forest
age on every change:
- Biodiversity: distinct species plus a bonus for using all seven layers
- Yield: rated yield scaled by how mature each plant is
- Vertical structure: plants per layer, saturating at five per layer
- Profit: income over the forest age minus fixed setup and yearly costs
"""
from collections import Counter
from dataclasses import dataclass
from typing import Optional, Sequence
import logging
import math

from forest_planner.domain.models import Layer, ScoreSnapshot, SpeciesRecord
from forest_planner.config import settings

logger = logging.getLogger(__name__)

ALL_LAYERS_BONUS = 50
POINTS_PER_SPECIES = 10
POINTS_PER_LAYER_PLANT = 10
MAX_SCORED_PER_LAYER = 5


def maturity_factor(forest_age: float, maturity_age: float) -> float:
    """
    Fraction of rated yield a plant produces at *forest_age*.

    Grows linearly until maturity and stays at exactly 1 afterwards. A
    species with no maturity period is treated as mature from the start.
    """
    if maturity_age <= 0:
        return 1.0
    return min(1.0, forest_age / maturity_age)


def annual_income(species: SpeciesRecord, forest_age: float) -> float:
    """Yearly income of one plant instance at *forest_age*."""
    return species.yield_per_year * maturity_factor(forest_age, species.maturity_age) * species.market_price


@dataclass
class ScoringConfig:
    """Configuration for the score panel profit figure."""

    setup_cost: float = 1000.0
    """One-off establishment cost"""

    annual_cost: float = 500.0
    """Running cost per year of forest age"""


class ScoringEngine:
    """
    Domain service computing the ScoreSnapshot of a plan.

    The profit figure here uses fixed costs from ScoringConfig. It is
    independent of the editable cost tables used by the EconomicProjector
    and the two figures generally differ.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        if config:
            self.config = config
        else:
            self.config = ScoringConfig(
                setup_cost=settings.scoring_setup_cost,
                annual_cost=settings.scoring_annual_cost,
            )

    def biodiversity_score(self, placed: Sequence[SpeciesRecord]) -> int:
        distinct_species = len({s.name for s in placed})
        layers_used = len({s.layer for s in placed})
        bonus = ALL_LAYERS_BONUS if layers_used == len(Layer) else 0
        return distinct_species * POINTS_PER_SPECIES + bonus

    def yield_score(self, placed: Sequence[SpeciesRecord], forest_age: float) -> int:
        total_yield = sum(
            s.yield_per_year * maturity_factor(forest_age, s.maturity_age)
            for s in placed
        )
        return math.floor(total_yield)

    def vertical_score(self, placed: Sequence[SpeciesRecord]) -> int:
        layer_counts = Counter(s.layer for s in placed)
        return sum(
            min(count, MAX_SCORED_PER_LAYER) * POINTS_PER_LAYER_PLANT
            for count in layer_counts.values()
        )

    def profit(self, placed: Sequence[SpeciesRecord], forest_age: float) -> float:
        """
        Cumulative profit over *forest_age* years with the fixed costs.

        Args:
            placed: All placed plant instances
            forest_age: Age of the forest in years

        Returns:
            total annual income * age - (setup cost + annual cost * age)
        """
        total_income = sum(annual_income(s, forest_age) for s in placed)
        total_cost = self.config.setup_cost + self.config.annual_cost * forest_age
        return total_income * forest_age - total_cost

    def score(self, placed: Sequence[SpeciesRecord], forest_age: float) -> ScoreSnapshot:
        """
        Compute every score for the placed plants at *forest_age*.

        Args:
            placed: All placed plant instances
            forest_age: Age of the forest in years

        Returns:
            ScoreSnapshot
        """
        snapshot = ScoreSnapshot(
            biodiversity_score=self.biodiversity_score(placed),
            yield_score=self.yield_score(placed, forest_age),
            vertical_score=self.vertical_score(placed),
            profit=self.profit(placed, forest_age),
        )
        logger.debug(f"Scores at age {forest_age}: biodiversity={snapshot.biodiversity_score}, "
                     f"yield={snapshot.yield_score}, vertical={snapshot.vertical_score}, "
                     f"profit={snapshot.profit:.2f}")
        return snapshot
