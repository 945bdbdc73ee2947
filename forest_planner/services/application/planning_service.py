"""
Application service: Orchestration layer for a planning session.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional
import logging

from pydantic import BaseModel, Field

from forest_planner.config import settings
from forest_planner.domain.grid import GridModel, derive_grid_size
from forest_planner.domain.models import (
    CellCoordinate,
    CompatibilityReport,
    EconomicState,
    LandSizeSpec,
    ScoreSnapshot,
    SpeciesRecord,
)
from forest_planner.infrastructure.species_catalog import SpeciesCatalog
from forest_planner.services.domain.compatibility_analyzer import CompatibilityAnalyzer
from forest_planner.services.domain.economic_projector import EconomicProjector
from forest_planner.services.domain.placement_engine import PlacementEngine
from forest_planner.services.domain.scoring_engine import ScoringEngine

logger = logging.getLogger(__name__)


def _default_land() -> LandSizeSpec:
    return LandSizeSpec(mode="acre", size_in_acres=settings.default_property_size_acres)


@dataclass
class PlanningSession:
    """
    Everything a user has entered for one plan.

    The grid is the single source of truth for the layout; scores,
    compatibility and economics are derived from it on demand.
    """

    land: LandSizeSpec = field(default_factory=_default_land)
    grid: Optional[GridModel] = None
    forest_age: float = field(default_factory=lambda: settings.default_forest_age)
    setup_costs: Dict[str, float] = field(default_factory=lambda: dict(settings.default_setup_costs))
    annual_costs: Dict[str, float] = field(default_factory=lambda: dict(settings.default_annual_costs))

    def __post_init__(self):
        if self.grid is None:
            self.grid = GridModel(derive_grid_size(self.land, settings.cell_side_ft))


class DerivedView(BaseModel):
    """All values derived from a session snapshot."""
    scores: ScoreSnapshot
    compatibility: CompatibilityReport
    companion_suggestions: List[str] = Field(
        description="Companions of placed plants not yet planted (unordered, sorted for display)"
    )
    economics: EconomicState


class PlanningService:
    """
    Application service for planning operations.

    Mutating operations change the session only; callers then call
    recompute() to obtain fresh derived values.
    """

    def __init__(
        self,
        catalog: SpeciesCatalog,
        placement: Optional[PlacementEngine] = None,
        analyzer: Optional[CompatibilityAnalyzer] = None,
        scoring: Optional[ScoringEngine] = None,
        projector: Optional[EconomicProjector] = None,
    ):
        """
        Initialize the service with dependencies.

        Args:
            catalog: Species catalog used to resolve placement commands
            placement: Placement engine enforcing density caps
            analyzer: Compatibility analyzer
            scoring: Scoring engine
            projector: Economic projector (defaults to one backed by *catalog*)
        """
        self.catalog = catalog
        self.placement = placement or PlacementEngine()
        self.analyzer = analyzer or CompatibilityAnalyzer()
        self.scoring = scoring or ScoringEngine()
        self.projector = projector or EconomicProjector(catalog)

    def place(self, session: PlanningSession, coord: CellCoordinate, species_id: int) -> bool:
        """
        Plant a catalog species at a cell.

        Args:
            session: Session to mutate
            coord: Target cell
            species_id: Catalog id of the species

        Returns:
            True if planted, False if the layer cap or grid bounds rejected it

        Raises:
            SpeciesNotFoundError: If the species id is not in the catalog
        """
        species = self.catalog.require(species_id)
        return self.placement.place(session.grid, coord, species)

    def remove(self, session: PlanningSession, coord: CellCoordinate) -> None:
        self.placement.remove(session.grid, coord)

    def inspect(self, session: PlanningSession, coord: CellCoordinate) -> Optional[SpeciesRecord]:
        """Most recently planted species at a cell, if any."""
        return self.placement.last_occupant(session.grid, coord)

    def set_land_size(self, session: PlanningSession, land: LandSizeSpec) -> int:
        """
        Change the land size. The grid is resized and every placement is dropped.

        Returns:
            The new grid size
        """
        new_size = derive_grid_size(land, settings.cell_side_ft)
        dropped = session.grid.occupied_count
        session.land = land
        session.grid.resize(new_size)
        logger.info(f"Land set to {land.mode} mode, grid {new_size}x{new_size} "
                    f"({dropped} occupied cells cleared)")
        return new_size

    def set_forest_age(self, session: PlanningSession, forest_age: float) -> None:
        session.forest_age = max(forest_age, 0)

    def update_setup_costs(self, session: PlanningSession, costs: Mapping[str, float]) -> None:
        session.setup_costs.update(costs)

    def update_annual_costs(self, session: PlanningSession, costs: Mapping[str, float]) -> None:
        session.annual_costs.update(costs)

    def recompute(self, session: PlanningSession) -> DerivedView:
        """
        Derive scores, compatibility, suggestions and economics.

        Works from a snapshot of the grid, so the view is unaffected by
        later placements. Nothing is cached.

        Args:
            session: Session to derive from

        Returns:
            DerivedView
        """
        placed = session.grid.snapshot().placed_species()
        age = session.forest_age

        return DerivedView(
            scores=self.scoring.score(placed, age),
            compatibility=self.analyzer.analyze(placed),
            companion_suggestions=sorted(self.analyzer.suggest_companions(placed)),
            economics=self.projector.project(
                placed, session.setup_costs, session.annual_costs, age
            ),
        )


# Singleton session for the single active user
_session: Optional[PlanningSession] = None


def get_planning_session() -> PlanningSession:
    """
    Get or create the in-memory planning session.

    Returns:
        PlanningSession instance
    """
    global _session
    if _session is None:
        _session = PlanningSession()
        logger.info(f"Created planning session with {_session.grid.size}x{_session.grid.size} grid")
    return _session
