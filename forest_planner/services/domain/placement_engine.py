"""
Domain service: adding and removing plants on the planning grid.

Each cell can hold several plants as long as no vertical layer exceeds its
density cap. Over-cap placements are rejected without raising.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional
import logging

from forest_planner.domain.grid import GridModel
from forest_planner.domain.models import CellCoordinate, Layer, SpeciesRecord

logger = logging.getLogger(__name__)


def _default_layer_caps() -> Dict[Layer, int]:
    return {
        Layer.CANOPY: 1,
        Layer.SHRUB: 4,
        Layer.ROOT: 7,
    }


@dataclass
class PlacementRule:
    """Maximum number of plants of each layer allowed in one cell."""

    layer_caps: Dict[Layer, int] = field(default_factory=_default_layer_caps)
    """Explicit per-layer caps"""

    default_cap: int = 7
    """Cap for any layer without an explicit entry"""

    def capacity_for(self, layer: Layer) -> int:
        return self.layer_caps.get(layer, self.default_cap)


class PlacementEngine:
    """
    Domain service applying placement commands to a GridModel.

    Caps are checked per layer, independently of the other layers already
    growing in the same cell.
    """

    def __init__(self, rule: Optional[PlacementRule] = None):
        """
        Initialize the engine.

        Args:
            rule: Density caps to enforce (defaults to the standard caps)
        """
        self.rule = rule or PlacementRule()

    def capacity_for(self, layer: Layer) -> int:
        return self.rule.capacity_for(layer)

    def place(
        self,
        grid: GridModel,
        coord: CellCoordinate,
        species: SpeciesRecord,
    ) -> bool:
        """
        Plant *species* at *coord* if its layer still has room there.

        Args:
            grid: Grid to mutate
            coord: Target cell
            species: Species to plant

        Returns:
            True if the plant was added, False if the grid was left unchanged
        """
        if not grid.contains(coord):
            logger.debug(f"Rejected {species.name} at {coord.key}: outside {grid.size}x{grid.size} grid")
            return False

        occupants = grid.get(coord)
        same_layer = sum(1 for s in occupants if s.layer == species.layer)
        capacity = self.capacity_for(species.layer)

        if same_layer >= capacity:
            logger.debug(f"Rejected {species.name} at {coord.key}: "
                         f"{species.layer.value} layer full ({same_layer}/{capacity})")
            return False

        grid.set(coord, occupants + [species])
        logger.debug(f"Placed {species.name} at {coord.key} ({len(occupants) + 1} plants in cell)")
        return True

    def remove(self, grid: GridModel, coord: CellCoordinate) -> None:
        """Clear every plant at *coord*. Clearing an empty cell does nothing."""
        if grid.get(coord):
            logger.debug(f"Cleared cell {coord.key}")
        grid.clear(coord)

    def last_occupant(self, grid: GridModel, coord: CellCoordinate) -> Optional[SpeciesRecord]:
        """Most recently planted species at *coord*, or None if the cell is empty."""
        return grid.last_occupant(coord)
