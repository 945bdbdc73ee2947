"""
Planning grid: which species occupy which cell.

Cells are keyed by CellCoordinate. Each occupied cell holds its species in
planting order; an unoccupied cell is simply absent from the mapping.
"""
import math
from typing import Dict, Iterable, List, Optional, Tuple

from forest_planner.domain.models import CellCoordinate, LandSizeSpec, SpeciesRecord

SQ_FT_PER_ACRE = 43560
DEFAULT_CELL_SIDE_FT = 9.0


def derive_grid_size(spec: LandSizeSpec, cell_side_ft: float = DEFAULT_CELL_SIDE_FT) -> int:
    """
    Compute the number of cells along each side of the (square) grid.

    Acre mode fits a square of the same area; custom mode uses the shorter
    side of the rectangle. Degenerate sizes (zero, negative or non-finite)
    clamp to a 1x1 grid.

    Args:
        spec: Land size specification
        cell_side_ft: Side of one cell in feet

    Returns:
        Grid size, at least 1
    """
    if spec.mode == "acre":
        square_feet = max(spec.size_in_acres, 0.0) * SQ_FT_PER_ACRE
        if not math.isfinite(square_feet):
            return 1
        size = math.floor(math.sqrt(square_feet / (cell_side_ft * cell_side_ft)))
    else:
        side = min(spec.length_ft, spec.width_ft)
        if not math.isfinite(side):
            return 1
        size = math.floor(side / cell_side_ft)
    return max(size, 1)


class GridModel:
    """
    Square planning grid mapping cells to their ordered occupants.

    Attributes:
        size: Number of cells along each side
    """

    def __init__(self, size: int = 1):
        self.size = max(int(size), 1)
        self._cells: Dict[CellCoordinate, List[SpeciesRecord]] = {}

    def resize(self, new_size: int) -> None:
        """Replace the grid dimensions and drop every placement."""
        self.size = max(int(new_size), 1)
        self._cells = {}

    def contains(self, coord: CellCoordinate) -> bool:
        return 0 <= coord.x < self.size and 0 <= coord.y < self.size

    def get(self, coord: CellCoordinate) -> List[SpeciesRecord]:
        """Return a copy of the occupants at *coord* (empty if none)."""
        return list(self._cells.get(coord, ()))

    def set(self, coord: CellCoordinate, species: Iterable[SpeciesRecord]) -> None:
        occupants = list(species)
        if occupants:
            self._cells[coord] = occupants
        else:
            self._cells.pop(coord, None)

    def clear(self, coord: CellCoordinate) -> None:
        self._cells.pop(coord, None)

    def last_occupant(self, coord: CellCoordinate) -> Optional[SpeciesRecord]:
        occupants = self._cells.get(coord)
        return occupants[-1] if occupants else None

    def occupied_cells(self) -> List[Tuple[CellCoordinate, List[SpeciesRecord]]]:
        """Occupied cells with their occupants, in first-planted order."""
        return [(coord, list(occupants)) for coord, occupants in self._cells.items()]

    def placed_species(self) -> List[SpeciesRecord]:
        """Every placed plant instance across the grid, flattened."""
        return [species for occupants in self._cells.values() for species in occupants]

    @property
    def occupied_count(self) -> int:
        return len(self._cells)

    def snapshot(self) -> "GridModel":
        """Copy of the grid that later placements will not affect."""
        copy = GridModel(self.size)
        copy._cells = {coord: list(occupants) for coord, occupants in self._cells.items()}
        return copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridModel):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __repr__(self) -> str:
        return f"GridModel(size={self.size}, occupied={self.occupied_count})"
