"""
Export of a plan as a coordinates table (CSV) or a vector drawing (SVG).
"""
import csv
import io
from dataclasses import dataclass
from typing import Dict
from xml.sax.saxutils import escape

from forest_planner.domain.grid import GridModel
from forest_planner.domain.models import Layer, SpeciesRecord

CELL_SIZE = 30
STACK_OFFSET = 5
CSV_HEADER = ["X", "Y", "Plant Name", "Layer"]


@dataclass(frozen=True)
class LayerStyle:
    """Fill colour and disc size multiplier of a layer."""
    color: str
    size_factor: float


LAYER_STYLES: Dict[Layer, LayerStyle] = {
    Layer.CANOPY: LayerStyle("#228B22", 2.5),
    Layer.SUB_CANOPY: LayerStyle("#32CD32", 2.0),
    Layer.SHRUB: LayerStyle("#90EE90", 1.5),
    Layer.HERBACEOUS: LayerStyle("#98FB98", 1.0),
    Layer.GROUND_COVER: LayerStyle("#00FA9A", 0.8),
    Layer.VINE: LayerStyle("#3CB371", 1.2),
    Layer.ROOT: LayerStyle("#964B00", 0.7),
}
FALLBACK_STYLE = LayerStyle("#000000", 1.0)


def plant_representation(species: SpeciesRecord, cell_size: int = CELL_SIZE) -> tuple[str, float]:
    """
    Colour and disc radius used to draw a plant.

    Args:
        species: Plant to draw
        cell_size: Cell side in display units

    Returns:
        Tuple of (color, radius)
    """
    style = LAYER_STYLES.get(species.layer, FALLBACK_STYLE)
    return style.color, cell_size / 3 * style.size_factor


def export_csv(grid: GridModel) -> str:
    """One row per planted instance: X, Y, plant name, layer."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for coord, occupants in grid.occupied_cells():
        for species in occupants:
            writer.writerow([coord.x, coord.y, species.name, species.layer.value])
    return buffer.getvalue()


def export_svg(grid: GridModel, cell_size: int = CELL_SIZE) -> str:
    """
    Draw the plan as an SVG document.

    Plants in the same cell are stacked downwards by STACK_OFFSET units in
    planting order, each labelled with its species symbol.
    """
    side = grid.size * cell_size
    parts = [
        f'<svg width="{side}" height="{side}" xmlns="http://www.w3.org/2000/svg">',
        '<rect width="100%" height="100%" fill="white"/>',
    ]

    for coord, occupants in grid.occupied_cells():
        cx = coord.x * cell_size + cell_size / 2
        for index, species in enumerate(occupants):
            color, radius = plant_representation(species, cell_size)
            cy = coord.y * cell_size + cell_size / 2 + index * STACK_OFFSET
            parts.append(f'<circle cx="{cx:g}" cy="{cy:g}" r="{radius:g}" fill="{color}"/>')
            parts.append(
                f'<text x="{cx:g}" y="{cy:g}" font-family="Arial" font-size="{radius:g}" '
                f'fill="white" text-anchor="middle" dominant-baseline="middle">'
                f'{escape(species.symbol)}</text>'
            )

    parts.append("</svg>")
    return "\n".join(parts)
