"""
Unit tests for CSV and SVG export.
"""
import xml.etree.ElementTree as ET

from forest_planner.domain.models import CellCoordinate, Layer
from forest_planner.infrastructure.plan_exporter import (
    CELL_SIZE,
    export_csv,
    export_svg,
    plant_representation,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


# ============================================================
# CSV Export Tests
# ============================================================

class TestExportCsv:
    """Tests for the coordinates table."""

    def test_empty_plan_has_header_only(self, grid):
        assert export_csv(grid) == "X,Y,Plant Name,Layer\n"

    def test_one_row_per_plant_instance(self, grid, mango, lemongrass):
        grid.set(CellCoordinate(0, 0), [mango, lemongrass])
        grid.set(CellCoordinate(2, 1), [lemongrass])

        lines = export_csv(grid).splitlines()

        assert lines == [
            "X,Y,Plant Name,Layer",
            "0,0,Mango,Canopy",
            "0,0,Lemongrass,Herbaceous",
            "2,1,Lemongrass,Herbaceous",
        ]

    def test_names_with_commas_are_quoted(self, grid, make_species):
        grid.set(CellCoordinate(1, 1), [make_species("Pepper, Black", Layer.VINE)])
        assert '1,1,"Pepper, Black",Vine' in export_csv(grid)


# ============================================================
# SVG Export Tests
# ============================================================

class TestExportSvg:
    """Tests for the plan drawing."""

    def test_document_size_matches_grid(self, grid):
        root = ET.fromstring(export_svg(grid))

        assert root.tag == f"{SVG_NS}svg"
        assert root.get("width") == str(3 * CELL_SIZE)
        assert root.get("height") == str(3 * CELL_SIZE)

    def test_stacked_discs(self, grid, mango, lemongrass):
        grid.set(CellCoordinate(1, 0), [mango, lemongrass])

        root = ET.fromstring(export_svg(grid))
        circles = root.findall(f"{SVG_NS}circle")
        labels = root.findall(f"{SVG_NS}text")

        assert len(circles) == 2
        assert [c.get("cx") for c in circles] == ["45", "45"]
        assert [c.get("cy") for c in circles] == ["15", "20"]
        assert circles[0].get("r") == "25"
        assert circles[0].get("fill") == "#228B22"
        assert circles[1].get("r") == "10"
        assert [t.text for t in labels] == [mango.symbol, lemongrass.symbol]

    def test_symbols_are_escaped(self, grid, make_species):
        grid.set(CellCoordinate(0, 0), [make_species("Odd", symbol="<&>")])

        root = ET.fromstring(export_svg(grid))

        assert root.find(f"{SVG_NS}text").text == "<&>"


class TestPlantRepresentation:
    """Tests for the per-layer style table."""

    def test_root_layer(self, make_species):
        color, radius = plant_representation(make_species("Turmeric", Layer.ROOT))
        assert color == "#964B00"
        assert radius == CELL_SIZE / 3 * 0.7
