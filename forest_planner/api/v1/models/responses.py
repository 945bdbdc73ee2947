"""
API response models using Pydantic.
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from forest_planner.domain.models import LandSizeSpec, SpeciesRecord


class SpeciesListResponse(BaseModel):
    """Response model for the species catalog endpoint."""
    count: int = Field(
        description="Number of species matching the filters"
    )
    species: List[SpeciesRecord] = Field(
        description="Matching species in catalog order"
    )


class CellResponse(BaseModel):
    """Contents of a single grid cell."""
    x: int = Field(description="Column of the cell")
    y: int = Field(description="Row of the cell")
    plants: List[SpeciesRecord] = Field(
        description="Species in the cell, in planting order"
    )
    last_planted: Optional[SpeciesRecord] = Field(
        default=None,
        description="Most recently planted species, if any"
    )


class PlacementResponse(BaseModel):
    """Response model for a planting command."""
    accepted: bool = Field(
        description="False when the layer is already full in this cell"
    )
    cell: CellResponse


class PlanResponse(BaseModel):
    """Response model for the current plan."""
    land: LandSizeSpec
    grid_size: int = Field(description="Cells along each side of the grid")
    forest_age: float = Field(description="Age of the forest in years")
    cells: List[CellResponse] = Field(description="Occupied cells only")
    setup_costs: Dict[str, float]
    annual_costs: Dict[str, float]

    class Config:
        json_schema_extra = {
            "example": {
                "land": {"mode": "acre", "size_in_acres": 1.0, "length_ft": 0, "width_ft": 0},
                "grid_size": 23,
                "forest_age": 5,
                "cells": [],
                "setup_costs": {"landCost": 10000, "tools": 500},
                "annual_costs": {"maintenance": 1000},
            }
        }
