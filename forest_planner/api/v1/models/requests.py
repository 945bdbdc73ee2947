"""
API request models using Pydantic.
"""
from typing import Dict
from pydantic import BaseModel, Field


class PlacementRequest(BaseModel):
    """Request body for planting a species in a cell."""
    species_id: int = Field(
        description="Catalog id of the species to plant",
        examples=[1]
    )


class ForestAgeRequest(BaseModel):
    """Request body for changing the forest age."""
    forest_age: int = Field(
        ge=1,
        le=50,
        description="Age of the forest in years",
        examples=[5]
    )


class CostUpdateRequest(BaseModel):
    """Named cost amounts to set; names not listed keep their current amount."""
    costs: Dict[str, float] = Field(
        description="Cost name to amount"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "costs": {"irrigation": 4500, "tools": 750},
            }
        }
