"""
Domain models for species, land and plan analysis results.

These models represent the core domain entities and should be independent
of any infrastructure concerns (catalog storage, HTTP, exports, etc.).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Literal, Tuple
from pydantic import BaseModel, Field, computed_field


class Layer(str, Enum):
    """Vertical planting strata of a food forest."""
    CANOPY = "Canopy"
    SUB_CANOPY = "Sub-canopy"
    SHRUB = "Shrub"
    HERBACEOUS = "Herbaceous"
    GROUND_COVER = "Ground Cover"
    VINE = "Vine"
    ROOT = "Root"


class Climate(str, Enum):
    """Climate zones a species is catalogued under."""
    TROPICAL = "Tropical"
    SUBTROPICAL = "Subtropical"
    TEMPERATE = "Temperate"


class SpeciesRecord(BaseModel):
    """A perennial species as supplied by the catalog."""
    id: int
    name: str
    symbol: str = Field(description="Short label drawn on the plan")
    climate: Climate
    layer: Layer
    companions: Tuple[str, ...] = Field(
        default=(),
        description="Names of species this one benefits from growing near"
    )
    yield_per_year: float = Field(description="Yield of a mature plant per year")
    unit: str = Field(description="Unit the yield is measured in")
    market_price: float = Field(description="Market price per unit of yield")
    maturity_age: float = Field(description="Years until full yield")
    description: str = ""
    image: str = ""

    class Config:
        frozen = True


@dataclass(frozen=True)
class CellCoordinate:
    """Position of one 9x9 ft cell on the planning grid."""
    x: int
    y: int

    @property
    def key(self) -> str:
        return f"{self.x},{self.y}"


class LandSizeSpec(BaseModel):
    """Size of the land being planned, either in acres or as length x width."""
    mode: Literal["acre", "custom"] = "acre"
    size_in_acres: float = Field(
        default=1.0, allow_inf_nan=False, description="Property size in acres (acre mode)"
    )
    length_ft: float = Field(
        default=0.0, allow_inf_nan=False, description="Property length in feet (custom mode)"
    )
    width_ft: float = Field(
        default=0.0, allow_inf_nan=False, description="Property width in feet (custom mode)"
    )


class CompatibilityRelation(str, Enum):
    """How two co-planted species relate."""
    COMPATIBLE = "compatible"
    INDETERMINATE = "indeterminate"


class CompatibilityFinding(BaseModel):
    """Classification of one pair of placed plants."""
    species_a: str
    species_b: str
    relation: CompatibilityRelation

    @computed_field
    @property
    def message(self) -> str:
        if self.relation == CompatibilityRelation.COMPATIBLE:
            return f"{self.species_a} and {self.species_b} are good companions."
        return f"{self.species_a} and {self.species_b} may not be ideal companions."


class CompatibilityReport(BaseModel):
    """All pairwise findings for the current plan."""
    compatible: List[CompatibilityFinding] = Field(default_factory=list)
    indeterminate: List[CompatibilityFinding] = Field(default_factory=list)


class ScoreSnapshot(BaseModel):
    """Scores of the current plan at a given forest age."""
    biodiversity_score: int
    yield_score: int
    vertical_score: int
    profit: float = Field(
        description="Profit using the fixed scoring costs, not the editable cost tables"
    )

    @computed_field
    @property
    def total_score(self) -> int:
        return self.biodiversity_score + self.yield_score + self.vertical_score


class EconomicState(BaseModel):
    """Cost inputs and derived income/profit figures."""
    setup_costs: Dict[str, float]
    annual_costs: Dict[str, float]
    income_by_species: Dict[str, float]
    total_income: float
    net_profit: float
    roi: float = Field(description="Return on investment in percent")
