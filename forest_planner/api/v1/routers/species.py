"""
API router for species catalog endpoints.
"""
from typing import Annotated, Optional
from fastapi import APIRouter, Path, Query

from forest_planner.api.dependencies import SpeciesCatalogDep
from forest_planner.api.v1.models.responses import SpeciesListResponse
from forest_planner.domain.models import Climate, Layer, SpeciesRecord


router = APIRouter(
    prefix="/species",
    tags=["species"],
)


@router.get(
    "",
    response_model=SpeciesListResponse,
    summary="List catalog species",
)
async def list_species(
    catalog: SpeciesCatalogDep,
    climate: Annotated[Optional[Climate], Query(description="Climate zone")] = None,
    layer: Annotated[Optional[Layer], Query(description="Vertical layer")] = None,
    search: Annotated[Optional[str], Query(description="Case-insensitive name search")] = None,
) -> SpeciesListResponse:
    """
    List species, optionally filtered by climate, layer and name.
    """
    species = catalog.filter(climate=climate, search=search, layer=layer)
    return SpeciesListResponse(count=len(species), species=species)


@router.get(
    "/{species_id}",
    response_model=SpeciesRecord,
    summary="Get a species",
    responses={404: {"description": "Species not found"}},
)
async def get_species(
    species_id: Annotated[int, Path(description="Catalog id of the species")],
    catalog: SpeciesCatalogDep,
) -> SpeciesRecord:
    return catalog.require(species_id)
