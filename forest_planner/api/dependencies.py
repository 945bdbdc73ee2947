"""
Dependency injection for FastAPI.
"""
from typing import Annotated
from fastapi import Depends

from forest_planner.infrastructure.species_catalog import (
    SpeciesCatalog,
    get_species_catalog,
)
from forest_planner.services.application.planning_service import (
    PlanningService,
    PlanningSession,
    get_planning_session,
)


def get_planning_service(
    catalog: Annotated[SpeciesCatalog, Depends(get_species_catalog)],
) -> PlanningService:
    """
    Dependency factory for PlanningService.

    Args:
        catalog: Species catalog (injected)

    Returns:
        PlanningService instance
    """
    return PlanningService(catalog=catalog)


# Type aliases for cleaner route signatures
SpeciesCatalogDep = Annotated[SpeciesCatalog, Depends(get_species_catalog)]
PlanningServiceDep = Annotated[PlanningService, Depends(get_planning_service)]
PlanningSessionDep = Annotated[PlanningSession, Depends(get_planning_session)]
