"""
API router for the planning session endpoints.
"""
from fastapi import APIRouter, Path, Response
from typing import Annotated

from forest_planner.api.dependencies import PlanningServiceDep, PlanningSessionDep
from forest_planner.api.v1.models.requests import (
    CostUpdateRequest,
    ForestAgeRequest,
    PlacementRequest,
)
from forest_planner.api.v1.models.responses import (
    CellResponse,
    PlacementResponse,
    PlanResponse,
)
from forest_planner.domain.models import CellCoordinate, LandSizeSpec
from forest_planner.infrastructure.plan_exporter import export_csv, export_svg
from forest_planner.services.application.planning_service import (
    DerivedView,
    PlanningSession,
)

router = APIRouter(
    prefix="/plan",
    tags=["plan"],
)

RATE_LIMITED = {429: {"description": "Too many requests"}}
X_PATH = Annotated[int, Path(ge=0, description="Column of the cell")]
Y_PATH = Annotated[int, Path(ge=0, description="Row of the cell")]


def _cell_in_grid(session: PlanningSession, x: int, y: int) -> CellCoordinate:
    coord = CellCoordinate(x, y)
    if not session.grid.contains(coord):
        size = session.grid.size
        raise ValueError(f"Cell ({x}, {y}) is outside the {size}x{size} grid")
    return coord


def _cell_response(session: PlanningSession, coord: CellCoordinate) -> CellResponse:
    return CellResponse(
        x=coord.x,
        y=coord.y,
        plants=session.grid.get(coord),
        last_planted=session.grid.last_occupant(coord),
    )


def _plan_response(session: PlanningSession) -> PlanResponse:
    return PlanResponse(
        land=session.land,
        grid_size=session.grid.size,
        forest_age=session.forest_age,
        cells=[_cell_response(session, coord) for coord, _ in session.grid.occupied_cells()],
        setup_costs=session.setup_costs,
        annual_costs=session.annual_costs,
    )


@router.get("", response_model=PlanResponse, summary="Get the current plan")
async def get_plan(session: PlanningSessionDep) -> PlanResponse:
    return _plan_response(session)


@router.put(
    "/land",
    response_model=PlanResponse,
    summary="Set the land size",
    description="""
    Set the land size either in acres or as length x width in feet.

    The grid is resized to fit 9x9 ft cells and every existing placement
    is cleared.
    """,
    responses=RATE_LIMITED,
)
async def set_land(
    land: LandSizeSpec,
    session: PlanningSessionDep,
    planning_service: PlanningServiceDep,
) -> PlanResponse:
    planning_service.set_land_size(session, land)
    return _plan_response(session)


@router.put(
    "/forest-age",
    response_model=PlanResponse,
    summary="Set the forest age",
    responses=RATE_LIMITED,
)
async def set_forest_age(
    request: ForestAgeRequest,
    session: PlanningSessionDep,
    planning_service: PlanningServiceDep,
) -> PlanResponse:
    planning_service.set_forest_age(session, request.forest_age)
    return _plan_response(session)


@router.get(
    "/cells/{x}/{y}",
    response_model=CellResponse,
    summary="Inspect a cell",
)
async def get_cell(x: X_PATH, y: Y_PATH, session: PlanningSessionDep) -> CellResponse:
    coord = _cell_in_grid(session, x, y)
    return _cell_response(session, coord)


@router.post(
    "/cells/{x}/{y}/plants",
    response_model=PlacementResponse,
    summary="Plant a species in a cell",
    description="""
    Plant a catalog species in a cell.

    Each cell accepts at most 1 Canopy, 4 Shrub and 7 plants of any other
    layer. A plant over its layer cap is not added and `accepted` is false;
    this is not an error.
    """,
    responses={
        400: {"description": "Cell outside the grid"},
        404: {"description": "Species not found"},
        **RATE_LIMITED,
    },
)
async def place_plant(
    x: X_PATH,
    y: Y_PATH,
    request: PlacementRequest,
    session: PlanningSessionDep,
    planning_service: PlanningServiceDep,
) -> PlacementResponse:
    coord = _cell_in_grid(session, x, y)
    accepted = planning_service.place(session, coord, request.species_id)
    return PlacementResponse(accepted=accepted, cell=_cell_response(session, coord))


@router.delete(
    "/cells/{x}/{y}",
    response_model=CellResponse,
    summary="Clear a cell",
    responses=RATE_LIMITED,
)
async def clear_cell(
    x: X_PATH,
    y: Y_PATH,
    session: PlanningSessionDep,
    planning_service: PlanningServiceDep,
) -> CellResponse:
    coord = _cell_in_grid(session, x, y)
    planning_service.remove(session, coord)
    return _cell_response(session, coord)


@router.put(
    "/costs/setup",
    response_model=PlanResponse,
    summary="Update setup costs",
    responses=RATE_LIMITED,
)
async def update_setup_costs(
    request: CostUpdateRequest,
    session: PlanningSessionDep,
    planning_service: PlanningServiceDep,
) -> PlanResponse:
    planning_service.update_setup_costs(session, request.costs)
    return _plan_response(session)


@router.put(
    "/costs/annual",
    response_model=PlanResponse,
    summary="Update annual costs",
    responses=RATE_LIMITED,
)
async def update_annual_costs(
    request: CostUpdateRequest,
    session: PlanningSessionDep,
    planning_service: PlanningServiceDep,
) -> PlanResponse:
    planning_service.update_annual_costs(session, request.costs)
    return _plan_response(session)


@router.get(
    "/report",
    response_model=DerivedView,
    summary="Scores, compatibility and economics",
    description="""
    Recompute every derived value of the plan:

    - Biodiversity, yield and vertical scores plus the fixed-cost profit
    - Compatibility of every pair of placed plants
    - Companion suggestions for species not yet planted
    - Income per species, net profit and ROI from the editable cost tables
    """,
)
async def get_report(
    session: PlanningSessionDep,
    planning_service: PlanningServiceDep,
) -> DerivedView:
    return planning_service.recompute(session)


@router.get("/export/csv", summary="Export plant coordinates as CSV")
async def export_plan_csv(session: PlanningSessionDep) -> Response:
    return Response(
        content=export_csv(session.grid),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="food_forest_coordinates.csv"'},
    )


@router.get("/export/svg", summary="Export the plan drawing as SVG")
async def export_plan_svg(session: PlanningSessionDep) -> Response:
    return Response(
        content=export_svg(session.grid),
        media_type="image/svg+xml",
        headers={"Content-Disposition": 'attachment; filename="food_forest_plan.svg"'},
    )
