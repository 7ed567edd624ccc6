"""
API router for plant density endpoints.
"""
from typing import Annotated, Optional
from fastapi import APIRouter, HTTPException, Query, Request

from orchard_planner.api.dependencies import DensityCalculatorDep, FarmPlanningServiceDep
from orchard_planner.api.rate_limit import COMMON_ERROR_RESPONSES, DEFAULT_LIMIT, limiter
from orchard_planner.domain.errors import OrchardPlannerError
from orchard_planner.domain.models import (
    AcreDensity,
    BlockDensity,
    FarmDensity,
    MiddleBedType,
    PalekarModel,
)
from orchard_planner.services.application.farm_planning_service import DensityReport


router = APIRouter(
    prefix="/density",
    tags=["density"],
)

ModelQuery = Annotated[PalekarModel, Query(description="Palekar model (K-module size)")]
MiddleBedQuery = Annotated[MiddleBedType, Query(description="Middle bed choice for 24x24")]
UtilizationQuery = Annotated[
    Optional[float],
    Query(description="Usable fraction of an acre in (0, 1]; defaults to the configured value"),
]
AcresQuery = Annotated[int, Query(description="Farm size in whole acres")]


@router.get(
    "/block",
    response_model=BlockDensity,
    summary="Plant counts for one K-module",
    description="""
    Counts every plant of one standalone K-module, bed by bed.

    24x24 modules hold Bed 1, the chosen middle bed and Bed 3.
    36x36 modules hold Bed 1, Bed 2, Bed 4 and Bed 3.
    """,
    responses=COMMON_ERROR_RESPONSES,
)
@limiter.limit(DEFAULT_LIMIT)
async def get_block_density(
    request: Request,
    calculator: DensityCalculatorDep,
    model: ModelQuery = PalekarModel.MODEL_24X24,
    middle_bed: MiddleBedQuery = MiddleBedType.BED2,
) -> BlockDensity:
    try:
        return calculator.compute_block_density(model, middle_bed)
    except OrchardPlannerError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get(
    "/acre",
    response_model=AcreDensity,
    summary="Plant counts per acre",
    description="""
    Scales the de-duplicated K-module density to one acre.

    Theoretical modules per acre = floor(43560 / K²); practical modules apply
    the land utilization factor for roads, ponds and sheds.
    """,
    responses=COMMON_ERROR_RESPONSES,
)
@limiter.limit(DEFAULT_LIMIT)
async def get_acre_density(
    request: Request,
    calculator: DensityCalculatorDep,
    model: ModelQuery = PalekarModel.MODEL_24X24,
    middle_bed: MiddleBedQuery = MiddleBedType.BED2,
    utilization: UtilizationQuery = None,
) -> AcreDensity:
    try:
        return calculator.compute_acre_density(model, middle_bed, utilization)
    except OrchardPlannerError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get(
    "/farm",
    response_model=FarmDensity,
    summary="Plant counts for a whole farm",
    responses=COMMON_ERROR_RESPONSES,
)
@limiter.limit(DEFAULT_LIMIT)
async def get_farm_density(
    request: Request,
    calculator: DensityCalculatorDep,
    model: ModelQuery = PalekarModel.MODEL_24X24,
    acres: AcresQuery = 1,
    middle_bed: MiddleBedQuery = MiddleBedType.BED2,
    utilization: UtilizationQuery = None,
) -> FarmDensity:
    try:
        return calculator.compute_farm_density(model, acres, middle_bed, utilization)
    except OrchardPlannerError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get(
    "/report",
    response_model=DensityReport,
    summary="Block, acre and farm density with summaries",
    responses=COMMON_ERROR_RESPONSES,
)
@limiter.limit(DEFAULT_LIMIT)
async def get_density_report(
    request: Request,
    planning_service: FarmPlanningServiceDep,
    model: ModelQuery = PalekarModel.MODEL_24X24,
    acres: AcresQuery = 1,
    middle_bed: MiddleBedQuery = MiddleBedType.BED2,
    utilization: UtilizationQuery = None,
) -> DensityReport:
    try:
        # Delegate to service layer (no business logic here)
        return planning_service.get_density_report(model, acres, middle_bed, utilization)
    except OrchardPlannerError as e:
        raise HTTPException(status_code=400, detail=e.message)
