"""
API router for income projection endpoints.
"""
from typing import Annotated
from fastapi import APIRouter, HTTPException, Query, Request

from orchard_planner.api.dependencies import FarmPlanningServiceDep
from orchard_planner.api.rate_limit import COMMON_ERROR_RESPONSES, DEFAULT_LIMIT, limiter
from orchard_planner.api.v1.models.responses import FarmReportRequest
from orchard_planner.domain.errors import OrchardPlannerError
from orchard_planner.domain.models import IncomeProjection, MiddleBedType, PalekarModel
from orchard_planner.services.application.farm_planning_service import FarmReport


router = APIRouter(
    prefix="/income",
    tags=["income"],
)


@router.get(
    "/projection",
    response_model=IncomeProjection,
    summary="Ten-year income projection",
    description="""
    Projects farm-gate income for years 1-10.

    Banana, papaya, pigeon pea and ground cover earn from year 1; small,
    medium and big trees ramp in as they mature. Only plant categories
    present in the layout appear in the projection.
    """,
    responses=COMMON_ERROR_RESPONSES,
)
@limiter.limit(DEFAULT_LIMIT)
async def get_income_projection(
    request: Request,
    planning_service: FarmPlanningServiceDep,
    model: Annotated[PalekarModel, Query(description="Palekar model")] = PalekarModel.MODEL_24X24,
    acres: Annotated[int, Query(description="Farm size in whole acres")] = 1,
    middle_bed: Annotated[MiddleBedType, Query(description="Middle bed choice for 24x24")] = MiddleBedType.BED2,
) -> IncomeProjection:
    try:
        return planning_service.get_income_report(model, acres, middle_bed)
    except OrchardPlannerError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post(
    "/farm-report",
    response_model=FarmReport,
    summary="Density and income per farm zone",
    responses=COMMON_ERROR_RESPONSES,
)
@limiter.limit(DEFAULT_LIMIT)
async def post_farm_report(
    request: Request,
    body: FarmReportRequest,
    planning_service: FarmPlanningServiceDep,
) -> FarmReport:
    try:
        return planning_service.get_farm_report(body.model, body.middle_bed, body.zones)
    except OrchardPlannerError as e:
        raise HTTPException(status_code=400, detail=e.message)
