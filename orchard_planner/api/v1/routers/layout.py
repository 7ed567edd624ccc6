"""
API router for orchard canvas layout endpoints.
"""
from typing import List
from fastapi import APIRouter, HTTPException, Request

from orchard_planner.api.rate_limit import COMMON_ERROR_RESPONSES, DEFAULT_LIMIT, limiter
from orchard_planner.domain.errors import OrchardPlannerError
from orchard_planner.domain.models import (
    LayoutValidation,
    OrchardConfig,
    OrchardLayout,
    OrchardPreset,
)
from orchard_planner.utils.orchard_layout import (
    ORCHARD_PRESETS,
    compute_orchard_layout,
    validate_orchard_config,
)


router = APIRouter(
    prefix="/layout",
    tags=["layout"],
)


@router.get(
    "/presets",
    response_model=List[OrchardPreset],
    summary="Preset orchard sizes",
)
async def get_layout_presets() -> List[OrchardPreset]:
    return ORCHARD_PRESETS


@router.post(
    "",
    response_model=OrchardLayout,
    summary="Bed and trench rectangles of an orchard canvas",
    responses=COMMON_ERROR_RESPONSES,
)
@limiter.limit(DEFAULT_LIMIT)
async def post_layout(request: Request, config: OrchardConfig) -> OrchardLayout:
    try:
        return compute_orchard_layout(config)
    except OrchardPlannerError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post(
    "/validate",
    response_model=LayoutValidation,
    summary="Check that the beds fit inside the boundary",
)
@limiter.limit(DEFAULT_LIMIT)
async def post_validate_layout(request: Request, config: OrchardConfig) -> LayoutValidation:
    return validate_orchard_config(config)
