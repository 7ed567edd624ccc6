"""
API router for plant symbol and summary endpoints.
"""
from typing import List
from fastapi import APIRouter, Request

from orchard_planner.api.rate_limit import DEFAULT_LIMIT, limiter
from orchard_planner.api.v1.models.responses import PlantCountsRequest, PlantSymbolsResponse
from orchard_planner.domain.catalog import PLANT_SYMBOLS
from orchard_planner.domain.models import CategorySummary, PlantDisplayInfo
from orchard_planner.services.domain.display_formatter import (
    get_category_summary,
    get_plant_display_list,
)


router = APIRouter(
    prefix="/plants",
    tags=["plants"],
)


@router.get(
    "/symbols",
    response_model=PlantSymbolsResponse,
    summary="Plant symbol catalog",
)
async def get_plant_symbols() -> PlantSymbolsResponse:
    symbols = list(PLANT_SYMBOLS.values())
    return PlantSymbolsResponse(symbol_count=len(symbols), symbols=symbols)


@router.post(
    "/display-list",
    response_model=List[PlantDisplayInfo],
    summary="Plant counts with display metadata, largest first",
)
@limiter.limit(DEFAULT_LIMIT)
async def post_display_list(request: Request, body: PlantCountsRequest) -> List[PlantDisplayInfo]:
    return get_plant_display_list(body.counts)


@router.post(
    "/category-summary",
    response_model=List[CategorySummary],
    summary="Plant counts grouped into summary categories",
)
@limiter.limit(DEFAULT_LIMIT)
async def post_category_summary(request: Request, body: PlantCountsRequest) -> List[CategorySummary]:
    return get_category_summary(body.counts)
