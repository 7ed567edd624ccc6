"""
API request and response models using Pydantic.
"""
from typing import Dict, List
from pydantic import BaseModel, Field

from orchard_planner.domain.models import MiddleBedType, PalekarModel, PlantSymbol, Zone


class PlantCountsRequest(BaseModel):
    """Request body carrying a plant count map."""
    counts: Dict[str, int] = Field(
        description="Plant counts keyed by symbol id",
        examples=[{"big": 61, "small": 122, "medium": 61}],
    )


class FarmReportRequest(BaseModel):
    """Request body for the per-zone farm report."""
    model: PalekarModel = Field(
        default=PalekarModel.MODEL_24X24,
        description="Palekar model applied to every zone",
    )
    middle_bed: MiddleBedType = Field(
        default=MiddleBedType.BED2,
        description="Middle bed choice for the 24x24 model",
    )
    zones: List[Zone] = Field(
        default_factory=list,
        description="Farm zones; the standard A/B/C split is used when empty",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "model": "24x24",
                "middle_bed": "bed2",
                "zones": [
                    {"id": "zone-a", "name": "Zone A", "acres": 4},
                    {"id": "zone-b", "name": "Zone B", "acres": 2},
                ]
            }
        }


class PlantSymbolsResponse(BaseModel):
    """Response model for the symbol catalog endpoint."""
    symbol_count: int = Field(
        description="Number of symbols in the catalog"
    )
    symbols: List[PlantSymbol] = Field(
        description="Display metadata of every plant symbol"
    )
