"""
Domain models for orchard density and income computations.

These models represent the core domain entities and should be independent
of any infrastructure concerns (HTTP routing, settings, etc.).
"""
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field


# Per-plant count keyed by symbol id
PlantCountMap = Dict[str, int]


class PalekarModel(str, Enum):
    """Palekar food forest spacing scheme."""
    MODEL_24X24 = "24x24"
    MODEL_36X36 = "36x36"


class MiddleBedType(str, Enum):
    """Middle bed choice for the 24x24 module."""
    BED2 = "bed2"  # banana / papaya
    BED4 = "bed4"  # vine / vegetable


class ModelDefaults(BaseModel):
    """Fixed geometry of one Palekar model."""
    model: PalekarModel
    bed_length: float = Field(description="Bed length in feet")
    tree_spacing_ft: float = Field(description="Spacing of B/M/S centre-column trees")
    bed_type_cycle: List[int] = Field(description="Bed archetypes of one standalone K-module")
    k_size_ft: int = Field(description="K-module span, centre-to-centre, in feet")
    k_bed_span: int = Field(description="Number of beds the K-module spans")
    layout_column_cycle: List[int] = Field(
        description="Bed archetype per column when laying out an orchard canvas"
    )

    class Config:
        frozen = True


class Placement(BaseModel):
    """A single plant position relative to its bed origin."""
    symbol_id: str
    x_offset_ft: float
    y_offset_ft: float

    class Config:
        frozen = True


class PlantSymbol(BaseModel):
    """Display metadata for a plant symbol."""
    id: str
    label: str
    short_label: str
    shape: str
    size: str
    radius: float
    fill: str
    stroke: str
    stroke_width: float


# ============================================================
# Density
# ============================================================

class BedDensity(BaseModel):
    """Standalone plant counts of one bed."""
    bed_type: int
    label: str
    plants: PlantCountMap
    total: int


class BlockDensity(BaseModel):
    """Plant counts for one standalone K-module."""
    model: PalekarModel
    block_size_ft: str = Field(description="K-module label, e.g. '24 × 24'")
    bed_count: int
    bed_length: float
    tree_spacing: float
    beds: List[BedDensity]
    total_per_block: PlantCountMap
    grand_total: int


class TiledModuleDensity(BaseModel):
    """Unique plant contribution of one K-module in a continuous tiling."""
    plants: PlantCountMap
    total: int


class AcreDensity(BaseModel):
    """Acre-level plant density."""
    model: PalekarModel
    tile_area_sq_ft: int
    k_size_ft: int
    theoretical_blocks_per_acre: int
    blocks_per_acre: int
    plants_per_acre: PlantCountMap
    total_plants_per_acre: int
    utilization: float


class FarmDensity(BaseModel):
    """Farm-level plant density."""
    acres: int
    total_blocks: int
    total_plants: int
    plant_breakdown: PlantCountMap


# ============================================================
# Income
# ============================================================

class PlantIncomeProfile(BaseModel):
    """
    Income profile for a plant category.

    Income ramps linearly from start_year to maturity_year and then stays
    at the mature value.
    """
    id: str
    label: str
    color: str
    symbol_ids: List[str]
    start_year: int
    maturity_year: int
    mature_income_per_plant: int = 0
    per_acre: bool = False
    mature_income_per_acre: int = 0

    class Config:
        frozen = True


class CategoryYearIncome(BaseModel):
    """Income of one category in one year."""
    profile_id: str
    label: str
    color: str
    income: int


class YearProjection(BaseModel):
    """One year of the income projection."""
    year: int
    categories: List[CategoryYearIncome]
    total_income: int
    cumulative_income: int


class CategoryTotal(BaseModel):
    """Projection-wide total of one category."""
    id: str
    label: str
    color: str
    total: int


class IncomeProjection(BaseModel):
    """Complete multi-year income projection."""
    model: PalekarModel
    acres: int
    years: List[YearProjection]
    category_totals: List[CategoryTotal]
    grand_total: int


# ============================================================
# Display
# ============================================================

class PlantDisplayInfo(BaseModel):
    id: str
    label: str
    short_label: str
    fill: str
    stroke: str
    count: int


class CategorySummary(BaseModel):
    category: str
    label: str
    color: str
    count: int
    ids: List[str]


# ============================================================
# Zones
# ============================================================

class Zone(BaseModel):
    """A named portion of the farm planted with one strategy."""
    id: str
    name: str
    color: str = "#10b981"
    acres: int = Field(ge=1, description="Zone area in whole acres")
    strategy: Optional[str] = None


# ============================================================
# Orchard Layout
# ============================================================

class OrchardConfig(BaseModel):
    """Canvas geometry of an orchard made of beds, trenches and a boundary."""
    width_ft: float = Field(gt=0, description="Total orchard width in feet")
    height_ft: float = Field(gt=0, description="Total orchard height in feet")
    boundary_width_ft: float = Field(ge=0, description="Live-fence thickness on each side")
    bed_width_ft: float = Field(gt=0)
    path_width_ft: float = Field(ge=0, description="Trench width between beds")
    bed_count: int = Field(ge=1, description="Beds per row")
    row_count: int = Field(default=1, ge=1, description="Vertical repetitions of the bed row")
    grid_spacing_ft: float = Field(gt=0)
    model: PalekarModel = PalekarModel.MODEL_24X24


class BedPosition(BaseModel):
    index: int = Field(description="Bed index, global across rows")
    row: int
    col: int
    bed_type: int
    label: str
    x: float
    y: float
    width: float
    height: float
    line_count: int
    line_offsets: List[float]


class PathPosition(BaseModel):
    index: int
    x: float
    y: float
    width: float
    height: float
    orientation: str = Field(description="'vertical' between columns, 'horizontal' between rows")


class Bounds(BaseModel):
    x: float
    y: float
    width: float
    height: float


class OrchardLayout(BaseModel):
    config: OrchardConfig
    beds: List[BedPosition]
    paths: List[PathPosition]
    inner_bounds: Bounds
    planted_area_sq_ft: float


class LayoutValidation(BaseModel):
    valid: bool
    message: str
    required_inner_width: float
    available_inner_width: float


class OrchardPreset(BaseModel):
    label: str
    bed_count: int
    description: str
