"""
Orchard canvas geometry: beds, trenches and the live-fence boundary.

The Palekar 24x24 module, measured across the beds:

    24 ft = centre of Bed 1 -> centre of Bed 3
          = half-bed(4.5) + trench(3) + bed(9) + trench(3) + half-bed(4.5)

Grid 1.5 ft, bed 9 ft (6 grid cells), trench 3 ft, boundary 1.5 ft.
"""
import math
import logging

from shapely.geometry import box
from shapely.ops import unary_union

from orchard_planner.domain.catalog import MODEL_DEFAULTS
from orchard_planner.domain.errors import InvalidInputError
from orchard_planner.domain.models import (
    BedPosition,
    Bounds,
    LayoutValidation,
    OrchardConfig,
    OrchardLayout,
    OrchardPreset,
    PalekarModel,
    PathPosition,
)

logger = logging.getLogger(__name__)

DEFAULT_BED_WIDTH_FT = 9.0
DEFAULT_PATH_WIDTH_FT = 3.0
DEFAULT_BOUNDARY_WIDTH_FT = 1.5
DEFAULT_GRID_SPACING_FT = 1.5

ORCHARD_PRESETS: list[OrchardPreset] = [
    OrchardPreset(label="3 Beds (K Module)", bed_count=3, description="24ft module"),
    OrchardPreset(label="4 Beds (1 Cycle)", bed_count=4, description="Full Bed 1-4 cycle"),
    OrchardPreset(label="8 Beds (2 Cycles)", bed_count=8, description="2x full cycles"),
    OrchardPreset(label="12 Beds (3 Cycles)", bed_count=12, description="3x full cycles"),
]


def calc_canvas_width(
    bed_count: int,
    bed_width_ft: float,
    path_width_ft: float,
    boundary_width_ft: float,
) -> float:
    """Total canvas width: boundary + beds + trenches between them + boundary."""
    return 2 * boundary_width_ft + bed_count * bed_width_ft + (bed_count - 1) * path_width_ft


def calc_canvas_height(
    bed_length_ft: float,
    boundary_width_ft: float,
    row_count: int = 1,
) -> float:
    """Total canvas height: boundary + stacked bed rows + boundary."""
    return 2 * boundary_width_ft + row_count * bed_length_ft


def config_from_bed_count(
    bed_count: int,
    row_count: int = 1,
    model: PalekarModel = PalekarModel.MODEL_24X24,
    bed_width_ft: float = DEFAULT_BED_WIDTH_FT,
    path_width_ft: float = DEFAULT_PATH_WIDTH_FT,
    boundary_width_ft: float = DEFAULT_BOUNDARY_WIDTH_FT,
    grid_spacing_ft: float = DEFAULT_GRID_SPACING_FT,
) -> OrchardConfig:
    """
    Build a full orchard config from a bed count.

    Args:
        bed_count: Beds per row
        row_count: Number of stacked bed rows
        model: Palekar model supplying the bed length
        bed_width_ft: Bed width
        path_width_ft: Trench width
        boundary_width_ft: Live-fence thickness
        grid_spacing_ft: Grid line spacing

    Returns:
        OrchardConfig sized to fit exactly
    """
    bed_length = MODEL_DEFAULTS[PalekarModel(model)].bed_length
    return OrchardConfig(
        width_ft=calc_canvas_width(bed_count, bed_width_ft, path_width_ft, boundary_width_ft),
        height_ft=calc_canvas_height(bed_length, boundary_width_ft, row_count),
        boundary_width_ft=boundary_width_ft,
        bed_width_ft=bed_width_ft,
        path_width_ft=path_width_ft,
        bed_count=bed_count,
        row_count=row_count,
        grid_spacing_ft=grid_spacing_ft,
        model=model,
    )


def validate_orchard_config(config: OrchardConfig) -> LayoutValidation:
    """
    Check that the beds and trenches fit inside the boundary.

    Args:
        config: Orchard configuration

    Returns:
        LayoutValidation with the required and available inner widths
    """
    inner_width = config.width_ft - 2 * config.boundary_width_ft
    required = config.bed_count * config.bed_width_ft + (config.bed_count - 1) * config.path_width_ft

    if required > inner_width + 1e-9:
        return LayoutValidation(
            valid=False,
            message=f"Needs {required:g}ft but only {inner_width:g}ft available.",
            required_inner_width=required,
            available_inner_width=inner_width,
        )

    message = (
        f"{config.bed_count} beds × {config.bed_width_ft:g}ft + "
        f"{config.bed_count - 1} trenches × {config.path_width_ft:g}ft"
    )
    if config.bed_count >= 3:
        module_ft = config.bed_width_ft + config.path_width_ft + config.bed_width_ft
        message += f" | Module K = {module_ft:g}ft"

    return LayoutValidation(
        valid=True,
        message=message,
        required_inner_width=required,
        available_inner_width=inner_width,
    )


def compute_orchard_layout(config: OrchardConfig) -> OrchardLayout:
    """
    Lay out beds and trenches on the orchard canvas.

    Beds run left to right inside the boundary with a trench between
    neighbours; rows stack top to bottom. Bed types follow the model's
    column cycle.

    Args:
        config: Orchard configuration

    Returns:
        OrchardLayout with bed and trench rectangles

    Raises:
        InvalidInputError: If the beds do not fit inside the boundary
    """
    validation = validate_orchard_config(config)
    if not validation.valid:
        raise InvalidInputError(validation.message)

    b = config.boundary_width_ft
    inner_width = config.width_ft - 2 * b
    inner_height = config.height_ft - 2 * b
    if inner_height <= 0:
        raise InvalidInputError(f"No room for beds: inner height is {inner_height:g}ft")

    inner = box(b, b, b + inner_width, b + inner_height)
    bed_height = inner_height / config.row_count
    column_cycle = MODEL_DEFAULTS[config.model].layout_column_cycle

    line_count = math.floor(config.bed_width_ft / config.grid_spacing_ft + 1e-9) + 1
    line_offsets = [i * config.grid_spacing_ft for i in range(line_count)]

    beds: list[BedPosition] = []
    paths: list[PathPosition] = []
    bed_shapes = []

    for row in range(config.row_count):
        y = b + row * bed_height
        x = b
        for col in range(config.bed_count):
            bed_type = column_cycle[col % len(column_cycle)]
            shape = box(x, y, x + config.bed_width_ft, y + bed_height)
            if not inner.covers(shape):
                raise InvalidInputError(f"Bed at column {col}, row {row} crosses the boundary")
            bed_shapes.append(shape)

            beds.append(BedPosition(
                index=len(beds),
                row=row,
                col=col,
                bed_type=bed_type,
                label=f"Bed {bed_type}",
                x=x,
                y=y,
                width=config.bed_width_ft,
                height=bed_height,
                line_count=line_count,
                line_offsets=list(line_offsets),
            ))
            x += config.bed_width_ft

            if col < config.bed_count - 1:
                paths.append(PathPosition(
                    index=len(paths),
                    x=x,
                    y=y,
                    width=config.path_width_ft,
                    height=bed_height,
                    orientation="vertical",
                ))
                x += config.path_width_ft

    planted_area = unary_union(bed_shapes).area
    logger.debug(f"Layout {config.model.value}: {len(beds)} beds, {len(paths)} trenches, "
                 f"{planted_area:.1f} sq ft planted")

    return OrchardLayout(
        config=config,
        beds=beds,
        paths=paths,
        inner_bounds=Bounds(x=b, y=b, width=inner_width, height=inner_height),
        planted_area_sq_ft=planted_area,
    )
