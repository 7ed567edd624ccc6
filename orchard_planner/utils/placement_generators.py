"""
Plant placement generators for the four bed archetypes.

Provides utilities for:
- Centre column B/M/S trees and pigeon pea midpoints (Bed 1 & 3)
- Ground-cover crops on edge and inner grid lines (Bed 1 & 3)
- Banana/papaya edges, pigeon pea and interior crops (Bed 2)
- Vine vegetables and pavilion poles (Bed 4)

All offsets are in feet relative to the bed's top-left corner. Positions are
computed as ``start + index * step`` so fractional steps never drift.
"""
import math
import logging

from orchard_planner.domain.catalog import PAVILION_POLE_PITCH_FT
from orchard_planner.domain.errors import ConfigurationError
from orchard_planner.domain.models import Placement

logger = logging.getLogger(__name__)

_EPSILON = 1e-9

# Centre column pattern: B(0) S(6) M(12) S(18) B(24) ...
CENTER_COLUMN_PATTERN = ("big", "small", "medium", "small")


def _positions(start: float, stop: float, step: float, inclusive: bool = True) -> list[float]:
    """
    Evenly spaced positions from start up to stop.

    Args:
        start: First position
        stop: Upper bound
        step: Distance between positions (must be positive)
        inclusive: Whether a position landing exactly on stop is kept

    Returns:
        List of positions in ascending order
    """
    if step <= 0:
        raise ConfigurationError(f"Placement step must be positive, got {step}")

    positions = []
    index = 0
    while True:
        value = start + index * step
        if value > stop + _EPSILON:
            break
        if not inclusive and value > stop - _EPSILON:
            break
        positions.append(value)
        index += 1
    return positions


def _is_multiple(value: float, pitch: float) -> bool:
    remainder = math.fmod(value, pitch)
    return math.isclose(remainder, 0.0, abs_tol=_EPSILON) or math.isclose(
        remainder, pitch, abs_tol=_EPSILON
    )


def is_boundary_placement(placement: Placement, bed_length_ft: float) -> bool:
    """
    Check whether a placement sits on the bottom edge of its bed.

    Boundary placements coincide with the first row of the module below
    when modules tile vertically.

    Args:
        placement: Placement to check
        bed_length_ft: Bed length in feet

    Returns:
        True if the placement lies at y == bed length
    """
    return math.isclose(placement.y_offset_ft, bed_length_ft, abs_tol=_EPSILON)


# ============================================================
# Bed 1 & 3
# ============================================================

def get_center_column_trees(
    bed_width_ft: float,
    bed_length_ft: float,
    spacing_ft: float = 6.0,
) -> list[Placement]:
    """
    Generate centre column tree placements for a B/M/S bed.

    Args:
        bed_width_ft: Bed width in feet
        bed_length_ft: Bed length in feet
        spacing_ft: Distance between consecutive trees

    Returns:
        Placements from y=0 to y=bed_length inclusive, cycling big/small/medium/small
    """
    center_x = bed_width_ft / 2
    return [
        Placement(
            symbol_id=CENTER_COLUMN_PATTERN[i % len(CENTER_COLUMN_PATTERN)],
            x_offset_ft=center_x,
            y_offset_ft=y,
        )
        for i, y in enumerate(_positions(0.0, bed_length_ft, spacing_ft))
    ]


def get_intermediate_placements(
    bed_width_ft: float,
    bed_length_ft: float,
    main_spacing_ft: float = 6.0,
    symbol_id: str = "pigeonPea",
) -> list[Placement]:
    """
    Generate pigeon pea placements at the midpoints of the centre column.

        0 B -- 3 △ -- 6 S -- 9 △ -- 12 M -- 15 △ -- 18 S -- 21 △ -- 24 B

    Args:
        bed_width_ft: Bed width in feet
        bed_length_ft: Bed length in feet
        main_spacing_ft: Spacing of the centre column trees
        symbol_id: Symbol to place at the midpoints

    Returns:
        Midpoint placements, strictly above the bottom edge
    """
    center_x = bed_width_ft / 2
    half_step = main_spacing_ft / 2
    return [
        Placement(symbol_id=symbol_id, x_offset_ft=center_x, y_offset_ft=y)
        for y in _positions(half_step, bed_length_ft, main_spacing_ft, inclusive=False)
    ]


def get_bed13_ground_cover_placements(
    bed_width_ft: float,
    bed_length_ft: float,
    grid_spacing_ft: float = 1.5,
    main_spacing_ft: float = 6.0,
) -> list[Placement]:
    """
    Generate ground-cover crops on the non-centre lines of Bed 1 & 3.

    Edge lines (one grid step in from each side) carry marigold on the tree
    rows and cotton on the midpoints. Inner lines (two grid steps in) carry
    groundnut on the tree rows and onion/garlic on the midpoints.

    Args:
        bed_width_ft: Bed width in feet
        bed_length_ft: Bed length in feet
        grid_spacing_ft: Grid line spacing
        main_spacing_ft: Spacing of the centre column trees

    Returns:
        Ground-cover placements, edge lines first
    """
    half_step = main_spacing_ft / 2
    tree_rows = _positions(0.0, bed_length_ft, main_spacing_ft)
    mid_rows = _positions(half_step, bed_length_ft, main_spacing_ft, inclusive=False)

    line_groups = (
        ((grid_spacing_ft, bed_width_ft - grid_spacing_ft), "marigold", "cotton"),
        ((2 * grid_spacing_ft, bed_width_ft - 2 * grid_spacing_ft), "groundnut", "onionGarlic"),
    )

    placements = []
    for columns, row_symbol, mid_symbol in line_groups:
        for x in columns:
            placements.extend(
                Placement(symbol_id=row_symbol, x_offset_ft=x, y_offset_ft=y) for y in tree_rows
            )
            placements.extend(
                Placement(symbol_id=mid_symbol, x_offset_ft=x, y_offset_ft=y) for y in mid_rows
            )
    return placements


# ============================================================
# Bed 2
# ============================================================

def get_bed2_edge_placements(
    bed_width_ft: float,
    bed_length_ft: float,
    grid_spacing_ft: float = 1.5,
    spacing_ft: float = 6.0,
) -> list[Placement]:
    """
    Generate banana and papaya on both edges of Bed 2, alternating.

        Left edge:  BA(0) PA(6) BA(12) PA(18) BA(24)
        Right edge: PA(0) BA(6) PA(12) BA(18) PA(24)

    Args:
        bed_width_ft: Bed width in feet
        bed_length_ft: Bed length in feet
        grid_spacing_ft: Offset of the edge columns from the bed sides
        spacing_ft: Distance between consecutive trees on one edge

    Returns:
        Edge placements ordered by row, left before right
    """
    left_x = grid_spacing_ft
    right_x = bed_width_ft - grid_spacing_ft

    placements = []
    for i, y in enumerate(_positions(0.0, bed_length_ft, spacing_ft)):
        is_even = i % 2 == 0
        placements.append(Placement(
            symbol_id="banana" if is_even else "papaya",
            x_offset_ft=left_x,
            y_offset_ft=y,
        ))
        placements.append(Placement(
            symbol_id="papaya" if is_even else "banana",
            x_offset_ft=right_x,
            y_offset_ft=y,
        ))
    return placements


def get_bed2_intermediate_placements(
    bed_width_ft: float,
    bed_length_ft: float,
    grid_spacing_ft: float = 1.5,
    main_spacing_ft: float = 6.0,
    symbol_id: str = "pigeonPea",
) -> list[Placement]:
    """Pigeon pea at the midpoints of both Bed 2 edge columns."""
    left_x = grid_spacing_ft
    right_x = bed_width_ft - grid_spacing_ft
    half_step = main_spacing_ft / 2

    placements = []
    for y in _positions(half_step, bed_length_ft, main_spacing_ft, inclusive=False):
        placements.append(Placement(symbol_id=symbol_id, x_offset_ft=left_x, y_offset_ft=y))
        placements.append(Placement(symbol_id=symbol_id, x_offset_ft=right_x, y_offset_ft=y))
    return placements


def get_bed2_interior_placements(
    bed_width_ft: float,
    bed_length_ft: float,
    grid_spacing_ft: float = 1.5,
    main_spacing_ft: float = 6.0,
) -> list[Placement]:
    """
    Generate the interior crops of Bed 2.

    Sugarcane stands on the centre line at tree spacing. Turmeric and ginger
    fill the lines two grid steps in from the left and right side at every
    half step.

    Args:
        bed_width_ft: Bed width in feet
        bed_length_ft: Bed length in feet
        grid_spacing_ft: Grid line spacing
        main_spacing_ft: Spacing of the edge trees

    Returns:
        Interior placements: sugarcane, then turmeric, then ginger
    """
    center_x = bed_width_ft / 2
    half_step = main_spacing_ft / 2
    rhizome_rows = _positions(0.0, bed_length_ft, half_step)

    placements = [
        Placement(symbol_id="sugarcane", x_offset_ft=center_x, y_offset_ft=y)
        for y in _positions(0.0, bed_length_ft, main_spacing_ft)
    ]
    placements.extend(
        Placement(symbol_id="turmeric", x_offset_ft=2 * grid_spacing_ft, y_offset_ft=y)
        for y in rhizome_rows
    )
    placements.extend(
        Placement(symbol_id="ginger", x_offset_ft=bed_width_ft - 2 * grid_spacing_ft, y_offset_ft=y)
        for y in rhizome_rows
    )
    return placements


# ============================================================
# Bed 4
# ============================================================

def get_bed4_placements(
    bed_width_ft: float,
    bed_length_ft: float,
    grid_spacing_ft: float = 1.5,
    row_spacing_ft: float = 3.0,
) -> list[Placement]:
    """
    Generate the vine/vegetable pavilion bed.

    Every interior grid column gets a vine vegetable on every row. On the
    structural columns (both edge lines and the centre) rows that fall on
    the pole pitch carry a bamboo pavilion pole instead.

    Args:
        bed_width_ft: Bed width in feet
        bed_length_ft: Bed length in feet
        grid_spacing_ft: Grid line spacing
        row_spacing_ft: Row pitch along the bed

    Returns:
        Placements ordered column by column
    """
    columns = _positions(grid_spacing_ft, bed_width_ft, grid_spacing_ft, inclusive=False)
    pole_columns = (grid_spacing_ft, bed_width_ft / 2, bed_width_ft - grid_spacing_ft)
    rows = _positions(0.0, bed_length_ft, row_spacing_ft)

    placements = []
    for x in columns:
        is_pole_column = any(math.isclose(x, pc, abs_tol=_EPSILON) for pc in pole_columns)
        for y in rows:
            is_pole = is_pole_column and _is_multiple(y, PAVILION_POLE_PITCH_FT)
            placements.append(Placement(
                symbol_id="pavilionPole" if is_pole else "vineVeg",
                x_offset_ft=x,
                y_offset_ft=y,
            ))
    return placements


# ============================================================
# Per-archetype dispatch
# ============================================================

def get_all_bed_placements(
    bed_type: int,
    bed_length_ft: float,
    tree_spacing_ft: float,
    bed_width_ft: float = 9.0,
    grid_spacing_ft: float = 1.5,
    bed4_row_spacing_ft: float = 3.0,
) -> list[Placement]:
    """
    Gather every placement of one bed archetype.

    Args:
        bed_type: Bed archetype (1-4)
        bed_length_ft: Bed length in feet
        tree_spacing_ft: Main tree spacing of the model
        bed_width_ft: Bed width in feet
        grid_spacing_ft: Grid line spacing
        bed4_row_spacing_ft: Row pitch of the vine bed

    Returns:
        All placements of the bed, boundary row included

    Raises:
        ConfigurationError: If bed_type is not a known archetype
    """
    if bed_type in (1, 3):
        placements = [
            *get_center_column_trees(bed_width_ft, bed_length_ft, tree_spacing_ft),
            *get_intermediate_placements(bed_width_ft, bed_length_ft, tree_spacing_ft),
            *get_bed13_ground_cover_placements(
                bed_width_ft, bed_length_ft, grid_spacing_ft, tree_spacing_ft
            ),
        ]
    elif bed_type == 2:
        placements = [
            *get_bed2_edge_placements(bed_width_ft, bed_length_ft, grid_spacing_ft, tree_spacing_ft),
            *get_bed2_intermediate_placements(
                bed_width_ft, bed_length_ft, grid_spacing_ft, tree_spacing_ft
            ),
            *get_bed2_interior_placements(
                bed_width_ft, bed_length_ft, grid_spacing_ft, tree_spacing_ft
            ),
        ]
    elif bed_type == 4:
        placements = get_bed4_placements(
            bed_width_ft, bed_length_ft, grid_spacing_ft, bed4_row_spacing_ft
        )
    else:
        raise ConfigurationError(f"Unknown bed type: {bed_type!r} (expected 1, 2, 3 or 4)")

    logger.debug(f"Bed {bed_type} ({bed_length_ft}ft @ {tree_spacing_ft}ft): {len(placements)} placements")
    return placements
