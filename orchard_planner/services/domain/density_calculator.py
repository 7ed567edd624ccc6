"""
Domain service: Plant density of Palekar food forest layouts.

This module scales the placement generators up through the planting
hierarchy:
- Bed density (standalone and tiled)
- K-module density (standalone display cycle and de-duplicated tiled cycle)
- Acre density (module tiling geometry and land utilization)
- Farm density (linear in acres)

Tiled counts drop placements shared with neighbouring modules: the bottom
row of every bed (it is the top row of the module below) and the last bed of
the cycle (it is the first bed of the module to the right).
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union
import math
import numbers
import logging

from orchard_planner.config import settings
from orchard_planner.domain.catalog import MODEL_DEFAULTS, SQ_FT_PER_ACRE
from orchard_planner.domain.errors import ConfigurationError, InvalidInputError
from orchard_planner.domain.models import (
    AcreDensity,
    BedDensity,
    BlockDensity,
    FarmDensity,
    MiddleBedType,
    ModelDefaults,
    PalekarModel,
    Placement,
    PlantCountMap,
    TiledModuleDensity,
)
from orchard_planner.utils.placement_generators import (
    get_all_bed_placements,
    is_boundary_placement,
)

logger = logging.getLogger(__name__)

ModelLike = Union[PalekarModel, str]
MiddleBedLike = Union[MiddleBedType, str]


@dataclass
class DensityConfig:
    """Configuration for density computations."""

    bed_width_ft: float = field(default_factory=lambda: settings.bed_width_ft)
    """Width of every bed in feet"""

    grid_spacing_ft: float = field(default_factory=lambda: settings.grid_spacing_ft)
    """Spacing of the planting grid lines"""

    bed4_row_spacing_ft: float = field(default_factory=lambda: settings.bed4_row_spacing_ft)
    """Row pitch of the vine/vegetable bed"""

    utilization: float = field(default_factory=lambda: settings.default_utilization)
    """Default land utilization used when a caller passes none"""


# ============================================================
# Count map helpers
# ============================================================

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def count_placements(placements: Iterable[Placement]) -> PlantCountMap:
    """Count placements per symbol id, in first-seen order."""
    return dict(Counter(p.symbol_id for p in placements))


def merge_counts(*maps: PlantCountMap) -> PlantCountMap:
    """Sum several count maps key by key."""
    merged: PlantCountMap = {}
    for counts in maps:
        for symbol_id, count in counts.items():
            merged[symbol_id] = merged.get(symbol_id, 0) + count
    return merged


def total_from_map(counts: PlantCountMap) -> int:
    return sum(counts.values())


def scale_counts(counts: PlantCountMap, factor: float) -> PlantCountMap:
    """
    Scale every count by a factor, rounding each symbol independently.

    The rounded values are not re-normalized, so their sum may differ
    slightly from a total scaled separately.
    """
    return {symbol_id: round_half_up(count * factor) for symbol_id, count in counts.items()}


# ============================================================
# Input validation
# ============================================================

def resolve_model(model: ModelLike) -> PalekarModel:
    try:
        return PalekarModel(model)
    except ValueError:
        valid = ", ".join(m.value for m in PalekarModel)
        raise ConfigurationError(f"Unknown Palekar model: {model!r} (expected one of {valid})")


def resolve_middle_bed(middle_bed: Optional[MiddleBedLike]) -> MiddleBedType:
    if middle_bed is None:
        return MiddleBedType.BED2
    try:
        return MiddleBedType(middle_bed)
    except ValueError:
        valid = ", ".join(m.value for m in MiddleBedType)
        raise ConfigurationError(f"Unknown middle bed: {middle_bed!r} (expected one of {valid})")


def validate_acres(acres: int) -> int:
    if isinstance(acres, bool) or not isinstance(acres, numbers.Integral):
        raise InvalidInputError(f"Acres must be a whole number, got {acres!r}")
    if acres < 1:
        raise InvalidInputError(f"Acres must be positive, got {acres}")
    return int(acres)


def validate_utilization(utilization: float) -> float:
    if isinstance(utilization, bool) or not isinstance(utilization, numbers.Real):
        raise InvalidInputError(f"Utilization must be a number, got {utilization!r}")
    if not math.isfinite(utilization) or not 0 < utilization <= 1:
        raise InvalidInputError(f"Utilization must be in (0, 1], got {utilization}")
    return float(utilization)


# ============================================================
# Bed cycles
# ============================================================

def get_bed_cycle(model: ModelLike, middle_bed: Optional[MiddleBedLike] = None) -> list[int]:
    """
    Bed archetypes of one standalone K-module.

    24x24: Bed 1 | Middle (Bed 2 or 4) | Bed 3
    36x36: Bed 1 | Bed 2 | Bed 4 | Bed 3 (middle bed choice is ignored)

    Args:
        model: Palekar model
        middle_bed: Middle bed choice for 24x24 (defaults to bed2)

    Returns:
        List of bed types
    """
    model = resolve_model(model)
    middle_bed = resolve_middle_bed(middle_bed)

    if model == PalekarModel.MODEL_24X24:
        return [1, 2 if middle_bed == MiddleBedType.BED2 else 4, 3]
    return list(MODEL_DEFAULTS[model].bed_type_cycle)


def get_tiled_bed_cycle(model: ModelLike, middle_bed: Optional[MiddleBedLike] = None) -> list[int]:
    """
    Bed archetypes a K-module contributes uniquely when tiled horizontally.

    The last bed of the display cycle is the first bed of the next module,
    so it is dropped.
    """
    return get_bed_cycle(model, middle_bed)[:-1]


class DensityCalculator:
    """
    Domain service for plant density of Palekar layouts.

    Every method is pure: it allocates and returns fresh structures and
    keeps no state between calls apart from its configuration.
    """

    def __init__(self, config: Optional[DensityConfig] = None):
        """
        Initialize the calculator.

        Args:
            config: Geometry and utilization configuration
        """
        self.config = config or DensityConfig()
        validate_utilization(self.config.utilization)

        logger.info(f"Initialized DensityCalculator with config: "
                    f"bed_width={self.config.bed_width_ft}ft, "
                    f"grid={self.config.grid_spacing_ft}ft, "
                    f"utilization={self.config.utilization}")

    def _bed_placements(self, bed_type: int, bed_length: float, spacing: float) -> list[Placement]:
        return get_all_bed_placements(
            bed_type,
            bed_length,
            spacing,
            bed_width_ft=self.config.bed_width_ft,
            grid_spacing_ft=self.config.grid_spacing_ft,
            bed4_row_spacing_ft=self.config.bed4_row_spacing_ft,
        )

    def compute_bed_density(self, bed_type: int, bed_length: float, spacing: float) -> PlantCountMap:
        """
        Standalone plant counts of one bed, boundary row included.

        Args:
            bed_type: Bed archetype (1-4)
            bed_length: Bed length in feet
            spacing: Main tree spacing in feet

        Returns:
            Plant count map
        """
        return count_placements(self._bed_placements(bed_type, bed_length, spacing))

    def compute_tiled_bed_density(self, bed_type: int, bed_length: float, spacing: float) -> PlantCountMap:
        """
        Plant counts of one bed excluding the boundary row at y == bed_length.

        In continuous tiling the bottom row is the top row of the bed below.
        """
        placements = self._bed_placements(bed_type, bed_length, spacing)
        unique = [p for p in placements if not is_boundary_placement(p, bed_length)]
        return count_placements(unique)

    def compute_block_density(
        self,
        model: ModelLike,
        middle_bed: Optional[MiddleBedLike] = MiddleBedType.BED2,
    ) -> BlockDensity:
        """
        Compute plant counts for one standalone K-module (for display).

        Args:
            model: Palekar model
            middle_bed: Middle bed choice for 24x24

        Returns:
            BlockDensity with per-bed counts and the merged module total
        """
        model = resolve_model(model)
        defaults: ModelDefaults = MODEL_DEFAULTS[model]
        bed_cycle = get_bed_cycle(model, middle_bed)

        beds = []
        for bed_type in bed_cycle:
            plants = self.compute_bed_density(bed_type, defaults.bed_length, defaults.tree_spacing_ft)
            beds.append(BedDensity(
                bed_type=bed_type,
                label=f"Bed {bed_type}",
                plants=plants,
                total=total_from_map(plants),
            ))

        total_per_block = merge_counts(*(b.plants for b in beds))
        grand_total = total_from_map(total_per_block)
        logger.debug(f"Block {model.value} cycle={bed_cycle}: {grand_total} plants")

        return BlockDensity(
            model=model,
            block_size_ft=f"{defaults.k_size_ft} × {defaults.k_size_ft}",
            bed_count=len(bed_cycle),
            bed_length=defaults.bed_length,
            tree_spacing=defaults.tree_spacing_ft,
            beds=beds,
            total_per_block=total_per_block,
            grand_total=grand_total,
        )

    def compute_tiled_module_density(
        self,
        model: ModelLike,
        middle_bed: Optional[MiddleBedLike] = None,
    ) -> TiledModuleDensity:
        """
        Compute the unique plant contribution of one K-module when tiled.

        For 24x24 the single B/M/S bed contributes B(0), S(6), M(12), S(18):
        one big tree per module.

        Args:
            model: Palekar model
            middle_bed: Middle bed choice for 24x24

        Returns:
            TiledModuleDensity with de-duplicated counts
        """
        model = resolve_model(model)
        defaults = MODEL_DEFAULTS[model]
        tiled_cycle = get_tiled_bed_cycle(model, middle_bed)

        plants = merge_counts(*(
            self.compute_tiled_bed_density(bed_type, defaults.bed_length, defaults.tree_spacing_ft)
            for bed_type in tiled_cycle
        ))
        return TiledModuleDensity(plants=plants, total=total_from_map(plants))

    def compute_acre_density(
        self,
        model: ModelLike,
        middle_bed: Optional[MiddleBedLike] = None,
        utilization: Optional[float] = None,
    ) -> AcreDensity:
        """
        Scale the tiled module density to one acre.

        24x24 tiles at 576 sq ft (75 modules per acre), 36x36 at 1296 sq ft
        (33 modules per acre). Utilization then removes land taken by roads,
        ponds, sheds and boundary fence.

        Args:
            model: Palekar model
            middle_bed: Middle bed choice for 24x24
            utilization: Usable fraction of the acre, in (0, 1]

        Returns:
            AcreDensity

        Raises:
            ConfigurationError: If model or middle bed is unknown
            InvalidInputError: If utilization is outside (0, 1]
        """
        model = resolve_model(model)
        utilization = validate_utilization(
            self.config.utilization if utilization is None else utilization
        )
        tiled = self.compute_tiled_module_density(model, middle_bed)

        k_size_ft = MODEL_DEFAULTS[model].k_size_ft
        tile_area_sq_ft = k_size_ft * k_size_ft
        theoretical_blocks = SQ_FT_PER_ACRE // tile_area_sq_ft
        blocks_per_acre = math.floor(theoretical_blocks * utilization)

        logger.debug(f"Acre {model.value}: {theoretical_blocks} theoretical modules, "
                     f"{blocks_per_acre} at {utilization:.0%} utilization")

        return AcreDensity(
            model=model,
            tile_area_sq_ft=tile_area_sq_ft,
            k_size_ft=k_size_ft,
            theoretical_blocks_per_acre=theoretical_blocks,
            blocks_per_acre=blocks_per_acre,
            plants_per_acre=scale_counts(tiled.plants, blocks_per_acre),
            total_plants_per_acre=blocks_per_acre * tiled.total,
            utilization=utilization,
        )

    def compute_farm_density(
        self,
        model: ModelLike,
        acres: int,
        middle_bed: Optional[MiddleBedLike] = None,
        utilization: Optional[float] = None,
    ) -> FarmDensity:
        """
        Scale the acre density to a whole farm.

        Args:
            model: Palekar model
            acres: Farm size in whole acres (no upper bound)
            middle_bed: Middle bed choice for 24x24
            utilization: Usable fraction of each acre

        Returns:
            FarmDensity

        Raises:
            InvalidInputError: If acres is not a positive integer
        """
        acres = validate_acres(acres)
        acre = self.compute_acre_density(model, middle_bed, utilization)

        return FarmDensity(
            acres=acres,
            total_blocks=acre.blocks_per_acre * acres,
            total_plants=acre.total_plants_per_acre * acres,
            plant_breakdown=scale_counts(acre.plants_per_acre, acres),
        )


# ============================================================
# Functional API
# ============================================================

def compute_block_density(
    model: ModelLike,
    middle_bed: Optional[MiddleBedLike] = MiddleBedType.BED2,
) -> BlockDensity:
    return DensityCalculator().compute_block_density(model, middle_bed)


def compute_acre_density(
    model: ModelLike,
    middle_bed: Optional[MiddleBedLike] = None,
    utilization: Optional[float] = None,
) -> AcreDensity:
    return DensityCalculator().compute_acre_density(model, middle_bed, utilization)


def compute_farm_density(
    model: ModelLike,
    acres: int,
    middle_bed: Optional[MiddleBedLike] = None,
    utilization: Optional[float] = None,
) -> FarmDensity:
    return DensityCalculator().compute_farm_density(model, acres, middle_bed, utilization)
