"""
Application service: Orchestration layer for farm planning reports.
"""
from typing import List, Optional, Sequence

from pydantic import BaseModel

from orchard_planner.domain.catalog import DEFAULT_ZONES
from orchard_planner.domain.models import (
    AcreDensity,
    BlockDensity,
    CategorySummary,
    FarmDensity,
    IncomeProjection,
    MiddleBedType,
    PalekarModel,
    PlantDisplayInfo,
    Zone,
)
from orchard_planner.services.domain.density_calculator import DensityCalculator
from orchard_planner.services.domain.display_formatter import (
    get_category_summary,
    get_plant_display_list,
)
from orchard_planner.services.domain.income_projector import IncomeProjector


class DensityReport(BaseModel):
    """Block, acre and farm density with their display summaries."""
    block: BlockDensity
    acre: AcreDensity
    farm: FarmDensity
    block_categories: List[CategorySummary]
    acre_plants: List[PlantDisplayInfo]
    farm_categories: List[CategorySummary]


class ZoneReport(BaseModel):
    zone: Zone
    density: FarmDensity
    income: IncomeProjection


class FarmReport(BaseModel):
    """Per-zone density and income with farm-wide totals."""
    model: PalekarModel
    middle_bed: MiddleBedType
    zones: List[ZoneReport]
    total_acres: int
    total_blocks: int
    total_plants: int
    total_income: int


class FarmPlanningService:
    """
    Application service for farm planning reports.

    Orchestrates the density and income domain services.
    Follows the application layer pattern - no business logic here,
    only coordination between domain services and formatters.
    """

    def __init__(
        self,
        density_calculator: DensityCalculator,
        income_projector: IncomeProjector,
    ):
        """
        Initialize the service with dependencies.

        Args:
            density_calculator: Density calculator for block/acre/farm counts
            income_projector: Income projector for multi-year income
        """
        self.density_calculator = density_calculator
        self.income_projector = income_projector

    def get_density_report(
        self,
        model: PalekarModel,
        acres: int,
        middle_bed: MiddleBedType = MiddleBedType.BED2,
        utilization: Optional[float] = None,
    ) -> DensityReport:
        """
        Get the density of one K-module, one acre and the whole farm.

        Args:
            model: Palekar model
            acres: Farm size in acres
            middle_bed: Middle bed choice for 24x24
            utilization: Usable fraction of each acre

        Returns:
            DensityReport

        Raises:
            ValueError: If any input is invalid
        """
        block = self.density_calculator.compute_block_density(model, middle_bed)
        acre = self.density_calculator.compute_acre_density(model, middle_bed, utilization)
        farm = self.density_calculator.compute_farm_density(model, acres, middle_bed, utilization)

        return DensityReport(
            block=block,
            acre=acre,
            farm=farm,
            block_categories=get_category_summary(block.total_per_block),
            acre_plants=get_plant_display_list(acre.plants_per_acre),
            farm_categories=get_category_summary(farm.plant_breakdown),
        )

    def get_income_report(
        self,
        model: PalekarModel,
        acres: int,
        middle_bed: MiddleBedType = MiddleBedType.BED2,
    ) -> IncomeProjection:
        """Get the ten-year income projection of a farm."""
        return self.income_projector.compute_income_projection(model, acres, middle_bed)

    def get_farm_report(
        self,
        model: PalekarModel,
        middle_bed: MiddleBedType = MiddleBedType.BED2,
        zones: Optional[Sequence[Zone]] = None,
    ) -> FarmReport:
        """
        Get density and income for every zone of a farm.

        Args:
            model: Palekar model applied to every zone
            middle_bed: Middle bed choice for 24x24
            zones: Farm zones (defaults to the standard A/B/C split)

        Returns:
            FarmReport with per-zone results and farm totals
        """
        zones = list(zones) if zones else list(DEFAULT_ZONES)

        zone_reports = [
            ZoneReport(
                zone=zone,
                density=self.density_calculator.compute_farm_density(model, zone.acres, middle_bed),
                income=self.income_projector.compute_income_projection(model, zone.acres, middle_bed),
            )
            for zone in zones
        ]

        return FarmReport(
            model=model,
            middle_bed=middle_bed,
            zones=zone_reports,
            total_acres=sum(z.zone.acres for z in zone_reports),
            total_blocks=sum(z.density.total_blocks for z in zone_reports),
            total_plants=sum(z.density.total_plants for z in zone_reports),
            total_income=sum(z.income.grand_total for z in zone_reports),
        )
