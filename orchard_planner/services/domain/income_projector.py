"""
Domain service: Ten-year income projection for a Palekar orchard.

Income for each plant category follows a maturity ramp: nothing before the
first productive year, a linear ramp up to the maturity year, then the full
mature income. Tree crops earn per plant; ground cover, spices and vines
earn per acre once they are present in the layout.
"""
from typing import Optional, Sequence
import logging

import numpy as np

from orchard_planner.domain.models import (
    CategoryTotal,
    CategoryYearIncome,
    IncomeProjection,
    PlantCountMap,
    PlantIncomeProfile,
    YearProjection,
)
from orchard_planner.services.domain.density_calculator import (
    DensityCalculator,
    MiddleBedLike,
    ModelLike,
    resolve_model,
    scale_counts,
    validate_acres,
)

logger = logging.getLogger(__name__)

PROJECTION_YEARS = 10


# Conservative farm-gate estimates (₹ per plant per year, or per acre)
PLANT_INCOME_PROFILES: tuple[PlantIncomeProfile, ...] = (
    PlantIncomeProfile(
        id="banana", label="Banana", color="#38bdf8",
        symbol_ids=["banana"],
        start_year=1, maturity_year=2, mature_income_per_plant=400,
    ),
    PlantIncomeProfile(
        id="papaya", label="Papaya", color="#a78bfa",
        symbol_ids=["papaya"],
        start_year=1, maturity_year=2, mature_income_per_plant=300,
    ),
    PlantIncomeProfile(
        id="small", label="Small Trees (Guava/Pomegranate)", color="#22c55e",
        symbol_ids=["small"],
        start_year=2, maturity_year=4, mature_income_per_plant=800,
    ),
    PlantIncomeProfile(
        id="medium", label="Medium Trees (Apple/Custard Apple)", color="#ec4899",
        symbol_ids=["medium"],
        start_year=3, maturity_year=6, mature_income_per_plant=1500,
    ),
    PlantIncomeProfile(
        id="big", label="Big Trees (Mango/Citrus)", color="#ef4444",
        symbol_ids=["big"],
        start_year=4, maturity_year=8, mature_income_per_plant=3000,
    ),
    PlantIncomeProfile(
        id="pigeonPea", label="Pigeon Pea (Arhar)", color="#4ade80",
        symbol_ids=["pigeonPea"],
        start_year=1, maturity_year=1, mature_income_per_plant=50,
    ),
    PlantIncomeProfile(
        id="groundCover", label="Ground Cover Crops", color="#facc15",
        symbol_ids=[
            "marigold", "fruitVeg", "milletsPulses", "groundnut",
            "onionGarlic", "cotton", "aromaticPaddy",
        ],
        start_year=1, maturity_year=1, per_acre=True, mature_income_per_acre=25000,
    ),
    PlantIncomeProfile(
        id="spices", label="Spices (Turmeric/Ginger)", color="#f97316",
        symbol_ids=["turmeric", "ginger"],
        start_year=1, maturity_year=2, per_acre=True, mature_income_per_acre=18000,
    ),
    PlantIncomeProfile(
        id="vine", label="Vine Vegetables", color="#16a34a",
        symbol_ids=["vineVeg"],
        start_year=1, maturity_year=1, per_acre=True, mature_income_per_acre=30000,
    ),
)


def yield_ramp(profile: PlantIncomeProfile, years: np.ndarray) -> np.ndarray:
    """
    Maturity ramp factor for each year.

    Args:
        profile: Income profile
        years: Array of 1-based year numbers

    Returns:
        Array of factors in [0, 1], non-decreasing in year
    """
    years = np.asarray(years, dtype=float)
    span = profile.maturity_year - profile.start_year
    if span > 0:
        ramp = (years - profile.start_year + 1) / (span + 1)
    else:
        ramp = np.ones_like(years)
    ramp = np.where(years >= profile.maturity_year, 1.0, ramp)
    return np.where(years < profile.start_year, 0.0, ramp)


def plant_count_for_profile(profile: PlantIncomeProfile, counts: PlantCountMap) -> int:
    return sum(counts.get(symbol_id, 0) for symbol_id in profile.symbol_ids)


class IncomeProjector:
    """
    Domain service for multi-year income projections.

    Builds on the acre density of a layout; absent categories never earn.
    """

    def __init__(
        self,
        density_calculator: Optional[DensityCalculator] = None,
        profiles: Sequence[PlantIncomeProfile] = PLANT_INCOME_PROFILES,
    ):
        """
        Initialize the projector.

        Args:
            density_calculator: Source of per-acre plant counts
            profiles: Income profiles, in reporting order
        """
        self.density_calculator = density_calculator or DensityCalculator()
        self.profiles = tuple(profiles)

    def category_income_curve(
        self,
        profile: PlantIncomeProfile,
        plant_count: int,
        acres: int,
        years: np.ndarray,
    ) -> list[int]:
        """
        Whole-rupee income of one category for each year.

        Args:
            profile: Income profile
            plant_count: Farm-wide plant count of the category
            acres: Farm size in acres
            years: Array of 1-based year numbers

        Returns:
            Income per year, rounded half up
        """
        if profile.per_acre:
            mature = profile.mature_income_per_acre * acres
        else:
            mature = profile.mature_income_per_plant * plant_count
        income = np.floor(mature * yield_ramp(profile, years) + 0.5)
        return [int(v) for v in income]

    def compute_income_projection(
        self,
        model: ModelLike,
        acres: int,
        middle_bed: Optional[MiddleBedLike] = None,
    ) -> IncomeProjection:
        """
        Compute the ten-year income projection of a farm.

        Args:
            model: Palekar model
            acres: Farm size in whole acres
            middle_bed: Middle bed choice for 24x24

        Returns:
            IncomeProjection with per-year rows and per-category totals

        Raises:
            ConfigurationError: If model or middle bed is unknown
            InvalidInputError: If acres is not a positive integer
        """
        model = resolve_model(model)
        acres = validate_acres(acres)
        acre_density = self.density_calculator.compute_acre_density(model, middle_bed)
        farm_plants = scale_counts(acre_density.plants_per_acre, acres)

        years = np.arange(1, PROJECTION_YEARS + 1)

        # Only categories present in the layout earn anything
        curves = {}
        for profile in self.profiles:
            if plant_count_for_profile(profile, acre_density.plants_per_acre) <= 0:
                continue
            plant_count = plant_count_for_profile(profile, farm_plants)
            curves[profile.id] = (profile, self.category_income_curve(profile, plant_count, acres, years))

        logger.debug(f"Income {model.value} x {acres}ac: categories={list(curves)}")

        year_rows = []
        cumulative = 0
        for i, year in enumerate(years.tolist()):
            categories = [
                CategoryYearIncome(
                    profile_id=profile.id,
                    label=profile.label,
                    color=profile.color,
                    income=curve[i],
                )
                for profile, curve in curves.values()
                if year >= profile.start_year
            ]
            year_total = sum(curve[i] for _, curve in curves.values())
            cumulative += year_total
            year_rows.append(YearProjection(
                year=year,
                categories=categories,
                total_income=year_total,
                cumulative_income=cumulative,
            ))

        category_totals = [
            CategoryTotal(id=profile.id, label=profile.label, color=profile.color, total=sum(curve))
            for profile, curve in curves.values()
            if sum(curve) > 0
        ]
        category_totals.sort(key=lambda c: c.total, reverse=True)

        logger.info(f"Projected {PROJECTION_YEARS}-year income for {acres} acre(s) of {model.value}: "
                    f"₹{cumulative}")

        return IncomeProjection(
            model=model,
            acres=acres,
            years=year_rows,
            category_totals=category_totals,
            grand_total=cumulative,
        )


def compute_income_projection(
    model: ModelLike,
    acres: int,
    middle_bed: Optional[MiddleBedLike] = None,
) -> IncomeProjection:
    return IncomeProjector().compute_income_projection(model, acres, middle_bed)
