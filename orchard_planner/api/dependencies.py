"""
Dependency injection for FastAPI.
"""
from typing import Annotated
from fastapi import Depends

from orchard_planner.services.domain.density_calculator import DensityCalculator
from orchard_planner.services.domain.income_projector import IncomeProjector
from orchard_planner.services.application.farm_planning_service import FarmPlanningService


def get_density_calculator() -> DensityCalculator:
    """
    Dependency factory for DensityCalculator.

    Returns:
        DensityCalculator instance
    """
    return DensityCalculator()


def get_income_projector(
    density_calculator: Annotated[DensityCalculator, Depends(get_density_calculator)],
) -> IncomeProjector:
    """
    Dependency factory for IncomeProjector.

    Args:
        density_calculator: Density calculator (injected)

    Returns:
        IncomeProjector instance
    """
    return IncomeProjector(density_calculator=density_calculator)


def get_farm_planning_service(
    density_calculator: Annotated[DensityCalculator, Depends(get_density_calculator)],
    income_projector: Annotated[IncomeProjector, Depends(get_income_projector)],
) -> FarmPlanningService:
    """
    Dependency factory for FarmPlanningService.

    Args:
        density_calculator: Density calculator (injected)
        income_projector: Income projector (injected)

    Returns:
        FarmPlanningService instance
    """
    return FarmPlanningService(
        density_calculator=density_calculator,
        income_projector=income_projector,
    )


# Type aliases for cleaner route signatures
DensityCalculatorDep = Annotated[DensityCalculator, Depends(get_density_calculator)]
FarmPlanningServiceDep = Annotated[FarmPlanningService, Depends(get_farm_planning_service)]
