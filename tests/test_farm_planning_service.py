"""
Unit tests for the farm planning application service.
"""
import pytest

from orchard_planner.domain.catalog import DEFAULT_ZONES
from orchard_planner.domain.errors import InvalidInputError
from orchard_planner.domain.models import MiddleBedType, PalekarModel, Zone
from orchard_planner.services.application.farm_planning_service import FarmPlanningService


@pytest.fixture
def planning_service(calculator, projector) -> FarmPlanningService:
    return FarmPlanningService(density_calculator=calculator, income_projector=projector)


# ============================================================
# Density Report Tests
# ============================================================

class TestDensityReport:
    """Tests for the combined density report."""

    def test_report_levels_agree(self, planning_service):
        report = planning_service.get_density_report(PalekarModel.MODEL_24X24, 3)

        assert report.block.grand_total == 131
        assert report.farm.acres == 3
        assert report.farm.total_blocks == 3 * report.acre.blocks_per_acre
        assert sum(c.count for c in report.block_categories) == report.block.grand_total

    def test_acre_plants_sorted(self, planning_service):
        report = planning_service.get_density_report(PalekarModel.MODEL_36X36, 1)
        counts = [p.count for p in report.acre_plants]

        assert counts == sorted(counts, reverse=True)

    def test_invalid_acres(self, planning_service):
        with pytest.raises(InvalidInputError):
            planning_service.get_density_report(PalekarModel.MODEL_24X24, 0)


# ============================================================
# Farm Report Tests
# ============================================================

class TestFarmReport:
    """Tests for the per-zone farm report."""

    def test_zone_totals(self, planning_service, sample_zones):
        report = planning_service.get_farm_report(PalekarModel.MODEL_24X24, MiddleBedType.BED2, sample_zones)

        assert report.total_acres == 6
        assert [z.zone.id for z in report.zones] == ["zone-a", "zone-b"]
        assert report.total_plants == sum(z.density.total_plants for z in report.zones)
        assert report.total_income == sum(z.income.grand_total for z in report.zones)

    def test_zone_income_matches_projection(self, planning_service, projector):
        zone = Zone(id="z", name="Z", acres=2)
        report = planning_service.get_farm_report(PalekarModel.MODEL_36X36, zones=[zone])

        expected = projector.compute_income_projection(PalekarModel.MODEL_36X36, 2)
        assert report.zones[0].income == expected

    def test_default_zones(self, planning_service):
        report = planning_service.get_farm_report(PalekarModel.MODEL_24X24)

        assert [z.zone.id for z in report.zones] == [z.id for z in DEFAULT_ZONES]
        assert report.total_acres == 10
