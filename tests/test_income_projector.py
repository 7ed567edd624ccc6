"""
Unit tests for the income projector.

Tests cover:
- Maturity ramps
- Year-by-year income for a reference farm
- Omission of absent categories
- Totals and cumulative sums
- Input validation
"""
import numpy as np
import pytest

from orchard_planner.domain.errors import ConfigurationError, InvalidInputError
from orchard_planner.services.domain.income_projector import (
    PLANT_INCOME_PROFILES,
    PROJECTION_YEARS,
    compute_income_projection,
    yield_ramp,
)

PROFILES = {p.id: p for p in PLANT_INCOME_PROFILES}
YEARS = np.arange(1, PROJECTION_YEARS + 1)


def _category_incomes(projection, profile_id):
    """Income of one category for every year, zero where it is not listed."""
    incomes = []
    for year in projection.years:
        match = [c.income for c in year.categories if c.profile_id == profile_id]
        incomes.append(match[0] if match else 0)
    return incomes


# ============================================================
# Ramp Tests
# ============================================================

class TestYieldRamp:
    """Tests for the maturity ramp."""

    def test_big_tree_ramp(self):
        ramp = yield_ramp(PROFILES["big"], YEARS)

        np.testing.assert_allclose(ramp, [0, 0, 0, 0.2, 0.4, 0.6, 0.8, 1, 1, 1])

    def test_immediate_maturity(self):
        ramp = yield_ramp(PROFILES["pigeonPea"], YEARS)

        assert ramp.tolist() == [1.0] * PROJECTION_YEARS

    @pytest.mark.parametrize("profile_id", list(PROFILES))
    def test_ramp_non_decreasing(self, profile_id):
        ramp = yield_ramp(PROFILES[profile_id], YEARS)

        assert np.all(np.diff(ramp) >= 0)
        assert ramp[-1] == 1.0


# ============================================================
# Projection Tests
# ============================================================

class TestIncomeProjection:
    """Tests for the ten-year projection."""

    def test_covers_ten_years(self, projector):
        projection = projector.compute_income_projection("24x24", 1, "bed2")

        assert [y.year for y in projection.years] == list(range(1, 11))
        assert projection.model.value == "24x24"
        assert projection.acres == 1

    def test_first_year_reference_farm(self, projector):
        """One acre of 24x24/bed2: 244 banana, 244 papaya, 732 pigeon pea per acre."""
        projection = projector.compute_income_projection("24x24", 1, "bed2")
        year1 = projection.years[0]
        incomes = {c.profile_id: c.income for c in year1.categories}

        assert incomes == {
            "banana": 48800,
            "papaya": 36600,
            "pigeonPea": 36600,
            "groundCover": 25000,
            "spices": 9000,
        }
        assert year1.total_income == 156000

    def test_mature_year_reference_farm(self, projector):
        projection = projector.compute_income_projection("24x24", 1, "bed2")

        assert projection.years[-1].total_income == 622500

    def test_absent_categories_omitted(self, projector):
        """Without a vine bed, vine income never appears."""
        projection = projector.compute_income_projection("24x24", 3, "bed2")

        assert all(c.profile_id != "vine" for y in projection.years for c in y.categories)
        assert "vine" not in {c.id for c in projection.category_totals}

    def test_bed4_layout_drops_banana(self, projector):
        projection = projector.compute_income_projection("24x24", 1, "bed4")
        ids = {c.id for c in projection.category_totals}

        assert "vine" in ids
        assert "banana" not in ids
        assert "spices" not in ids

    def test_categories_listed_from_start_year(self, projector):
        projection = projector.compute_income_projection("36x36", 1)

        year3 = {c.profile_id for c in projection.years[2].categories}
        assert "medium" in year3
        assert "big" not in year3

    @pytest.mark.parametrize("model, middle_bed", [("24x24", "bed2"), ("24x24", "bed4"), ("36x36", "bed2")])
    def test_grand_total_additivity(self, projector, model, middle_bed):
        projection = projector.compute_income_projection(model, 5, middle_bed)

        assert projection.grand_total == sum(y.total_income for y in projection.years)
        assert projection.grand_total == sum(c.total for c in projection.category_totals)
        assert projection.years[-1].cumulative_income == projection.grand_total

    def test_cumulative_income(self, projector):
        projection = projector.compute_income_projection("24x24", 2)
        running = 0
        for year in projection.years:
            running += year.total_income
            assert year.cumulative_income == running

    @pytest.mark.parametrize("profile_id", ["big", "medium", "small", "banana"])
    def test_category_income_monotone(self, projector, profile_id):
        projection = projector.compute_income_projection("36x36", 4)
        incomes = _category_incomes(projection, profile_id)

        assert incomes == sorted(incomes)

    def test_category_totals_sorted_descending(self, projector):
        projection = projector.compute_income_projection("24x24", 1)
        totals = [c.total for c in projection.category_totals]

        assert totals == sorted(totals, reverse=True)

    def test_mature_income_scales_with_acres(self, projector):
        one = projector.compute_income_projection("24x24", 1)
        ten = projector.compute_income_projection("24x24", 10)

        assert ten.years[-1].total_income == 10 * one.years[-1].total_income

    def test_money_values_are_ints(self, projector):
        projection = projector.compute_income_projection("36x36", 3)

        assert isinstance(projection.grand_total, int)
        assert all(isinstance(c.income, int) for y in projection.years for c in y.categories)

    def test_idempotent(self):
        assert compute_income_projection("24x24", 12) == compute_income_projection("24x24", 12)


# ============================================================
# Validation Tests
# ============================================================

class TestIncomeValidation:
    """Tests for invalid projection inputs."""

    @pytest.mark.parametrize("acres", [0, -1, 1.5])
    def test_invalid_acres(self, projector, acres):
        with pytest.raises(InvalidInputError):
            projector.compute_income_projection("24x24", acres)

    def test_unknown_model(self, projector):
        with pytest.raises(ConfigurationError):
            projector.compute_income_projection("12x12", 1)
