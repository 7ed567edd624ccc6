"""
Unit tests for bed placement generators.

Tests cover:
- Centre column pattern and boundary rows
- Pigeon pea midpoints
- Ground cover and Bed 2 interior crops
- Bed 2 edge alternation
- Bed 4 vine/pole grid
- Archetype dispatch
"""
from collections import Counter

import pytest

from orchard_planner.domain.errors import ConfigurationError
from orchard_planner.domain.models import Placement
from orchard_planner.utils.placement_generators import (
    get_all_bed_placements,
    get_bed13_ground_cover_placements,
    get_bed2_edge_placements,
    get_bed2_intermediate_placements,
    get_bed2_interior_placements,
    get_bed4_placements,
    get_center_column_trees,
    get_intermediate_placements,
    is_boundary_placement,
)


def _symbols(placements: list[Placement]) -> Counter:
    return Counter(p.symbol_id for p in placements)


# ============================================================
# Bed 1 & 3 Tests
# ============================================================

class TestCenterColumn:
    """Tests for the B/M/S centre column."""

    def test_pattern_along_24ft_bed(self):
        """Trees should cycle big/small/medium/small every 6ft."""
        trees = get_center_column_trees(9, 24, 6)

        assert [t.symbol_id for t in trees] == ["big", "small", "medium", "small", "big"]
        assert [t.y_offset_ft for t in trees] == [0, 6, 12, 18, 24]
        assert all(t.x_offset_ft == 4.5 for t in trees)

    def test_36ft_bed_uses_9ft_spacing(self):
        """The 36x36 model spaces trees 9ft apart."""
        trees = get_center_column_trees(9, 36, 9)

        assert [t.y_offset_ft for t in trees] == [0, 9, 18, 27, 36]

    def test_last_tree_is_boundary(self):
        """Only the tree at y == bed length is a boundary placement."""
        trees = get_center_column_trees(9, 24, 6)

        boundary = [t for t in trees if is_boundary_placement(t, 24)]
        assert len(boundary) == 1
        assert boundary[0].y_offset_ft == 24

    def test_deterministic(self):
        """Identical inputs yield identical sequences."""
        assert get_center_column_trees(9, 24, 6) == get_center_column_trees(9, 24, 6)


class TestIntermediatePlacements:
    """Tests for pigeon pea midpoints on the centre column."""

    def test_midpoints_exclude_bed_ends(self):
        placements = get_intermediate_placements(9, 24, 6)

        assert [p.y_offset_ft for p in placements] == [3, 9, 15, 21]
        assert {p.symbol_id for p in placements} == {"pigeonPea"}

    def test_fractional_half_step(self):
        """9ft spacing gives 4.5ft midpoints without float drift."""
        placements = get_intermediate_placements(9, 36, 9)

        assert [p.y_offset_ft for p in placements] == [4.5, 13.5, 22.5, 31.5]


class TestGroundCover:
    """Tests for Bed 1 & 3 ground-cover crops."""

    def test_counts_on_24ft_bed(self):
        counts = _symbols(get_bed13_ground_cover_placements(9, 24, 1.5, 6))

        assert counts == {"marigold": 10, "cotton": 8, "groundnut": 10, "onionGarlic": 8}

    def test_lines_avoid_centre_column(self):
        placements = get_bed13_ground_cover_placements(9, 24, 1.5, 6)

        assert {p.x_offset_ft for p in placements} == {1.5, 3.0, 6.0, 7.5}


# ============================================================
# Bed 2 Tests
# ============================================================

class TestBed2:
    """Tests for the banana/papaya bed."""

    def test_edges_alternate_opposite(self):
        placements = get_bed2_edge_placements(9, 24, 1.5, 6)
        left = [p.symbol_id for p in placements if p.x_offset_ft == 1.5]
        right = [p.symbol_id for p in placements if p.x_offset_ft == 7.5]

        assert left == ["banana", "papaya", "banana", "papaya", "banana"]
        assert right == ["papaya", "banana", "papaya", "banana", "papaya"]

    def test_pigeon_pea_on_both_edges(self):
        placements = get_bed2_intermediate_placements(9, 24, 1.5, 6)

        assert len(placements) == 8
        assert {p.x_offset_ft for p in placements} == {1.5, 7.5}

    def test_interior_crops(self):
        counts = _symbols(get_bed2_interior_placements(9, 24, 1.5, 6))

        assert counts == {"sugarcane": 5, "turmeric": 9, "ginger": 9}


# ============================================================
# Bed 4 Tests
# ============================================================

class TestBed4:
    """Tests for the vine/vegetable pavilion bed."""

    def test_grid_size_24ft(self):
        placements = get_bed4_placements(9, 24, 1.5, 3)
        counts = _symbols(placements)

        # 5 interior columns x 9 rows
        assert len(placements) == 45
        assert counts["pavilionPole"] == 15
        assert counts["vineVeg"] == 30

    def test_poles_only_on_structural_columns_and_6ft_rows(self):
        poles = [p for p in get_bed4_placements(9, 24, 1.5, 3) if p.symbol_id == "pavilionPole"]

        assert {p.x_offset_ft for p in poles} == {1.5, 4.5, 7.5}
        assert all(p.y_offset_ft % 6 == 0 for p in poles)

    def test_grid_size_36ft(self):
        counts = _symbols(get_bed4_placements(9, 36, 1.5, 3))

        assert counts["pavilionPole"] == 21
        assert counts["vineVeg"] == 44


# ============================================================
# Dispatch Tests
# ============================================================

class TestAllBedPlacements:
    """Tests for per-archetype dispatch."""

    @pytest.mark.parametrize("bed_type, expected", [(1, 45), (2, 41), (3, 45), (4, 45)])
    def test_totals_per_archetype(self, bed_type, expected):
        assert len(get_all_bed_placements(bed_type, 24, 6)) == expected

    def test_bed_1_and_3_identical(self):
        assert get_all_bed_placements(1, 24, 6) == get_all_bed_placements(3, 24, 6)

    @pytest.mark.parametrize("bed_type", [0, 5, -1])
    def test_unknown_bed_type_rejected(self, bed_type):
        with pytest.raises(ConfigurationError):
            get_all_bed_placements(bed_type, 24, 6)

    def test_placements_are_immutable(self):
        placement = get_center_column_trees(9, 24, 6)[0]

        with pytest.raises(Exception):
            placement.symbol_id = "medium"
