"""Tests for coordinate clustering."""

from __future__ import annotations

import pytest

from table_grid_restorer.clustering import cluster_coordinates


@pytest.mark.smoke
def test_close_coordinates_merge_into_their_mean():
    assert cluster_coordinates([10.0, 10.5, 11.0], 2.0) == pytest.approx([10.5])


@pytest.mark.smoke
def test_small_threshold_keeps_coordinates_apart():
    assert cluster_coordinates([10.0, 10.5, 11.0], 0.1) == pytest.approx([10.0, 10.5, 11.0])


def test_empty_input_gives_no_lines():
    assert cluster_coordinates([], 2.0) == []


def test_single_coordinate_is_returned_as_is():
    assert cluster_coordinates([42.0], 2.0) == [42.0]


def test_input_order_does_not_matter():
    assert cluster_coordinates([50.0, 0.0, 49.0, 1.0], 2.0) == pytest.approx([0.5, 49.5])


def test_chained_neighbours_form_one_cluster_wider_than_threshold():
    """Each value is compared against the last one added, not the cluster mean."""
    assert cluster_coordinates([0.0, 1.5, 3.0, 4.5], 2.0) == pytest.approx([2.25])


def test_distance_is_measured_against_last_added_value():
    # 4.0 is 2.0 from the last value (2.0) but 3.0 from the first
    assert cluster_coordinates([0.0, 2.0, 4.0], 2.0) == pytest.approx([2.0])


def test_zero_threshold_groups_only_equal_values():
    assert cluster_coordinates([1.0, 1.0, 2.0, 2.0001], 0.0) == pytest.approx([1.0, 2.0, 2.0001])


def test_output_is_strictly_increasing():
    lines = cluster_coordinates([5.0, 1.0, 9.0, 1.2, 5.1, 20.0, 8.9], 0.5)
    assert all(a < b for a, b in zip(lines, lines[1:]))
    assert len(lines) == 4
