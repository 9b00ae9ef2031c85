"""Tests for crop positioning."""

import pytest

from backend.imageproc.enums import Gravity
from backend.imageproc.geometry import crop_position


class TestCropPosition:
    @pytest.mark.parametrize(
        "gravity, expected",
        [
            (Gravity.NORTH_WEST, (0, 0)),
            (Gravity.NORTH, (150, 0)),
            (Gravity.NORTH_EAST, (300, 0)),
            (Gravity.WEST, (0, 100)),
            (Gravity.CENTER, (150, 100)),
            (Gravity.EAST, (300, 100)),
            (Gravity.SOUTH_WEST, (0, 200)),
            (Gravity.SOUTH, (150, 200)),
            (Gravity.SOUTH_EAST, (300, 200)),
        ],
    )
    def test_all_gravities(self, gravity, expected):
        assert crop_position(400, 300, 100, 100, gravity) == expected

    def test_center_rounds_down(self):
        assert crop_position(101, 51, 100, 50, Gravity.CENTER) == (0, 0)
        assert crop_position(103, 53, 100, 50, Gravity.CENTER) == (1, 1)

    def test_same_size_is_origin(self):
        for gravity in Gravity:
            assert crop_position(120, 80, 120, 80, gravity) == (0, 0)

    def test_offsets_stay_within_bounds(self):
        sizes = [(1, 1, 1, 1), (10, 7, 3, 7), (640, 480, 100, 479), (999, 1000, 998, 1)]
        for sw, sh, tw, th in sizes:
            for gravity in Gravity:
                x, y = crop_position(sw, sh, tw, th, gravity)
                assert 0 <= x <= sw - tw
                assert 0 <= y <= sh - th

    def test_opposite_gravities(self):
        assert crop_position(500, 200, 100, 50, Gravity.WEST)[0] == 0
        assert crop_position(500, 200, 100, 50, Gravity.EAST)[0] == 400
        assert crop_position(500, 200, 100, 50, Gravity.NORTH)[1] == 0
        assert crop_position(500, 200, 100, 50, Gravity.SOUTH)[1] == 150

    @pytest.mark.parametrize("target", [(0, 10), (10, 0), (-1, 10)])
    def test_non_positive_target_asserts(self, target):
        with pytest.raises(AssertionError):
            crop_position(100, 100, *target, Gravity.CENTER)

    @pytest.mark.parametrize("target", [(101, 10), (10, 101)])
    def test_target_larger_than_source_asserts(self, target):
        with pytest.raises(AssertionError):
            crop_position(100, 100, *target, Gravity.CENTER)
