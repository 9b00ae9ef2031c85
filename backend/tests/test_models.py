"""Tests for settings and geometry data structures."""

import dataclasses
import math

import pytest

from backend.imageproc.enums import Gravity, ResizeMode
from backend.imageproc.exceptions import InvalidArgumentError
from backend.imageproc.models import CropRectangle, ImageSettings


class TestImageSettings:
    def test_defaults_are_empty(self):
        settings = ImageSettings()
        assert settings.width is None
        assert settings.height is None
        assert settings.mode is None
        assert settings.quality is None
        assert settings.gravity is None

    def test_default_quality_accepted(self):
        assert ImageSettings(quality=0.85).quality == 0.85

    @pytest.mark.parametrize("quality", [0.0, 1.0, 0, 1])
    def test_boundary_quality_accepted(self, quality):
        ImageSettings(quality=quality)  # No exception

    @pytest.mark.parametrize("quality", [1.5, -0.1, 85, math.nan])
    def test_out_of_range_quality_rejected(self, quality):
        with pytest.raises(InvalidArgumentError, match="between 0.0 and 1.0"):
            ImageSettings(quality=quality)

    def test_quality_error_is_value_error(self):
        with pytest.raises(ValueError):
            ImageSettings(quality=2.0)

    def test_other_fields_not_validated(self):
        settings = ImageSettings(width=-5, height=0)
        assert settings.width == -5

    def test_is_immutable(self):
        settings = ImageSettings(width=100)
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.width = 200

    def test_has_settings(self):
        assert not ImageSettings().has_settings
        assert not ImageSettings(mode=ResizeMode.CROP, gravity=Gravity.NORTH).has_settings
        assert ImageSettings(width=10).has_settings
        assert ImageSettings(height=10).has_settings
        assert ImageSettings(quality=0.5).has_settings

    def test_maximum_dimension(self):
        assert ImageSettings().maximum_dimension is None
        assert ImageSettings(width=300).maximum_dimension == 300
        assert ImageSettings(height=200).maximum_dimension == 200
        assert ImageSettings(width=300, height=500).maximum_dimension == 500

    def test_effective_applies_defaults(self):
        effective = ImageSettings(width=100).effective(100, 75)
        assert effective == ImageSettings(
            width=100,
            height=75,
            mode=ResizeMode.SCALE_WITH_UPSCALE,
            quality=0.85,
            gravity=Gravity.CENTER,
        )

    def test_effective_keeps_requested_values(self):
        settings = ImageSettings(
            width=100, height=50, mode=ResizeMode.CROP, quality=0.0, gravity=Gravity.EAST
        )
        effective = settings.effective(100, 50)
        assert effective.mode is ResizeMode.CROP
        assert effective.quality == 0.0
        assert effective.gravity is Gravity.EAST

    def test_effective_gravity_defaults_to_center(self):
        settings = ImageSettings(width=100, height=50, mode=ResizeMode.CROP)
        assert settings.effective(100, 50).gravity is Gravity.CENTER


class TestEnums:
    def test_gravity_from_code(self):
        assert Gravity("c") is Gravity.CENTER
        assert Gravity("nw") is Gravity.NORTH_WEST
        assert Gravity("se") is Gravity.SOUTH_EAST

    def test_unknown_gravity_code(self):
        with pytest.raises(ValueError):
            Gravity("up")

    def test_resize_mode_from_name(self):
        assert ResizeMode("scale") is ResizeMode.SCALE_WITHOUT_UPSCALE
        assert ResizeMode("scale!") is ResizeMode.SCALE_WITH_UPSCALE


class TestCropRectangle:
    def test_box(self):
        rect = CropRectangle(x=10, y=20, width=100, height=50)
        assert rect.x2 == 110
        assert rect.y2 == 70
        assert rect.box == (10, 20, 110, 70)
