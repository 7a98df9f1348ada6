"""Tests for SliceConfig validation."""

import dataclasses

import pytest

from polyslice import DEFAULT_CONFIG, SliceConfig, Units
from polyslice.core.errors import ConfigurationError


class TestSliceConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.offset_scales == (0.01, 0.001, 0.0001)
        assert DEFAULT_CONFIG.units is Units.PLANAR
        assert DEFAULT_CONFIG.overlap_tolerance == 0.00005
        assert DEFAULT_CONFIG.preserve_holes is False

    def test_list_of_widths_normalised(self):
        config = SliceConfig(offset_scales=[1, 0.5])
        assert config.offset_scales == (1.0, 0.5)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.preserve_holes = True

    @pytest.mark.parametrize("scales", [
        (),
        (0.01, 0.01),
        (0.001, 0.01),
        (0.01, -0.001),
        (float("inf"), 0.01),
    ])
    def test_invalid_widths(self, scales):
        with pytest.raises(ConfigurationError, match="offset_scales"):
            SliceConfig(offset_scales=scales)

    def test_tolerance_must_be_positive(self):
        with pytest.raises(ConfigurationError, match="overlap_tolerance"):
            SliceConfig(overlap_tolerance=0.0)

    def test_tolerance_below_smallest_width(self):
        with pytest.raises(ConfigurationError, match="smallest offset scale"):
            SliceConfig(offset_scales=(0.01, 0.001), overlap_tolerance=0.001)

    def test_units_must_be_enum(self):
        with pytest.raises(ConfigurationError, match="units"):
            SliceConfig(units="kilometers")
