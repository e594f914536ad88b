"""Tests for the curve tuning configuration."""

import dataclasses

import pytest

from maths.curves import CurveConfig


class TestCurveConfig:

    def test_defaults(self):
        config = CurveConfig()

        assert config.tolerance == 1.0
        assert config.max_depth == 32
        assert config.intersection_area == 4.0
        assert config.approx_epsilon == 0.001

    @pytest.mark.parametrize("field, value", [
        ("tolerance", 0),
        ("tolerance", -1.0),
        ("max_depth", 0),
        ("intersection_area", 0),
        ("approx_epsilon", -0.1),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValueError):
            CurveConfig(**{field: value})

    def test_frozen(self):
        config = CurveConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.tolerance = 2.0
