"""Tests for hsv.py color conversion and the contrast color rule."""

import pytest

from signchooser.color import ColorSample
from signchooser.hsv import (
    HSVAColor,
    contrast_color,
    contrast_hsva,
    golden_clamp,
    hsva_to_rgba,
    reversed_hsva,
    rgba_to_hsva,
)

BACKGROUNDS = [
    ColorSample(0, 0, 0),
    ColorSample(255, 255, 255),
    ColorSample(128, 128, 128),
    ColorSample(255, 0, 0),
    ColorSample(12, 200, 90, 255),
    ColorSample(240, 230, 10),
    ColorSample(60, 60, 200, 40),
]


class TestConversion:
    def test_red(self):
        hsva = rgba_to_hsva(ColorSample(255, 0, 0, 9))
        assert hsva.h == pytest.approx(0.0, abs=1e-3)
        assert hsva.s == pytest.approx(1.0)
        assert hsva.v == pytest.approx(1.0)
        assert hsva.a == 9

    def test_blue_hue(self):
        assert rgba_to_hsva(ColorSample(0, 0, 255)).h == pytest.approx(240.0, abs=1e-3)

    @pytest.mark.parametrize("color", BACKGROUNDS)
    def test_back_and_forth(self, color):
        assert hsva_to_rgba(rgba_to_hsva(color)) == color


class TestReversed:
    def test_complement(self):
        rev = reversed_hsva(HSVAColor(h=300.0, s=0.25, v=0.75, a=3))
        assert rev.h == pytest.approx(120.0)
        assert rev.s == pytest.approx(0.75)
        assert rev.v == pytest.approx(0.25)
        assert rev.a == 3

    @pytest.mark.parametrize("x, expected", [(0.0, 0.6180), (0.3819, 0.6180), (0.3820, 1.0), (0.9, 1.0)])
    def test_golden_clamp(self, x, expected):
        assert golden_clamp(x) == expected

    @pytest.mark.parametrize("background", BACKGROUNDS)
    def test_saturation_and_value_snapped(self, background):
        hsva = contrast_hsva(background)
        assert hsva.s in (0.6180, 1.0)
        assert hsva.v in (0.6180, 1.0)

    def test_white_background(self):
        # (0, 0, 1) -> (180, 1, 0) -> value snapped to 0.618
        assert contrast_color(ColorSample(255, 255, 255)) == ColorSample(0, 158, 158)

    def test_black_background(self):
        assert contrast_color(ColorSample(0, 0, 0)) == ColorSample(0, 255, 255)

    def test_alpha_kept(self):
        assert contrast_color(ColorSample(10, 10, 10, 77)).alpha == 77
