"""HSV helpers for picking a sign color that stands out from its background."""

import cv2
import numpy as np
from dataclasses import dataclass, replace

from .color import ColorSample
from .config import GOLDEN_LOW, GOLDEN_HIGH


@dataclass(frozen=True)
class HSVAColor:
    """Hue in degrees [0, 360), saturation and value in [0, 1], 8-bit alpha."""
    h: float
    s: float
    v: float
    a: int = 0


def rgba_to_hsva(color: ColorSample) -> HSVAColor:
    """Convert an 8-bit color to HSVA."""
    rgb = np.array([[color.rgb]], dtype=np.float32) / 255.0
    h, s, v = cv2.cvtColor(rgb, cv2.COLOR_RGB2HSV)[0, 0]
    return HSVAColor(h=float(h) % 360.0, s=float(s), v=float(v), a=color.alpha)


def hsva_to_rgba(color: HSVAColor) -> ColorSample:
    """Convert HSVA back to an 8-bit color."""
    hsv = np.array([[[color.h, color.s, color.v]]], dtype=np.float32)
    rgb = cv2.cvtColor(hsv, cv2.COLOR_HSV2RGB)[0, 0]
    r, g, b = (int(c) for c in np.clip(np.rint(rgb * 255.0), 0, 255))
    return ColorSample(red=r, green=g, blue=b, alpha=color.a)


def reversed_hsva(color: HSVAColor) -> HSVAColor:
    """Complement: opposite hue, inverted saturation and value, same alpha."""
    return HSVAColor(
        h=(color.h + 180.0) % 360.0,
        s=1.0 - color.s,
        v=1.0 - color.v,
        a=color.a,
    )


def golden_clamp(x: float) -> float:
    """Snap a saturation/value to one of two strong levels."""
    return GOLDEN_HIGH if x < GOLDEN_LOW else 1.0


def contrast_hsva(background: ColorSample) -> HSVAColor:
    """Reversed HSVA of a background color with saturation and value snapped."""
    rev = reversed_hsva(rgba_to_hsva(background))
    return replace(rev, s=golden_clamp(rev.s), v=golden_clamp(rev.v))


def contrast_color(background: ColorSample) -> ColorSample:
    """The color drawn over background when auto sign color is on."""
    return hsva_to_rgba(contrast_hsva(background))
