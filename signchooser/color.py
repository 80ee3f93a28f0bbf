"""Color statistics for signs and photo regions."""

import math
import numpy as np
from dataclasses import dataclass
from typing import Optional

from .image_io import color_type


@dataclass(frozen=True)
class ColorSample:
    """Mean color of a region, 8-bit channels."""
    red: int
    green: int
    blue: int
    alpha: int = 0

    @property
    def rgb(self):
        return (self.red, self.green, self.blue)

    @property
    def bgr(self):
        return (self.blue, self.green, self.red)


class ColorMgr:
    """Mean color and color distance of one image (or sub-image)."""

    def __init__(self, image: np.ndarray):
        """
        Args:
            image: (H, W, 3) BGR or (H, W, 4) BGRA uint8 array. In BGRA
                images the alpha channel is a blend weight; weight 0
                pixels are ignored.
        """
        self.set_image(image)

    def set_image(self, image: np.ndarray):
        self.image = image

    def mean_color(self) -> Optional[ColorSample]:
        """
        Mean of every included pixel, channel by channel.

        All pixels of an RGB image are included; in an RGBA image only
        those with alpha > 0. Sums are 64-bit and the mean is floored to
        8 bits.

        Returns:
            ColorSample, or None when no pixel is included (undefined mean)
        """
        if self.image.size == 0:
            return None

        pixels = self.image.reshape(-1, self.image.shape[-1])
        if color_type(self.image) == 'RGBA':
            pixels = pixels[pixels[:, 3] > 0]

        count = pixels.shape[0]
        if count == 0:
            return None

        sums = pixels.sum(axis=0, dtype=np.int64)
        b, g, r = (int(s) // count for s in sums[:3])
        a = int(sums[3]) // count if pixels.shape[1] == 4 else 0

        return ColorSample(red=r, green=g, blue=b, alpha=a)

    def color_distance(self, other: 'ColorMgr') -> Optional[float]:
        """
        Euclidean RGB distance between the two mean colors.

        Alpha is left out; it is a blend weight, not a color.

        Returns:
            Non-negative distance, or None if either mean is undefined
        """
        mean_self = self.mean_color()
        mean_other = other.mean_color()
        if mean_self is None or mean_other is None:
            return None

        dr = mean_self.red - mean_other.red
        dg = mean_self.green - mean_other.green
        db = mean_self.blue - mean_other.blue
        return math.sqrt(dr * dr + dg * dg + db * db)
