"""Sign placement: where a sign goes on a photo and at what scale."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .config import SignConfig, CORNERS


@dataclass(frozen=True)
class Placement:
    """Rectangle a sign occupies on a photo, plus the scale used."""
    x0: int
    y0: int
    x1: int
    y1: int
    scale: float = 1.0

    @property
    def rect(self) -> Tuple[int, int, int, int]:
        return (self.x0, self.y0, self.x1, self.y1)

    @property
    def w(self) -> int:
        return self.x1 - self.x0

    @property
    def h(self) -> int:
        return self.y1 - self.y0

    @property
    def area(self) -> int:
        return self.w * self.h


def scaled_size(size: Tuple[int, int], scale: float) -> Tuple[int, int]:
    """(width, height) of a sign drawn at scale."""
    w, h = size
    return int(round(w * scale)), int(round(h * scale))


class SignPlacer:
    """
    Corner/margin/scale placement policy.

    The sign is scaled by config.scale_rate, or so that it spans
    config.scale_to_width of the photo width when that is set, then
    anchored at config.corner with a margin of config.margin times the
    photo's shorter edge. A sign that does not fit inside the margins is
    rejected.
    """

    def place(
        self,
        photo_size: Tuple[int, int],
        sign_size: Tuple[int, int],
        config: SignConfig,
    ) -> Optional[Placement]:
        """
        Compute the placement of one sign on one photo.

        Args:
            photo_size: (W, H) of the photo
            sign_size: (w, h) of the sign at native resolution
            config: Placement options

        Returns:
            Placement with 0 <= x0 < x1 <= W and 0 <= y0 < y1 <= H,
            or None if the sign cannot be placed
        """
        W, H = photo_size
        sign_w, sign_h = sign_size
        if W <= 0 or H <= 0 or sign_w <= 0 or sign_h <= 0:
            return None

        scale = self._scale(photo_size, sign_size, config)
        if scale <= 0:
            return None

        w, h = scaled_size(sign_size, scale)
        if w <= 0 or h <= 0:
            return None

        margin = int(min(W, H) * config.margin)
        if w + 2 * margin > W or h + 2 * margin > H:
            return None  # too large for this photo

        x0, y0 = self._anchor(config.corner, (W, H), (w, h), margin)
        return Placement(x0=x0, y0=y0, x1=x0 + w, y1=y0 + h, scale=scale)

    def _scale(self, photo_size: Tuple[int, int], sign_size: Tuple[int, int], config: SignConfig) -> float:
        if config.scale_to_width is not None:
            return config.scale_to_width * photo_size[0] / sign_size[0]
        return config.scale_rate

    def _anchor(self, corner: str, photo_size: Tuple[int, int], size: Tuple[int, int], margin: int) -> Tuple[int, int]:
        W, H = photo_size
        w, h = size

        if corner == 'center':
            return (W - w) // 2, (H - h) // 2
        if corner not in CORNERS:
            raise ValueError(f"Unknown corner '{corner}'")

        vertical, horizontal = corner.split('-')
        x0 = margin if horizontal == 'left' else W - margin - w
        y0 = margin if vertical == 'top' else H - margin - h
        return x0, y0
