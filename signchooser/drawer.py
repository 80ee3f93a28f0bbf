"""Sign selection by color contrast and alpha-weighted compositing."""

import numpy as np
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .color import ColorMgr, ColorSample
from .config import SignConfig, DISTANCE_EPSILON
from .hsv import contrast_color
from .image_io import load_image, image_size, sub_image, rescale, color_type
from .placement import Placement, SignPlacer, scaled_size


class SignDrawer:
    """Own a library of signs, pick the best one for a photo and draw it."""

    def __init__(self, placer: Optional[SignPlacer] = None, verbose: bool = False):
        """
        Initialize drawer with an empty library.

        Args:
            placer: Placement engine, anything with a
                place(photo_size, sign_size, config) method
            verbose: Print progress messages
        """
        self.placer = placer or SignPlacer()
        self.verbose = verbose
        self._signs: List[Tuple[str, np.ndarray]] = []

    def __len__(self) -> int:
        return len(self._signs)

    @property
    def library(self) -> Tuple[str, ...]:
        """Names of the loaded signs, in load order."""
        return tuple(name for name, _ in self._signs)

    def sign(self, index: int) -> np.ndarray:
        """Stored (read-only) sign image."""
        return self._signs[index][1]

    def add_sign(self, name: str, image: np.ndarray):
        """Append a decoded sign to the library."""
        image = image.copy()
        image.setflags(write=False)
        self._signs.append((name, image))

    def clear_library(self):
        self._signs.clear()

    def load_library(self, base_path) -> int:
        """
        Load every decodable image in a directory into the library.

        Entries that are not images are skipped. Entries are visited in
        sorted name order so selection ties resolve the same way
        everywhere.

        Args:
            base_path: Sign directory

        Returns:
            Number of signs loaded by this call

        Raises:
            FileNotFoundError: base_path does not exist
            NotADirectoryError: base_path is not a directory
        """
        base_path = Path(base_path)
        if not base_path.exists():
            raise FileNotFoundError(f"Sign directory not found: {base_path}")
        if not base_path.is_dir():
            raise NotADirectoryError(f"Not a directory: {base_path}")

        loaded = 0
        for entry in sorted(base_path.iterdir()):
            image = load_image(entry)
            if image is None:
                self._log(f"  Skipped {entry.name} (not an image)")
                continue
            self.add_sign(entry.name, image)
            loaded += 1

        self._log(f"✓ Loaded {loaded} signs from {base_path}")
        return loaded

    def choose_sign(self, photo: np.ndarray, config: SignConfig) -> Optional[Dict]:
        """
        Pick the sign whose mean color is furthest from the photo region it
        would cover.

        A candidate replaces the current best only when its distance is
        greater by more than DISTANCE_EPSILON, so ties keep the earlier
        sign and a zero distance never qualifies.

        Args:
            photo: Photo (H, W, 3|4)
            config: Placement options

        Returns:
            Dict with 'index', 'name', 'placement', 'distance', or None if
            no sign could be placed with a measurable distance
        """
        photo_size = image_size(photo)
        best = None
        best_distance = 0.0

        for index, (name, sign) in enumerate(self._signs):
            placement = self.placer.place(photo_size, image_size(sign), config)
            if placement is None:
                self._log(f"  {name}: no placement")
                continue

            region = sub_image(photo, placement.rect)
            if region is None:
                continue

            dist = ColorMgr(region).color_distance(ColorMgr(sign))
            if dist is None:
                self._log(f"  {name}: undefined mean color")
                continue

            self._log(f"  {name}: distance {dist:.2f} at {placement.rect}")
            if dist > best_distance + DISTANCE_EPSILON:
                best_distance = dist
                best = {
                    'index': index,
                    'name': name,
                    'placement': placement,
                    'distance': dist,
                }

        return best

    def reverse_color(self, photo: np.ndarray, placement: Placement) -> Optional[ColorSample]:
        """
        Contrast color for the region under a placement.

        Returns:
            Reversed, saturation/value-snapped mean color of the region,
            or None when the region has no measurable mean
        """
        region = sub_image(photo, placement.rect)
        if region is None:
            return None
        mean = ColorMgr(region).mean_color()
        if mean is None:
            return None
        return contrast_color(mean)

    def composite(
        self,
        dest: np.ndarray,
        sign: np.ndarray,
        placement: Placement,
        config: SignConfig,
        reverse_color: Optional[ColorSample] = None,
    ) -> np.ndarray:
        """
        Alpha-blend a sign into dest in place.

        The sign's alpha channel is the blend weight w: each covered channel
        becomes (dest * (255 - w) + fg * w) // 255, fg being reverse_color
        when given, else the sign pixel. Blended pixels get alpha 0; pixels
        with w == 0 or outside dest are left alone. Signs without alpha
        blend at full weight.

        Args:
            dest: Destination photo, modified in place
            sign: Sign image at native resolution (not modified)
            placement: Where to draw; placement.scale applies when
                config.auto_sign_scale is set
            config: Compositing flags
            reverse_color: Fixed foreground color (auto sign color)

        Returns:
            dest
        """
        # 1. Resample the sign to the placement scale
        if config.auto_sign_scale:
            size = scaled_size(image_size(sign), placement.scale)
            if size != image_size(sign):
                sign = rescale(sign, size)

        # 2. Clip to the destination
        W, H = image_size(dest)
        x0, y0 = placement.x0, placement.y0
        x1 = min(x0 + sign.shape[1], W)
        y1 = min(y0 + sign.shape[0], H)
        if x1 <= x0 or y1 <= y0:
            return dest

        sign = sign[:y1 - y0, :x1 - x0]
        # 3. Blend weights from the alpha channel
        if color_type(sign) == 'RGBA':
            weight = sign[:, :, 3].astype(np.uint32)
        else:
            weight = np.full(sign.shape[:2], 255, dtype=np.uint32)
        mask = weight > 0

        # 4. Integer blend of covered pixels
        region = dest[y0:y1, x0:x1]
        bg = region[:, :, :3].astype(np.uint32)
        if reverse_color is not None:
            fg = np.array(reverse_color.bgr, dtype=np.uint32)
        else:
            fg = sign[:, :, :3].astype(np.uint32)

        w = weight[:, :, None]
        blended = (bg * (255 - w) + fg * w) // 255

        region[:, :, :3][mask] = blended[mask].astype(np.uint8)
        # 5. Blended pixels become opaque
        if color_type(dest) == 'RGBA':
            region[:, :, 3][mask] = 0

        return dest

    def sign_photo(self, photo: np.ndarray, config: Optional[SignConfig] = None) -> Dict:
        """
        Choose the best sign for a photo and draw it onto a copy.

        Args:
            photo: Source photo (not modified)
            config: Placement options and compositing flags

        Returns:
            Dict with:
                - 'composite': Signed copy of the photo, None on failure
                - 'valid': Whether a sign was drawn
                - 'sign': Name of the chosen sign
                - 'placement': Placement used
                - 'distance': Color distance of the winner
                - 'reverse_color': Foreground color used (auto sign color)
                - 'warnings': List of warning messages
        """
        config = config or SignConfig()
        warnings = []

        choice = self.choose_sign(photo, config)
        if choice is None:
            self._log("✗ No suitable sign for this photo")
            return {
                'composite': None,
                'valid': False,
                'sign': None,
                'placement': None,
                'distance': None,
                'reverse_color': None,
                'warnings': ['No sign could be placed with visible contrast'],
            }

        dest = photo.copy()
        placement = choice['placement']

        reverse = None
        if config.auto_sign_color:
            reverse = self.reverse_color(dest, placement)

        self.composite(dest, self.sign(choice['index']), placement, config, reverse_color=reverse)
        self._log(f"✓ Signed with {choice['name']} at {placement.rect} (distance {choice['distance']:.2f})")

        return {
            'composite': dest,
            'valid': True,
            'sign': choice['name'],
            'placement': placement,
            'distance': choice['distance'],
            'reverse_color': reverse,
            'warnings': warnings,
        }

    def _log(self, message: str):
        """Print message if verbose."""
        if self.verbose:
            print(message)


def demo_sign_drawer():
    """Sign a synthetic photo with two synthetic signs."""
    photo = np.full((480, 640, 3), 230, dtype=np.uint8)
    photo[240:, :] = (40, 90, 30)

    dark = np.zeros((60, 120, 4), dtype=np.uint8)
    dark[10:50, 10:110] = (30, 30, 30, 255)
    light = np.zeros((60, 120, 4), dtype=np.uint8)
    light[10:50, 10:110] = (250, 250, 250, 200)

    drawer = SignDrawer(verbose=True)
    drawer.add_sign('dark', dark)
    drawer.add_sign('light', light)

    result = drawer.sign_photo(photo, SignConfig(corner='bottom-right', auto_sign_color=True))
    print(f"Valid: {result['valid']}, sign: {result['sign']}, reverse color: {result['reverse_color']}")
    return result


if __name__ == "__main__":
    demo_sign_drawer()
