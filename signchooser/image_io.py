"""Image loading, saving and pixel-region access."""

import cv2
import numpy as np
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from .config import OUTPUT_QUALITY, PNG_COMPRESSION

Rect = Tuple[int, int, int, int]  # (x0, y0, x1, y1), x1/y1 exclusive


def load_image(path) -> Optional[np.ndarray]:
    """
    Decode an image file into an 8-bit BGR or BGRA array.

    OpenCV is tried first; formats it cannot decode (GIF and friends) go
    through Pillow. Anything that is not a readable image gives None.

    Args:
        path: Image file path (unicode-safe)

    Returns:
        (H, W, 3) or (H, W, 4) uint8 array, or None
    """
    path = Path(path)
    if not path.is_file():
        return None

    try:
        stream = np.fromfile(str(path), dtype=np.uint8)
    except OSError:
        return None

    image = None
    if stream.size:
        try:
            image = cv2.imdecode(stream, cv2.IMREAD_UNCHANGED)
        except cv2.error:
            image = None  # e.g. header declares more pixels than OpenCV accepts
    if image is None:
        image = _load_with_pillow(path)
    if image is None:
        return None

    return _normalize(image)


def _load_with_pillow(path: Path) -> Optional[np.ndarray]:
    """Fallback decoder for formats OpenCV does not read."""
    try:
        with Image.open(path) as im:
            has_alpha = 'A' in im.getbands() or 'transparency' in im.info
            rgb = np.asarray(im.convert('RGBA' if has_alpha else 'RGB'))
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError):
        return None

    if has_alpha:
        return cv2.cvtColor(rgb, cv2.COLOR_RGBA2BGRA)
    return cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)


def _normalize(image: np.ndarray) -> np.ndarray:
    """Reduce to 8 bits and expand grayscale to BGR."""
    if image.dtype == np.uint16:
        image = (image // 257).astype(np.uint8)
    elif image.dtype != np.uint8:
        image = cv2.normalize(image, None, 0, 255, cv2.NORM_MINMAX).astype(np.uint8)

    if image.ndim == 2:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    elif image.shape[2] == 1:
        image = cv2.cvtColor(image[:, :, 0], cv2.COLOR_GRAY2BGR)

    return image


def save_image(path, image: np.ndarray, quality: int = OUTPUT_QUALITY) -> bool:
    """
    Encode an image by file extension and write it (unicode-safe).

    Returns:
        True on success, False if the extension is unsupported or the
        write fails
    """
    path = Path(path)
    ext = path.suffix.lower()

    params = []
    if ext in ['.jpg', '.jpeg']:
        params = [cv2.IMWRITE_JPEG_QUALITY, quality]
    elif ext == '.webp':
        params = [cv2.IMWRITE_WEBP_QUALITY, quality]
    elif ext == '.png':
        params = [cv2.IMWRITE_PNG_COMPRESSION, PNG_COMPRESSION]

    try:
        ok, encoded = cv2.imencode(ext, image, params)
    except cv2.error:
        return False
    if not ok:
        return False

    try:
        encoded.tofile(str(path))
    except OSError:
        return False
    return True


def color_type(image: np.ndarray) -> str:
    """'RGBA' for images carrying an alpha (blend weight) channel, else 'RGB'."""
    if image.ndim == 3 and image.shape[2] == 4:
        return 'RGBA'
    return 'RGB'


def image_size(image: np.ndarray) -> Tuple[int, int]:
    """(width, height) of an image."""
    return image.shape[1], image.shape[0]


def sub_image(image: np.ndarray, rect: Rect) -> Optional[np.ndarray]:
    """
    Copy the region rect out of image.

    Returns:
        Region copy, or None if rect is empty or not inside the image
    """
    x0, y0, x1, y1 = rect
    W, H = image_size(image)
    if x0 < 0 or y0 < 0 or x1 > W or y1 > H or x0 >= x1 or y0 >= y1:
        return None
    return image[y0:y1, x0:x1].copy()


def rescale(image: np.ndarray, size: Tuple[int, int], interpolation: int = cv2.INTER_LANCZOS4) -> np.ndarray:
    """Resample to size (width, height); returns a new array."""
    return cv2.resize(image, size, interpolation=interpolation)
