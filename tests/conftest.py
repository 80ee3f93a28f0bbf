"""Shared fixtures: synthetic photos, signs and directories."""

import cv2
import numpy as np
import pytest


def solid(h, w, bgr, alpha=None):
    """Uniform (h, w) image; BGRA when alpha is given."""
    if alpha is None:
        image = np.zeros((h, w, 3), dtype=np.uint8)
        image[:] = bgr
    else:
        image = np.zeros((h, w, 4), dtype=np.uint8)
        image[:] = (*bgr, alpha)
    return image


@pytest.fixture
def white_photo():
    return solid(60, 80, (255, 255, 255))


@pytest.fixture
def bordered_sign():
    """20x30 sign: opaque (B,G,R)=(50,100,200) core, fully transparent 3px border."""
    sign = np.zeros((20, 30, 4), dtype=np.uint8)
    sign[3:-3, 3:-3] = (50, 100, 200, 255)
    return sign


@pytest.fixture
def sign_dir(tmp_path):
    """Directory with two signs, a text file and a subdirectory."""
    signs = tmp_path / "signs"
    signs.mkdir()
    cv2.imwrite(str(signs / "b_black.png"), solid(10, 10, (0, 0, 0), alpha=255))
    cv2.imwrite(str(signs / "a_white.png"), solid(10, 10, (255, 255, 255), alpha=255))
    (signs / "readme.txt").write_text("not an image")
    (signs / "nested").mkdir()
    return signs


@pytest.fixture
def photo_dir(tmp_path):
    """Directory with two signable photos, a tiny photo, a text file and an old output."""
    photos = tmp_path / "photos"
    photos.mkdir()
    cv2.imwrite(str(photos / "beach.png"), solid(100, 120, (200, 200, 200)))
    cv2.imwrite(str(photos / "forest.jpg"), solid(100, 120, (30, 120, 40)))
    cv2.imwrite(str(photos / "tiny.png"), solid(5, 5, (10, 10, 10)))
    cv2.imwrite(str(photos / "SIGN_old.png"), solid(100, 120, (0, 0, 0)))
    (photos / "notes.txt").write_text("holiday")
    return photos


def write_oversized_gif(path):
    """GIF header declaring 60000x60000 pixels with no image data."""
    header = b"GIF89a" + (60000).to_bytes(2, "little") * 2 + b"\x00\x00\x00"
    path.write_bytes(header + b"\x3b")
