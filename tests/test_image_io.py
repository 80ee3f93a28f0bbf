"""Tests for image_io.py loading, saving and region access."""

import cv2
import numpy as np
from PIL import Image

from signchooser.image_io import color_type, image_size, load_image, rescale, save_image, sub_image
from tests.conftest import solid, write_oversized_gif


class TestLoadImage:
    def test_png_with_alpha(self, tmp_path, bordered_sign):
        path = tmp_path / "sign.png"
        cv2.imwrite(str(path), bordered_sign)
        image = load_image(path)
        assert image.shape == (20, 30, 4)
        assert np.array_equal(image, bordered_sign)

    def test_grayscale_expanded(self, tmp_path):
        path = tmp_path / "gray.png"
        cv2.imwrite(str(path), np.full((4, 5), 77, dtype=np.uint8))
        image = load_image(path)
        assert image.shape == (4, 5, 3)
        assert (image == 77).all()

    def test_sixteen_bit_reduced(self, tmp_path):
        path = tmp_path / "deep.png"
        cv2.imwrite(str(path), np.full((3, 3, 3), 65535, dtype=np.uint16))
        image = load_image(path)
        assert image.dtype == np.uint8
        assert (image == 255).all()

    def test_gif(self, tmp_path):
        path = tmp_path / "sign.gif"
        Image.new('RGB', (4, 3), (255, 0, 0)).save(path)
        image = load_image(path)
        assert image.shape[:2] == (3, 4)
        assert tuple(image[0, 0, :3]) == (0, 0, 255)

    def test_unicode_path(self, tmp_path):
        path = tmp_path / "фото.png"
        cv2.imencode('.png', solid(2, 2, (1, 2, 3)))[1].tofile(str(path))
        assert tuple(load_image(path)[0, 0]) == (1, 2, 3)

    def test_text_file(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        assert load_image(path) is None

    def test_oversized_header(self, tmp_path):
        path = tmp_path / "broken.gif"
        write_oversized_gif(path)
        assert load_image(path) is None

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.png"
        path.write_bytes(b"")
        assert load_image(path) is None

    def test_directory(self, tmp_path):
        assert load_image(tmp_path) is None

    def test_missing(self, tmp_path):
        assert load_image(tmp_path / "missing.png") is None


class TestSaveImage:
    def test_png_lossless(self, tmp_path):
        path = tmp_path / "out.png"
        image = solid(3, 3, (10, 20, 30), alpha=40)
        assert save_image(path, image)
        assert np.array_equal(load_image(path), image)

    def test_jpeg(self, tmp_path):
        path = tmp_path / "out.jpg"
        assert save_image(path, solid(8, 8, (10, 20, 30)), quality=100)
        assert load_image(path).shape == (8, 8, 3)

    def test_unknown_extension(self, tmp_path):
        assert not save_image(tmp_path / "out.unknownext", solid(2, 2, (0, 0, 0)))

    def test_missing_parent(self, tmp_path):
        assert not save_image(tmp_path / "no" / "such" / "out.png", solid(2, 2, (0, 0, 0)))


class TestRegions:
    def test_color_type(self):
        assert color_type(solid(1, 1, (0, 0, 0))) == 'RGB'
        assert color_type(solid(1, 1, (0, 0, 0), alpha=0)) == 'RGBA'

    def test_image_size(self):
        assert image_size(solid(3, 7, (0, 0, 0))) == (7, 3)

    def test_sub_image_copies(self):
        image = solid(4, 4, (0, 0, 0))
        image[1, 2] = (9, 9, 9)
        region = sub_image(image, (2, 1, 4, 3))
        assert region.shape == (2, 2, 3)
        assert tuple(region[0, 0]) == (9, 9, 9)
        region[:] = 1
        assert tuple(image[0, 0]) == (0, 0, 0)

    def test_sub_image_out_of_bounds(self):
        image = solid(4, 4, (0, 0, 0))
        assert sub_image(image, (0, 0, 5, 4)) is None
        assert sub_image(image, (-1, 0, 2, 2)) is None

    def test_sub_image_empty(self):
        assert sub_image(solid(4, 4, (0, 0, 0)), (2, 2, 2, 3)) is None

    def test_rescale(self):
        image = rescale(solid(2, 3, (5, 5, 5), alpha=255), (6, 4))
        assert image.shape == (4, 6, 4)
