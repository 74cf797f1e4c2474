"""Tests for image loading, saving and seam drawing."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
import pytest
from PIL import Image
from seamcarve.image_io import draw_seam, load_image, save_image

from conftest import make_random_image


class TestLoadSave:
    def test_png_roundtrip_is_lossless(self, tmp_path):
        image = make_random_image(7, 9)
        path = str(tmp_path / "image.png")
        save_image(image, path)
        loaded = load_image(path)
        assert loaded.dtype == torch.uint8
        assert torch.equal(loaded, image)

    def test_grayscale_saved_as_single_channel(self, tmp_path):
        gray = torch.arange(12, dtype=torch.uint8).reshape(3, 4) * 20
        path = str(tmp_path / "gray.png")
        save_image(gray, path)
        with Image.open(path) as img:
            assert img.mode == 'L'
            assert np.array(img).tolist() == gray.tolist()

    def test_load_converts_to_rgb(self, tmp_path):
        path = str(tmp_path / "l.png")
        Image.fromarray(np.full((2, 3), 77, dtype=np.uint8)).save(path)
        loaded = load_image(path)
        assert loaded.shape == (3, 2, 3)
        assert (loaded == 77).all()

    def test_save_rejects_non_uint8(self, tmp_path):
        path = tmp_path / "float.png"
        with pytest.raises(ValueError, match="uint8"):
            save_image(torch.rand(3, 4, 4) * 255, str(path))
        with pytest.raises(ValueError, match="uint8"):
            save_image(torch.full((4, 4), 300, dtype=torch.int32), str(path))
        assert not path.exists()

    def test_save_accepts_single_channel(self, tmp_path):
        path = str(tmp_path / "one.png")
        save_image(torch.full((1, 2, 3), 40, dtype=torch.uint8), path)
        assert (load_image(path) == 40).all()

    def test_missing_file_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            load_image(str(tmp_path / "missing.jpg"))

    def test_undecodable_file_raises_oserror(self, tmp_path):
        path = tmp_path / "junk.jpg"
        path.write_bytes(b"not an image")
        with pytest.raises(OSError):
            load_image(str(path))


class TestDrawSeam:
    def test_paints_seam_pixels(self):
        image = torch.zeros(3, 3, 4, dtype=torch.uint8)
        vis = draw_seam(image, torch.tensor([1, 2, 2]))
        assert vis[:, 0, 1].tolist() == [255, 0, 0]
        assert vis[:, 1, 2].tolist() == [255, 0, 0]
        assert vis[:, 2, 2].tolist() == [255, 0, 0]
        assert int(vis.sum()) == 3 * 255
        assert image.sum() == 0

    def test_grayscale(self):
        image = torch.zeros(2, 3, dtype=torch.uint8)
        vis = draw_seam(image, torch.tensor([0, 1]))
        assert vis.tolist() == [[255, 0, 0], [0, 255, 0]]
