"""Tests for the OpenImage aggregate and Pillow round-tripping."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
import pytest
from PIL import Image
from seamcarve.errors import InvalidInputError
from seamcarve.image import OpenImage

from conftest import make_noise_image


@pytest.fixture
def png_path(tmp_path):
    array = make_noise_image(12, 20).permute(1, 2, 0).numpy()
    path = tmp_path / "input.png"
    Image.fromarray(np.ascontiguousarray(array)).save(path)
    return path


class TestOpenImage:
    def test_from_file(self, png_path):
        opened = OpenImage.from_file(png_path)
        assert opened.dims == (20, 12)
        assert torch.equal(opened.raster, make_noise_image(12, 20))

    def test_from_pil_converts_mode(self):
        img = Image.new('L', (5, 4), color=80)
        opened = OpenImage.from_pil(img)
        assert opened.raster.shape == (3, 4, 5)
        assert (opened.raster == 80).all()

    def test_missing_file_error_surfaces(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            OpenImage.from_file(tmp_path / "missing.png")

    def test_compute_energy_keeps_tables(self):
        opened = OpenImage(make_noise_image(6, 8))
        energy = opened.compute_energy()
        assert energy.shape == (6, 8)
        assert opened.cumulative.shape == (6, 8)
        assert torch.equal(opened.cumulative[0], energy[0])

    def test_carve_once_invalidates_tables(self):
        opened = OpenImage(make_noise_image(6, 8))
        opened.compute_energy()
        seam = opened.carve_once()
        assert seam.shape == (6,)
        assert opened.dims == (7, 6)
        assert opened.energy is None
        assert opened.cumulative is None

    def test_carve_once_refuses_tiny_raster(self):
        opened = OpenImage(make_noise_image(1, 8))
        with pytest.raises(InvalidInputError):
            opened.carve_once()

    def test_reduce_in_place(self):
        opened = OpenImage(make_noise_image(6, 20))
        result = opened.reduce(25)
        assert result.removed == 5
        assert opened.dims == (15, 6)
        assert opened.raster is result.raster

    def test_save_roundtrip(self, png_path, tmp_path):
        opened = OpenImage.from_file(png_path)
        opened.reduce(10)
        out = tmp_path / "out.png"
        opened.save(out)
        reopened = OpenImage.from_file(out)
        assert reopened.dims == (18, 12)
        assert torch.equal(reopened.raster, opened.raster)
