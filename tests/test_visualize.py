"""Tests for debug visualisations."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
from seamcarve.visualize import draw_seam, save_energy_map


def test_draw_seam_paints_only_seam_pixels():
    raster = torch.zeros(3, 3, 4, dtype=torch.uint8)
    seam = torch.tensor([1, 2, 2])
    painted = draw_seam(raster, seam, color=(255, 0, 10))

    assert painted[:, 0, 1].tolist() == [255, 0, 10]
    assert painted[:, 1, 2].tolist() == [255, 0, 10]
    assert painted[:, 2, 2].tolist() == [255, 0, 10]
    assert painted[0].sum().item() == 3 * 255
    assert raster.sum() == 0, "input must not be modified"


def test_save_energy_map(tmp_path):
    path = tmp_path / "energy.png"
    save_energy_map(torch.rand(8, 12, dtype=torch.float64), path)
    assert path.exists()
    assert path.stat().st_size > 0
