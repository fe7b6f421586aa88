"""Shared test fixtures for the seam carving test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


def make_gradient_image(H, W):
    """Horizontal gradient: dark left, bright right, uint8 (3, H, W)."""
    grad = torch.linspace(0, 255, W).round().to(torch.uint8)
    return grad.view(1, 1, W).expand(3, H, W).clone()


def make_edge_image(H, W, edge_col):
    """Black left of `edge_col`, white from `edge_col` on."""
    image = torch.zeros(3, H, W, dtype=torch.uint8)
    image[:, :, edge_col:] = 255
    return image


def make_noise_image(H, W, seed=0):
    generator = torch.Generator().manual_seed(seed)
    return torch.randint(0, 256, (3, H, W), dtype=torch.uint8, generator=generator)


@pytest.fixture
def noise_image():
    """Random 24x40 RGB raster."""
    return make_noise_image(24, 40)


@pytest.fixture
def scenario_energy():
    """5x3 energy map with a diagonal valley of cost 9 + 1 + 1."""
    return torch.tensor([[9., 9., 9., 9., 9.],
                         [9., 1., 9., 9., 9.],
                         [9., 9., 1., 9., 9.]])
