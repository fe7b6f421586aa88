"""Debug visualisations: seam overlays and energy heat maps."""

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
import torch


def draw_seam(raster: torch.Tensor, seam: torch.Tensor, color=(255, 0, 0)) -> torch.Tensor:
    """Return a copy of the raster with the seam pixels painted in `color`."""
    img_vis = raster.clone()
    rows = torch.arange(raster.shape[-2], device=raster.device)
    img_vis[:, rows, seam] = torch.tensor(color, dtype=raster.dtype,
                                          device=raster.device).unsqueeze(1)
    return img_vis


def save_energy_map(energy: torch.Tensor, path, cmap: str = 'inferno'):
    """Save an energy map as a heat map image."""
    plt.imsave(path, energy.cpu().numpy(), cmap=cmap)
