"""
Seam computation: cumulative energy, backtrace and removal.

Vertical seams only. A seam is a (H,) long tensor holding the column of
the seam pixel in each row, ordered top to bottom.

Ties between equal-cost predecessors always resolve to the smallest column,
so the same energy map always yields the same seam.
"""

import torch
from typing import List, Tuple

from .errors import InvalidInputError, SeamInvariantError
from .raster import MIN_HEIGHT


def cumulative_energy(energy: torch.Tensor) -> torch.Tensor:
    """
    Minimum accumulated energy from the top row to every pixel.

    M[0] = E[0]
    M[i, j] = E[i, j] + min(M[i-1, j-1], M[i-1, j], M[i-1, j+1])

    Out-of-range predecessors at the left/right border are ignored. Each row
    depends on the completed row above, so rows are swept in order while the
    columns of a row are computed together.

    Args:
        energy: Energy map (H, W)

    Returns:
        Cumulative table (H, W), float64
    """
    H, W = energy.shape
    M = energy.to(torch.float64).clone()

    for i in range(1, H):
        M_prev = M[i - 1]
        M_left = torch.full((W,), float('inf'), dtype=M.dtype, device=M.device)
        M_left[1:] = M_prev[:-1]
        M_right = torch.full((W,), float('inf'), dtype=M.dtype, device=M.device)
        M_right[:-1] = M_prev[1:]

        M[i] += torch.min(torch.min(M_left, M_prev), M_right)

    return M


def find_seam(cumulative: torch.Tensor) -> torch.Tensor:
    """
    Backtrace the minimum-cost vertical seam from a cumulative table.

    Starts at the minimum of the last row and walks upward, at each row
    choosing the cheapest of the (up to) three columns adjacent to the
    current one.

    Args:
        cumulative: Cumulative table (H, W) from cumulative_energy

    Returns:
        Seam indices (H,) with column index per row
    """
    H, W = cumulative.shape
    if H < MIN_HEIGHT:
        raise InvalidInputError(
            f"Cannot find a vertical seam in a table of height {H}")

    seam = torch.zeros(H, dtype=torch.long, device=cumulative.device)

    # argmin returns the first minimum, which gives the left-bias tie-break
    col = int(torch.argmin(cumulative[-1]).item())
    seam[-1] = col

    for i in range(H - 2, -1, -1):
        left = max(0, col - 1)
        right = min(W - 1, col + 1)
        col = left + int(torch.argmin(cumulative[i, left:right + 1]).item())
        seam[i] = col

    return seam


def seam_energy(energy: torch.Tensor, seam: torch.Tensor) -> float:
    """Sum of energy values along a seam."""
    rows = torch.arange(energy.shape[0], device=energy.device)
    return energy[rows, seam].sum().item()


def seam_coordinates(seam: torch.Tensor) -> List[Tuple[int, int]]:
    """Seam as (column, row) pairs, top row first."""
    return [(int(col), row) for row, col in enumerate(seam.tolist())]


def validate_seam(seam: torch.Tensor, height: int, width: int):
    """
    Check that a seam can be removed from a (height, width) grid.

    Raises:
        SeamInvariantError: wrong length, out-of-bounds column, or a step of
            more than one column between consecutive rows
    """
    if seam.dim() != 1 or seam.shape[0] != height:
        raise SeamInvariantError(
            f"Seam has shape {tuple(seam.shape)}, expected one entry for each of {height} rows")

    if seam.numel() == 0:
        return

    if seam.min() < 0 or seam.max() >= width:
        raise SeamInvariantError(
            f"Seam columns must lie in [0, {width}), got [{seam.min().item()}, {seam.max().item()}]")

    if height > 1:
        steps = torch.abs(seam[1:] - seam[:-1])
        if steps.max() > 1:
            row = int(torch.argmax(steps).item())
            raise SeamInvariantError(
                f"Seam is not 8-connected between rows {row} and {row + 1}: "
                f"columns {seam[row].item()} -> {seam[row + 1].item()}")


def remove_seam(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """
    Remove a vertical seam from an image.

    Each row loses the pixel at its own seam column; everything to the right
    shifts left by one.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices (H,)

    Returns:
        Carved image with one column fewer
    """
    if image.dim() == 2:
        image = image.unsqueeze(0)
        squeeze_output = True
    else:
        squeeze_output = False

    C, H, W = image.shape
    validate_seam(seam, H, W)

    keep = torch.ones(H, W, dtype=torch.bool, device=image.device)
    keep[torch.arange(H, device=image.device), seam.to(image.device)] = False
    carved = image[:, keep].reshape(C, H, W - 1)

    if squeeze_output:
        carved = carved.squeeze(0)

    return carved
