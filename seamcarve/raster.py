"""
Raster helpers.

A raster is a uint8 tensor of shape (3, H, W): H rows of W RGB pixels,
channel-first like the rest of the torch code in this package. Carving only
ever shrinks W; H is fixed for the lifetime of a raster.
"""

import numpy as np
import torch
from typing import List, Tuple

from .errors import InvalidInputError

# Smallest raster the engine will carve. Below this there is no interior
# neighbourhood for the energy operators and no vertical path to follow.
MIN_WIDTH = 3
MIN_HEIGHT = 2


def as_raster(data) -> torch.Tensor:
    """
    Convert raster-like input to a validated (3, H, W) uint8 tensor.

    Accepts:
        - torch tensor (3, H, W)
        - numpy array (H, W, 3), as produced by np.array(PIL image)
        - nested rows: a sequence of rows, each a sequence of (R, G, B)

    Raises:
        InvalidInputError: ragged rows, wrong channel count or empty input
    """
    if isinstance(data, torch.Tensor):
        if data.dim() != 3 or data.shape[0] != 3:
            raise InvalidInputError(
                f"Expected raster tensor of shape (3, H, W), got {tuple(data.shape)}")
        raster = data
    elif isinstance(data, np.ndarray):
        if data.ndim != 3 or data.shape[2] != 3:
            raise InvalidInputError(
                f"Expected array of shape (H, W, 3), got {data.shape}")
        raster = torch.from_numpy(np.ascontiguousarray(data)).permute(2, 0, 1)
    else:
        raster = _raster_from_rows(data)

    if raster.shape[1] == 0 or raster.shape[2] == 0:
        raise InvalidInputError("Raster has no pixels")

    if raster.dtype != torch.uint8:
        if raster.dtype.is_floating_point or raster.min() < 0 or raster.max() > 255:
            raise InvalidInputError(
                f"Raster values must be 8-bit integers, got dtype {raster.dtype}")
        raster = raster.to(torch.uint8)

    return raster.contiguous()


def _raster_from_rows(rows) -> torch.Tensor:
    try:
        rows = [list(row) for row in rows]
    except TypeError as e:
        raise InvalidInputError(f"Raster must be a sequence of rows: {e}") from e
    if not rows:
        raise InvalidInputError("Raster has no rows")

    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise InvalidInputError(
                f"Row {i} has {len(row)} pixels, expected {width}")
        for pixel in row:
            try:
                channels = len(pixel)
            except TypeError:
                raise InvalidInputError(
                    f"Row {i} has a pixel that is not an (R, G, B) triple: {pixel!r}") from None
            if channels != 3:
                raise InvalidInputError(
                    f"Row {i} has a pixel with {channels} channels, expected 3")

    try:
        array = np.array(rows, dtype=np.int64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Raster rows are not numeric RGB triples: {e}") from e
    if array.size and (array.min() < 0 or array.max() > 255):
        raise InvalidInputError("Channel values must lie in [0, 255]")

    return torch.from_numpy(array.astype(np.uint8)).permute(2, 0, 1)


def to_rows(raster: torch.Tensor) -> List[List[Tuple[int, int, int]]]:
    """Convert a (3, H, W) raster back to nested rows of (R, G, B) tuples."""
    array = raster.permute(1, 2, 0).cpu().numpy()
    return [[tuple(int(v) for v in pixel) for pixel in row] for row in array]


def raster_dims(raster: torch.Tensor) -> Tuple[int, int]:
    """Return (width, height)."""
    return raster.shape[-1], raster.shape[-2]


def check_carvable(raster: torch.Tensor):
    """Raise InvalidInputError if the raster is below the carving floor."""
    width, height = raster_dims(raster)
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        raise InvalidInputError(
            f"Raster {width}x{height} is below the minimum carvable size "
            f"{MIN_WIDTH}x{MIN_HEIGHT}")
