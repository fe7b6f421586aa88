"""
High-level carving functions that orchestrate the reduction loop.

Every cycle recomputes energy and the cumulative table from scratch on the
current raster, finds one seam and removes it. Nothing derived from a
raster is reused after that raster has been carved.
"""

import logging
import numbers
import warnings
from typing import List, NamedTuple, Optional, Tuple

import torch

from .energy import check_border, get_energy_function
from .errors import ExhaustedGeometryWarning, InvalidInputError
from .raster import MIN_WIDTH, as_raster, check_carvable, raster_dims
from .seam import cumulative_energy, find_seam, remove_seam

logger = logging.getLogger(__name__)


class ReductionResult(NamedTuple):
    raster: torch.Tensor
    requested: int
    removed: int
    seams: List[torch.Tensor]

    @property
    def clipped(self) -> bool:
        return self.removed < self.requested


def make_energy_function(energy: str = 'sobel', border: Optional[str] = None):
    """Energy model `energy` bound to a border policy (model default if None)."""
    fn = get_energy_function(energy)
    if border is None:
        return fn
    check_border(border)
    return lambda raster: fn(raster, border=border)


def iterations_for(width: int, fraction) -> int:
    """Number of seams needed to remove `fraction` percent of `width`."""
    if isinstance(fraction, bool) or not isinstance(fraction, numbers.Integral):
        raise InvalidInputError(
            f"Reduction fraction must be an integer percentage, got {fraction!r}")
    if not 0 <= fraction <= 100:
        raise InvalidInputError(
            f"Reduction fraction must be in [0, 100], got {fraction}")
    return (width * int(fraction)) // 100


def max_safe_iterations(width: int) -> int:
    """Most seams that can be removed without going below MIN_WIDTH."""
    return max(0, width - MIN_WIDTH)


def carve_seam(raster: torch.Tensor, energy_fn) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    One full carving cycle: energy, cumulative table, seam, removal.

    Returns:
        (carved raster, removed seam)
    """
    energy = energy_fn(raster)
    table = cumulative_energy(energy)
    seam = find_seam(table)
    logger.debug("Seam cost %.1f, columns %d..%d",
                 table[-1, seam[-1]].item(), seam.min().item(), seam.max().item())
    return remove_seam(raster, seam), seam


def _carve(raster: torch.Tensor, n_seams: int, energy_fn, log_every: int,
           seams: Optional[List[torch.Tensor]]) -> torch.Tensor:
    carved = raster.clone()

    for i in range(n_seams):
        width, height = raster_dims(carved)
        if width <= MIN_WIDTH:
            logger.warning("Stopping after %d/%d seams: width %d reached the minimum",
                           i, n_seams, width)
            break

        carved, seam = carve_seam(carved, energy_fn)
        if seams is not None:
            seams.append(seam)

        if (i + 1) % log_every == 0:
            logger.info("Removed %d/%d seams, size: %dx%d",
                        i + 1, n_seams, width - 1, height)

    return carved


def carve_image(raster: torch.Tensor, n_seams: int, energy: str = 'sobel',
                border: Optional[str] = None, log_every: int = 20,
                seams: Optional[List[torch.Tensor]] = None) -> torch.Tensor:
    """
    Remove up to `n_seams` vertical seams.

    Stops early rather than carve below MIN_WIDTH.

    Args:
        raster: RGB raster (3, H, W)
        n_seams: Number of seams to remove
        energy: Energy model name ('sobel' or 'dual_gradient')
        border: Border policy passed to the energy model (model default if None)
        log_every: Log progress every this many seams
        seams: If given, removed seams are appended to it

    Returns:
        Carved raster
    """
    energy_fn = make_energy_function(energy, border)
    return _carve(raster, n_seams, energy_fn, log_every, seams)


def reduce_with_report(raster, fraction: int, energy: str = 'sobel',
                       border: Optional[str] = None,
                       log_every: int = 20) -> ReductionResult:
    """
    Reduce raster width by `fraction` percent and report what was done.

    The number of seams is floor(width * fraction / 100), clipped so the
    width never drops below MIN_WIDTH. Clipping issues an
    ExhaustedGeometryWarning.

    Raises:
        InvalidInputError: bad fraction, energy model or raster; raised
            before any carving happens
    """
    raster = as_raster(raster)
    check_carvable(raster)
    energy_fn = make_energy_function(energy, border)
    width, height = raster_dims(raster)

    requested = iterations_for(width, fraction)
    n_seams = min(requested, max_safe_iterations(width))
    if n_seams < requested:
        message = (f"Requested {requested} seams ({fraction}% of width {width}) "
                   f"but only {n_seams} can be removed; clipping")
        logger.warning(message)
        warnings.warn(message, ExhaustedGeometryWarning, stacklevel=2)

    logger.info("Carving %dx%d raster: removing %d seams with %s energy",
                width, height, n_seams, energy)

    seams = []
    carved = _carve(raster, n_seams, energy_fn, log_every, seams)

    if seams:
        logger.info("Done: %dx%d -> %dx%d", width, height, *raster_dims(carved))

    return ReductionResult(carved, requested, len(seams), seams)


def reduce(raster, fraction: int, energy: str = 'sobel',
           border: Optional[str] = None) -> torch.Tensor:
    """
    Remove `fraction` percent of the raster's width by seam carving.

    Args:
        raster: Raster-like input (see raster.as_raster)
        fraction: Integer percentage of the width to remove, 0-100
        energy: Energy model name
        border: Border policy for the energy model

    Returns:
        Carved raster (3, H, W - k)
    """
    return reduce_with_report(raster, fraction, energy=energy, border=border).raster
