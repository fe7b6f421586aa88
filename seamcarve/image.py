"""
OpenImage: a decoded image being carved, plus Pillow decode/encode.
"""

import logging
from typing import Optional

import numpy as np
import torch
from PIL import Image

from .carving import ReductionResult, carve_seam, make_energy_function, reduce_with_report
from .raster import as_raster, check_carvable, raster_dims
from .seam import cumulative_energy

logger = logging.getLogger(__name__)


class OpenImage:
    """
    A raster under carving, with the energy tables last computed for it.

    `energy` and `cumulative` describe the current raster only; any seam
    removal clears them.
    """

    def __init__(self, raster):
        self.raster = as_raster(raster)
        self.energy: Optional[torch.Tensor] = None
        self.cumulative: Optional[torch.Tensor] = None

    @classmethod
    def from_pil(cls, img: Image.Image) -> 'OpenImage':
        return cls(np.array(img.convert('RGB'), dtype=np.uint8))

    @classmethod
    def from_file(cls, path) -> 'OpenImage':
        """Decode an image file. Codec errors propagate unchanged."""
        with Image.open(path) as img:
            opened = cls.from_pil(img)
        logger.info("Opened %s (%dx%d)", path, *opened.dims)
        return opened

    @property
    def dims(self):
        """(width, height)"""
        return raster_dims(self.raster)

    def _invalidate(self):
        self.energy = None
        self.cumulative = None

    def compute_energy(self, energy: str = 'sobel', border: Optional[str] = None) -> torch.Tensor:
        """Compute and keep the energy map and cumulative table of the current raster."""
        energy_fn = make_energy_function(energy, border)
        self.energy = energy_fn(self.raster)
        self.cumulative = cumulative_energy(self.energy)
        return self.energy

    def carve_once(self, energy: str = 'sobel', border: Optional[str] = None) -> torch.Tensor:
        """Remove a single seam and return it."""
        check_carvable(self.raster)
        self.raster, seam = carve_seam(self.raster, make_energy_function(energy, border))
        self._invalidate()
        return seam

    def reduce(self, fraction: int, energy: str = 'sobel',
               border: Optional[str] = None) -> ReductionResult:
        """Carve away `fraction` percent of the width in place."""
        result = reduce_with_report(self.raster, fraction, energy=energy, border=border)
        self.raster = result.raster
        self._invalidate()
        return result

    def to_pil(self) -> Image.Image:
        array = self.raster.permute(1, 2, 0).cpu().numpy()
        return Image.fromarray(np.ascontiguousarray(array))

    def save(self, path):
        """Encode to `path`; the format follows the file extension."""
        self.to_pil().save(path)
        logger.info("Saved: %s (%dx%d)", path, *self.dims)
