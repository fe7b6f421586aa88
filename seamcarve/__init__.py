"""
Content-aware image width reduction by seam carving.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007.
"""

__version__ = "0.1.0"

from .errors import (SeamCarveError, InvalidInputError, SeamInvariantError,
                     ExhaustedGeometryWarning)
from .raster import MIN_WIDTH, MIN_HEIGHT, as_raster, to_rows, raster_dims
from .energy import luma, sobel_energy, dual_gradient_energy, get_energy_function
from .seam import (cumulative_energy, find_seam, seam_energy, seam_coordinates,
                   validate_seam, remove_seam)
from .carving import (
    ReductionResult,
    carve_image,
    reduce,
    reduce_with_report,
)
from .image import OpenImage

__all__ = [
    'SeamCarveError',
    'InvalidInputError',
    'SeamInvariantError',
    'ExhaustedGeometryWarning',
    'MIN_WIDTH',
    'MIN_HEIGHT',
    'as_raster',
    'to_rows',
    'raster_dims',
    'luma',
    'sobel_energy',
    'dual_gradient_energy',
    'get_energy_function',
    'cumulative_energy',
    'find_seam',
    'seam_energy',
    'seam_coordinates',
    'validate_seam',
    'remove_seam',
    'ReductionResult',
    'carve_image',
    'reduce',
    'reduce_with_report',
    'OpenImage',
]
