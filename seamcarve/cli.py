"""
Command-line entry point.

    seamcarve photo.jpg 20 -o narrow.jpg
"""

import logging
import sys

from PIL import Image

from .carving import ReductionResult
from .config import Config
from .errors import InvalidInputError, SeamCarveError
from .image import OpenImage
from .raster import check_carvable
from .seam import find_seam
from .visualize import draw_seam, save_energy_map

logger = logging.getLogger(__name__)


def run(config: Config) -> ReductionResult:
    """Decode, carve and encode as described by `config`."""
    suffix = config.output_path.suffix.lower()
    if suffix not in Image.registered_extensions():
        raise InvalidInputError(f"Unknown output image format: {suffix!r}")

    opened = OpenImage.from_file(config.img_path)
    check_carvable(opened.raster)

    if config.energy_map_path or config.seam_overlay_path:
        energy = opened.compute_energy(config.energy, config.border)
        if config.energy_map_path:
            save_energy_map(energy, config.energy_map_path)
            logger.info("Saved energy map: %s", config.energy_map_path)
        if config.seam_overlay_path:
            overlay = OpenImage(draw_seam(opened.raster, find_seam(opened.cumulative)))
            overlay.save(config.seam_overlay_path)

    result = opened.reduce(config.reduce_by, energy=config.energy, border=config.border)
    if result.clipped:
        logger.warning("Removed %d of %d requested seams", result.removed, result.requested)

    opened.save(config.output_path)
    return result


def main(argv=None) -> int:
    try:
        config = Config.from_args(argv)
    except SeamCarveError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )
    logger.debug("%r", config)

    try:
        run(config)
    except (SeamCarveError, OSError) as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    return 0
