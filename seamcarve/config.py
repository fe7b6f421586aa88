"""
Run configuration for the command-line tool.
"""

import argparse
import logging
import os
from pathlib import Path
from typing import Optional

from .energy import BORDER_POLICIES, ENERGY_FUNCTIONS
from .errors import InvalidInputError

DEFAULT_LOG_LEVEL = 'INFO'


class Config:
    """
    What to carve and where to put the result.

    Args:
        img_path: Image to read
        reduce_by: Percentage of the width to remove, 0-100
        output_path: Where to write the result (default: <stem>_carved<suffix>)
        energy: Energy model name
        border: Border policy for the energy model (model default if None)
        energy_map_path: If set, save a heat map of the initial energy here
        seam_overlay_path: If set, save the input with its first seam drawn here
        log_level: Logging level name
    """

    def __init__(self, img_path, reduce_by: int, output_path=None,
                 energy: str = 'sobel', border: Optional[str] = None,
                 energy_map_path=None, seam_overlay_path=None,
                 log_level: str = DEFAULT_LOG_LEVEL):
        if not 0 <= reduce_by <= 100:
            raise InvalidInputError(
                f"Percentage to carve the image by must be in [0, 100], got {reduce_by}")
        if energy not in ENERGY_FUNCTIONS:
            raise InvalidInputError(f"Invalid energy model: {energy!r}")
        if border is not None and border not in BORDER_POLICIES:
            raise InvalidInputError(f"Invalid border policy: {border!r}")

        self.img_path = Path(img_path)
        self.reduce_by = reduce_by
        if output_path is None:
            output_path = self.img_path.with_name(
                f"{self.img_path.stem}_carved{self.img_path.suffix}")
        self.output_path = Path(output_path)
        self.energy = energy
        self.border = border
        self.energy_map_path = Path(energy_map_path) if energy_map_path else None
        self.seam_overlay_path = Path(seam_overlay_path) if seam_overlay_path else None
        self.log_level = log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidInputError(f"Invalid log level: {log_level!r}")

    def __repr__(self):
        return (f"Config(img_path={str(self.img_path)!r}, reduce_by={self.reduce_by}, "
                f"output_path={str(self.output_path)!r}, energy={self.energy!r}, "
                f"border={self.border!r})")

    @classmethod
    def from_args(cls, argv=None) -> 'Config':
        args = build_parser().parse_args(argv)
        return cls(
            img_path=args.image,
            reduce_by=args.percent,
            output_path=args.output,
            energy=args.energy,
            border=args.border,
            energy_map_path=args.energy_map,
            seam_overlay_path=args.seam_overlay,
            log_level=args.log_level,
        )


class _ArgumentParser(argparse.ArgumentParser):
    """Reports bad arguments as InvalidInputError instead of exiting."""

    def error(self, message):
        raise InvalidInputError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='seamcarve',
        description="Shrink an image's width by content-aware seam carving"
    )
    parser.add_argument(
        'image', type=str,
        help='Image file to carve'
    )
    parser.add_argument(
        'percent', type=int,
        help='Percentage of the width to remove (0-100)'
    )
    parser.add_argument(
        '-o', '--output', type=str,
        help='Output image path (default: <image>_carved.<ext>)'
    )
    parser.add_argument(
        '--energy', choices=sorted(ENERGY_FUNCTIONS), default='sobel',
        help='Energy model (default: sobel)'
    )
    parser.add_argument(
        '--border', choices=BORDER_POLICIES,
        help='Border policy for the energy model (default: replicate for sobel, '
             'wrap for dual_gradient)'
    )
    parser.add_argument(
        '--energy-map', type=str,
        help='Save a heat map of the initial energy to this path'
    )
    parser.add_argument(
        '--seam-overlay', type=str,
        help='Save the input with its first seam drawn to this path'
    )
    parser.add_argument(
        '--log-level', type=str,
        default=os.getenv('SEAMCARVE_LOG_LEVEL', DEFAULT_LOG_LEVEL),
        help='Logging level (default: $SEAMCARVE_LOG_LEVEL or INFO)'
    )
    return parser
