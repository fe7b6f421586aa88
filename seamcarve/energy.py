"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

Two models are available and must not be mixed within one run, since they
produce different seams:
  - sobel: L1 magnitude of Sobel gradients on the luma image
    (Avidan & Shamir 2007). Borders replicate the edge pixel by default.
  - dual_gradient: squared RGB differences between opposite neighbours.
    Neighbour lookup wraps around the image by default.

Energies are absolute per-pixel magnitudes; nothing is normalised.
"""

import torch
import torch.nn.functional as F

from .errors import InvalidInputError

# ITU-R BT.601 luma weights in thousandths, so integer RGB gives integer-valued
# scaled luma and the Sobel sums stay exact
LUMA_WEIGHTS = (299, 587, 114)
LUMA_SCALE = 1000

ENERGY_DTYPE = torch.float64

# Border policy name -> F.pad mode
_PAD_MODES = {
    'replicate': 'replicate',
    'wrap': 'circular',
}


BORDER_POLICIES = tuple(_PAD_MODES)


def _pad_mode(border: str) -> str:
    try:
        return _PAD_MODES[border]
    except KeyError:
        raise InvalidInputError(
            f"Invalid border policy: {border!r}. Must be one of {sorted(_PAD_MODES)}") from None


def check_border(border: str):
    """Raise InvalidInputError for an unknown border policy."""
    _pad_mode(border)


def _scaled_luma(raster: torch.Tensor) -> torch.Tensor:
    """Luma times LUMA_SCALE; integer-valued for integer input."""
    image = raster.to(ENERGY_DTYPE)
    if image.dim() == 2:
        return image * LUMA_SCALE
    return (LUMA_WEIGHTS[0] * image[0]
            + LUMA_WEIGHTS[1] * image[1]
            + LUMA_WEIGHTS[2] * image[2])


def luma(raster: torch.Tensor) -> torch.Tensor:
    """
    Grayscale intensity of a raster.

    Args:
        raster: RGB raster (3, H, W) or grayscale (H, W)

    Returns:
        Luma (H, W) as float64, on the 0-255 scale of the input
    """
    return _scaled_luma(raster) / LUMA_SCALE


def _pad(image: torch.Tensor, border: str) -> torch.Tensor:
    """Pad a (C, H, W) tensor by one pixel on every side."""
    # F.pad wants a batch dimension for replicate/circular modes
    return F.pad(image.unsqueeze(0), (1, 1, 1, 1), mode=_pad_mode(border)).squeeze(0)


def sobel_energy(raster: torch.Tensor, border: str = 'replicate') -> torch.Tensor:
    """
    Gradient magnitude energy (paper equation 6).

    Uses L1 norm of Sobel gradients on the luma image:
    E(i,j) = |Gx(i,j)| + |Gy(i,j)|

    Args:
        raster: RGB raster (3, H, W) or grayscale (H, W)
        border: 'replicate' (clamp-to-edge) or 'wrap'

    Returns:
        Energy map (H, W)
    """
    gray = _scaled_luma(raster).unsqueeze(0)  # (1, H, W)

    sobel_x = torch.tensor([[-1, 0, 1],
                           [-2, 0, 2],
                           [-1, 0, 1]], dtype=ENERGY_DTYPE, device=gray.device)
    sobel_x = sobel_x.view(1, 1, 3, 3)

    sobel_y = torch.tensor([[-1, -2, -1],
                           [ 0,  0,  0],
                           [ 1,  2,  1]], dtype=ENERGY_DTYPE, device=gray.device)
    sobel_y = sobel_y.view(1, 1, 3, 3)

    padded = _pad(gray, border).unsqueeze(0)  # (1, 1, H+2, W+2)

    grad_x = F.conv2d(padded, sobel_x)
    grad_y = F.conv2d(padded, sobel_y)

    energy = (torch.abs(grad_x) + torch.abs(grad_y)) / LUMA_SCALE
    return energy[0, 0]


def dual_gradient_energy(raster: torch.Tensor, border: str = 'wrap') -> torch.Tensor:
    """
    Dual-gradient colour energy.

    E(x,y) = sum_c (I_c(x+1,y) - I_c(x-1,y))^2 + sum_c (I_c(x,y+1) - I_c(x,y-1))^2

    With border='wrap' the left neighbour of column 0 is the last column
    and the row above row 0 is the last row.

    Args:
        raster: RGB raster (3, H, W) or grayscale (H, W)
        border: 'wrap' or 'replicate'

    Returns:
        Energy map (H, W)
    """
    image = raster.to(ENERGY_DTYPE)
    if image.dim() == 2:
        image = image.unsqueeze(0)

    padded = _pad(image, border)
    left = padded[:, 1:-1, :-2]
    right = padded[:, 1:-1, 2:]
    above = padded[:, :-2, 1:-1]
    below = padded[:, 2:, 1:-1]

    delta_x = ((right - left) ** 2).sum(dim=0)
    delta_y = ((below - above) ** 2).sum(dim=0)
    return delta_x + delta_y


ENERGY_FUNCTIONS = {
    'sobel': sobel_energy,
    'dual_gradient': dual_gradient_energy,
}


def get_energy_function(name: str):
    """Look up an energy model by name."""
    try:
        return ENERGY_FUNCTIONS[name]
    except KeyError:
        raise InvalidInputError(
            f"Invalid energy model: {name!r}. Must be one of {sorted(ENERGY_FUNCTIONS)}") from None
