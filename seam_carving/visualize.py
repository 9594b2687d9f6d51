"""
Diagnostic renderings: the energy map as an image and the first seams to be removed.
"""

from typing import Sequence

import torch

from .energy import gradient_magnitude_energy
from .seam import SEAM_COLOR, dp_seam_table, paint_seam


def energy_to_image(energy: torch.Tensor) -> torch.Tensor:
    """
    Render an energy map as a grayscale RGB image.

    High energy is dark: each channel is 255 - floor(energy), clamped to
    [0, 255]. Energy can exceed 255, so strong edges saturate to black.

    Args:
        energy: Energy map (H, W)

    Returns:
        uint8 image (3, H, W)
    """
    gray = (255.0 - energy.to(torch.float64).floor()).clamp(0, 255).to(torch.uint8)
    return gray.unsqueeze(0).expand(3, -1, -1).clone()


def seam_overlay(image: torch.Tensor, color: Sequence[int] = SEAM_COLOR) -> torch.Tensor:
    """Energy image of ``image`` with its cheapest horizontal and vertical seams drawn on top."""
    energy = gradient_magnitude_energy(image)
    canvas = energy_to_image(energy)

    paint_seam(canvas, dp_seam_table(energy, direction='horizontal'), color)
    paint_seam(canvas, dp_seam_table(energy, direction='vertical'), color)
    return canvas
