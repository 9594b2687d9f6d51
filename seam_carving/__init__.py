"""
Content-aware image shrinking by seam carving.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007.
"""

__version__ = "0.1.0"

from .errors import SeamCarvingError, InvalidReductionError, DegenerateGridError
from .energy import gradient_magnitude_energy
from .seam import (SeamTable, SEAM_COLOR, dp_seam_table, find_min_seam_end,
                   backtrack_seam, remove_seam, carve_seam, paint_seam)
from .carving import ResizeOrchestrator, ResizeState, carve_image, check_reduction
from .visualize import energy_to_image, seam_overlay
from .image_io import load_image, save_image

__all__ = [
    'SeamCarvingError',
    'InvalidReductionError',
    'DegenerateGridError',
    'gradient_magnitude_energy',
    'SeamTable',
    'SEAM_COLOR',
    'dp_seam_table',
    'find_min_seam_end',
    'backtrack_seam',
    'remove_seam',
    'carve_seam',
    'paint_seam',
    'ResizeOrchestrator',
    'ResizeState',
    'carve_image',
    'check_reduction',
    'energy_to_image',
    'seam_overlay',
    'load_image',
    'save_image',
]
