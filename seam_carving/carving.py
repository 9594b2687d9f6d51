"""
High-level carving: drives seam removal until the target size is reached.
"""

import enum
import logging
from typing import List

import torch

from .energy import gradient_magnitude_energy
from .errors import DegenerateGridError, InvalidReductionError
from .seam import carve_seam, dp_seam_table, find_min_seam_end

logger = logging.getLogger(__name__)


class ResizeState(enum.Enum):
    CARVING = 'carving'
    DONE = 'done'


def check_reduction(image: torch.Tensor, delta_width: int, delta_height: int):
    """Validate a requested reduction against an RGB grid (3, H, W).

    Raises:
        DegenerateGridError: the grid has a zero dimension
        InvalidReductionError: a delta is negative or would remove the whole axis
    """
    if image.dim() != 3:
        raise ValueError(f"Expected an image of shape (C, H, W), got {tuple(image.shape)}")

    _, H, W = image.shape
    if H < 1 or W < 1:
        raise DegenerateGridError(f"Cannot carve a {W}x{H} image")
    if delta_width < 0 or delta_height < 0:
        raise InvalidReductionError(
            f"Reductions must be non-negative, got width={delta_width}, height={delta_height}")
    if delta_width >= W:
        raise InvalidReductionError(f"Cannot remove {delta_width} columns from width {W}")
    if delta_height >= H:
        raise InvalidReductionError(f"Cannot remove {delta_height} rows from height {H}")


class ResizeOrchestrator:
    """
    Greedy interleaving of vertical and horizontal seam removal.

    Every step recomputes the energy of the current image and the seam table
    of each direction that still needs carving, then removes the cheaper seam.
    Once one direction is finished the other is carved unconditionally; equal
    costs favor the horizontal seam. Choosing the cheaper seam at each step
    approximates the minimum total removed energy without searching all
    removal orders.

    Attributes:
        image: The current (live) image (3, H, W); replaced on every carve
        remaining_vertical: Vertical seams (columns) still to remove
        remaining_horizontal: Horizontal seams (rows) still to remove
        history: Direction of every seam removed so far, in order
    """

    def __init__(self, image: torch.Tensor, delta_width: int, delta_height: int):
        check_reduction(image, delta_width, delta_height)
        self.image = image
        self.remaining_vertical = delta_width
        self.remaining_horizontal = delta_height
        self.history: List[str] = []

    @property
    def state(self) -> ResizeState:
        if self.remaining_vertical > 0 or self.remaining_horizontal > 0:
            return ResizeState.CARVING
        return ResizeState.DONE

    def step(self) -> str:
        """Remove one seam and return its direction."""
        if self.state is ResizeState.DONE:
            raise RuntimeError("Resize already finished")

        _, H, W = self.image.shape
        if H < 1 or W < 1:
            raise DegenerateGridError(f"Image shrank to {W}x{H} while carving")

        energy = gradient_magnitude_energy(self.image)

        vertical_table = horizontal_table = None
        cost_v = cost_h = float('inf')
        if self.remaining_vertical > 0:
            vertical_table = dp_seam_table(energy, direction='vertical')
            _, cost_v = find_min_seam_end(vertical_table)
        if self.remaining_horizontal > 0:
            horizontal_table = dp_seam_table(energy, direction='horizontal')
            _, cost_h = find_min_seam_end(horizontal_table)

        if self.remaining_horizontal == 0 or (self.remaining_vertical > 0 and cost_v < cost_h):
            self.image = carve_seam(vertical_table, self.image)
            self.remaining_vertical -= 1
            direction = 'vertical'
        else:
            self.image = carve_seam(horizontal_table, self.image)
            self.remaining_horizontal -= 1
            direction = 'horizontal'

        self.history.append(direction)
        logger.debug("Removed %s seam (vertical cost %.2f, horizontal cost %.2f), now %dx%d",
                     direction, cost_v, cost_h, self.image.shape[2], self.image.shape[1])
        return direction

    def run(self) -> torch.Tensor:
        """Carve until both reductions are met and return the final image."""
        while self.state is ResizeState.CARVING:
            self.step()
        return self.image


def carve_image(image: torch.Tensor, delta_width: int, delta_height: int) -> torch.Tensor:
    """
    Content-aware shrink of an RGB image.

    Args:
        image: Image tensor (3, H, W)
        delta_width: Number of columns to remove
        delta_height: Number of rows to remove

    Returns:
        Carved image (3, H - delta_height, W - delta_width)
    """
    orchestrator = ResizeOrchestrator(image.clone(), delta_width, delta_height)
    carved = orchestrator.run()

    logger.info("Carved %dx%d -> %dx%d (%d vertical, %d horizontal seams)",
                image.shape[2], image.shape[1], carved.shape[2], carved.shape[1],
                delta_width, delta_height)
    return carved
