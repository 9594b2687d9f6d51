"""
Seam computation: dynamic-programming tables, seam location and removal.

Each table cell holds the cumulative cost of the cheapest connected path from
the start edge to that cell, plus the offset (-1, 0, +1) of the predecessor on
that path. Backtracking the offsets from the cheapest terminal cell yields the
seam that is removed (or painted, for diagnostics).
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import torch

from .errors import DegenerateGridError

DIRECTIONS = ('vertical', 'horizontal')

# Marker color used when drawing seams on a display copy
SEAM_COLOR = (255, 0, 0)

# Candidate order for the predecessor search. argmin returns the first minimum,
# so ties go to the straight predecessor, then -1, then +1.
_PREDECESSOR_OFFSETS = (0, -1, 1)


@dataclass(frozen=True, eq=False)
class SeamTable:
    """Cumulative minimum-cost table for one seam direction.

    Attributes:
        cost: Cumulative path cost (H, W), float64
        step: Offset to the predecessor cell on the previous scanline (H, W), int8
        direction: 'vertical' (top to bottom) or 'horizontal' (left to right)
    """
    cost: torch.Tensor
    step: torch.Tensor
    direction: str

    @property
    def shape(self) -> Tuple[int, int]:
        return tuple(self.cost.shape)


def _check_direction(direction: str):
    if direction not in DIRECTIONS:
        raise ValueError(f"Invalid direction: {direction}")


def _vertical_table(energy: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
    """Top-to-bottom DP over an (H, W) energy map."""
    H, W = energy.shape
    device = energy.device

    cost = torch.empty((H, W), dtype=torch.float64, device=device)
    step = torch.zeros((H, W), dtype=torch.int8, device=device)
    offsets = torch.tensor(_PREDECESSOR_OFFSETS, dtype=torch.int8, device=device)

    cost[0] = energy[0]

    for i in range(1, H):
        prev = cost[i - 1]

        # Predecessor at col - 1 / col + 1; missing neighbors at the sides are +inf
        from_left = torch.full_like(prev, float('inf'))
        from_left[1:] = prev[:-1]
        from_right = torch.full_like(prev, float('inf'))
        from_right[:-1] = prev[1:]

        candidates = torch.stack([prev, from_left, from_right])
        choice = torch.argmin(candidates, dim=0)
        best = candidates.gather(0, choice.unsqueeze(0)).squeeze(0)

        cost[i] = energy[i] + best
        step[i] = offsets[choice]

    return cost, step


def dp_seam_table(energy: torch.Tensor, direction: str = 'vertical') -> SeamTable:
    """
    Build the cumulative-cost table for seams in the given direction.

    Vertical seams run top to bottom with one pixel per row and may drift one
    column per row. Horizontal seams run left to right with one pixel per
    column. For every cell outside the start edge:

        cost[here] = energy[here] + min(cost of the up-to-three predecessors)

    Ties between predecessors prefer the straight one, then -1 before +1.

    Args:
        energy: Energy map (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        SeamTable with cost and step tensors shaped like ``energy``
    """
    _check_direction(direction)
    if energy.dim() != 2:
        raise ValueError(f"Expected an energy map of shape (H, W), got {tuple(energy.shape)}")

    H, W = energy.shape
    if H < 1 or W < 1:
        raise DegenerateGridError(f"Cannot build a seam table for a {W}x{H} energy map")

    energy = energy.to(torch.float64)

    if direction == 'vertical':
        cost, step = _vertical_table(energy)
    else:
        # Horizontal seams are vertical seams of the transposed map
        cost, step = _vertical_table(energy.t())
        cost = cost.t().contiguous()
        step = step.t().contiguous()

    return SeamTable(cost=cost, step=step, direction=direction)


def find_min_seam_end(table: SeamTable) -> Tuple[int, float]:
    """
    Locate the cheapest seam endpoint on the table's terminal edge.

    The terminal edge is the bottom row for vertical tables and the right
    column for horizontal ones. Ties go to the lowest index.

    Returns:
        (index along the terminal edge, cumulative seam cost)
    """
    if table.cost.numel() == 0:
        raise DegenerateGridError("Cannot locate a seam in an empty table")

    if table.direction == 'vertical':
        edge = table.cost[-1]
    else:
        edge = table.cost[:, -1]

    index = int(torch.argmin(edge).item())
    return index, float(edge[index].item())


def backtrack_seam(table: SeamTable) -> torch.Tensor:
    """
    Trace the cheapest seam back from the terminal edge to the start edge.

    Returns:
        Seam indices - for vertical: (H,) with column index per row
                      for horizontal: (W,) with row index per column
    """
    index, _ = find_min_seam_end(table)

    # Scanlines along dim 0
    step = table.step if table.direction == 'vertical' else table.step.t()
    n_lines = step.shape[0]

    seam = torch.zeros(n_lines, dtype=torch.long, device=step.device)
    for line in range(n_lines - 1, -1, -1):
        seam[line] = index
        index += int(step[line, index].item())

    return seam


def remove_seam(image: torch.Tensor, seam: torch.Tensor,
                direction: str = 'vertical') -> torch.Tensor:
    """
    Remove a seam from an image.

    The result is a freshly allocated grid: every row (vertical) or column
    (horizontal) keeps all its pixels except the seam pixel, in their original
    order. The input is not modified.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices
        direction: 'vertical' or 'horizontal'

    Returns:
        Carved image with one column/row removed
    """
    _check_direction(direction)

    if image.dim() == 2:
        return remove_seam(image.unsqueeze(0), seam, direction).squeeze(0)

    if direction == 'horizontal':
        carved = remove_seam(image.transpose(1, 2), seam, direction='vertical')
        return carved.transpose(1, 2).contiguous()

    C, H, W = image.shape
    seam = seam.to(device=image.device, dtype=torch.long)

    if seam.shape != (H,):
        raise ValueError(f"Seam of length {seam.numel()} does not match {H} scanlines")
    if H > 0 and (seam.min() < 0 or seam.max() >= W):
        raise ValueError(f"Seam indices must lie in [0, {W})")

    keep = torch.ones((H, W), dtype=torch.bool, device=image.device)
    keep[torch.arange(H, device=image.device), seam] = False

    return image[:, keep].reshape(C, H, W - 1)


def carve_seam(table: SeamTable, image: torch.Tensor) -> torch.Tensor:
    """Backtrack the cheapest seam of ``table`` and remove it from ``image``."""
    if tuple(image.shape[-2:]) != table.shape:
        raise ValueError(f"Table of shape {table.shape} does not match image "
                         f"of shape {tuple(image.shape)}")
    seam = backtrack_seam(table)
    return remove_seam(image, seam, direction=table.direction)


def paint_seam(canvas: torch.Tensor, table: SeamTable,
               color: Sequence[int] = SEAM_COLOR) -> torch.Tensor:
    """
    Draw the cheapest seam of ``table`` onto a display copy, in place.

    Args:
        canvas: Display image (3, H, W); callers pass a copy, never the grid
            being carved
        table: Seam table computed for a grid of the same size
        color: Marker color, one value per channel

    Returns:
        The painted canvas
    """
    if tuple(canvas.shape[-2:]) != table.shape:
        raise ValueError(f"Table of shape {table.shape} does not match canvas "
                         f"of shape {tuple(canvas.shape)}")

    seam = backtrack_seam(table).to(canvas.device)
    marker = torch.tensor(color, dtype=canvas.dtype, device=canvas.device).unsqueeze(1)
    lines = torch.arange(seam.numel(), device=canvas.device)

    if table.direction == 'vertical':
        canvas[:, lines, seam] = marker
    else:
        canvas[:, seam, lines] = marker

    return canvas
