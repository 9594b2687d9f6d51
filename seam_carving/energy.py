"""
Energy function for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the L1 gradient magnitude of each color channel (Avidan & Shamir 2007),
averaged over R, G and B.
"""

import torch

from .errors import DegenerateGridError


def _axis_gradient(channels: torch.Tensor, dim: int) -> torch.Tensor:
    """Absolute finite difference of ``channels`` along ``dim``.

    Interior cells use the central difference halved; the first and last
    cells use the undivided one-sided difference with their single neighbor.
    An axis of length 1 has no neighbor and contributes zero.
    """
    n = channels.shape[dim]
    grad = torch.zeros_like(channels)
    if n < 2:
        return grad

    first = channels.narrow(dim, 0, 1)
    second = channels.narrow(dim, 1, 1)
    last = channels.narrow(dim, n - 1, 1)
    before_last = channels.narrow(dim, n - 2, 1)

    grad.narrow(dim, 0, 1).copy_((second - first).abs())
    grad.narrow(dim, n - 1, 1).copy_((last - before_last).abs())

    if n > 2:
        ahead = channels.narrow(dim, 2, n - 2)
        behind = channels.narrow(dim, 0, n - 2)
        grad.narrow(dim, 1, n - 2).copy_((ahead - behind).abs() / 2)

    return grad


def gradient_magnitude_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute gradient magnitude energy for an RGB pixel grid.

    Per channel, E_c(x, y) = |dI_c/dx| + |dI_c/dy| with central differences
    in the interior and one-sided differences on the borders. The energy is
    the mean of E_c over the three channels, so values lie in roughly
    [0, 510] for 8-bit input.

    Args:
        image: RGB pixel grid (3, H, W), any numeric dtype

    Returns:
        Energy map (H, W) as float64
    """
    if image.dim() != 3 or image.shape[0] != 3:
        raise ValueError(f"Expected an RGB grid of shape (3, H, W), got {tuple(image.shape)}")

    _, H, W = image.shape
    if H < 1 or W < 1:
        raise DegenerateGridError(f"Cannot compute energy of a {W}x{H} grid")

    channels = image.to(torch.float64)
    grad_x = _axis_gradient(channels, dim=2)
    grad_y = _axis_gradient(channels, dim=1)

    return (grad_x + grad_y).mean(dim=0)
