"""Tests for the gradient magnitude energy."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seam_carving.energy import gradient_magnitude_energy
from seam_carving.errors import DegenerateGridError

from conftest import make_flat_grid


class TestGradientMagnitudeEnergy:
    def test_uniform_grid_is_zero(self, flat_grid):
        """A solid-color grid has zero energy everywhere, borders included."""
        energy = gradient_magnitude_energy(flat_grid)
        assert torch.equal(energy, torch.zeros(3, 3, dtype=torch.float64))

    def test_bright_center_hand_computed(self, bright_center_grid):
        """Single white pixel at (1, 1) on black.

        The pixel itself has zero energy (its central differences skip it);
        its four edge-adjacent neighbors see a one-sided difference of 255.
        """
        energy = gradient_magnitude_energy(bright_center_grid)
        expected = torch.tensor([[0., 255., 0.],
                                 [255., 0., 255.],
                                 [0., 255., 0.]], dtype=torch.float64)
        assert torch.equal(energy, expected)

    def test_interior_difference_is_halved(self):
        """Borders use undivided one-sided differences, interior halves the central one."""
        grid = torch.zeros(3, 2, 3, dtype=torch.uint8)
        grid[:, :, 1] = 10
        grid[:, :, 2] = 40
        energy = gradient_magnitude_energy(grid)
        expected = torch.tensor([[10., 20., 30.],
                                 [10., 20., 30.]], dtype=torch.float64)
        assert torch.equal(energy, expected)

    def test_averages_over_channels(self):
        """Energy is the mean of the per-channel gradient sums."""
        grid = torch.zeros(3, 2, 3, dtype=torch.uint8)
        grid[0, :, 1] = 30
        grid[0, :, 2] = 60
        energy = gradient_magnitude_energy(grid)
        assert torch.equal(energy, torch.full((2, 3), 10., dtype=torch.float64))

    def test_vertical_gradient(self):
        """Row-wise change produces energy through the y derivative."""
        grid = torch.zeros(3, 3, 2, dtype=torch.uint8)
        grid[:, 1, :] = 10
        grid[:, 2, :] = 40
        energy = gradient_magnitude_energy(grid)
        expected = torch.tensor([[10., 10.],
                                 [20., 20.],
                                 [30., 30.]], dtype=torch.float64)
        assert torch.equal(energy, expected)

    def test_energy_can_exceed_255(self):
        """Corners of a checkerboard pick up both one-sided differences."""
        ys, xs = torch.meshgrid(torch.arange(3), torch.arange(3), indexing='ij')
        board = (((xs + ys) % 2) * 255).to(torch.uint8)
        grid = board.unsqueeze(0).expand(3, 3, 3).clone()
        energy = gradient_magnitude_energy(grid)
        assert energy[0, 0].item() == 510.0
        assert energy.max().item() <= 510.0

    def test_single_row_has_no_vertical_term(self):
        """An axis of length 1 contributes no gradient."""
        grid = torch.zeros(3, 1, 3, dtype=torch.uint8)
        grid[:, 0, 1] = 10
        grid[:, 0, 2] = 40
        energy = gradient_magnitude_energy(grid)
        assert torch.equal(energy, torch.tensor([[10., 20., 30.]], dtype=torch.float64))

    def test_single_pixel_is_zero(self):
        energy = gradient_magnitude_energy(make_flat_grid(1, 1, value=200))
        assert energy.shape == (1, 1)
        assert energy.item() == 0.0

    def test_output_shape_and_dtype(self):
        grid = torch.randint(0, 256, (3, 32, 48), dtype=torch.uint8)
        energy = gradient_magnitude_energy(grid)
        assert energy.shape == (32, 48)
        assert energy.dtype == torch.float64

    def test_energy_nonnegative(self, random_grid):
        """Energy should always be non-negative (L1 norm of gradients)."""
        energy = gradient_magnitude_energy(random_grid)
        assert (energy >= 0).all()
        assert energy.max() <= 510.0

    def test_float_input_matches_uint8(self, random_grid):
        """Dtype of the grid does not change the result."""
        as_uint8 = gradient_magnitude_energy(random_grid)
        as_float = gradient_magnitude_energy(random_grid.to(torch.float32))
        assert torch.equal(as_uint8, as_float)

    def test_empty_grid_raises(self):
        with pytest.raises(DegenerateGridError):
            gradient_magnitude_energy(torch.zeros(3, 0, 4, dtype=torch.uint8))

    def test_non_rgb_raises(self):
        with pytest.raises(ValueError):
            gradient_magnitude_energy(torch.zeros(1, 4, 4))
        with pytest.raises(ValueError):
            gradient_magnitude_energy(torch.zeros(4, 4))
