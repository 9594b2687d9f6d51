"""Shared test fixtures for the seam carving test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


def make_flat_grid(H, W, value=128):
    """Uniform RGB grid (3, H, W)."""
    return torch.full((3, H, W), value, dtype=torch.uint8)


def make_bright_pixel_grid(H, W, x, y):
    """Black RGB grid with a single white pixel at column x, row y."""
    grid = torch.zeros(3, H, W, dtype=torch.uint8)
    grid[:, y, x] = 255
    return grid


def make_split_grid(H, W, split):
    """Black columns [0, split), white columns [split, W)."""
    grid = torch.zeros(3, H, W, dtype=torch.uint8)
    grid[:, :, split:] = 255
    return grid


@pytest.fixture
def flat_grid():
    """Flat-color 3x3 grid."""
    return make_flat_grid(3, 3)


@pytest.fixture
def bright_center_grid():
    """3x3 black grid with a white pixel at (1, 1)."""
    return make_bright_pixel_grid(3, 3, 1, 1)


@pytest.fixture
def random_grid():
    torch.manual_seed(42)
    return torch.randint(0, 256, (3, 12, 16), dtype=torch.uint8)
