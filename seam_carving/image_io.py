"""
Image file I/O: decode files to (3, H, W) uint8 tensors and back.

Codec errors from Pillow (missing file, unreadable data) propagate unchanged.
"""

from pathlib import Path
from typing import Union

import numpy as np
import torch
from PIL import Image

PathLike = Union[str, Path]


def load_image(path: PathLike) -> torch.Tensor:
    """Load an image file as an RGB uint8 tensor (3, H, W)."""
    with Image.open(path) as img:
        img_array = np.array(img.convert('RGB'), dtype=np.uint8)
    return torch.from_numpy(img_array).permute(2, 0, 1).contiguous()


def save_image(tensor: torch.Tensor, path: PathLike):
    """Save an RGB tensor (3, H, W) to ``path``; the format follows the suffix."""
    img_array = tensor.permute(1, 2, 0).cpu().numpy()
    img_array = np.ascontiguousarray(img_array.clip(0, 255).astype(np.uint8))
    Image.fromarray(img_array).save(path)
