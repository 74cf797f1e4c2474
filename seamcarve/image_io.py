"""
Reading and writing images as uint8 tensors.
"""

from typing import Tuple

import numpy as np
import torch
from PIL import Image


def load_image(path: str) -> torch.Tensor:
    """Load image and convert to a (3, H, W) uint8 tensor.

    Raises OSError (FileNotFoundError, PIL.UnidentifiedImageError) when
    the file is missing or cannot be decoded.
    """
    with Image.open(path) as img:
        img_array = np.array(img.convert('RGB'), dtype=np.uint8)
    return torch.from_numpy(img_array).permute(2, 0, 1).contiguous()


def save_image(tensor: torch.Tensor, path: str):
    """Save a (3, H, W), (1, H, W) or (H, W) uint8 tensor as an image."""
    if tensor.dtype != torch.uint8:
        raise ValueError(f"Expected uint8 pixels, got {tensor.dtype}")
    if tensor.dim() == 3 and tensor.shape[0] == 1:
        tensor = tensor.squeeze(0)
    if tensor.dim() == 3:
        img_array = tensor.permute(1, 2, 0).cpu().numpy()
    else:
        img_array = tensor.cpu().numpy()
    img = Image.fromarray(np.ascontiguousarray(img_array))
    img.save(path)


def draw_seam(image: torch.Tensor, seam: torch.Tensor,
              color: Tuple[int, int, int] = (255, 0, 0)) -> torch.Tensor:
    """Return a copy of the image with a vertical seam painted in."""
    img_vis = image.clone()
    rows = torch.arange(seam.shape[0], device=image.device)
    cols = seam.to(image.device)

    if img_vis.dim() == 2:
        img_vis[rows, cols] = 255
    else:
        fill = torch.tensor(color[:img_vis.shape[0]], dtype=img_vis.dtype,
                            device=image.device)
        img_vis[:, rows, cols] = fill.unsqueeze(1)

    return img_vis
