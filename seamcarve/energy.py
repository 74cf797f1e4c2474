"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

Energy is the central-difference gradient magnitude of pixel brightness,
with neighbors outside the image treated as black (zero padding).
"""

import torch
import torch.nn.functional as F


def _as_channels(image: torch.Tensor) -> torch.Tensor:
    """Return image as (C, H, W), accepting (H, W) gray input."""
    if image.dim() == 2:
        return image.unsqueeze(0)
    if image.dim() == 3:
        if image.shape[0] not in (1, 3):
            raise ValueError(f"Expected 1 or 3 channels, got {image.shape[0]}")
        return image
    raise ValueError(f"Expected (C, H, W) or (H, W) image, got shape {tuple(image.shape)}")


def brightness(image: torch.Tensor) -> torch.Tensor:
    """
    Unweighted channel mean per pixel, floored to an integer.

    Args:
        image: uint8 RGB image (3, H, W) or gray image (H, W)

    Returns:
        Brightness map (H, W), dtype long, values in [0, 255]
    """
    channels = _as_channels(image).long()
    return channels.sum(dim=0) // channels.shape[0]


def gradient_magnitude_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute gradient magnitude energy for an image.

    E(x, y) = sqrt(dx^2 + dy^2), where
        dx = B(x+1, y) - B(x-1, y)
        dy = B(x, y+1) - B(x, y-1)
    and B is brightness, taken as 0 outside the image.

    Args:
        image: uint8 RGB image (3, H, W) or gray image (H, W)

    Returns:
        Energy map (H, W), float64, all values >= 0
    """
    gray = brightness(image).to(torch.float64)
    H, W = gray.shape
    if H == 0 or W == 0:
        raise ValueError(f"Cannot compute energy of an empty image ({H}x{W})")

    # Pad (left, right, top, bottom) by one pixel of zeros
    padded = F.pad(gray.view(1, 1, H, W), (1, 1, 1, 1)).view(H + 2, W + 2)

    dx = padded[1:-1, 2:] - padded[1:-1, :-2]
    dy = padded[2:, 1:-1] - padded[:-2, 1:-1]

    return torch.sqrt(dx * dx + dy * dy)


def normalize_energy(energy: torch.Tensor) -> torch.Tensor:
    """Map energy linearly onto 8-bit grayscale for display.

    gray = round(255 * (e - min) / (max - min)). A uniform energy map
    (max == min) has no range to stretch and maps to all zeros.

    Args:
        energy: Energy map (H, W)

    Returns:
        Grayscale map (H, W), uint8
    """
    energy = energy.to(torch.float64)
    e_min = energy.min()
    e_max = energy.max()
    span = (e_max - e_min).item()

    if span == 0.0:
        return torch.zeros(energy.shape, dtype=torch.uint8, device=energy.device)

    gray = torch.round(255.0 * (energy - e_min) / span)
    return gray.clamp(0, 255).to(torch.uint8)
