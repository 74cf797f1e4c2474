"""
High-level carving functions that run the compute/find/remove loop.
"""

import logging
from dataclasses import dataclass

import torch

from .energy import gradient_magnitude_energy, normalize_energy
from .seam import greedy_seam, remove_seam, seam_energy

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 20


@dataclass
class CarveResult:
    """Output of a carving run.

    Attributes:
        image: Carved image, same channels and height as the input
        energy_map: Normalized uint8 energy (H, W) of the original image
        seams_removed: Number of seams actually removed after clamping
    """
    image: torch.Tensor
    energy_map: torch.Tensor
    seams_removed: int

    @property
    def width(self) -> int:
        return self.image.shape[-1]

    @property
    def height(self) -> int:
        return self.image.shape[-2]


def _check_pixel_grid(image: torch.Tensor) -> None:
    if image.dim() not in (2, 3):
        raise ValueError(f"Expected (C, H, W) or (H, W) image, got shape {tuple(image.shape)}")
    if image.dim() == 3 and image.shape[0] not in (1, 3):
        raise ValueError(f"Expected 1 or 3 channels, got {image.shape[0]}")
    if image.dtype != torch.uint8:
        raise ValueError(f"Expected uint8 pixels, got {image.dtype}")
    H, W = image.shape[-2:]
    if H == 0 or W == 0:
        raise ValueError(f"Cannot carve an empty image ({H}x{W})")


def carve_image(image: torch.Tensor, n_seams: int) -> CarveResult:
    """
    Reduce image width by removing low-energy vertical seams one at a time.

    Energy is recomputed from scratch on the current image before every
    seam. The number of seams is clamped to width - 1 so at least one
    column always survives.

    Args:
        image: uint8 image tensor (3, H, W) or (H, W)
        n_seams: Number of seams to remove

    Returns:
        CarveResult with the carved image and the first energy map
    """
    _check_pixel_grid(image)
    if n_seams < 0:
        raise ValueError(f"n_seams must be non-negative, got {n_seams}")

    H, W = image.shape[-2:]
    n_remove = min(n_seams, W - 1)
    if n_remove < n_seams:
        logger.info("Requested %d seams but width is %d; removing %d",
                    n_seams, W, n_remove)

    carved = image
    energy = gradient_magnitude_energy(carved)
    energy_map = normalize_energy(energy)

    for i in range(n_remove):
        if i > 0:
            energy = gradient_magnitude_energy(carved)
        seam = greedy_seam(energy)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Seam %d: start column %d, energy %.3f",
                         i + 1, seam[0].item(), seam_energy(energy, seam))
        carved = remove_seam(carved, seam)

        if (i + 1) % PROGRESS_EVERY == 0:
            logger.info("Removed %d/%d seams, size: %d x %d",
                        i + 1, n_remove, carved.shape[-1], H)

    return CarveResult(image=carved, energy_map=energy_map, seams_removed=n_remove)


def carve_image_traditional(image: torch.Tensor, n_seams: int) -> torch.Tensor:
    """
    Rectangular seam carving, returning only the carved image.

    Args:
        image: uint8 image tensor (3, H, W) or (H, W)
        n_seams: Number of seams to remove

    Returns:
        Carved image
    """
    return carve_image(image, n_seams).image
