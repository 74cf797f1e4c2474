"""
Basic seam carving example on a synthetic image.

Shows the original, its energy map with the first seam, and the carved
result side by side.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import matplotlib.pyplot as plt

from seamcarve import carve_image, draw_seam, gradient_magnitude_energy, greedy_seam


def make_scene(H: int = 120, W: int = 200) -> torch.Tensor:
    """Sky gradient with two solid boxes, as a (3, H, W) uint8 tensor."""
    image = torch.zeros(3, H, W, dtype=torch.uint8)
    rows = torch.linspace(90, 200, H).to(torch.uint8).unsqueeze(1)
    image[0] = rows // 2
    image[1] = rows
    image[2] = 230
    image[:, 60:110, 30:60] = torch.tensor([200, 40, 40], dtype=torch.uint8).view(3, 1, 1)
    image[:, 40:110, 130:150] = torch.tensor([30, 120, 30], dtype=torch.uint8).view(3, 1, 1)
    return image


def main():
    image = make_scene()
    C, H, W = image.shape
    print(f"Image shape: {C} x {H} x {W}")

    seam = greedy_seam(gradient_magnitude_energy(image))
    result = carve_image(image, n_seams=80)
    print(f"Removed {result.seams_removed} seams, new size: {result.width} x {result.height}")

    fig, axes = plt.subplots(1, 3, figsize=(15, 4))
    axes[0].imshow(draw_seam(image, seam).permute(1, 2, 0).numpy())
    axes[0].set_title('Original with first seam')
    axes[1].imshow(result.energy_map.numpy(), cmap='gray')
    axes[1].set_title('Energy')
    axes[2].imshow(result.image.permute(1, 2, 0).numpy())
    axes[2].set_title(f'Carved ({result.width} x {result.height})')
    for ax in axes:
        ax.axis('off')

    plt.tight_layout()
    plt.savefig('seam_carving_example.png', dpi=100)
    print("Saved: seam_carving_example.png")


if __name__ == '__main__':
    main()
