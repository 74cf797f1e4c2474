"""
Seam computation and removal.

Seams are found with a greedy downhill descent: every column of the top
row is tried as a starting point, each path steps to the cheapest of the
(up to) three pixels below it, and the path with the lowest total energy
wins. This is a local heuristic, not the cumulative-cost DP of Avidan &
Shamir; it is kept because switching changes which seams are removed.
"""

import torch
import torch.nn.functional as F


def greedy_seam(energy: torch.Tensor) -> torch.Tensor:
    """
    Compute the lowest-energy greedy vertical seam.

    From column x at row i, the path moves to row i+1 at x (straight
    down) unless x-1 is strictly cheaper; x+1 then replaces the current
    choice only if strictly cheaper still. Columns outside the image are
    never considered. Among all starting columns the lowest total wins,
    and equal totals go to the leftmost start.

    All W candidate paths are advanced together, one row at a time.

    Args:
        energy: Energy map (H, W)

    Returns:
        Seam indices (H,) with the column index per row
    """
    if energy.dim() != 2:
        raise ValueError(f"Expected (H, W) energy map, got shape {tuple(energy.shape)}")
    H, W = energy.shape
    if H == 0 or W == 0:
        raise ValueError(f"Cannot find a seam in an empty energy map ({H}x{W})")

    energy = energy.to(torch.float64)
    device = energy.device

    # One column of +inf on each side so edge paths never step outside
    padded = F.pad(energy, (1, 1), value=float('inf'))

    pos = torch.arange(W, dtype=torch.long, device=device)
    paths = torch.empty(H, W, dtype=torch.long, device=device)
    paths[0] = pos
    totals = energy[0].clone()

    for i in range(1, H):
        row = padded[i]
        # Column c of the image is column c + 1 of the padded row
        best = row[pos + 1]
        step = pos

        left = row[pos]
        go_left = left < best
        step = torch.where(go_left, pos - 1, step)
        best = torch.where(go_left, left, best)

        right = row[pos + 2]
        go_right = right < best
        step = torch.where(go_right, pos + 1, step)
        best = torch.where(go_right, right, best)

        pos = step
        paths[i] = pos
        totals = totals + best

    # argmin returns the first minimal index, i.e. the leftmost start
    start_col = torch.argmin(totals).item()
    return paths[:, start_col].clone()


def seam_energy(energy: torch.Tensor, seam: torch.Tensor) -> float:
    """Total energy along a vertical seam."""
    rows = torch.arange(energy.shape[0], device=energy.device)
    return energy[rows, seam.to(energy.device)].sum().item()


def validate_seam(seam: torch.Tensor, width: int, height: int) -> None:
    """
    Check that a seam is a connected in-bounds vertical path.

    Raises:
        ValueError: if the seam has the wrong length, an index outside
            [0, width), or consecutive rows more than one column apart.
    """
    if seam.dim() != 1 or seam.shape[0] != height:
        raise ValueError(f"Seam must have one index per row ({height}), "
                         f"got shape {tuple(seam.shape)}")

    out_of_bounds = (seam < 0) | (seam >= width)
    if out_of_bounds.any():
        row = torch.nonzero(out_of_bounds)[0].item()
        raise ValueError(f"Seam index {seam[row].item()} at row {row} "
                         f"is outside [0, {width})")

    if height > 1:
        jumps = (seam[1:] - seam[:-1]).abs()
        if (jumps > 1).any():
            row = torch.nonzero(jumps > 1)[0].item()
            raise ValueError(f"Seam jumps from column {seam[row].item()} to "
                             f"{seam[row + 1].item()} between rows {row} and {row + 1}")


def remove_seam(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """
    Remove a vertical seam from an image.

    The input is left untouched; a new, one column narrower tensor is
    returned with the remaining pixels of each row in their original order.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices (H,)

    Returns:
        Carved image with one column removed
    """
    if image.dim() == 2:
        # Grayscale
        image = image.unsqueeze(0)
        squeeze_output = True
    else:
        squeeze_output = False

    C, H, W = image.shape
    if W < 2:
        raise ValueError(f"Cannot remove a seam from an image of width {W}")

    seam = seam.to(device=image.device, dtype=torch.long)
    validate_seam(seam, W, H)

    cols = torch.arange(W, device=image.device)
    keep = cols.unsqueeze(0) != seam.unsqueeze(1)  # (H, W), one False per row

    carved = image[:, keep].reshape(C, H, W - 1)

    if squeeze_output:
        carved = carved.squeeze(0)

    return carved
