"""
Command-line entry point: carve an image file and save the result.
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from .carving import carve_image
from .energy import gradient_magnitude_energy
from .image_io import draw_seam, load_image, save_image
from .logging_config import setup_logging
from .seam import greedy_seam

logger = logging.getLogger(__name__)

DEFAULT_SEAMS = 120


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seamcarve',
        description="Reduce image width by removing low-energy vertical seams"
    )
    parser.add_argument(
        'input',
        nargs='?',
        default='input.jpg',
        help='Input image (default: input.jpg)'
    )
    parser.add_argument(
        '-o', '--output',
        type=str,
        default='output.jpg',
        help='Carved output image (default: output.jpg)'
    )
    parser.add_argument(
        '--energy-map',
        type=str,
        default='energy_map.png',
        help='Where to save the grayscale energy map (default: energy_map.png)'
    )
    parser.add_argument(
        '-n', '--seams',
        type=_non_negative_int,
        default=DEFAULT_SEAMS,
        help=f'Number of seams to remove, capped at width - 1 (default: {DEFAULT_SEAMS})'
    )
    parser.add_argument(
        '--show-seam',
        type=str,
        metavar='PATH',
        help='Also save the input with its first seam drawn in red'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log every seam to stderr'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        metavar='PATH',
        help='Write a DEBUG log of every seam to PATH'
    )
    return parser


def _remove_written(paths):
    for path in paths:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING,
                  log_file=args.log_file)

    written = []
    try:
        image = load_image(args.input)
        H, W = image.shape[-2:]
        print(f"Original Image Size: {W} x {H}")

        result = carve_image(image, n_seams=args.seams)

        # Carved image first: if it cannot be written nothing else is
        save_image(result.image, args.output)
        written.append(args.output)
        save_image(result.energy_map, args.energy_map)
        written.append(args.energy_map)

        if args.show_seam:
            seam = greedy_seam(gradient_magnitude_energy(image))
            save_image(draw_seam(image, seam), args.show_seam)
            written.append(args.show_seam)
    except (OSError, ValueError) as e:
        _remove_written(written)
        logger.debug("Run aborted", exc_info=True)
        print(f"Error processing the image: {e}")
        return 1

    print(f"Energy map saved as: {args.energy_map}")
    if args.show_seam:
        print(f"Seam preview saved as: {args.show_seam}")
    print("Seam carving applied successfully!")
    print(f"New Image Size: {result.width} x {result.height}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
