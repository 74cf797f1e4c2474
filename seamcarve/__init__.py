"""
Content-aware image width reduction by greedy vertical seam carving.
"""

__version__ = "0.1.0"

from .energy import brightness, gradient_magnitude_energy, normalize_energy
from .seam import greedy_seam, remove_seam, seam_energy, validate_seam
from .carving import CarveResult, carve_image, carve_image_traditional
from .image_io import load_image, save_image, draw_seam

__all__ = [
    'brightness',
    'gradient_magnitude_energy',
    'normalize_energy',
    'greedy_seam',
    'remove_seam',
    'seam_energy',
    'validate_seam',
    'CarveResult',
    'carve_image',
    'carve_image_traditional',
    'load_image',
    'save_image',
    'draw_seam',
]
