"""Shared test fixtures for the seamcarve test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import logging

import torch
import pytest


def make_uniform_image(H, W, color=(120, 60, 200)):
    """Solid-color uint8 RGB image."""
    image = torch.empty(3, H, W, dtype=torch.uint8)
    for c, value in enumerate(color):
        image[c] = value
    return image


def make_edge_image(H, W, edge_col):
    """Black left of edge_col, white from edge_col on."""
    image = torch.zeros(3, H, W, dtype=torch.uint8)
    image[:, :, edge_col:] = 255
    return image


def make_random_image(H, W, seed=42):
    generator = torch.Generator().manual_seed(seed)
    return torch.randint(0, 256, (3, H, W), dtype=torch.uint8, generator=generator)


@pytest.fixture
def clean_logging():
    """Detach and close any handlers setup_logging left on the package logger."""
    logger = logging.getLogger("seamcarve")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def random_image():
    """Random 20x30 RGB image."""
    return make_random_image(20, 30)
