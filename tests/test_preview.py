"""Tests for the pygame preview surface."""

import numpy as np
import pytest

pygame = pytest.importorskip("pygame")

from phongtrace.renderer.preview import make_surface


def test_surface_matches_image():
    image = np.zeros((2, 3, 3), dtype=np.uint8)
    image[0, 2] = (255, 51, 0)
    image[1, 0] = (0, 0, 255)
    surface = make_surface(image)
    assert surface.get_size() == (3, 2)
    assert tuple(surface.get_at((2, 0)))[:3] == (255, 51, 0)
    assert tuple(surface.get_at((0, 1)))[:3] == (0, 0, 255)
