import numpy as np
import pytest

from RK_raster import Raster


@pytest.fixture
def flat_100():
    """4x4 gray image, every pixel 100"""
    return Raster.gray(4, 4, 100)


@pytest.fixture
def noisy_gray():
    """Reproducible 9x7 gray image with values all over 0-255"""
    rng = np.random.default_rng(1234)
    return Raster(rng.integers(0, 256, size=(7, 9), dtype=np.uint8))
