import numpy as np
import pytest

from RK_raster import Raster
from RK_image_restoration import RK_image_restoration
from RK_spatial_filter import RK_spatial_filter


@pytest.fixture
def restoration():
    return RK_image_restoration()


@pytest.fixture
def mid_gray():
    return Raster.gray(40, 25, 128)


def test_same_seed_same_noise(restoration, mid_gray):
    first = restoration.add_salt_and_pepper(mid_gray, rng=42)
    second = restoration.add_salt_and_pepper(mid_gray, rng=np.random.default_rng(42))
    assert first == second


def test_noise_is_salt_or_pepper(restoration, mid_gray):
    noisy = restoration.add_salt_and_pepper(mid_gray, rng=3)
    changed = noisy.pixels[noisy.pixels != 128]

    assert 0 < changed.size <= int(mid_gray.size() * 0.1)
    assert set(changed.tolist()) <= {0, 255}
    assert np.all(mid_gray.pixels == 128)


def test_noise_fraction(restoration, mid_gray):
    noisy = restoration.add_salt_and_pepper(mid_gray, rng=5, fraction=0.0)
    assert noisy == mid_gray


def test_median_cleans_sparse_noise(restoration):
    img = Raster.gray(30, 30, 128)
    noisy = restoration.add_salt_and_pepper(img, rng=11, fraction=0.02)
    restored = RK_spatial_filter().median_filter(noisy, 3, 3)

    interior = restored.pixels[1:-1, 1:-1]
    noisy_interior = noisy.pixels[1:-1, 1:-1]
    assert np.count_nonzero(interior != 128) < np.count_nonzero(noisy_interior != 128)
