import numpy as np
import pytest

from RK_raster import Raster
from RK_histogram import RK_histogram


@pytest.fixture
def histogram():
    return RK_histogram()


def ramp_4x4():
    return Raster(np.arange(16, dtype=np.uint8).reshape(4, 4))


def test_histogram_counts_every_pixel(histogram, noisy_gray):
    hist = histogram.build_histogram(noisy_gray)
    assert len(hist) == 256
    assert sum(hist) == noisy_gray.size()
    assert hist[int(noisy_gray.pixels[3, 4])] >= 1


def test_histogram_of_flat_image(histogram, flat_100):
    hist = histogram.build_histogram(flat_100)
    assert hist[100] == 16
    assert sum(hist) - hist[100] == 0


def test_lut_clamps_lowest_bin(histogram):
    hist = [0] * 256
    hist[5] = 1
    hist[200] = 1019
    lut = histogram.equalization_lut(hist, 1020)

    assert lut[5] == 0
    assert lut[200] == 254
    assert lut[255] == 254
    assert all(a <= b for a, b in zip(lut, lut[1:]))


def test_lut_rejects_short_histogram(histogram):
    with pytest.raises(ValueError):
        histogram.equalization_lut([1] * 10, 10)


def test_equalize_flat_image(histogram, flat_100):
    hist = histogram.build_histogram(flat_100)
    equalized, new_hist = histogram.equalize_histogram(flat_100, hist)

    # cdf reaches N at 100, so 100 -> 255 - 1
    assert np.all(equalized.pixels == 254)
    assert new_hist[254] == 16
    assert sum(new_hist) == 16


def test_equalize_leaves_arguments_alone(histogram, noisy_gray):
    hist = histogram.build_histogram(noisy_gray)
    hist_before = list(hist)
    img_before = noisy_gray.copy()

    equalized, new_hist = histogram.equalize_histogram(noisy_gray, hist)

    assert hist == hist_before
    assert noisy_gray == img_before
    assert new_hist == histogram.build_histogram(equalized)


def test_equalize_ramp(histogram):
    img = ramp_4x4()
    equalized, _ = histogram.equalize_histogram(img, histogram.build_histogram(img))

    # level v holds a cdf of v + 1 over 16 pixels
    expected = [int((v + 1) * 255 / 16) - 1 for v in range(16)]
    assert equalized.pixels.reshape(-1).tolist() == expected


def test_equalize_twice_converges(histogram):
    img = ramp_4x4()
    once, hist_once = histogram.equalize_histogram(img, histogram.build_histogram(img))
    twice, _ = histogram.equalize_histogram(once, hist_once)

    first_changes = int(np.count_nonzero(once.pixels != img.pixels))
    second_changes = int(np.count_nonzero(twice.pixels != once.pixels))
    assert second_changes < first_changes


def test_equalize_output_is_monotonic_in_input(histogram, noisy_gray):
    equalized, _ = histogram.equalize_histogram(noisy_gray, histogram.build_histogram(noisy_gray))
    order = np.argsort(noisy_gray.pixels.reshape(-1), kind="stable")
    mapped = equalized.pixels.reshape(-1)[order]
    assert np.all(np.diff(mapped.astype(int)) >= 0)


def test_equalized_histogram_counts_output_levels(histogram, noisy_gray):
    equalized, new_hist = histogram.equalize_histogram(noisy_gray, histogram.build_histogram(noisy_gray))

    assert isinstance(new_hist, list) and len(new_hist) == 256
    flat = equalized.pixels.reshape(-1).tolist()
    assert new_hist == [flat.count(level) for level in range(256)]
