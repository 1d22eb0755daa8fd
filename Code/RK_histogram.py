# RK_histogram.py
import logging
import numpy as np
from RK_raster import Raster, require_gray

logger = logging.getLogger(__name__)

LEVELS = 256


class RK_histogram:

    def build_histogram(self, image):
        """Count how many pixels hold each of the 256 gray levels"""
        require_gray(image, "build_histogram")
        return np.bincount(image.pixels.reshape(-1), minlength=LEVELS).tolist()

    def equalization_lut(self, histogram, pixel_count):
        """
        Lookup table mapping each gray level through the scaled cumulative count.

            lut[v] = max(0, int(cdf[v] * 255 / N) - 1)

        The -1 turns a count into a 0-based level, which sends the lowest
        populated level to -1; that is clamped back to 0.
        """
        if len(histogram) != LEVELS:
            logger.error(f"Histogram must have {LEVELS} bins, got {len(histogram)}")
            raise ValueError(f"Histogram must have {LEVELS} bins, got {len(histogram)}")

        scale = 255.0 / pixel_count
        lut = [0] * LEVELS
        freq_acc = 0
        for v in range(LEVELS):
            freq_acc += histogram[v]
            lut[v] = max(0, int(freq_acc * scale) - 1)
        return lut

    def equalize_histogram(self, image, histogram):
        """
        Perform histogram equalization.

        `histogram` must be the histogram of `image`. Neither argument is
        modified: the equalized image and its own histogram are returned as a
        new pair.
        """
        require_gray(image, "equalize_histogram")
        lut = self.equalization_lut(histogram, image.size())

        lut_arr = np.array(lut, dtype=np.uint8)
        equalized = Raster(lut_arr[image.pixels])
        new_hist = np.bincount(equalized.pixels.reshape(-1), minlength=LEVELS).tolist()

        logger.debug(f"Equalized {image.width()}x{image.height()} image")
        return equalized, new_hist
