# RK_tone_mapping.py
import logging
import numpy as np
from RK_raster import Raster, SIGNED, require_gray

logger = logging.getLogger(__name__)


class RK_tone_mapping:

    def normalize(self, image, max_value, min_value, out=None):
        """
        Linearly map a wide-range integer buffer into 0-255.

            out = int((value - min) * 255 / (max - min))

        min/max should be the true extremes of `image` (as reported by
        convolve_raw or dynamic_range_compress_raw); nothing is clamped, a value
        outside them wraps like any other 8-bit store.

        When max == min there is no range to stretch and `out` is returned as
        it is: a fresh all-zero raster unless the caller supplied one.
        """
        if out is None:
            out = Raster.gray(image.width(), image.height())
        if max_value == min_value:
            logger.debug(f"Flat range ({min_value}); normalize leaves output untouched")
            return out

        src = image.pixels.astype(SIGNED)
        scaled = ((src - min_value) * 255) / float(max_value - min_value)
        out.pixels[:, :] = (scaled.astype(SIGNED) & 0xFF).astype(np.uint8)
        return out

    def dynamic_range_compress_raw(self, image, c, gamma):
        """
        Power-law compression s = c * r^gamma, kept as integers.

        Returns (signed_raster, min, max), extrema collected in the same pass.
        """
        require_gray(image, "dynamic_range_compress")
        width, height = image.width(), image.height()
        compressed = Raster.signed(width, height)
        low, high = None, None

        for j in range(height):
            row_in = image.row_read(j)
            row_out = compressed.row_write(j)
            for i in range(width):
                value = int(c * pow(float(row_in[i]), gamma))
                row_out[i] = value
                if low is None or value < low:
                    low = value
                if high is None or value > high:
                    high = value

        logger.debug(f"Dynamic range compression c={c}, gamma={gamma}: range [{low}, {high}]")
        return compressed, low, high

    def dynamic_range_compress(self, image, c, gamma):
        """Apply power-law (gamma) compression and normalize the result back to 0-255"""
        compressed, low, high = self.dynamic_range_compress_raw(image, c, gamma)
        return self.normalize(compressed, high, low)
