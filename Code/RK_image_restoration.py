# RK_image_restoration.py
import logging
import numpy as np
from RK_raster import Raster, require_gray

logger = logging.getLogger(__name__)

NOISE_FRACTION = 0.1


class RK_image_restoration:

    def add_salt_and_pepper(self, image, rng=None, fraction=NOISE_FRACTION):
        """
        Add salt and pepper noise to the image.

        int(N * fraction) positions are drawn uniformly (with replacement) and
        each is set to 0 or 255 with equal odds. `rng` is a numpy Generator or a
        seed for one; the global numpy random state is never used.
        """
        require_gray(image, "add_salt_and_pepper")
        if not isinstance(rng, np.random.Generator):
            rng = np.random.default_rng(rng)

        noisy = image.copy()
        num_pixels = image.size()
        count = int(num_pixels * fraction)

        positions = rng.integers(0, num_pixels, size=count)
        colors = rng.integers(0, 2, size=count) * 255
        flat = noisy.pixels.reshape(-1)
        flat[positions] = colors.astype(np.uint8)

        logger.debug(f"Salt and pepper: {count} of {num_pixels} pixels hit")
        return noisy
