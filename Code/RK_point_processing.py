# RK_point_processing.py
import logging
import numpy as np
from RK_raster import Raster, GRAY, COLOR, require_gray, require_color

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 128


def _channels(image):
    words = image.pixels
    r = ((words >> 16) & 0xFF).astype(GRAY)
    g = ((words >> 8) & 0xFF).astype(GRAY)
    b = (words & 0xFF).astype(GRAY)
    return r, g, b


class RK_point_processing:

    def to_grayscale(self, image):
        """Convert a packed color image to gray with s = (R + G + B) / 3"""
        require_color(image, "to_grayscale")
        r, g, b = _channels(image)
        total = r.astype(np.uint16) + g + b
        return Raster((total // 3).astype(GRAY))

    def split_channels(self, image):
        """Split a packed color image into three gray images (R, G, B)"""
        require_color(image, "split_channels")
        r, g, b = _channels(image)
        return Raster(r), Raster(g), Raster(b)

    def invert_gray(self, image):
        """Compute negative of the image"""
        require_gray(image, "invert_gray")
        return Raster(255 - image.pixels)

    def invert_color(self, image):
        """Negative of a packed color image; every channel becomes 255 - c, alpha is opaque"""
        require_color(image, "invert_color")
        r, g, b = _channels(image)
        inverted = (0xFF000000
                    | ((255 - r).astype(COLOR) << 16)
                    | ((255 - g).astype(COLOR) << 8)
                    | (255 - b).astype(COLOR))
        return Raster(inverted.astype(COLOR))

    def binarize(self, image, threshold=DEFAULT_THRESHOLD):
        """Pixels below `threshold` become 0, the rest 255"""
        require_gray(image, "binarize")
        binary = np.zeros_like(image.pixels)
        binary[image.pixels >= threshold] = 255
        return Raster(binary)

    def threshold_low(self, image, threshold):
        """Pixels below `threshold` become 0, the rest are kept"""
        require_gray(image, "threshold_low")
        thresholded = image.pixels.copy()
        thresholded[image.pixels < threshold] = 0
        return Raster(thresholded)
