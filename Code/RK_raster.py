# RK_raster.py
import logging
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

GRAY = np.uint8
COLOR = np.uint32
SIGNED = np.int64


def red(word):
    return (int(word) >> 16) & 0xFF


def green(word):
    return (int(word) >> 8) & 0xFF


def blue(word):
    return int(word) & 0xFF


def pack(r, g, b):
    """Pack three 8-bit channels into a 0xAARRGGBB word with opaque alpha"""
    return 0xFF000000 | ((int(r) & 0xFF) << 16) | ((int(g) & 0xFF) << 8) | (int(b) & 0xFF)


class Raster:
    """
    Rectangular pixel buffer, row-major, backed by a 2-D numpy array of shape (H, W).

    Three flavours are used across the toolkit, told apart by dtype:
        1. uint8  -> gray buffer, one 8-bit sample per pixel.
        2. uint32 -> color buffer, one packed 0xAARRGGBB word per pixel.
        3. int64  -> signed intermediate (raw convolution, dynamic range compression).
    """

    def __init__(self, pixels):
        pixels = np.ascontiguousarray(pixels)
        if pixels.ndim != 2:
            logger.error(f"Raster needs a 2-D array, got shape {pixels.shape}")
            raise ValueError(f"Raster needs a 2-D array, got shape {pixels.shape}")
        self.pixels = pixels

    @classmethod
    def gray(cls, width, height, value=0):
        return cls(np.full((height, width), value, dtype=GRAY))

    @classmethod
    def color(cls, width, height, value=0):
        return cls(np.full((height, width), value, dtype=COLOR))

    @classmethod
    def signed(cls, width, height, value=0):
        return cls(np.full((height, width), value, dtype=SIGNED))

    @classmethod
    def from_array(cls, arr, dtype=None):
        """Build a raster from any 2-D array-like; the data is always copied"""
        return cls(np.array(arr, dtype=dtype, copy=True))

    @property
    def dtype(self):
        return self.pixels.dtype

    def width(self):
        return self.pixels.shape[1]

    def height(self):
        return self.pixels.shape[0]

    def size(self):
        return self.pixels.size

    def row_read(self, j):
        row = self.pixels[j].view()
        row.flags.writeable = False
        return row

    def row_write(self, j):
        return self.pixels[j]

    def copy(self):
        return Raster(self.pixels.copy())

    def as_signed(self):
        return Raster(self.pixels.astype(SIGNED))

    def is_gray(self):
        return self.pixels.dtype == GRAY

    def is_color(self):
        return self.pixels.dtype == COLOR

    def __eq__(self, other):
        if not isinstance(other, Raster):
            return NotImplemented
        return self.pixels.shape == other.pixels.shape and np.array_equal(self.pixels, other.pixels)

    def __repr__(self):
        return f"Raster({self.width()}x{self.height()}, dtype={self.pixels.dtype})"


def require_gray(raster, operation):
    if not raster.is_gray():
        logger.error(f"{operation} expects a gray (uint8) raster, got {raster.dtype}")
        raise ValueError(f"{operation} expects a gray (uint8) raster, got {raster.dtype}")


def require_color(raster, operation):
    if not raster.is_color():
        logger.error(f"{operation} expects a color (uint32) raster, got {raster.dtype}")
        raise ValueError(f"{operation} expects a color (uint32) raster, got {raster.dtype}")


def load_image(image_path, color=False):
    """Load an image file through Pillow into a gray raster, or a packed color raster"""
    if not color:
        img = Image.open(image_path).convert('L')  # Convert to grayscale
        return Raster(np.array(img, dtype=GRAY))

    rgb = np.array(Image.open(image_path).convert('RGB'), dtype=COLOR)
    packed = 0xFF000000 | (rgb[:, :, 0] << 16) | (rgb[:, :, 1] << 8) | rgb[:, :, 2]
    return Raster(packed.astype(COLOR))
