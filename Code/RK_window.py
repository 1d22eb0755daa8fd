# RK_window.py
import logging

logger = logging.getLogger(__name__)


def check_window(raster, kw, kh, operation):
    """Fail fast on a window that cannot be placed anywhere inside the raster"""
    if kw <= 0 or kh <= 0:
        logger.error(f"{operation}: window {kw}x{kh} must have positive dimensions")
        raise ValueError(f"{operation}: window {kw}x{kh} must have positive dimensions")
    if kw > raster.width() or kh > raster.height():
        logger.error(f"{operation}: window {kw}x{kh} larger than image {raster.width()}x{raster.height()}")
        raise ValueError(f"{operation}: window {kw}x{kh} larger than image {raster.width()}x{raster.height()}")


def interior_range(width, height, kw, kh):
    """Columns and rows at which a kw x kh window is centered inside the image"""
    cx, cy = kw >> 1, kh >> 1
    return range(cx, width - cx), range(cy, height - cy)


def windows(raster, kw, kh):
    """
    Sliding window over every interior position of `raster`.

    Yields (i, j, taps) where i is the column, j the row and taps a list of
    (kernel_index, sample) pairs. The kernel is mirrored before it is laid over
    the image, so this is a true convolution and not a cross-correlation:

        rmi = kw - mi - 1,  rmj = kh - mj - 1
        x   = i + (kh >> 1) - rmi
        y   = j + (kw >> 1) - rmj
        weight index = rmj * kw + rmi

    For square kernels x, y never leave the image. Rectangular kernels can reach
    outside it; such samples are simply left out of `taps`.

    Only `raster` is read, so callers are free to write into a separate output
    while iterating.
    """
    width, height = raster.width(), raster.height()
    cx, cy = kw >> 1, kh >> 1
    src = raster.pixels
    cols, rows = interior_range(width, height, kw, kh)

    for j in rows:
        for i in cols:
            taps = []
            for mj in range(kh):
                rmj = kh - mj - 1
                y = j + cx - rmj
                if y < 0 or y >= height:
                    continue
                for mi in range(kw):
                    rmi = kw - mi - 1
                    x = i + cy - rmi
                    if x < 0 or x >= width:
                        continue
                    taps.append((rmj * kw + rmi, int(src[y, x])))
            yield i, j, taps


class NarrowSink:
    """Truncate the accumulator and store it into an 8-bit cell, wrapping like a narrowing cast"""

    def __init__(self, output):
        self.output = output

    def store(self, i, j, acc):
        self.output.pixels[j, i] = int(acc) & 0xFF

    def result(self):
        return self.output


class TransformSink(NarrowSink):
    """Pass the truncated accumulator through a caller transform before the 8-bit store"""

    def __init__(self, output, transform):
        super().__init__(output)
        self.transform = transform

    def store(self, i, j, acc):
        self.output.pixels[j, i] = int(self.transform(int(acc))) & 0xFF


class RawSink:
    """Keep the truncated accumulator at full width in a signed raster"""

    def __init__(self, output):
        self.output = output

    def store(self, i, j, acc):
        self.output.pixels[j, i] = int(acc)

    def extrema(self):
        # rim included
        return int(self.output.pixels.min()), int(self.output.pixels.max())

    def result(self):
        low, high = self.extrema()
        return self.output, low, high
