# RK_spatial_filter.py
import logging
import math
from RK_raster import require_gray
from RK_window import check_window, windows, NarrowSink, TransformSink, RawSink

logger = logging.getLogger(__name__)

MEDIAN_MIDPOINTS = ("window", "gathered")


def box_kernel(size):
    """Flat size x size averaging kernel, every weight 1/size²"""
    return [1.0 / (size * size)] * (size * size)


class RK_spatial_filter:

    def _check_kernel(self, image, kernel, kw, kh, operation):
        require_gray(image, operation)
        check_window(image, kw, kh, operation)
        if len(kernel) != kw * kh:
            logger.error(f"{operation}: kernel has {len(kernel)} weights, expected {kw}x{kh}")
            raise ValueError(f"{operation}: kernel has {len(kernel)} weights, expected {kw}x{kh}")

    def _convolve(self, image, kernel, kw, kh, sink):
        """
        Shared accumulation for every convolution mode.

        Every interior pixel gets Σ(sample × mirrored weight), summed as a float
        and handed to `sink`, which decides how it is stored:
            NarrowSink    -> truncated and wrapped into 8 bits.
            TransformSink -> caller transform, then wrapped into 8 bits.
            RawSink       -> kept as a signed integer, extrema reported.

        The sink output has to be seeded with a copy of the input, which is what
        keeps the rim (where the kernel does not fit) pass-through.
        """
        weights = [float(w) for w in kernel]
        for i, j, taps in windows(image, kw, kh):
            acc = math.fsum(weights[k] * sample for k, sample in taps)
            sink.store(i, j, acc)
        return sink.result()

    def convolve_normalized(self, image, kernel, kw, kh):
        """Convolve a gray image; results are truncated to int and wrapped to 8 bits (no clamping)"""
        self._check_kernel(image, kernel, kw, kh, "convolve_normalized")
        logger.debug(f"Convolving {image.width()}x{image.height()} with {kw}x{kh} kernel")
        return self._convolve(image, kernel, kw, kh, NarrowSink(image.copy()))

    def convolve_with_callback(self, image, kernel, kw, kh, transform):
        """Convolve a gray image, mapping each integer result through `transform` before storing it"""
        self._check_kernel(image, kernel, kw, kh, "convolve_with_callback")
        logger.debug(f"Convolving {image.width()}x{image.height()} with {kw}x{kh} kernel and custom transform")
        return self._convolve(image, kernel, kw, kh, TransformSink(image.copy(), transform))

    def convolve_raw(self, image, kernel, kw, kh):
        """
        Convolve a gray image without narrowing.

        Returns (signed_raster, min, max). The extrema cover the whole buffer,
        pass-through rim included, so they can be fed straight to normalize().
        """
        self._check_kernel(image, kernel, kw, kh, "convolve_raw")
        out, low, high = self._convolve(image, kernel, kw, kh, RawSink(image.as_signed()))
        logger.debug(f"Raw convolution range: [{low}, {high}]")
        return out, low, high

    def average_filter(self, image, size=3):
        """Apply average filter to the image"""
        return self.convolve_normalized(image, box_kernel(size), size, size)

    def median_filter(self, image, mw, mh, midpoint="window"):
        """
        Replace every interior pixel with the median of its mw x mh window.

        midpoint="window" picks sorted[(mw*mh) >> 1] whatever number of samples
        was actually gathered, clamped to the last one when fewer were found.
        Only rectangular windows can lose samples at the edges, and for those
        this is not always the true median; it is kept for compatibility with
        existing outputs. midpoint="gathered" uses the middle of what was
        gathered instead.

        A window that gathered nothing leaves the input pixel in place.
        """
        require_gray(image, "median_filter")
        check_window(image, mw, mh, "median_filter")
        if midpoint not in MEDIAN_MIDPOINTS:
            logger.error(f"median_filter: unknown midpoint policy {midpoint!r}")
            raise ValueError(f"median_filter: midpoint must be one of {MEDIAN_MIDPOINTS}, got {midpoint!r}")

        filtered = image.copy()
        full_index = (mw * mh) >> 1
        for i, j, taps in windows(image, mw, mh):
            if not taps:
                continue
            samples = sorted(sample for _, sample in taps)
            if midpoint == "window":
                index = min(full_index, len(samples) - 1)
            else:
                index = len(samples) >> 1
            filtered.pixels[j, i] = samples[index]

        return filtered
